from __future__ import annotations

from datetime import datetime
from typing import Protocol

from eth_price_api.domain.entities.wallet import Portfolio, WalletTransaction


class PortfolioPort(Protocol):
    def get_portfolio(self, *, address: str) -> Portfolio:
        ...


class TransactionHistoryPort(Protocol):
    def list_transactions(self, *, address: str, now: datetime) -> list[WalletTransaction]:
        ...
