from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from eth_price_api.domain.entities.wallet import Portfolio, WalletTransaction


@dataclass(frozen=True)
class GetPortfolioOutput:
    address: str
    portfolio: Portfolio
    timestamp: datetime


@dataclass(frozen=True)
class GetTransactionsOutput:
    address: str
    transactions: list[WalletTransaction]
    timestamp: datetime
