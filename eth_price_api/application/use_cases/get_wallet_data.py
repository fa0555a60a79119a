from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from eth_price_api.application.dto.wallet import GetPortfolioOutput, GetTransactionsOutput
from eth_price_api.application.ports.wallet_data_port import PortfolioPort, TransactionHistoryPort


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GetPortfolioUseCase:
    def __init__(
        self,
        *,
        portfolio_port: PortfolioPort,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._portfolio_port = portfolio_port
        self._clock = clock

    def execute(self, *, address: str) -> GetPortfolioOutput:
        return GetPortfolioOutput(
            address=address,
            portfolio=self._portfolio_port.get_portfolio(address=address),
            timestamp=self._clock(),
        )


class GetTransactionsUseCase:
    def __init__(
        self,
        *,
        transaction_history_port: TransactionHistoryPort,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._transaction_history_port = transaction_history_port
        self._clock = clock

    def execute(self, *, address: str) -> GetTransactionsOutput:
        now = self._clock()
        return GetTransactionsOutput(
            address=address,
            transactions=self._transaction_history_port.list_transactions(address=address, now=now),
            timestamp=now,
        )
