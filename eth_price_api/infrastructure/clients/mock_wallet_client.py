from __future__ import annotations

from datetime import datetime, timedelta

from eth_price_api.application.ports.wallet_data_port import PortfolioPort, TransactionHistoryPort
from eth_price_api.domain.entities.wallet import Portfolio, WalletTransaction


# Fixed figures until balances are read from chain.
MOCK_PORTFOLIO = Portfolio(eth=2.5, usdt=1000, total_value_usd=12135.58)


class MockPortfolioClient(PortfolioPort):
    def get_portfolio(self, *, address: str) -> Portfolio:
        _ = address
        return MOCK_PORTFOLIO


class MockTransactionHistoryClient(TransactionHistoryPort):
    def list_transactions(self, *, address: str, now: datetime) -> list[WalletTransaction]:
        return [
            WalletTransaction(
                id=1,
                type="send",
                from_address=address,
                to_address="0x1234567890123456789012345678901234567890",
                amount=0.5,
                token="ETH",
                timestamp=now - timedelta(hours=2),
                status="confirmed",
            ),
            WalletTransaction(
                id=2,
                type="receive",
                from_address="0x9876543210987654321098765432109876543210",
                to_address=address,
                amount=1.2,
                token="ETH",
                timestamp=now - timedelta(days=1),
                status="confirmed",
            ),
            WalletTransaction(
                id=3,
                type="send",
                from_address=address,
                to_address="0x9999888877776666555544443333222211110000",
                amount=100,
                token="USDT",
                timestamp=now - timedelta(days=3),
                status="confirmed",
            ),
        ]
