from __future__ import annotations

from functools import lru_cache

from eth_price_api.application.dto.eth_price import PriceOracleConfig
from eth_price_api.application.use_cases.get_eth_price import (
    GetEthPriceUseCase,
    GetPoolSpotPriceUseCase,
)
from eth_price_api.application.use_cases.get_wallet_data import (
    GetPortfolioUseCase,
    GetTransactionsUseCase,
)
from eth_price_api.infrastructure.clients.mock_wallet_client import (
    MockPortfolioClient,
    MockTransactionHistoryClient,
)
from eth_price_api.infrastructure.clients.pool_state_provider import Univ3PoolStateAdapter
from eth_price_api.infrastructure.clients.univ3_pool_client import (
    Univ3PoolClient,
    Univ3PoolClientSettings,
)
from eth_price_api.shared.config import get_settings


def get_price_oracle_config() -> PriceOracleConfig:
    settings = get_settings()
    return PriceOracleConfig(
        pool_address=settings.pool_address,
        rpc_url=settings.rpc_url,
        price_decimals_precision=settings.price_decimals_precision,
        timeout_seconds=settings.rpc_timeout_seconds,
    )


@lru_cache(maxsize=1)
def _get_univ3_pool_client() -> Univ3PoolClient:
    config = get_price_oracle_config()
    return Univ3PoolClient(
        Univ3PoolClientSettings(
            rpc_url=config.rpc_url,
            timeout_seconds=config.timeout_seconds,
        )
    )


def get_pool_spot_price_use_case() -> GetPoolSpotPriceUseCase:
    return GetPoolSpotPriceUseCase(
        pool_state_port=Univ3PoolStateAdapter(_get_univ3_pool_client()),
        config=get_price_oracle_config(),
    )


def get_eth_price_use_case() -> GetEthPriceUseCase:
    return GetEthPriceUseCase(spot_price_use_case=get_pool_spot_price_use_case())


def get_portfolio_use_case() -> GetPortfolioUseCase:
    return GetPortfolioUseCase(portfolio_port=MockPortfolioClient())


def get_transactions_use_case() -> GetTransactionsUseCase:
    return GetTransactionsUseCase(transaction_history_port=MockTransactionHistoryClient())
