from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from eth_price_api.domain.entities.pool_price import PoolSpotPrice


@dataclass(frozen=True)
class PriceOracleConfig:
    pool_address: str
    rpc_url: str
    price_decimals_precision: int = 18
    timeout_seconds: float = 10.0

    def __post_init__(self) -> None:
        if self.price_decimals_precision < 0:
            raise ValueError("price_decimals_precision must be non-negative.")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive.")


@dataclass(frozen=True)
class GetEthPriceOutput:
    price: float
    timestamp: datetime
    source: str
    spot: PoolSpotPrice
