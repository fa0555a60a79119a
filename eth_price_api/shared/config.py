from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


DEFAULT_RPC_URL = "https://ethereum-rpc.publicnode.com"
# WETH/USDT 0.3% pool on Ethereum mainnet.
DEFAULT_POOL_ADDRESS = "0xc7bBeC68d12a0d1830360F8Ec58fA599bA1b0e9b"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    frontend_url: str
    rpc_url: str
    pool_address: str
    price_decimals_precision: int
    rpc_timeout_seconds: float
    log_level: str


def get_settings() -> Settings:
    price_decimals_precision = int(_env("PRICE_DECIMALS_PRECISION", "18"))
    if price_decimals_precision < 0:
        raise ValueError("PRICE_DECIMALS_PRECISION must be non-negative.")
    rpc_timeout_seconds = float(_env("RPC_TIMEOUT_SECONDS", "10"))
    if rpc_timeout_seconds <= 0:
        raise ValueError("RPC_TIMEOUT_SECONDS must be positive.")
    return Settings(
        host=_env("HOST", "0.0.0.0"),
        port=int(_env("PORT", "3001")),
        frontend_url=_env("FRONTEND_URL", "http://localhost:3000"),
        rpc_url=_env("ETH_RPC_URL", DEFAULT_RPC_URL),
        pool_address=_env("ETH_USDT_POOL_ADDRESS", DEFAULT_POOL_ADDRESS),
        price_decimals_precision=price_decimals_precision,
        rpc_timeout_seconds=rpc_timeout_seconds,
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
