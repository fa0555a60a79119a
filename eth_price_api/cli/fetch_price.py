from __future__ import annotations

import argparse
import sys

from eth_price_api.application.dto.eth_price import PriceOracleConfig
from eth_price_api.application.use_cases.get_eth_price import GetPoolSpotPriceUseCase
from eth_price_api.domain.exceptions import PriceOracleError
from eth_price_api.infrastructure.clients.pool_state_provider import Univ3PoolStateAdapter
from eth_price_api.infrastructure.clients.univ3_pool_client import (
    Univ3PoolClient,
    Univ3PoolClientSettings,
)
from eth_price_api.shared.config import Settings, get_settings


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="eth-price",
        description="Read the ETH/USDT spot price from a Uniswap V3 pool.",
    )
    ap.add_argument("--pool", default=defaults.pool_address, help="pool contract address")
    ap.add_argument("--rpc-url", default=defaults.rpc_url, help="Ethereum JSON-RPC endpoint")
    ap.add_argument("--timeout", type=float, default=defaults.rpc_timeout_seconds, help="RPC timeout in seconds")
    ap.add_argument(
        "--precision",
        type=int,
        default=defaults.price_decimals_precision,
        help="fractional digits kept in the fixed-point price",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    parser = build_parser(get_settings())
    args = parser.parse_args(argv)
    try:
        config = PriceOracleConfig(
            pool_address=args.pool,
            rpc_url=args.rpc_url,
            price_decimals_precision=args.precision,
            timeout_seconds=args.timeout,
        )
    except ValueError as exc:
        parser.error(str(exc))

    client = Univ3PoolClient(
        Univ3PoolClientSettings(rpc_url=config.rpc_url, timeout_seconds=config.timeout_seconds)
    )
    use_case = GetPoolSpotPriceUseCase(
        pool_state_port=Univ3PoolStateAdapter(client),
        config=config,
    )

    try:
        spot = use_case.execute()
    except PriceOracleError as exc:
        print(f"Failed to fetch ETH price: {exc}", file=sys.stderr)
        return 1

    print(f"Token0 Address: {spot.pool.token0_address}")
    print(f"Token1 Address: {spot.pool.token1_address}")
    print(f"Token0 Decimals: {spot.pool.token0_decimals}")
    print(f"Token1 Decimals: {spot.pool.token1_decimals}")
    print(f"SqrtPriceX96: {spot.sqrt_price_x96}")
    print(f"1 ETH ≈ {spot.display_price:.2f} USDT")
    print(f"Final ETH price: ${spot.display_price:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
