from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
import logging

from eth_price_api.application.dto.eth_price import GetEthPriceOutput, PriceOracleConfig
from eth_price_api.application.ports.pool_state_port import PoolStatePort
from eth_price_api.domain.entities.pool_price import PoolReference, PoolSpotPrice
from eth_price_api.domain.exceptions import PriceOracleResponseError
from eth_price_api.domain.services.univ3_math import (
    format_fixed,
    sqrt_price_x96_to_raw_price,
    to_display_price,
)


logger = logging.getLogger(__name__)

PRICE_SOURCE = "Uniswap V3"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GetPoolSpotPriceUseCase:
    """Reads token0/token1, their decimals and slot0, then prices token0 in token1.

    The address lookups and slot0 run concurrently; the decimals lookups wait
    for their token address. Any failure propagates and no price is produced.
    """

    def __init__(self, *, pool_state_port: PoolStatePort, config: PriceOracleConfig):
        self._pool_state_port = pool_state_port
        self._config = config

    def execute(self) -> PoolSpotPrice:
        pool_address = self._config.pool_address
        port = self._pool_state_port

        with ThreadPoolExecutor(max_workers=3) as executor:
            token0_future = executor.submit(port.get_token0, pool_address=pool_address)
            token1_future = executor.submit(port.get_token1, pool_address=pool_address)
            slot_future = executor.submit(port.get_slot0, pool_address=pool_address)

            token0_address = token0_future.result()
            token1_address = token1_future.result()
            decimals0_future = executor.submit(port.get_token_decimals, token_address=token0_address)
            decimals1_future = executor.submit(port.get_token_decimals, token_address=token1_address)

            slot = slot_future.result()
            token0_decimals = decimals0_future.result()
            token1_decimals = decimals1_future.result()

        pool = PoolReference(
            pool_address=pool_address,
            token0_address=token0_address,
            token1_address=token1_address,
            token0_decimals=token0_decimals,
            token1_decimals=token1_decimals,
        )
        precision = self._config.price_decimals_precision
        try:
            raw_price = sqrt_price_x96_to_raw_price(
                slot.sqrt_price_x96,
                token0_decimals,
                token1_decimals,
                precision,
            )
            fixed_price = format_fixed(raw_price, precision)
            display_price = to_display_price(fixed_price)
        except ValueError as exc:
            raise PriceOracleResponseError(str(exc)) from exc

        logger.debug(
            "get_pool_spot_price: computed pool=%s token0=%s token1=%s decimals0=%s decimals1=%s sqrt_price_x96=%s price=%s",
            pool_address,
            token0_address,
            token1_address,
            token0_decimals,
            token1_decimals,
            slot.sqrt_price_x96,
            fixed_price,
        )
        return PoolSpotPrice(
            pool=pool,
            sqrt_price_x96=slot.sqrt_price_x96,
            raw_price=raw_price,
            precision=precision,
            fixed_price=fixed_price,
            display_price=display_price,
        )


class GetEthPriceUseCase:
    def __init__(
        self,
        *,
        spot_price_use_case: GetPoolSpotPriceUseCase,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._spot_price_use_case = spot_price_use_case
        self._clock = clock

    def execute(self) -> GetEthPriceOutput:
        spot = self._spot_price_use_case.execute()
        return GetEthPriceOutput(
            price=spot.display_price,
            timestamp=self._clock(),
            source=PRICE_SOURCE,
            spot=spot,
        )
