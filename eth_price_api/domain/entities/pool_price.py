from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PoolReference:
    pool_address: str
    token0_address: str
    token1_address: str
    token0_decimals: int
    token1_decimals: int


@dataclass(frozen=True)
class SlotSnapshot:
    sqrt_price_x96: int


@dataclass(frozen=True)
class PoolSpotPrice:
    """Price of token0 denominated in token1.

    ``raw_price`` is a fixed-point integer with ``precision`` fractional digits.
    """

    pool: PoolReference
    sqrt_price_x96: int
    raw_price: int
    precision: int
    fixed_price: str
    display_price: float
