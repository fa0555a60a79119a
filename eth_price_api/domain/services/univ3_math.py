from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
import math


Q96 = 2**96
Q192 = Q96**2
MAX_SQRT_PRICE_X96 = 2**160 - 1
MAX_TOKEN_DECIMALS = 255
DISPLAY_QUANT = Decimal("0.01")


def validate_sqrt_price_x96(sqrt_price_x96: int) -> int:
    if isinstance(sqrt_price_x96, bool) or not isinstance(sqrt_price_x96, int):
        raise ValueError(f"sqrtPriceX96 must be an integer, got {sqrt_price_x96!r}.")
    if sqrt_price_x96 < 0 or sqrt_price_x96 > MAX_SQRT_PRICE_X96:
        raise ValueError(f"sqrtPriceX96 out of uint160 range: {sqrt_price_x96}.")
    return sqrt_price_x96


def validate_token_decimals(decimals: int, *, field_name: str = "decimals") -> int:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueError(f"{field_name} must be an integer, got {decimals!r}.")
    if decimals < 0 or decimals > MAX_TOKEN_DECIMALS:
        raise ValueError(f"{field_name} out of uint8 range: {decimals}.")
    return decimals


def sqrt_price_x96_to_raw_price(
    sqrt_price_x96: int,
    token0_decimals: int,
    token1_decimals: int,
    precision: int = 18,
) -> int:
    """Token1 per token0 as a fixed-point integer with ``precision`` fractional digits.

    Every step is unbounded ``int`` arithmetic; the squared term alone can
    exceed 320 bits. The division truncates, so digits past ``precision``
    are dropped rather than rounded.
    """
    validate_sqrt_price_x96(sqrt_price_x96)
    validate_token_decimals(token0_decimals, field_name="token0 decimals")
    validate_token_decimals(token1_decimals, field_name="token1 decimals")
    if precision < 0:
        raise ValueError("precision must be non-negative.")

    numerator = sqrt_price_x96**2 * 10**token0_decimals * 10**precision
    denominator = Q192 * 10**token1_decimals
    return numerator // denominator


def format_fixed(raw_price: int, precision: int = 18) -> str:
    """Render a fixed-point integer with exactly ``precision`` fractional digits."""
    if raw_price < 0:
        raise ValueError("raw price must be non-negative.")
    if precision == 0:
        return str(raw_price)
    whole, fraction = divmod(raw_price, 10**precision)
    return f"{whole}.{fraction:0{precision}d}"


def to_display_price(fixed_price: str) -> float:
    """Parse to a float, then round its exact binary value half-up to 2 decimals."""
    parsed = float(fixed_price)
    if not math.isfinite(parsed):
        raise ValueError(f"price does not fit a float: {fixed_price}.")
    value = Decimal(parsed)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(fixed_price) + 2)
        rounded = value.quantize(DISPLAY_QUANT, rounding=ROUND_HALF_UP)
    return float(rounded)
