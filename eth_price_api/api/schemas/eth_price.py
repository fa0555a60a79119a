from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class EthPriceResponse(BaseModel):
    success: Literal[True] = True
    price: float = Field(..., description="USDT per ETH, rounded to 2 decimals.")
    timestamp: str
    source: str


class EthPriceErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
