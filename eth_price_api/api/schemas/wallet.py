from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PortfolioBalancesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    eth: float = Field(..., alias="ETH")
    usdt: float = Field(..., alias="USDT")
    total_value_usd: float = Field(..., alias="totalValueUSD")


class PortfolioResponse(BaseModel):
    success: Literal[True] = True
    address: str
    portfolio: PortfolioBalancesResponse
    timestamp: str


class TransactionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: str
    from_address: str = Field(..., alias="from")
    to_address: str = Field(..., alias="to")
    amount: float
    token: str
    timestamp: str
    status: str


class TransactionsResponse(BaseModel):
    success: Literal[True] = True
    address: str
    transactions: list[TransactionResponse]
    timestamp: str
