from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Portfolio:
    eth: float
    usdt: float
    total_value_usd: float


@dataclass(frozen=True)
class WalletTransaction:
    id: int
    type: str
    from_address: str
    to_address: str
    amount: float
    token: str
    timestamp: datetime
    status: str
