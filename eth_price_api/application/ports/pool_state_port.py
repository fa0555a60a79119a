from __future__ import annotations

from typing import Protocol

from eth_price_api.domain.entities.pool_price import SlotSnapshot


class PoolStatePort(Protocol):
    def get_token0(self, *, pool_address: str) -> str:
        ...

    def get_token1(self, *, pool_address: str) -> str:
        ...

    def get_token_decimals(self, *, token_address: str) -> int:
        ...

    def get_slot0(self, *, pool_address: str) -> SlotSnapshot:
        ...
