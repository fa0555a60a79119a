from __future__ import annotations

from eth_price_api.application.ports.pool_state_port import PoolStatePort
from eth_price_api.domain.entities.pool_price import SlotSnapshot
from eth_price_api.domain.exceptions import (
    PriceOracleResponseError,
    PriceOracleTimeoutError,
    PriceOracleUnavailableError,
)
from eth_price_api.infrastructure.clients.univ3_pool_client import (
    PoolRpcDecodeError,
    PoolRpcError,
    PoolRpcTimeoutError,
    Univ3PoolClient,
)


class Univ3PoolStateAdapter(PoolStatePort):
    def __init__(self, client: Univ3PoolClient):
        self._client = client

    def get_token0(self, *, pool_address: str) -> str:
        return self._guard(self._client.get_token0, pool_address=pool_address)

    def get_token1(self, *, pool_address: str) -> str:
        return self._guard(self._client.get_token1, pool_address=pool_address)

    def get_token_decimals(self, *, token_address: str) -> int:
        return self._guard(self._client.get_token_decimals, token_address=token_address)

    def get_slot0(self, *, pool_address: str) -> SlotSnapshot:
        sqrt_price_x96 = self._guard(self._client.get_sqrt_price_x96, pool_address=pool_address)
        return SlotSnapshot(sqrt_price_x96=sqrt_price_x96)

    @staticmethod
    def _guard(call, **kwargs):
        try:
            return call(**kwargs)
        except PoolRpcTimeoutError as exc:
            raise PriceOracleTimeoutError(str(exc)) from exc
        except PoolRpcError as exc:
            raise PriceOracleUnavailableError(str(exc)) from exc
        except PoolRpcDecodeError as exc:
            raise PriceOracleResponseError(str(exc)) from exc
