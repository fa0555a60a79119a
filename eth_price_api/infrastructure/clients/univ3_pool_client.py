from __future__ import annotations

from dataclasses import dataclass
import logging

import requests
from web3 import Web3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError, Web3Exception


logger = logging.getLogger(__name__)


POOL_ABI = [
    {
        "name": "slot0",
        "outputs": [
            {"name": "sqrtPriceX96", "type": "uint160"},
            {"name": "tick", "type": "int24"},
            {"name": "observationIndex", "type": "uint16"},
            {"name": "observationCardinality", "type": "uint16"},
            {"name": "observationCardinalityNext", "type": "uint16"},
            {"name": "feeProtocol", "type": "uint8"},
            {"name": "unlocked", "type": "bool"},
        ],
        "inputs": [],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "name": "token0",
        "outputs": [{"name": "", "type": "address"}],
        "inputs": [],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "name": "token1",
        "outputs": [{"name": "", "type": "address"}],
        "inputs": [],
        "stateMutability": "view",
        "type": "function",
    },
]

ERC20_DECIMALS_ABI = [
    {
        "inputs": [],
        "name": "decimals",
        "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    }
]


class PoolRpcError(RuntimeError):
    pass


class PoolRpcTimeoutError(PoolRpcError):
    pass


class PoolRpcDecodeError(RuntimeError):
    pass


@dataclass(frozen=True)
class Univ3PoolClientSettings:
    rpc_url: str
    timeout_seconds: float


class Univ3PoolClient:
    """Read-only calls against a Uniswap V3 pool and its ERC20 tokens.

    Every call is a single ``eth_call``. The provider's own retry layer is
    disabled so one failed request fails the read.
    """

    def __init__(self, settings: Univ3PoolClientSettings, w3: Web3 | None = None):
        self._settings = settings
        self._w3 = w3 or Web3(
            Web3.HTTPProvider(
                settings.rpc_url,
                request_kwargs={"timeout": settings.timeout_seconds},
                exception_retry_configuration=None,
            )
        )

    def get_token0(self, *, pool_address: str) -> str:
        pool = self._pool_contract(pool_address)
        return self._decode_address(self._call("token0", pool.functions.token0()), "token0")

    def get_token1(self, *, pool_address: str) -> str:
        pool = self._pool_contract(pool_address)
        return self._decode_address(self._call("token1", pool.functions.token1()), "token1")

    def get_token_decimals(self, *, token_address: str) -> int:
        token = self._contract(token_address, ERC20_DECIMALS_ABI)
        value = self._call("decimals", token.functions.decimals())
        if isinstance(value, bool) or not isinstance(value, int):
            raise PoolRpcDecodeError(f"decimals() returned a non-integer value for {token_address}.")
        return value

    def get_sqrt_price_x96(self, *, pool_address: str) -> int:
        pool = self._pool_contract(pool_address)
        slot0 = self._call("slot0", pool.functions.slot0())
        try:
            sqrt_price_x96 = slot0[0]
        except (TypeError, IndexError) as exc:
            raise PoolRpcDecodeError(f"slot0() returned an unexpected value: {slot0!r}") from exc
        if isinstance(sqrt_price_x96, bool) or not isinstance(sqrt_price_x96, int):
            raise PoolRpcDecodeError(f"slot0() sqrtPriceX96 is not an integer: {sqrt_price_x96!r}")
        return sqrt_price_x96

    def _pool_contract(self, pool_address: str):
        return self._contract(pool_address, POOL_ABI)

    def _contract(self, address: str, abi: list[dict]):
        try:
            checksum = Web3.to_checksum_address(address)
        except (TypeError, ValueError) as exc:
            raise PoolRpcDecodeError(f"Invalid contract address: {address!r}") from exc
        return self._w3.eth.contract(address=checksum, abi=abi)

    def _call(self, label: str, contract_function):
        try:
            return contract_function.call()
        except requests.exceptions.Timeout as exc:
            logger.warning(
                "univ3_pool_client: rpc_timeout call=%s timeout_seconds=%s",
                label,
                self._settings.timeout_seconds,
            )
            raise PoolRpcTimeoutError(
                f"{label}() timed out after {self._settings.timeout_seconds}s"
            ) from exc
        except requests.exceptions.RequestException as exc:
            logger.warning("univ3_pool_client: rpc_request_failed call=%s detail=%s", label, exc)
            raise PoolRpcError(f"{label}() request failed: {exc}") from exc
        except ContractLogicError as exc:
            raise PoolRpcError(f"{label}() reverted: {exc}") from exc
        except BadFunctionCallOutput as exc:
            raise PoolRpcDecodeError(f"{label}() returned undecodable output: {exc}") from exc
        except Web3Exception as exc:
            raise PoolRpcError(f"{label}() failed: {exc}") from exc
        except ValueError as exc:
            # json.JSONDecodeError when the node answers with a non-JSON body.
            logger.warning("univ3_pool_client: rpc_malformed_response call=%s detail=%s", label, exc)
            raise PoolRpcDecodeError(f"{label}() returned a malformed RPC response: {exc}") from exc

    @staticmethod
    def _decode_address(value, label: str) -> str:
        if not isinstance(value, str) or not Web3.is_address(value):
            raise PoolRpcDecodeError(f"{label}() returned an invalid address: {value!r}")
        return Web3.to_checksum_address(value)
