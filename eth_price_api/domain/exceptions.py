from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class PriceOracleError(DomainError):
    """Could not obtain a price from the pool."""


class PriceOracleUnavailableError(PriceOracleError):
    """RPC endpoint unreachable, RPC error or contract revert."""


class PriceOracleTimeoutError(PriceOracleUnavailableError):
    """RPC request did not complete within the configured timeout."""


class PriceOracleResponseError(PriceOracleError):
    """Pool or token contract returned a value that could not be interpreted."""
