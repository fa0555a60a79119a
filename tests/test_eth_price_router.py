from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from eth_price_api.api.deps import get_eth_price_use_case
from eth_price_api.application.dto.eth_price import GetEthPriceOutput
from eth_price_api.domain.entities.pool_price import PoolReference, PoolSpotPrice
from eth_price_api.domain.exceptions import (
    PriceOracleResponseError,
    PriceOracleTimeoutError,
    PriceOracleUnavailableError,
)
from eth_price_api.main import app


class FakeGetEthPriceUseCase:
    def execute(self) -> GetEthPriceOutput:
        spot = PoolSpotPrice(
            pool=PoolReference(
                pool_address="0xpool",
                token0_address="0xweth",
                token1_address="0xusdt",
                token0_decimals=18,
                token1_decimals=6,
            ),
            sqrt_price_x96=2**96 // 20000,
            raw_price=3456123456789012345678901,
            precision=18,
            fixed_price="3456.123456789012345678",
            display_price=3456.12,
        )
        return GetEthPriceOutput(
            price=spot.display_price,
            timestamp=datetime(2026, 1, 1, 12, 30, 0, tzinfo=timezone.utc),
            source="Uniswap V3",
            spot=spot,
        )


class FailingGetEthPriceUseCase:
    def __init__(self, error: Exception):
        self._error = error

    def execute(self) -> GetEthPriceOutput:
        raise self._error


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_eth_price_returns_rounded_price(client):
    app.dependency_overrides[get_eth_price_use_case] = lambda: FakeGetEthPriceUseCase()

    response = client.get("/api/eth-price")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "price": 3456.12,
        "timestamp": "2026-01-01T12:30:00.000Z",
        "source": "Uniswap V3",
    }


@pytest.mark.parametrize(
    ("error", "prefix"),
    [
        (PriceOracleUnavailableError("token0() request failed: refused"), "Failed to fetch price"),
        (PriceOracleTimeoutError("slot0() timed out after 10.0s"), "Timed out fetching price"),
        (
            PriceOracleResponseError("slot0() returned undecodable output"),
            "Could not parse price from oracle response",
        ),
    ],
)
def test_eth_price_failure_returns_500_without_price(client, error, prefix):
    app.dependency_overrides[get_eth_price_use_case] = lambda: FailingGetEthPriceUseCase(error)

    response = client.get("/api/eth-price")

    assert response.status_code == 500
    payload = response.json()
    assert payload["success"] is False
    assert payload["error"].startswith(prefix)
    assert str(error) in payload["error"]
    assert "price" not in payload


def test_eth_price_unexpected_error_keeps_json_failure_body(client):
    app.dependency_overrides[get_eth_price_use_case] = lambda: FailingGetEthPriceUseCase(
        RuntimeError("boom")
    )

    response = client.get("/api/eth-price")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to fetch price: boom"}
