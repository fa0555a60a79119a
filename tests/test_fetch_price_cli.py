from __future__ import annotations

import pytest

from eth_price_api.cli import fetch_price
from eth_price_api.domain.entities.pool_price import PoolReference, PoolSpotPrice
from eth_price_api.domain.exceptions import PriceOracleUnavailableError
from eth_price_api.shared.config import Settings


def _spot() -> PoolSpotPrice:
    return PoolSpotPrice(
        pool=PoolReference(
            pool_address="0xc7bBeC68d12a0d1830360F8Ec58fA599bA1b0e9b",
            token0_address="0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
            token1_address="0xdAC17F958D2ee523a2206206994597C13D831ec7",
            token0_decimals=18,
            token1_decimals=6,
        ),
        sqrt_price_x96=2**96 // 20000,
        raw_price=2499999999999999999999,
        precision=18,
        fixed_price="2499.999999999999999999",
        display_price=2500.0,
    )


def _recording_use_case(configs: list):
    class FakeSpotPriceUseCase:
        def __init__(self, *, pool_state_port, config):
            _ = pool_state_port
            configs.append(config)

        def execute(self) -> PoolSpotPrice:
            return _spot()

    return FakeSpotPriceUseCase


class FailingSpotPriceUseCase:
    def __init__(self, *, pool_state_port, config):
        _ = (pool_state_port, config)

    def execute(self) -> PoolSpotPrice:
        raise PriceOracleUnavailableError("token0() request failed: refused")


def test_cli_prints_price_summary(monkeypatch, capsys):
    configs: list = []
    monkeypatch.setattr(fetch_price, "GetPoolSpotPriceUseCase", _recording_use_case(configs))

    code = fetch_price.main(["--pool", "0x0000000000000000000000000000000000000001", "--timeout", "3"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Token0 Decimals: 18" in out
    assert "Token1 Decimals: 6" in out
    assert f"SqrtPriceX96: {2**96 // 20000}" in out
    assert "1 ETH ≈ 2500.00 USDT" in out
    assert len(configs) == 1
    assert configs[0].pool_address == "0x0000000000000000000000000000000000000001"
    assert configs[0].timeout_seconds == 3.0


def test_cli_defaults_come_from_settings(monkeypatch):
    configs: list = []
    monkeypatch.setattr(fetch_price, "GetPoolSpotPriceUseCase", _recording_use_case(configs))
    monkeypatch.setattr(
        fetch_price,
        "get_settings",
        lambda: Settings(
            host="127.0.0.1",
            port=3001,
            frontend_url="http://localhost:3000",
            rpc_url="http://localhost:8545",
            pool_address="0x0000000000000000000000000000000000000002",
            price_decimals_precision=8,
            rpc_timeout_seconds=4.0,
            log_level="INFO",
        ),
    )

    assert fetch_price.main([]) == 0

    assert len(configs) == 1
    assert configs[0].rpc_url == "http://localhost:8545"
    assert configs[0].pool_address == "0x0000000000000000000000000000000000000002"
    assert configs[0].price_decimals_precision == 8
    assert configs[0].timeout_seconds == 4.0


def test_cli_rejects_negative_precision(monkeypatch, capsys):
    configs: list = []
    monkeypatch.setattr(fetch_price, "GetPoolSpotPriceUseCase", _recording_use_case(configs))

    with pytest.raises(SystemExit) as exc_info:
        fetch_price.main(["--precision", "-1"])

    assert exc_info.value.code == 2
    assert "price_decimals_precision" in capsys.readouterr().err
    assert configs == []


def test_cli_exits_non_zero_on_failure(monkeypatch, capsys):
    monkeypatch.setattr(fetch_price, "GetPoolSpotPriceUseCase", FailingSpotPriceUseCase)

    code = fetch_price.main([])

    captured = capsys.readouterr()
    assert code == 1
    assert "refused" in captured.err
    assert captured.out == ""
