from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from eth_price_api.api.deps import get_eth_price_use_case
from eth_price_api.api.schemas.common import iso_timestamp
from eth_price_api.api.schemas.eth_price import EthPriceErrorResponse, EthPriceResponse
from eth_price_api.application.use_cases.get_eth_price import GetEthPriceUseCase
from eth_price_api.domain.exceptions import (
    PriceOracleError,
    PriceOracleResponseError,
    PriceOracleTimeoutError,
    PriceOracleUnavailableError,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=EthPriceErrorResponse(error=message).model_dump(),
    )


@router.get(
    "/api/eth-price",
    response_model=EthPriceResponse,
    responses={500: {"model": EthPriceErrorResponse}},
)
def get_eth_price(
    use_case: GetEthPriceUseCase = Depends(get_eth_price_use_case),
):
    try:
        result = use_case.execute()
    except PriceOracleTimeoutError as exc:
        logger.warning("eth_price_router: oracle_failed kind=timeout detail=%s", exc)
        return _error_response(f"Timed out fetching price: {exc}")
    except PriceOracleUnavailableError as exc:
        logger.warning("eth_price_router: oracle_failed kind=unavailable detail=%s", exc)
        return _error_response(f"Failed to fetch price: {exc}")
    except PriceOracleResponseError as exc:
        logger.warning("eth_price_router: oracle_failed kind=malformed detail=%s", exc)
        return _error_response(f"Could not parse price from oracle response: {exc}")
    except PriceOracleError as exc:
        logger.warning("eth_price_router: oracle_failed kind=unknown detail=%s", exc)
        return _error_response(str(exc) or "Failed to fetch price")
    except Exception as exc:  # noqa: BLE001
        logger.exception("eth_price_router: oracle_failed kind=unexpected detail=%s", exc)
        return _error_response(f"Failed to fetch price: {exc}" if str(exc) else "Failed to fetch price")

    return EthPriceResponse(
        price=result.price,
        timestamp=iso_timestamp(result.timestamp),
        source=result.source,
    )
