from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from eth_price_api.api.schemas.common import iso_timestamp
from eth_price_api.api.schemas.health import HealthResponse

router = APIRouter()


@router.get("/api/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        message="Backend API is running",
        timestamp=iso_timestamp(datetime.now(timezone.utc)),
    )
