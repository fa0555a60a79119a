from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    success: Literal[True] = True
    message: str
    timestamp: str
