from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str = "ok"
    endpoint: str = "/nfl"
    cache_ttl_sec: int
    priority: Literal["zenrows", "scraperapi", "residential_proxy", "direct"]


class ErrorResponse(BaseModel):
    error: str
