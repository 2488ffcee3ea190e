"""Normalized projection records served by the API."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ProjectionRecord(BaseModel):
    """One player/stat line resolved from the upstream document."""

    Player: str
    Stat: str
    Line: Optional[Union[int, float]] = None
    id: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)
