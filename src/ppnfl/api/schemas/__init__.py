"""Pydantic models for API I/O."""

from .status import ErrorResponse, StatusResponse

__all__ = [
    "ErrorResponse",
    "StatusResponse",
]
