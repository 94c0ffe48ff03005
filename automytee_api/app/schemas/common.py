"""
Response envelope shared by every endpoint.

Each response body is ``{"success": bool}`` plus either ``data`` on
success or ``error`` (and, for validation failures, ``details``) on
failure.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Successful response wrapper."""

    success: bool = True
    data: T


class ErrorEnvelope(BaseModel):
    """Failure response wrapper."""

    success: bool = False
    error: str
    details: Optional[List[Dict[str, Any]]] = None
