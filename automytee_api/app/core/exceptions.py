"""
Domain exceptions raised by the service layer.

Services raise these instead of ``HTTPException`` so that they stay
usable outside a request.  ``main.py`` maps every class to a status
code and renders the response envelope.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence


@dataclass(frozen=True)
class FieldViolation:
    """One failed constraint on one payload field."""

    field: str
    rule: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class ContentError(Exception):
    """Base class for all content service errors."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ContentError):
    """Raised when a payload violates one or more field constraints."""

    status_code = 400

    def __init__(self, violations: Sequence[FieldViolation]) -> None:
        self.violations: List[FieldViolation] = list(violations)
        super().__init__(", ".join(v.message for v in self.violations) or "Validation failed")

    def details(self) -> List[Dict[str, Any]]:
        return [v.to_dict() for v in self.violations]


class NotFound(ContentError):
    """Raised when no record matches a well-formed identifier."""

    status_code = 404

    def __init__(self, resource: str, record_id: str) -> None:
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} not found")


class InvalidId(ContentError):
    """Raised when an identifier cannot address a document at all."""

    status_code = 400

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"Invalid id: {record_id!r}")


class StoreUnavailable(ContentError):
    """Raised when the document store cannot be reached."""

    status_code = 503

    def __init__(self, message: str = "Document store unavailable") -> None:
        super().__init__(message)
