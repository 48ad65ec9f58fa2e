"""Error taxonomy and the JSON error envelopes returned to callers."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

GENERIC_ERROR_MESSAGE = "Error processing request. Try again after some time"


class ErrorId(str, Enum):
    MISSING_PARAMETER = "MISSING_PARAMETER"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    INVALID_FORMAT = "INVALID_FORMAT"
    UNAVAILABLE_FOR_LOCATION = "UNAVAILABLE_FOR_LOCATION"


_MESSAGES = {
    ErrorId.MISSING_PARAMETER: "One or more parameters are missing in request.",
    ErrorId.INVALID_PARAMETER: "One or more parameters are invalid in request.",
    ErrorId.INVALID_FORMAT: "One or more parameters in request are not in required format.",
}


class ParameterError(ValueError):
    """Raised when a request parameter is missing or malformed."""

    def __init__(self, error_id: ErrorId, field: str):
        self.error_id = error_id
        self.field = field
        super().__init__(f"{error_id.value}: {field}")

    @property
    def message(self) -> str:
        return _MESSAGES[self.error_id]

    def envelope(self) -> Dict[str, Any]:
        return {"error": {"message": self.message, "id": self.error_id.value, "field": self.field}}


class ProviderError(RuntimeError):
    """Raised when a third-party provider answers with an unusable response."""

    def __init__(self, provider: str, message: str, status: Optional[int] = None):
        self.provider = provider
        self.detail = message
        self.status = status
        super().__init__(f"{provider}: {message}" + (f" (status {status})" if status is not None else ""))


class LocationUnavailableError(ProviderError):
    """Raised when the places provider does not cover the requested location."""

    def envelope(self) -> Dict[str, Any]:
        return {
            "error": {
                "message": self.detail or GENERIC_ERROR_MESSAGE,
                "id": ErrorId.UNAVAILABLE_FOR_LOCATION.value,
            }
        }


def generic_error() -> Dict[str, Any]:
    return {"error": {"message": GENERIC_ERROR_MESSAGE}}


def is_error(envelope: Dict[str, Any]) -> bool:
    return "error" in envelope


__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "ErrorId",
    "ParameterError",
    "ProviderError",
    "LocationUnavailableError",
    "generic_error",
    "is_error",
]
