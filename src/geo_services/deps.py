"""FastAPI dependencies: service singletons and envelope -> HTTP response."""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from geo_services.providers.factory import Services, build_services

# Module-level singleton so HTTP sessions persist across requests
_services: Optional[Services] = None


def get_services() -> Services:
    global _services
    if _services is None:
        _services = build_services()
    return _services


def respond(envelope: Dict[str, Any]) -> JSONResponse:
    """200 on success, 400 for parameter errors (they carry an id/field), 502 otherwise."""
    error = envelope.get("error")
    if error is None:
        status = 200
    elif "field" in error:
        status = 400
    else:
        status = 502
    return JSONResponse(content=envelope, status_code=status)
