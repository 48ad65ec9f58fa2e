"""Directions: turn-by-turn route and route midpoint between two "lat,lng" points."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from geo_services.core.midpoint import MidpointError, find_midpoint
from geo_services.core.validation import parse_endpoints
from geo_services.errors import ParameterError, ProviderError, generic_error
from geo_services.providers.base import RouteProvider

log = logging.getLogger(__name__)


class DirectionsService:
    def __init__(self, provider: RouteProvider):
        self.provider = provider

    def get_route(self, source: Optional[str], destination: Optional[str]) -> Dict[str, Any]:
        """Route summary with directions, or an error envelope."""
        try:
            origin, dest = parse_endpoints(source, destination)
        except ParameterError as e:
            return e.envelope()

        try:
            summary = self.provider.fetch_summary(origin, dest)
        except (ProviderError, requests.RequestException) as e:
            log.warning("Route lookup failed for %s -> %s: %s", source, destination, e)
            return generic_error()

        return {"route": summary.to_wire()}

    def get_midpoint(self, source: Optional[str], destination: Optional[str]) -> Dict[str, Any]:
        """``{"midway": {"lat", "lng"}}`` at half the driving distance, or an error envelope."""
        try:
            origin, dest = parse_endpoints(source, destination)
        except ParameterError as e:
            return e.envelope()

        try:
            route = self.provider.fetch_route(origin, dest)
        except (ProviderError, requests.RequestException) as e:
            log.warning("Route lookup failed for %s -> %s: %s", source, destination, e)
            return generic_error()

        result = find_midpoint(route)
        if isinstance(result, MidpointError):
            log.info("No midpoint for %s -> %s: %s (%s)", source, destination, result.kind.value, result.detail)
            return generic_error()

        return {"midway": result.as_dict()}
