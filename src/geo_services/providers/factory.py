from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from geo_services.config import Settings, settings as default_settings
from geo_services.providers.base import RouteProvider
from geo_services.providers.http import HTTPClient

if TYPE_CHECKING:
    from geo_services.services.directions import DirectionsService
    from geo_services.services.location import LocationService
    from geo_services.services.places import PlacesService


@dataclass
class Services:
    directions: DirectionsService
    location: LocationService
    places: PlacesService


def _http(cfg: Settings) -> HTTPClient:
    return HTTPClient(
        user_agent=cfg.user_agent,
        timeout_s=cfg.http_timeout_s,
        tries=cfg.http_tries,
        backoff_s=cfg.http_backoff_s,
    )


def build_route_provider(name: str, cfg: Optional[Settings] = None) -> RouteProvider:
    """
    Build a route provider from a name like:
      "mapquest"
      "mock"
    """
    cfg = cfg or default_settings
    token = name.strip().lower()

    # Local imports to avoid circular imports
    from geo_services.providers.mapquest import MapQuestDirections
    from geo_services.providers.mock import MockRouteProvider

    if token == "mapquest":
        return MapQuestDirections(api_key=cfg.mapquest_api_key, base_url=cfg.mapquest_base_url, http=_http(cfg))
    if token == "mock":
        return MockRouteProvider()
    raise ValueError(f"Unknown route provider: '{name}' (supported: mapquest, mock)")


def build_services(cfg: Optional[Settings] = None, route_provider: Optional[str] = None) -> Services:
    """Wire every service with explicit credentials from *cfg*."""
    cfg = cfg or default_settings

    from geo_services.providers.mapquest import MapQuestGeocoder
    from geo_services.providers.yelp import YelpPlaces
    from geo_services.services.directions import DirectionsService
    from geo_services.services.location import LocationService
    from geo_services.services.places import PlacesService

    http = _http(cfg)
    geocoder = MapQuestGeocoder(api_key=cfg.mapquest_api_key, base_url=cfg.mapquest_base_url, http=http)
    yelp = YelpPlaces(
        api_key=cfg.yelp_api_key,
        base_url=cfg.yelp_base_url,
        term=cfg.yelp_search_term,
        limit=cfg.yelp_search_limit,
        http=http,
    )
    provider = build_route_provider(route_provider or cfg.route_provider, cfg)

    return Services(
        directions=DirectionsService(provider),
        location=LocationService(geocoder),
        places=PlacesService(yelp, geocoder),
    )
