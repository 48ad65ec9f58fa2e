"""Centralized settings for the geo-services backend."""
from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "GEO_SERVICES_"}

    # MapQuest: directions + geocoding; empty string means unconfigured
    mapquest_api_key: str = ""
    mapquest_base_url: str = "https://www.mapquestapi.com"

    # Yelp Fusion business search
    yelp_api_key: str = ""
    yelp_base_url: str = "https://api.yelp.com/v3"
    yelp_search_term: str = "restaurants"
    yelp_search_limit: int = 20

    # Outbound HTTP policy shared by all providers
    http_timeout_s: int = 25
    http_tries: int = 4
    http_backoff_s: float = 0.8
    user_agent: str = "geo-services/0.1.0"

    # Route provider used by the API and CLI: "mapquest" | "mock"
    route_provider: str = "mapquest"


settings = Settings()
