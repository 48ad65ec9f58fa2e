from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class LatLng(_WireModel):
    lat: float
    lng: float


class Direction(_WireModel):
    narrative: str = ""
    url: str = ""
    distance: float = 0.0
    time: str = ""
    turn_type: str = Field(default="unknown", alias="turnType")
    transport_mode: str = Field(default="", alias="transportMode")
    direction: str = ""
    icon_url: str = Field(default="", alias="iconUrl")


class RouteSummary(_WireModel):
    has_toll_road: bool = Field(default=False, alias="hasTollRoad")
    has_country_cross: bool = Field(default=False, alias="hasCountryCross")
    has_ferry: bool = Field(default=False, alias="hasFerry")
    distance: float = 0.0
    fuel_used: float = Field(default=0.0, alias="fuelUsed")
    formatted_time: str = Field(default="", alias="formattedTime")

    # None when the provider returned no legs
    directions: Optional[List[Direction]] = None


class Address(_WireModel):
    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = Field(default="", alias="postalCode")


class Venue(_WireModel):
    name: str
    address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = Field(default="", alias="postalCode")
    country: str = ""
    distance: float = -1
    formatted_phone: str = Field(default="", alias="formattedPhone")
    lat: Optional[float] = None
    lng: Optional[float] = None
