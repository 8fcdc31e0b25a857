"""Place objects tagged in tweets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class PlaceField(StrEnum):
    """Fields that can be requested on place objects."""

    CONTAINED_WITHIN = "contained_within"
    COUNTRY = "country"
    COUNTRY_CODE = "country_code"
    FULL_NAME = "full_name"
    GEO = "geo"
    ID = "id"
    NAME = "name"
    PLACE_TYPE = "place_type"


@dataclass
class PlaceGeo:
    """Place details in GeoJSON form."""

    type: str = ""
    bbox: list[float] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlaceGeo:
        return cls(
            type=data.get("type", ""),
            bbox=[float(v) for v in data.get("bbox") or []],
            properties=dict(data.get("properties") or {}),
        )


@dataclass
class Place:
    """A place tagged in a tweet."""

    full_name: str = ""
    id: str = ""
    contained_within: list[str] = field(default_factory=list)
    country: str = ""
    country_code: str = ""
    geo: PlaceGeo | None = None
    name: str = ""
    place_type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Place:
        geo = data.get("geo")
        return cls(
            full_name=data.get("full_name", ""),
            id=data.get("id", ""),
            contained_within=list(data.get("contained_within") or []),
            country=data.get("country", ""),
            country_code=data.get("country_code", ""),
            geo=None if geo is None else PlaceGeo.from_dict(geo),
            name=data.get("name", ""),
            place_type=data.get("place_type", ""),
        )