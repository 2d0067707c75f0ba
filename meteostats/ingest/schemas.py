"""Schema of the station master table ("Maestro climatológico")."""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..coordinates import Latitude, Longitude
from ..units import Meters

__all__ = ["Station"]


class Station(BaseModel):
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    id: str = Field(alias="INDICATIVO", min_length=1)
    name: str = Field(alias="NOMBRE")
    province: str = Field(alias="PROVINCIA")
    city: str = Field(alias="MUNICIPIO")
    altitude: Meters = Field(alias="ALTITUD")
    longitude: Longitude = Field(alias="LONGITUD")
    latitude: Latitude = Field(alias="LATITUD")
    # Carried as an opaque label, e.g. "ETRS89".
    datum: str = Field(alias="DATUM")

    @field_validator("altitude", mode="before")
    @classmethod
    def _parse_altitude(cls, value: Any) -> Meters:
        if isinstance(value, Meters):
            return value
        return Meters.parse(str(value))

    @field_validator("longitude", mode="before")
    @classmethod
    def _parse_longitude(cls, value: Any) -> Longitude:
        if isinstance(value, Longitude):
            return value
        return Longitude.decode(str(value).strip())

    @field_validator("latitude", mode="before")
    @classmethod
    def _parse_latitude(cls, value: Any) -> Latitude:
        if isinstance(value, Latitude):
            return value
        return Latitude.decode(str(value).strip())

    @field_serializer("altitude")
    def _dump_altitude(self, value: Meters) -> float:
        return value.value

    @field_serializer("longitude", "latitude")
    def _dump_coordinate(self, value: Any) -> str:
        return value.encode()

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
