"""
Pydantic models for the GeoJSON FeatureCollection written for FIR boundaries.

Coordinates are kept as ``Decimal`` so that values read from a file are not
rounded through binary floats.
"""

from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, conlist, field_validator

CRS84 = "urn:ogc:def:crs:OGC:1.3:CRS84"

# [longitude, latitude], an optional altitude is tolerated and ignored
Position = conlist(Decimal, min_length=2, max_length=3)


class Crs(BaseModel):
    """Named coordinate reference system member."""

    type: str = "name"
    properties: Dict[str, str] = Field(default_factory=lambda: {"name": CRS84})


class FeatureProperties(BaseModel):
    """Properties of one FIR feature."""
    model_config = ConfigDict(populate_by_name=True)

    icao: str = Field(alias="ICAO")
    is_oceanic: bool = Field(alias="IsOceanic")
    label: Position = Field(alias="Lable")

    @field_validator("is_oceanic", mode="before")
    @classmethod
    def _flag_from_number(cls, value: Any) -> Any:
        if isinstance(value, Decimal):
            return int(value) if value == value.to_integral_value() else value
        return value


class MultiPolygon(BaseModel):
    """One polygon per ring of the FIR: the base ring first, then its extensions."""

    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: List[List[List[Position]]]


class Feature(BaseModel):
    type: Literal["Feature"] = "Feature"
    properties: FeatureProperties
    bbox: Optional[List[Decimal]] = None
    geometry: MultiPolygon


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    name: str = ""
    crs: Crs = Field(default_factory=Crs)
    features: List[Feature] = Field(default_factory=list)
