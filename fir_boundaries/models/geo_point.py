import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Tuple

from ..errors import FIRFormatError, InvalidNumberError, PointOutOfRange

LATITUDE_LIMIT = Decimal(90)
LONGITUDE_LIMIT = Decimal(180)

# Plain ASCII decimal: optional sign, digits, optional fraction. No exponent or grouping.
DECIMAL_PATTERN = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')


def parse_decimal(value: str, field: str, line_number: Optional[int] = None) -> Decimal:
    """
    Parse a decimal field exactly.

    Raises:
        InvalidNumberError: if the text is not a plain decimal number
    """
    text = value.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise InvalidNumberError(field, value, line_number)
    return Decimal(text)


def format_decimal(value: Decimal) -> str:
    """Render a decimal at full precision without exponent notation."""
    return format(value, 'f')


@dataclass(frozen=True, order=True)
class GeoPoint:
    """
    An immutable, range checked (latitude, longitude) pair.

    Coordinates are exact decimals in degrees:
    - Latitude: -90 to +90 (inclusive)
    - Longitude: -180 to +180 (inclusive)

    Equality and ordering compare the exact decimal values, latitude first.
    """

    latitude: Decimal
    longitude: Decimal

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not (-LATITUDE_LIMIT <= self.latitude <= LATITUDE_LIMIT
                and -LONGITUDE_LIMIT <= self.longitude <= LONGITUDE_LIMIT):
            raise PointOutOfRange(self.latitude, self.longitude)

    @classmethod
    def from_dat_str(cls, line: str, line_number: Optional[int] = None) -> 'GeoPoint':
        """
        Parse a native format point line ``"lat|lon"``.

        Raises:
            FIRFormatError: if the line does not hold exactly 2 fields
            InvalidNumberError: if a field is not a decimal
            PointOutOfRange: if the coordinates are outside their range
        """
        fields = [f.strip() for f in line.split('|')]
        if len(fields) != 2:
            raise FIRFormatError(f"expected 2 fields, got: {len(fields)}", line_number)
        return cls(
            parse_decimal(fields[0], 'latitude', line_number),
            parse_decimal(fields[1], 'longitude', line_number),
        )

    @classmethod
    def from_lon_lat(cls, position: Any) -> 'GeoPoint':
        """Build a point from a GeoJSON ``[longitude, latitude]`` position."""
        lon, lat = position[0], position[1]
        return cls(Decimal(lat), Decimal(lon))

    def to_dat_str(self) -> str:
        return f"{format_decimal(self.latitude)}|{format_decimal(self.longitude)}"

    def to_lon_lat(self) -> Tuple[Decimal, Decimal]:
        """GeoJSON axis order."""
        return (self.longitude, self.latitude)

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"
