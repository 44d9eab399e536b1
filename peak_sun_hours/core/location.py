"""
Location providers
"""
from typing import Optional

from peak_sun_hours.core.errors import LocationError
from peak_sun_hours.core.models import Coordinate
from peak_sun_hours.core.request_builder import parse_number, validate_coordinates


class LocationProvider:
    """Source of the device position"""

    def locate(self) -> Coordinate:
        """Return the current position or raise LocationError"""
        raise NotImplementedError


class StaticLocationProvider(LocationProvider):
    """Always reports the same position"""

    def __init__(self, latitude: float, longitude: float):
        self.coordinate = Coordinate(latitude, longitude)

    def locate(self) -> Coordinate:
        return self.coordinate


class ReportedLocationProvider(LocationProvider):
    """Position reported by the browser geolocation API

    The browser sends either a coordinate pair or the message of its
    PositionError.
    """

    def __init__(self, latitude=None, longitude=None, error: Optional[str] = None):
        self.latitude = latitude
        self.longitude = longitude
        self.error = error

    def locate(self) -> Coordinate:
        if self.error:
            raise LocationError(self.error)

        lat = parse_number(self.latitude)
        lon = parse_number(self.longitude)
        if lat is None or lon is None or not validate_coordinates(lat, lon):
            raise LocationError("Position unavailable")
        return Coordinate(lat, lon)
