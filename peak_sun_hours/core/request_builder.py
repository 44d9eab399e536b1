"""
PVcalc query construction and input validation
"""
import math
from typing import Optional

from peak_sun_hours.config import get_config
from peak_sun_hours.core.errors import ValidationError
from peak_sun_hours.core.models import Coordinate, PanelConfig, QuerySpec

config = get_config()


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value) -> Optional[float]:
    """
    Parse a form or query value into a finite float

    Args:
        value: number or string as typed by the user

    Returns:
        The parsed value, or None when it is missing or not a number
    """
    if _is_blank(value) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def validate_coordinates(lat: float, lon: float) -> bool:
    """
    Check that a coordinate pair is within range

    Args:
        lat: latitude (-90 ~ 90)
        lon: longitude (-180 ~ 180)

    Returns:
        Whether the pair is a valid coordinate
    """
    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        return False

    if not (-90 <= lat <= 90):
        return False

    if not (-180 <= lon <= 180):
        return False

    return True


def parse_coordinate(latitude, longitude) -> Coordinate:
    """Validate the mandatory coordinate fields"""
    if _is_blank(latitude) or _is_blank(longitude):
        raise ValidationError("Latitude and Longitude are required.")

    lat = parse_number(latitude)
    lon = parse_number(longitude)
    if lat is None:
        raise ValidationError(f"Latitude must be a number, got {latitude!r}.")
    if lon is None:
        raise ValidationError(f"Longitude must be a number, got {longitude!r}.")

    if not validate_coordinates(lat, lon):
        raise ValidationError(
            f"Coordinates out of range: latitude {lat} must be within [-90, 90] "
            f"and longitude {lon} within [-180, 180]."
        )
    return Coordinate(lat, lon)


def _angle_or_zero(value) -> float:
    number = parse_number(value)
    return 0 if number is None else number


def build_query(latitude, longitude, tilt=None, azimuth=None) -> QuerySpec:
    """
    Build a fixed-mount, monthly PVcalc query

    Latitude and longitude are mandatory. Tilt and azimuth are lenient:
    missing or non-numeric values are sent as 0.

    Raises:
        ValidationError: latitude or longitude missing, not a number, or out of range
    """
    coord = parse_coordinate(latitude, longitude)
    return QuerySpec(
        latitude=coord.latitude,
        longitude=coord.longitude,
        tilt=_angle_or_zero(tilt),
        azimuth=_angle_or_zero(azimuth),
        peak_power=config.PEAK_POWER,
        loss=config.SYSTEM_LOSS,
        output_format=config.OUTPUT_FORMAT,
    )


def build(coord: Optional[Coordinate], panel: Optional[PanelConfig] = None) -> QuerySpec:
    """Build a query from model objects"""
    if coord is None:
        raise ValidationError("Latitude and Longitude are required.")
    if panel is None:
        return build_query(coord.latitude, coord.longitude)
    return build_query(coord.latitude, coord.longitude, panel.tilt, panel.azimuth)
