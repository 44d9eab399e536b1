"""
core module - data acquisition for the peak sun hours report

This module contains the following components:
- models: report data model (coordinates, monthly records, yearly totals)
- request_builder: input validation and PVcalc query construction
- irradiance_client: PVGIS PVcalc API client
- location: location providers
- session: report / error / loading state owner
"""

from .errors import (
    CalculationError,
    ValidationError,
    NetworkError,
    UpstreamError,
    LocationError,
)
from .models import (
    MONTH_LABELS,
    Coordinate,
    PanelConfig,
    QuerySpec,
    MonthlyRecord,
    YearlyTotal,
    ReportModel,
)
from .request_builder import build, build_query
from .irradiance_client import IrradianceClient, parse_report
from .location import LocationProvider, StaticLocationProvider, ReportedLocationProvider
from .session import ReportSession, SessionState

__version__ = "1.0.0"
__author__ = "Peak Sun Hours Team"


def create_session(config_class=None):
    """Build a report session wired to PVGIS from configuration"""
    from peak_sun_hours.config import get_config
    from peak_sun_hours.utils.formatting import format_coordinate

    cfg = config_class or get_config()
    client = IrradianceClient(base_url=cfg.PVGIS_BASE_URL, timeout=cfg.PVGIS_TIMEOUT)
    default_form = {
        'latitude': format_coordinate(cfg.DEFAULT_LOCATION[0]),
        'longitude': format_coordinate(cfg.DEFAULT_LOCATION[1]),
        'tilt': cfg.DEFAULT_TILT,
        'azimuth': cfg.DEFAULT_AZIMUTH,
    }
    return ReportSession(client, discard_stale=cfg.DISCARD_STALE_RESULTS,
                         default_form=default_form)


__all__ = [
    'CalculationError',
    'ValidationError',
    'NetworkError',
    'UpstreamError',
    'LocationError',
    'MONTH_LABELS',
    'Coordinate',
    'PanelConfig',
    'QuerySpec',
    'MonthlyRecord',
    'YearlyTotal',
    'ReportModel',
    'build',
    'build_query',
    'IrradianceClient',
    'parse_report',
    'LocationProvider',
    'StaticLocationProvider',
    'ReportedLocationProvider',
    'ReportSession',
    'SessionState',
    'create_session'
]
