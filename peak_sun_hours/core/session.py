"""
Report session - owner of the report / error / loading state

The session is a small state machine:

    IDLE -> LOADING -> SUCCESS | FAILED -> (next begin) LOADING ...

Overlapping calculations are not cancelled. Unless ``discard_stale`` is set,
whichever response resolves last overwrites the state, even if it was issued
first.
"""
import logging
from enum import Enum
from typing import Optional

from peak_sun_hours.core.errors import (
    CalculationError, LocationError, LocationUnsupportedError, ValidationError
)
from peak_sun_hours.core.irradiance_client import IrradianceClient
from peak_sun_hours.core.location import LocationProvider
from peak_sun_hours.core.models import Coordinate, ReportModel
from peak_sun_hours.core.request_builder import build_query
from peak_sun_hours.utils.formatting import format_coordinate

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    SUCCESS = 'success'
    FAILED = 'failed'


def display_message(error) -> str:
    """User-facing text for a failed attempt"""
    if isinstance(error, LocationUnsupportedError):
        return error.message
    if isinstance(error, LocationError):
        return f"Geolocation error: {error.message}"
    if isinstance(error, ValidationError):
        return error.message
    if isinstance(error, CalculationError):
        return f"Failed to fetch data: {error.message}. Please check your inputs and try again."
    return str(error)


class ReportSession:
    """Coordinates location lookup, calculation and the resulting report"""

    def __init__(self, client: IrradianceClient, discard_stale: bool = False,
                 default_form: Optional[dict] = None):
        self.client = client
        self.discard_stale = discard_stale
        self.form = dict(default_form or {})
        self.state = SessionState.IDLE
        self.report: Optional[ReportModel] = None
        self.error = None
        self.loading = False
        self._generation = 0

    @property
    def error_message(self) -> Optional[str]:
        return display_message(self.error) if self.error is not None else None

    @property
    def generation(self) -> int:
        return self._generation

    def _is_stale(self, token: Optional[int]) -> bool:
        if not self.discard_stale or token is None:
            return False
        return token != self._generation

    # State transitions

    def begin(self) -> int:
        """Start a calculation: clear the previous outcome and return its token"""
        self._generation += 1
        self.report = None
        self.error = None
        self.loading = True
        self.state = SessionState.LOADING
        return self._generation

    def succeed(self, report: ReportModel, token: Optional[int] = None) -> bool:
        if self._is_stale(token):
            logger.info("Discarding result of superseded request %s", token)
            return False
        self.report = report
        self.error = None
        self.loading = False
        self.state = SessionState.SUCCESS
        return True

    def fail(self, error, token: Optional[int] = None) -> bool:
        if self._is_stale(token):
            logger.info("Discarding failure of superseded request %s", token)
            return False
        self.report = None
        self.error = error
        self.loading = False
        self.state = SessionState.FAILED
        return True

    def reset(self):
        self.report = None
        self.error = None
        self.loading = False
        self.state = SessionState.IDLE

    # Operations

    def calculate(self, latitude, longitude, tilt=None, azimuth=None) -> Optional[ReportModel]:
        """
        Validate the inputs, query PVcalc and record the outcome

        Errors never escape; they are stored on the session.

        Returns:
            The new report, or None when the attempt failed or was superseded
        """
        self.form.update(latitude=latitude, longitude=longitude, tilt=tilt, azimuth=azimuth)

        try:
            spec = build_query(latitude, longitude, tilt, azimuth)
        except ValidationError as e:
            logger.info("Rejected calculation input: %s", e.message)
            self.fail(e)
            return None

        token = self.begin()
        try:
            report = self.client.fetch(spec)
        except CalculationError as e:
            logger.warning("Calculation %s failed (%s): %s", token, e.kind, e.message)
            self.fail(e, token)
            return None

        return report if self.succeed(report, token) else None

    def locate(self, provider: Optional[LocationProvider]) -> Optional[Coordinate]:
        """
        Fill the form coordinates from a location provider

        The current report is left as it is.
        """
        if provider is None:
            self.error = LocationUnsupportedError()
            return None

        self.loading = True
        self.error = None
        try:
            coordinate = provider.locate().rounded(4)
        except LocationError as e:
            logger.warning("Location lookup failed: %s", e.message)
            self.error = e
            return None
        finally:
            self.loading = False

        self.form.update(latitude=format_coordinate(coordinate.latitude),
                         longitude=format_coordinate(coordinate.longitude))
        return coordinate

    def to_dict(self) -> dict:
        """JSON snapshot of the session"""
        return {
            'state': self.state.value,
            'loading': self.loading,
            'error': self.error_message,
            'error_kind': getattr(self.error, 'kind', None),
            'form': self.form,
            'report': self.report.to_dict() if self.report is not None else None,
        }
