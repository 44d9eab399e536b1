"""
PVGIS PVcalc API client
Issues one query and normalizes the answer into a ReportModel
"""
import logging
import numbers
from typing import Optional

import requests

from peak_sun_hours.config import get_config
from peak_sun_hours.core.errors import NetworkError, UpstreamError
from peak_sun_hours.core.models import (
    MONTHS_PER_YEAR, MonthlyRecord, QuerySpec, ReportModel, YearlyTotal
)

logger = logging.getLogger(__name__)
config = get_config()


def _lookup(payload, path):
    node = payload
    for key in path:
        if not isinstance(node, dict) or key not in node:
            raise UpstreamError(
                f"Unexpected response shape: missing {'.'.join(path)}"
            )
        node = node[key]
    return node


def _number(entry, key, where):
    value = entry.get(key) if isinstance(entry, dict) else None
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise UpstreamError(
            f"Unexpected response shape: {where}.{key} is not a number"
        )
    return float(value)


def parse_report(payload, mounting: str = 'fixed', query: QuerySpec = None) -> ReportModel:
    """
    Validate a PVcalc JSON document and map it onto the report model

    Args:
        payload: decoded JSON body of a successful response
        mounting: output branch to read ('fixed' for a non-tracking system)
        query: query that produced the payload, kept for reference

    Returns:
        ReportModel with values at full precision

    Raises:
        UpstreamError: the document does not have the expected shape
    """
    monthly_path = ('outputs', 'monthly', mounting)
    totals_path = ('outputs', 'totals', mounting)
    monthly = _lookup(payload, monthly_path)
    totals = _lookup(payload, totals_path)

    if not isinstance(monthly, list) or len(monthly) != MONTHS_PER_YEAR:
        count = len(monthly) if isinstance(monthly, list) else type(monthly).__name__
        raise UpstreamError(
            f"Unexpected response shape: {'.'.join(monthly_path)} must hold "
            f"{MONTHS_PER_YEAR} entries, got {count}"
        )

    records = []
    for index, entry in enumerate(monthly):
        where = f"{'.'.join(monthly_path)}[{index}]"
        reported_month = entry.get('month') if isinstance(entry, dict) else None
        if reported_month is not None and reported_month != index + 1:
            # The position is taken as the calendar month; PVGIS does not promise it
            logger.warning("Monthly entry %d reports month %r, keeping positional month %d",
                           index, reported_month, index + 1)
        records.append(MonthlyRecord(
            month_index=index,
            energy_per_day=_number(entry, 'E_d', where),
            irradiation_per_day=_number(entry, 'H(i)_d', where),
        ))

    where = '.'.join(totals_path)
    yearly = YearlyTotal(
        energy_per_year=_number(totals, 'E_y', where),
        irradiation_per_year=_number(totals, 'H(i)_y', where),
    )
    return ReportModel(tuple(records), yearly, query)


def _error_message(response) -> str:
    fallback = f"API request failed with status {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get('message'):
        return str(body['message'])
    return fallback


class IrradianceClient:
    """Client for the PVGIS PVcalc endpoint"""

    def __init__(self, base_url: Optional[str] = None, session=None,
                 timeout: Optional[float] = None):
        self.base_url = (base_url or config.PVGIS_BASE_URL).rstrip('/')
        self.path = config.PVGIS_CALC_PATH
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f'{self.base_url}{self.path}'

    def fetch(self, spec: QuerySpec) -> ReportModel:
        """
        Run one PVcalc query

        There is no retry and no cache; every call returns a new report.

        Args:
            spec: validated query

        Returns:
            ReportModel built from the response

        Raises:
            NetworkError: no response was received
            UpstreamError: non-success status or unexpected response shape
        """
        params = spec.to_params()
        logger.info("Requesting PVcalc for lat=%s lon=%s angle=%s aspect=%s",
                    spec.latitude, spec.longitude, spec.tilt, spec.azimuth)

        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("PVcalc request failed: %s", e)
            raise NetworkError(str(e) or type(e).__name__) from e

        if not response.ok:
            message = _error_message(response)
            logger.error("PVcalc returned status %s: %s", response.status_code, message)
            raise UpstreamError(message)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("PVcalc returned a non-JSON body: %s", e)
            raise UpstreamError("Unexpected response shape: body is not JSON") from e

        report = parse_report(payload, spec.mounting, spec)
        logger.debug("PVcalc report parsed: E_y=%s H(i)_y=%s",
                     report.totals.energy_per_year, report.totals.irradiation_per_year)
        return report
