"""
Report data model

All values are kept at the precision returned by PVGIS. Rounding is applied
only when rows are rendered or exported.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

MONTHS_PER_YEAR = len(MONTH_LABELS)


@dataclass(frozen=True)
class Coordinate:
    """Geographic point in decimal degrees"""
    latitude: float
    longitude: float

    def rounded(self, digits: int = 4) -> "Coordinate":
        return Coordinate(round(self.latitude, digits), round(self.longitude, digits))


@dataclass(frozen=True)
class PanelConfig:
    """Panel orientation as entered in the form"""
    tilt: float = 10
    azimuth: float = 0


@dataclass(frozen=True)
class QuerySpec:
    """Validated PVcalc query"""
    latitude: float
    longitude: float
    tilt: float = 0
    azimuth: float = 0
    peak_power: float = 1
    loss: float = 14
    output_format: str = 'json'
    granularity: str = 'monthly'
    mounting: str = 'fixed'

    def to_params(self) -> Dict[str, object]:
        """Query parameters in the order PVcalc documents them"""
        return {
            'lat': self.latitude,
            'lon': self.longitude,
            'peakpower': self.peak_power,
            'loss': self.loss,
            'angle': self.tilt,
            'aspect': self.azimuth,
            'outputformat': self.output_format,
        }


@dataclass(frozen=True)
class MonthlyRecord:
    """Daily averages for one calendar month (kWh/m²/day)"""
    month_index: int
    energy_per_day: float
    irradiation_per_day: float

    @property
    def label(self) -> str:
        return MONTH_LABELS[self.month_index]

    @property
    def month(self) -> int:
        """Calendar month number, 1 = January"""
        return self.month_index + 1


@dataclass(frozen=True)
class YearlyTotal:
    energy_per_year: float
    irradiation_per_year: float


@dataclass(frozen=True)
class ReportModel:
    """Normalized PVcalc result

    Built once per successful calculation and replaced as a whole, never
    updated field by field.
    """
    monthly: Tuple[MonthlyRecord, ...]
    totals: YearlyTotal
    query: QuerySpec = field(default=None, compare=False)

    def __post_init__(self):
        monthly = tuple(self.monthly)
        if len(monthly) != MONTHS_PER_YEAR:
            raise ValueError(f"expected {MONTHS_PER_YEAR} monthly records, got {len(monthly)}")
        if [record.month_index for record in monthly] != list(range(MONTHS_PER_YEAR)):
            raise ValueError("monthly records must be ordered by month index")
        object.__setattr__(self, 'monthly', monthly)

    def to_dict(self) -> Dict[str, object]:
        """JSON-ready representation, full precision"""
        data = {
            'monthly': [
                {
                    'month': record.month,
                    'label': record.label,
                    'E_d': record.energy_per_day,
                    'H(i)_d': record.irradiation_per_day,
                }
                for record in self.monthly
            ],
            'totals': {
                'E_y': self.totals.energy_per_year,
                'H(i)_y': self.totals.irradiation_per_year,
            },
        }
        if self.query is not None:
            data['query'] = self.query.to_params()
        return data

    @classmethod
    def from_values(cls, monthly: List[Tuple[float, float]], totals: Tuple[float, float],
                    query: QuerySpec = None) -> "ReportModel":
        """Build a report from (E_d, H(i)_d) pairs in calendar order"""
        records = tuple(
            MonthlyRecord(index, energy, irradiation)
            for index, (energy, irradiation) in enumerate(monthly)
        )
        return cls(records, YearlyTotal(*totals), query)
