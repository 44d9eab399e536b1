"""
Tabular views of a report (display rows, data frames and data downloads)
"""
from io import BytesIO
from typing import List, Tuple

import pandas as pd

from peak_sun_hours.core.models import ReportModel
from peak_sun_hours.utils.formatting import format_value

MONTHLY_TITLE = 'Monthly Average Peak Sun Hours (kWh/m²/day)'
MONTHLY_HEADER = ('Month', 'Energy (E_d)', 'Irradiation (H(i)_d)')
YEARLY_TITLE = 'Yearly Summary'
YEARLY_HEADER = ('Description', 'Energy (E_y)', 'Irradiation (H(i)_y)')


def monthly_rows(report: ReportModel) -> List[Tuple[str, str, str]]:
    """One row per month, values with 2 decimals"""
    return [
        (record.label,
         format_value(record.energy_per_day),
         format_value(record.irradiation_per_day))
        for record in report.monthly
    ]


def totals_row(report: ReportModel) -> Tuple[str, str, str]:
    totals = report.totals
    return ('Total',
            format_value(totals.energy_per_year),
            format_value(totals.irradiation_per_year))


def to_dataframe(report: ReportModel) -> pd.DataFrame:
    """Monthly values at full precision"""
    return pd.DataFrame({
        'month': [record.month for record in report.monthly],
        'month_label': [record.label for record in report.monthly],
        'E_d': [record.energy_per_day for record in report.monthly],
        'H(i)_d': [record.irradiation_per_day for record in report.monthly],
    })


def totals_dataframe(report: ReportModel) -> pd.DataFrame:
    return pd.DataFrame({
        'description': ['Total'],
        'E_y': [report.totals.energy_per_year],
        'H(i)_y': [report.totals.irradiation_per_year],
    })


class TableRenderer:
    """Binds a report to the page tables and to the data downloads"""

    def context(self, report: ReportModel) -> dict:
        """Template variables for the result tables"""
        if report is None:
            return {'monthly': None, 'totals': None}
        return {
            'monthly_title': MONTHLY_TITLE,
            'monthly_header': MONTHLY_HEADER,
            'monthly': monthly_rows(report),
            'yearly_title': YEARLY_TITLE,
            'yearly_header': YEARLY_HEADER,
            'totals': totals_row(report),
        }

    def to_csv(self, report: ReportModel) -> BytesIO:
        output = BytesIO()
        to_dataframe(report).to_csv(output, index=False, encoding='utf-8-sig')
        output.seek(0)
        return output

    def to_json(self, report: ReportModel) -> BytesIO:
        output = BytesIO()
        frame = to_dataframe(report)
        output.write(frame.to_json(orient='records').encode('utf-8'))
        output.seek(0)
        return output

    def to_excel(self, report: ReportModel) -> BytesIO:
        """Workbook with the monthly table and a yearly summary sheet"""
        output = BytesIO()

        with pd.ExcelWriter(output, engine='openpyxl') as writer:
            to_dataframe(report).to_excel(writer, sheet_name='Monthly', index=False)
            totals_dataframe(report).to_excel(writer, sheet_name=YEARLY_TITLE, index=False)

            if report.query is not None:
                info_df = pd.DataFrame({
                    'parameter': list(report.query.to_params().keys()),
                    'value': [str(value) for value in report.query.to_params().values()],
                })
                info_df.to_excel(writer, sheet_name='Query', index=False)

        output.seek(0)
        return output
