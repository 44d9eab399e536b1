"""
Report download routes
"""
from flask import Blueprint, current_app, request, send_file
from io import BytesIO

from peak_sun_hours.export.pdf_exporter import PDFExporter
from peak_sun_hours.export.table_renderer import TableRenderer
from peak_sun_hours.web.app import get_session

download_bp = Blueprint('download', __name__)

pdf_exporter = PDFExporter()
table_renderer = TableRenderer()

DATA_FORMATS = {
    'csv': ('text/csv', 'csv', TableRenderer.to_csv),
    'json': ('application/json', 'json', TableRenderer.to_json),
    'excel': ('application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
              'xlsx', TableRenderer.to_excel),
}


@download_bp.route('/report')
def download_report():
    """PDF report of the current result"""
    session = get_session(current_app)

    data = pdf_exporter.export(session.report)
    if data is None:
        # Nothing calculated yet
        return '', 204

    return send_file(
        BytesIO(data),
        mimetype='application/pdf',
        as_attachment=True,
        download_name=current_app.config['REPORT_FILENAME']
    )


@download_bp.route('/data')
def download_data():
    """Monthly data as CSV, JSON or Excel"""
    session = get_session(current_app)
    file_format = request.args.get('format', default='csv')

    if file_format not in DATA_FORMATS:
        return "Unsupported file format.", 400

    if session.report is None:
        return '', 204

    mimetype, extension, render = DATA_FORMATS[file_format]
    try:
        output = render(table_renderer, session.report)
    except Exception as e:
        current_app.logger.exception("Data export failed")
        return f"Data export failed: {str(e)}", 500

    return send_file(
        output,
        mimetype=mimetype,
        as_attachment=True,
        download_name=f"{current_app.config['DATA_FILENAME']}.{extension}"
    )
