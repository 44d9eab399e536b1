import pytest

from peak_sun_hours.web import create_app

from fakes import FakeResponse, pvgis_payload


def test_index_page(http):
    response = http.get('/')

    assert response.status_code == 200
    page = response.get_data(as_text=True)
    assert 'Solar Peak Sun Hours' in page
    assert 'value="1.3733"' in page
    assert 'Download PDF' not in page


def test_calculate_form_shows_tables(http):
    response = http.post('/calculate', data={
        'latitude': '1.3733', 'longitude': '32.2903', 'tilt': '10', 'azimuth': '0'
    }, follow_redirects=True)

    page = response.get_data(as_text=True)
    assert response.status_code == 200
    assert page.count('<td>4.10</td>') == 12
    assert '<td>1500.00</td>' in page
    assert 'Download PDF' in page


def test_calculate_form_validation_error(http, fake_http):
    response = http.post('/calculate', data={'latitude': '', 'longitude': '32.2903'},
                         follow_redirects=True)

    assert 'Latitude and Longitude are required.' in response.get_data(as_text=True)
    assert fake_http.calls == []


def test_api_calculate(http, fake_http):
    response = http.get('/api/calculate?lat=1.3733&lon=32.2903&tilt=10&azimuth=0')

    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['totals'] == {'E_y': 1500.0, 'H(i)_y': 1600.0}
    assert [m['label'] for m in data['monthly']][:3] == ['Jan', 'Feb', 'Mar']
    assert fake_http.calls[0]['params']['angle'] == 10


def test_api_calculate_validation_error(http):
    response = http.get('/api/calculate?lon=32.2903')

    assert response.status_code == 400
    data = response.get_json()
    assert data['kind'] == 'ValidationError'
    assert data['success'] is False


def test_api_calculate_upstream_error(http, fake_http):
    fake_http.responses[:] = [FakeResponse(400, {'message': 'Location over the sea.'})]

    response = http.get('/api/calculate?lat=0&lon=0')

    assert response.status_code == 502
    data = response.get_json()
    assert data['kind'] == 'UpstreamError'
    assert 'Location over the sea.' in data['error']


def test_api_report_snapshot(http):
    assert http.get('/api/report').get_json()['state'] == 'idle'

    http.get('/api/calculate?lat=1.3733&lon=32.2903')

    snapshot = http.get('/api/report').get_json()
    assert snapshot['state'] == 'success'
    assert snapshot['report']['totals']['E_y'] == 1500.0


@pytest.mark.parametrize("query, valid", [
    ('lat=36.5&lon=127.8', True),
    ('lat=100&lon=127.8', False),
    ('lat=abc&lon=1', False),
])
def test_validate_location(http, query, valid):
    assert http.get(f'/api/validate_location?{query}').get_json()['valid'] is valid


def test_download_report_without_result_is_noop(http):
    response = http.get('/download/report')

    assert response.status_code == 204
    assert response.data == b''


def test_download_report(http):
    http.get('/api/calculate?lat=1.3733&lon=32.2903&tilt=10&azimuth=0')

    response = http.get('/download/report')

    assert response.status_code == 200
    assert response.mimetype == 'application/pdf'
    assert 'solar-report.pdf' in response.headers['Content-Disposition']
    assert response.data.startswith(b'%PDF')


def test_download_after_failure_is_noop(http, fake_http):
    http.get('/api/calculate?lat=1.3733&lon=32.2903')
    fake_http.responses.append(FakeResponse(200, {'outputs': {}}))
    http.get('/api/calculate?lat=1.3733&lon=32.2903')

    assert http.get('/download/report').status_code == 204


@pytest.mark.parametrize("file_format, mimetype, extension", [
    ('csv', 'text/csv', 'csv'),
    ('json', 'application/json', 'json'),
    ('excel', 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet', 'xlsx'),
])
def test_download_data(http, file_format, mimetype, extension):
    http.get('/api/calculate?lat=1.3733&lon=32.2903')

    response = http.get(f'/download/data?format={file_format}')

    assert response.status_code == 200
    assert response.mimetype == mimetype
    assert f'solar-report.{extension}' in response.headers['Content-Disposition']


def test_download_data_unknown_format(http):
    assert http.get('/download/data?format=xml').status_code == 400


def test_locate_with_browser_position(http):
    http.post('/locate', data={'latitude': '51.507351', 'longitude': '-0.127758'})

    form = http.get('/api/report').get_json()['form']
    assert form['latitude'] == '51.5074'
    assert form['longitude'] == '-0.1278'


def test_locate_with_browser_error(http):
    response = http.post('/locate', data={'error': 'User denied Geolocation'}, follow_redirects=True)

    assert 'Geolocation error: User denied Geolocation' in response.get_data(as_text=True)


def test_locate_unsupported(http):
    http.post('/locate', data={'unsupported': '1'})

    assert http.get('/api/report').get_json()['error'] == 'Geolocation is not supported by this browser.'


def test_locate_defaults_to_configured_location(http):
    http.post('/calculate', data={'latitude': '', 'longitude': '32.2903'})
    assert http.get('/api/report').get_json()['form']['latitude'] == ''

    http.post('/locate')

    assert http.get('/api/report').get_json()['form']['latitude'] == '1.3733'


def test_each_browser_keeps_its_own_report(app):
    alice = app.test_client()
    bob = app.test_client()

    alice.post('/calculate', data={
        'latitude': '1.3733', 'longitude': '32.2903', 'tilt': '10', 'azimuth': '0'
    })
    bob.post('/locate', data={'error': 'User denied Geolocation'})

    bob_page = bob.get('/').get_data(as_text=True)
    assert '<td>1500.00</td>' not in bob_page
    assert 'Download PDF' not in bob_page
    assert bob.get('/download/report').status_code == 204
    assert bob.get('/api/report').get_json()['report'] is None

    alice_page = alice.get('/').get_data(as_text=True)
    assert '<td>1500.00</td>' in alice_page
    assert 'Geolocation error' not in alice_page
    assert alice.get('/download/report').data.startswith(b'%PDF')
    assert len(app.extensions['peak_sun_hours']) == 2


def test_sessions_built_from_configuration():
    app = create_app('testing')

    snapshot = app.test_client().get('/api/report').get_json()

    assert snapshot['state'] == 'idle'
    assert snapshot['form'] == {'latitude': '1.3733', 'longitude': '32.2903', 'tilt': 10, 'azimuth': 0}
