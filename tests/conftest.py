import pytest
import requests

from peak_sun_hours.core.irradiance_client import IrradianceClient
from peak_sun_hours.core.models import ReportModel
from peak_sun_hours.core.session import ReportSession
from peak_sun_hours.web.app import create_app

from fakes import FakeResponse, FakeSession, pvgis_payload


@pytest.fixture
def payload():
    return pvgis_payload()


@pytest.fixture
def report():
    return ReportModel.from_values([(4.1, 4.4)] * 12, (1500.0, 1600.0))


@pytest.fixture
def fake_http():
    return FakeSession(FakeResponse(200, pvgis_payload()))


@pytest.fixture
def client(fake_http):
    return IrradianceClient(base_url='http://pvgis.test', session=fake_http)


DEFAULT_FORM = {'latitude': '1.3733', 'longitude': '32.2903', 'tilt': 10, 'azimuth': 0}


@pytest.fixture
def report_session(client):
    return ReportSession(client, default_form=DEFAULT_FORM)


@pytest.fixture
def app(client):
    # Every browser gets its own session, all sharing the fake PVGIS client
    app = create_app('testing', session_factory=lambda: ReportSession(client, default_form=DEFAULT_FORM))
    return app


@pytest.fixture
def http(app):
    return app.test_client()


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("Failed to establish a new connection")
