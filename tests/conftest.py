import asyncio
import copy
import inspect
import logging

import httpx
import pytest

from weathercli.core.config import reset_config_provider

SAMPLE_PAYLOAD = {
    "coord": {"lon": 30.5167, "lat": 50.4333},
    "weather": [
        {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}
    ],
    "base": "stations",
    "main": {
        "temp": 12.4,
        "feels_like": 11.38,
        "temp_min": 11.1,
        "temp_max": 13.9,
        "pressure": 1018,
        "humidity": 71,
    },
    "visibility": 10000,
    "wind": {"speed": 3.6, "deg": 240},
    "clouds": {"all": 75},
    "dt": 1760608800,
    "sys": {
        "type": 2,
        "id": 2003742,
        "country": "UA",
        "sunrise": 1760588040,
        "sunset": 1760626860,
    },
    "timezone": 10800,
    "id": 703448,
    "name": "Kyiv",
    "cod": 200,
}


def pytest_pyfunc_call(pyfuncitem):
    if inspect.iscoroutinefunction(pyfuncitem.obj):
        funcargs = {
            name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
        }
        asyncio.run(pyfuncitem.obj(**funcargs))
        return True
    return None


@pytest.fixture(autouse=True)
def _config_scope():

    reset_config_provider()
    yield
    reset_config_provider()


@pytest.fixture(autouse=True)
def _logging_scope():

    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    logging.getLogger("httpx").setLevel(logging.NOTSET)
    logging.getLogger("httpcore").setLevel(logging.NOTSET)


@pytest.fixture
def payload():

    return copy.deepcopy(SAMPLE_PAYLOAD)


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, handler):
        self.requests = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_transport():

    def _factory(status_code=200, json_body=None, content=None, exc=None):
        def handler(request):
            if exc is not None:
                raise exc
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        return RecordingTransport(handler)

    return _factory
