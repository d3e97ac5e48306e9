import pytest

from pytpcontrol import OptionsBuilder, TpAsyncConnector, TpConnector

HOST = "10.0.0.5"
CREDENTIALS = {"username": "admin", "password": "secret"}


class FakeResponse:
    def __init__(self, status=200, body=b"<Status/>"):
        self.status = status
        self._body = body
        self.read_count = 0

    async def read(self):
        self.read_count += 1
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession, recording each request."""

    def __init__(self):
        self.calls = []
        self.closed = False
        self.response = FakeResponse()

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        return self.response

    async def close(self):
        self.closed = True


@pytest.fixture
def builder():
    return OptionsBuilder(CREDENTIALS, HOST)


@pytest.fixture
def sent_requests(monkeypatch):
    calls = []

    def fake_request(method, url, **kwargs):
        calls.append((method, url, kwargs))
        return "response"

    monkeypatch.setattr("pytpcontrol.tp_connector.requests.request", fake_request)
    return calls


@pytest.fixture
def connector(sent_requests):
    return TpConnector(HOST, CREDENTIALS, timeout=5)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def async_connector(fake_session):
    return TpAsyncConnector(HOST, CREDENTIALS, session=fake_session)
