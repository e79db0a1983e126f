import pytest

from app import create_app
from simulation import CSRFSimulator, Mode

TOKEN = "csrf-ab12cd34e"


@pytest.fixture
def make_simulator():
    def _make(mode=Mode.VULNERABLE, **kwargs):
        kwargs.setdefault("token_factory", lambda: TOKEN)
        kwargs.setdefault("clock", lambda: "12:00:00")
        return CSRFSimulator(mode=mode, **kwargs)

    return _make


@pytest.fixture
def simulator(make_simulator):
    return make_simulator()


@pytest.fixture
def protected(make_simulator):
    return make_simulator(Mode.PROTECTED)


@pytest.fixture
def client(simulator):
    app = create_app(simulator)
    app.config["TESTING"] = True
    return app.test_client()
