import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from fuel_station import create_app


@pytest.fixture
def app():
    app = create_app({"TESTING": True})
    yield app


@pytest.fixture
def runner(app):
    """Flask CLI runner for the registered station commands."""
    return app.test_cli_runner()


@pytest.fixture
def lines():
    """
    Collects console report lines. Pass `lines.append` as the `echo` sink
    to inspect exactly what a transaction printed.
    """
    return []
