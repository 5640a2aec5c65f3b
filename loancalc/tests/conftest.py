from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from loancalc.app import create_app
from loancalc.app.config import Settings


@pytest.fixture()
def app() -> Flask:
    return create_app(Settings())


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
