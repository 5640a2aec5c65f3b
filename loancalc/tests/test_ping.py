from flask.testing import FlaskClient

from loancalc import __version__


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong", "service": "loancalc", "version": __version__}
