from __future__ import annotations

from loancalc.app import create_app
from loancalc.app.config import DEFAULT_CORS_ORIGINS, Settings


def test_defaults_when_environment_is_empty():
    settings = Settings.from_env({})

    assert settings == Settings()
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"
    assert settings.log_json is False


def test_environment_overrides():
    settings = Settings.from_env(
        {
            "LOANCALC_CORS_ORIGINS": "https://loans.example.com, http://localhost:8080",
            "LOANCALC_LOG_LEVEL": "debug",
            "LOANCALC_LOG_JSON": "true",
        }
    )

    assert settings.cors_origins == ("https://loans.example.com", "http://localhost:8080")
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


def test_app_keeps_settings_and_allows_configured_origin():
    settings = Settings(cors_origins=("https://loans.example.com",))
    app = create_app(settings)

    assert app.config["LOANCALC_SETTINGS"] is settings
    with app.test_client() as client:
        response = client.get("/api/ping", headers={"Origin": "https://loans.example.com"})

    assert response.headers.get("Access-Control-Allow-Origin") == "https://loans.example.com"
