"""Settings validation tests."""

import pytest
from pydantic import ValidationError

from bookmarks_api.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.jwt_algorithm == "HS256"
    assert settings.jwt_expiration_minutes > 0


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.jwt_secret = "something-else"


def test_token_lifetime_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(jwt_expiration_minutes=0)


def test_production_rejects_default_secret():
    with pytest.raises(ValidationError, match="JWT_SECRET"):
        Settings(environment="production", database_url="postgresql://db.internal/bookmarks")


def test_production_rejects_localhost_database():
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(
            environment="production",
            jwt_secret="real-secret",
            database_url="postgresql://localhost/bookmarks",
        )


def test_production_accepts_secure_settings():
    settings = Settings(
        environment="production",
        jwt_secret="real-secret",
        database_url="postgresql://db.internal/bookmarks",
    )
    assert settings.is_production
    assert not settings.is_development


def test_default_database_url_names_psycopg2_driver():
    field = Settings.model_fields["database_url"]
    assert field.default.startswith("postgresql+psycopg2://")
