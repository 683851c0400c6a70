import pytest

from catalog.config import DEFAULT_JWT_SECRET, Settings


def test_database_url_from_components():
    settings = Settings(_env_file=None, db_user="app", db_password="pw", db_host="db", db_name="courses")

    assert settings.database_url == "postgresql+psycopg_async://app:pw@db:5432/courses"


def test_database_url_override():
    settings = Settings(_env_file=None, db_url="sqlite+aiosqlite:///./catalog.db")

    assert settings.database_url == "sqlite+aiosqlite:///./catalog.db"


def test_default_secret_refused_outside_development():
    settings = Settings(_env_file=None, app_env="production", jwt_secret_key=DEFAULT_JWT_SECRET)

    assert settings.is_production
    with pytest.raises(RuntimeError):
        settings.validate_for_production()


def test_default_secret_allowed_in_development():
    Settings(_env_file=None, app_env="development").validate_for_production()
