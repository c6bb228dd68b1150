"""Test settings, startup checks and engine selection."""

import pytest

from app.config import ConfigurationError, Settings
from app.database.engine import build_engine
from app.main import create_app


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "HOST", "FRONTEND_URL", "JWT_EXPIRES_DAYS", "BCRYPT_ROUNDS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.host == "0.0.0.0"
        assert settings.port == 3001
        assert settings.frontend_url == "http://localhost:5173"
        assert settings.jwt_expires_days == 7
        assert settings.bcrypt_rounds == 10

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("FRONTEND_URL", "https://shop.example.com")

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.frontend_url == "https://shop.example.com"

    def test_jwt_secret_from_env(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "from-env")
        assert Settings(_env_file=None).jwt_secret == "from-env"


class TestStartup:
    """Test the app refuses to start without a signing secret."""

    def test_missing_secret(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        with pytest.raises(ConfigurationError, match="JWT_SECRET"):
            create_app(Settings(_env_file=None))

    def test_empty_secret(self):
        with pytest.raises(ConfigurationError):
            create_app(Settings(_env_file=None, jwt_secret=""))

    def test_app_state(self, settings: Settings):
        app = create_app(settings)
        assert app.state.settings is settings
        assert app.state.token_service is not None


class TestBuildEngine:
    """Test database URL resolution."""

    def test_sqlite_url(self):
        engine = build_engine(Settings(_env_file=None, database_url="sqlite:///:memory:"))
        assert engine.dialect.name == "sqlite"

    def test_default_is_local_sqlite(self, monkeypatch):
        for name in ("DATABASE_URL", "DB_HOST"):
            monkeypatch.delenv(name, raising=False)

        engine = build_engine(Settings(_env_file=None))

        assert engine.dialect.name == "sqlite"
        assert engine.url.database == "./local.db"

    def test_separate_postgres_params(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(
            _env_file=None,
            db_host="db.internal",
            db_user="catalog",
            db_password="p@ss:word",
            db_name="catalog",
        )

        engine = build_engine(settings)

        assert engine.dialect.name == "postgresql"
        assert engine.url.host == "db.internal"
        assert engine.url.password == "p@ss:word"
