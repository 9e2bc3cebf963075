"""Unit tests for config.yaml loading and environment substitution."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from bookshelf.app.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
)
from bookshelf.app.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
    validate_runtime_config,
)

PROJECT_CONFIG = Path(__file__).resolve().parents[2] / "config.yaml"


class TestSubstituteEnvVars:
    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_default_used_when_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-fallback}") == "fallback"

    def test_env_wins_over_default(self):
        with patch.dict(os.environ, {"PORT": "8080"}):
            assert substitute_env_vars("port: ${PORT:-5000}") == "port: 8080"

    def test_required_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="MISSING_VAR not set"):
                substitute_env_vars("${MISSING_VAR}")

    def test_required_with_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="needed for signing"):
                substitute_env_vars("${JWT_SECRET:?needed for signing}")


class TestLoadTemplatedYaml:
    def test_project_config_defaults(self):
        env = {"APP_ENVIRONMENT": "development"}
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(PROJECT_CONFIG)

        assert config.app.port == 5000
        assert config.app.session_jwt_secret == "dev-secret-change-me"
        assert config.database.url == "sqlite:///./bookshelf.db"
        assert config.jwt.token_lifetime_seconds == 3600
        assert config.security.bcrypt_rounds == 10
        assert config.logging.file is None

    def test_environment_variables_applied(self):
        env = {
            "APP_ENVIRONMENT": "development",
            "DATABASE_URL": "sqlite:///./other.db",
            "JWT_SECRET": "from-env",
            "PORT": "8081",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(PROJECT_CONFIG)

        assert config.database.url == "sqlite:///./other.db"
        assert config.app.session_jwt_secret == "from-env"
        assert config.app.port == 8081

    def test_environment_prefixed_override(self):
        env = {
            "APP_ENVIRONMENT": "production",
            "JWT_SECRET": "generic",
            "PRODUCTION_JWT_SECRET": "prod-only",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(PROJECT_CONFIG)

        assert config.app.environment == "production"
        assert config.app.session_jwt_secret == "prod-only"

    def test_invalid_values_rejected(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  security:\n    bcrypt_rounds: 2\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file)

    def test_empty_file_rejected(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        with pytest.raises(ValueError):
            load_templated_yaml(config_file)


class TestValidateRuntimeConfig:
    def test_production_requires_secret(self):
        config = ConfigData(app=AppConfig(environment="production", session_jwt_secret=None))

        with pytest.raises(ValueError, match="JWT_SECRET"):
            validate_runtime_config(config)

    def test_shipped_config_refuses_production_without_secret(self):
        env = {"APP_ENVIRONMENT": "production"}
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(PROJECT_CONFIG)

        assert config.app.environment == "production"
        with pytest.raises(ValueError, match="JWT_SECRET"):
            validate_runtime_config(config)

    def test_shipped_config_accepts_production_secret(self):
        env = {"APP_ENVIRONMENT": "production", "JWT_SECRET": "a-real-production-key"}
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(PROJECT_CONFIG)

        validate_runtime_config(config)

    def test_development_without_secret_only_warns(self):
        validate_runtime_config(ConfigData(app=AppConfig(session_jwt_secret=None)))


class TestDatabaseConfig:
    def test_sqlite_connection_string_is_url(self):
        config = DatabaseConfig(url="sqlite:///./x.db")

        assert config.is_sqlite
        assert config.connection_string == "sqlite:///./x.db"

    def test_postgres_is_not_sqlite(self):
        config = DatabaseConfig(url="postgresql://app:pw@db:5432/bookshelf")

        assert not config.is_sqlite
        assert config.connection_string == "postgresql://app:pw@db:5432/bookshelf"
