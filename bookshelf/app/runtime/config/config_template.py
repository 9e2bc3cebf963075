"""Loading of ``config.yaml`` with shell-style environment placeholders."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from bookshelf.app.runtime.config.config_data import ConfigData

# ${NAME}, ${NAME:-default} or ${NAME:?message}
_PLACEHOLDER = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:(?P<op>:[-?])(?P<arg>[^}]*))?\}")

# Fallback for JWT_SECRET in config.yaml; never acceptable in production
DEV_JWT_SECRET = "dev-secret-change-me"


def substitute_env_vars(text: str) -> str:
    """Expand environment placeholders in ``text``.

    ``${NAME}`` requires the variable, ``${NAME:-default}`` falls back to
    ``default`` and ``${NAME:?message}`` fails with ``message``.

    Raises:
        ValueError: If a required variable is not set
    """

    def _expand(match: re.Match) -> str:
        name, op, arg = match.group("name", "op", "arg")
        value = os.getenv(name)
        if value is not None:
            return value
        if op == ":-":
            return arg
        if op == ":?":
            raise ValueError(f"Required environment variable {name}: {arg}")
        raise ValueError(f"Required environment variable {name} not set")

    return _PLACEHOLDER.sub(_expand, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_NAME`` variables to ``NAME`` for the active environment.

    With ``APP_ENVIRONMENT=production`` a ``PRODUCTION_JWT_SECRET`` variable
    becomes ``JWT_SECRET`` before the template is rendered.
    """
    prefix = f"{env_mode.upper()}_"
    promoted = {
        name[len(prefix):]: value
        for name, value in os.environ.items()
        if name.startswith(prefix) and len(name) > len(prefix)
    }
    if promoted:
        logger.info("Applying {} overrides: {}", env_mode, sorted(promoted))
    os.environ.update(promoted)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """Render and validate a configuration file.

    Settings are read from the top-level ``config`` mapping.

    Raises:
        ValueError: If a placeholder cannot be resolved, the YAML is empty or
            malformed, or the values fail validation
        FileNotFoundError: If ``file_path`` does not exist
    """
    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.info("Loading configuration from {} for environment: {}", file_path, env_mode)
    apply_environment_overrides(env_mode)

    rendered = substitute_env_vars(Path(file_path).read_text())
    try:
        document = yaml.safe_load(rendered)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not isinstance(document, dict):
        raise ValueError(f"{file_path} does not contain a configuration mapping")

    try:
        return ConfigData.model_validate(document.get("config") or {})
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def validate_runtime_config(config: ConfigData) -> None:
    """Fail fast on settings that are unsafe for the configured environment.

    Production refuses both a missing secret and the development default
    shipped in config.yaml.
    """
    secret = config.app.session_jwt_secret
    if config.app.environment == "production":
        if not secret or secret == DEV_JWT_SECRET:
            raise ValueError("JWT_SECRET must be configured in production")
    elif not secret:
        logger.warning("JWT_SECRET is not set; session tokens cannot be issued")
    elif secret == DEV_JWT_SECRET:
        logger.warning("Signing session tokens with the development JWT_SECRET")
