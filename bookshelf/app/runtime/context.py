"""Process-wide configuration held in a ``ContextVar``.

The active ``ConfigData`` is loaded once from ``config.yaml`` (or the file
named by ``APP_CONFIG_FILE``) and can be overridden for the duration of a
block with ``with_context``; overrides are per task and per thread.
"""

import os
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from loguru import logger

from bookshelf.app.runtime.config.config_data import ConfigData
from bookshelf.app.runtime.config.config_template import load_templated_yaml


@dataclass
class AppContext:
    config: ConfigData


def _load_default_config() -> ConfigData:
    config_path = Path(os.getenv("APP_CONFIG_FILE", "config.yaml"))
    if not config_path.exists():
        logger.warning("{} not found; using built-in configuration defaults", config_path)
        return ConfigData()
    return load_templated_yaml(config_path)


_app_context: ContextVar[AppContext] = ContextVar(
    "bookshelf_app_context", default=AppContext(config=_load_default_config())
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Install ``context`` as current; the returned token undoes it."""
    return _app_context.set(context)


def _deep_update(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_update(current, value)
        else:
            merged[key] = value
    return merged


def merge_config(base: ConfigData, override: ConfigData) -> ConfigData:
    """Layer the explicitly set values of ``override`` onto ``base``.

    Only values passed to a constructor count as set, so an override should
    be built as ``ConfigData(jwt=JWTConfig(token_lifetime_seconds=60))``.
    """
    merged = _deep_update(base.model_dump(), override.model_dump(exclude_unset=True))
    return ConfigData.model_validate(merged)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Run a block against ``config_override`` merged onto the current config.

    Example:
        with with_context(ConfigData(security=SecurityConfig(bcrypt_rounds=4))):
            hash_password("secret1")  # cheap hash, everything else unchanged
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData or None, not {type(config_override).__name__}"
        )

    current = get_context()
    token = set_context(replace(current, config=merge_config(current.config, config_override)))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the current configuration outright, without merging."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    return get_context().config
