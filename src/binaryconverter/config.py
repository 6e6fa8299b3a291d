"""
Configuration
=============
This module serves as the central registry for global constants and the
start-up settings of the converter.

Why is this file needed?
------------------------
1. Abstraction: It keeps the application identifiers and defaults out of
   the widgets.
2. Overrides: It resolves settings from defaults, then environment
   variables, then command line flags.

Exports:
    AppConfig: Resolved start-up settings.
    load_config: Build an AppConfig from the environment and CLI overrides.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from binaryconverter.model.state import CompatibilityMode, DIGITS_LIMIT

# Global Constants
ORG_ID = "binaryconverter"
APP_ID = "binary-converter"
VISIBLE_APP_NAME = "Binary Converter"

ENV_PREFIX = "BINARY_CONVERTER_"
ENV_DIGITS_LIMIT = ENV_PREFIX + "DIGITS_LIMIT"
ENV_LIMIT_ENABLED = ENV_PREFIX + "LIMIT_ENABLED"
ENV_RULES = ENV_PREFIX + "RULES"
ENV_LOG_LEVEL = ENV_PREFIX + "LOG_LEVEL"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class AppConfig:
    digits_limit: int = DIGITS_LIMIT
    digits_limit_enabled: bool = True
    rules: CompatibilityMode = CompatibilityMode.STRICT
    log_level: int = logging.WARNING
    log_file: Optional[str] = None


def parse_limit(value: Any) -> int:
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Digits limit must be an integer, got {value!r}.") from None
    if limit < 1:
        raise ConfigError(f"Digits limit must be positive, got {limit}.")
    return limit


def parse_bool(value: str) -> bool:
    text = value.strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"Cannot interpret {value!r} as a boolean.")


def parse_rules(value: str) -> CompatibilityMode:
    try:
        return CompatibilityMode(value.strip().lower())
    except ValueError:
        names = ", ".join(m.value for m in CompatibilityMode)
        raise ConfigError(f"Unknown rules {value!r}, expected one of: {names}.") from None


def parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level {value!r}.")
    return level


def load_config(
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """
    Resolve the start-up settings.

    Args:
        overrides: Values from the command line; None entries are ignored.
        environ: Environment mapping, defaults to os.environ.
    """
    env = os.environ if environ is None else environ
    config = AppConfig()

    if ENV_DIGITS_LIMIT in env:
        config = replace(config, digits_limit=parse_limit(env[ENV_DIGITS_LIMIT]))
    if ENV_LIMIT_ENABLED in env:
        config = replace(config, digits_limit_enabled=parse_bool(env[ENV_LIMIT_ENABLED]))
    if ENV_RULES in env:
        config = replace(config, rules=parse_rules(env[ENV_RULES]))
    if ENV_LOG_LEVEL in env:
        config = replace(config, log_level=parse_log_level(env[ENV_LOG_LEVEL]))

    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key == "digits_limit":
            value = parse_limit(value)
        elif key == "rules" and not isinstance(value, CompatibilityMode):
            value = parse_rules(value)
        elif key == "log_level" and not isinstance(value, int):
            value = parse_log_level(value)
        elif key not in AppConfig.__dataclass_fields__:
            raise ConfigError(f"Unknown setting {key!r}.")
        config = replace(config, **{key: value})

    return config
