"""
Datadog Lambda properties loaded from aws.env, .env and environment variables.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

from lambda_env import env_vars

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


@dataclass
class DatadogLambdaProps:
    enable_datadog_tracing: bool = True
    enable_datadog_logs: bool = True
    env: Optional[str] = None
    service: Optional[str] = None
    version: Optional[str] = None
    tags: Optional[str] = None


def parse_bool(value: Optional[str], default: bool) -> bool:
    """
    Parse a boolean flag from a config string.

    :param value: Raw value or None.
    :param default: Value used when raw value is None or blank.
    :returns: Parsed boolean.
    :raises ValueError: If the value is not a recognised boolean.
    """
    if value is None or not value.strip():
        return default
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value}")


def _clean(value: Optional[str]) -> Optional[str]:
    text = (value or "").strip()
    return text or None


def load_config(base_dir: Optional[Path] = None) -> Dict[str, str]:
    """
    Load configuration from aws.env, .env, and environment variables.
    Later sources override earlier ones.

    :param base_dir: Directory holding the env files, current directory when None.
    :returns: Dictionary with configuration values
    """
    base_dir = base_dir or Path.cwd()
    aws_env_path = base_dir / "aws.env"
    env_path = base_dir / ".env"

    config: Dict[str, str] = {}

    if aws_env_path.exists():
        config.update({k: v for k, v in dotenv_values(str(aws_env_path)).items() if v is not None})

    if env_path.exists():
        config.update({k: v for k, v in dotenv_values(str(env_path)).items() if v is not None})

    config.update(os.environ)

    return config


def load_props(base_dir: Optional[Path] = None) -> DatadogLambdaProps:
    """
    Build DatadogLambdaProps from the layered configuration.

    :param base_dir: Directory holding the env files.
    :returns: DatadogLambdaProps
    """
    config = load_config(base_dir)
    return DatadogLambdaProps(
        enable_datadog_tracing=parse_bool(config.get(env_vars.ENABLE_DD_TRACING_ENV_VAR), True),
        enable_datadog_logs=parse_bool(config.get(env_vars.ENABLE_DD_LOGS_ENV_VAR), True),
        env=_clean(config.get(env_vars.DD_ENV_ENV_VAR)),
        service=_clean(config.get(env_vars.DD_SERVICE_ENV_VAR)),
        version=_clean(config.get(env_vars.DD_VERSION_ENV_VAR)),
        tags=_clean(config.get(env_vars.DD_TAGS)),
    )
