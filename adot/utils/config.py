#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration Utilities
-----------------------
Functions for loading the environment configuration each command needs.

Everything is read from process environment variables, optionally seeded
from ``$ADOT_HOME/.env``. Validation happens here, before any network or
filesystem mutation.
"""

import os
import json
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from dotenv import load_dotenv

from ..constants import (
    DEFAULT_ADOT_HOME,
    ENV_ADOT_HOME,
    ENV_CREDENTIALS,
    ENV_IPINFO_TOKEN,
    ENV_PROJECT_ID,
)
from ..errors import ConfigError

SERVICE_ACCOUNT_KEYS = ("client_email", "private_key")


@dataclass(frozen=True)
class Config:
    credentials_path: Optional[str] = None
    project_id: Optional[str] = None
    ipinfo_token: Optional[str] = None


def get_adot_home() -> str:
    """Base directory for logs and the optional .env file."""
    return os.environ.get(ENV_ADOT_HOME) or DEFAULT_ADOT_HOME


def load_env_file(logger: logging.Logger, adot_home: str) -> bool:
    """从 ADOT_HOME 下的 .env 文件加载环境变量（已设置的变量优先）。"""
    dotenv_path = os.path.join(adot_home, ".env")
    if not os.path.exists(dotenv_path):
        logger.debug(f".env file not found: {dotenv_path}")
        return False
    load_dotenv(dotenv_path=dotenv_path, override=False)
    logger.debug(f"Loaded environment from {dotenv_path}")
    return True


def _env(name: str) -> Optional[str]:
    value = (os.environ.get(name) or "").strip()
    return value or None


def validate_credentials_file(logger: logging.Logger, path: str) -> None:
    """Checks that ``path`` holds a service-account JSON key.

    Raises:
        ConfigError: if the file is missing, unreadable, or not a service-account key.
    """
    logger.debug(f"Validating service-account file: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"{ENV_CREDENTIALS} points to a missing file: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"credential file {path} is not valid JSON ({e.msg})")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read credential file {path}: {e}")

    if not isinstance(data, dict) or data.get("type") != "service_account":
        raise ConfigError(f"credential file {path} is not a service-account key")
    missing = [key for key in SERVICE_ACCOUNT_KEYS if not data.get(key)]
    if missing:
        raise ConfigError(f"credential file {path} is missing {', '.join(missing)}")


def load_config(logger: logging.Logger, required: Iterable[str] = ()) -> Config:
    """读取环境变量并校验命令所需的配置。

    Args:
        logger: The logging object.
        required: Names of the environment variables the command needs.

    Returns:
        A Config with every known setting (unset ones are None).

    Raises:
        ConfigError: if any required variable is missing, or the credential
            file is required and invalid. All missing names are reported at once.
    """
    required = tuple(required)
    config = Config(
        credentials_path=_env(ENV_CREDENTIALS),
        project_id=_env(ENV_PROJECT_ID),
        ipinfo_token=_env(ENV_IPINFO_TOKEN),
    )
    values = {
        ENV_CREDENTIALS: config.credentials_path,
        ENV_PROJECT_ID: config.project_id,
        ENV_IPINFO_TOKEN: config.ipinfo_token,
    }

    missing = [name for name in required if not values.get(name)]
    if missing:
        raise ConfigError(f"missing environment variable(s): {', '.join(missing)}")

    if ENV_CREDENTIALS in required:
        validate_credentials_file(logger, config.credentials_path)

    logger.info(f"配置加载完成 (required: {', '.join(required) or 'none'})")
    return config
