"""
Store client configuration loader.

Credentials come from the environment (a local .env is honoured). Client
behaviour that is not secret can be set in config/store_config.yml.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from wooshop.error_handler import StoreConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "store_config.yml"

# settings field -> environment variable
CREDENTIAL_ENV_VARS: Dict[str, str] = {
    "base_url": "WOOCOMMERCE_URL",
    "consumer_key": "WOOCOMMERCE_CONSUMER_KEY",
    "consumer_secret": "WOOCOMMERCE_CONSUMER_SECRET",
}


class StoreSettings(BaseModel):
    """Fixed for the lifetime of the process; injected into the client."""

    base_url: str = Field(min_length=1)
    consumer_key: str = Field(min_length=1)
    consumer_secret: str = Field(min_length=1)
    api_prefix: str = "wp-json/wc/v3"
    # Off by default: error statuses are returned like any other JSON body.
    check_status: bool = False
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    redact_credentials: bool = True


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise StoreConfigurationError(f"Store config must be a mapping: {config_path}")
    return dict(data.get("store", data) or {})


def load_store_settings(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> StoreSettings:
    """
    Load and validate store settings.

    Args:
        config_path: YAML settings file. Defaults to $WOO_CONFIG_PATH, then
            config/store_config.yml when present.
        env: Environment mapping. Defaults to os.environ after loading .env.

    Returns:
        Validated StoreSettings

    Raises:
        FileNotFoundError: If an explicitly requested config file doesn't exist
        StoreConfigurationError: If a credential is missing or a setting is invalid
    """
    if env is None:
        load_dotenv()
        env = os.environ

    explicit = config_path or env.get("WOO_CONFIG_PATH")
    data: Dict[str, Any] = {}
    if explicit:
        config_path = Path(explicit)
        if not config_path.exists():
            raise FileNotFoundError(f"Store config file not found: {config_path}")
        data = _read_yaml(config_path)
    elif DEFAULT_CONFIG_PATH.exists():
        data = _read_yaml(DEFAULT_CONFIG_PATH)

    for field_name, var in CREDENTIAL_ENV_VARS.items():
        value = env.get(var)
        if value:
            data[field_name] = value

    missing = [var for field_name, var in CREDENTIAL_ENV_VARS.items() if not data.get(field_name)]
    if missing:
        logger.error("Store credentials missing: %s", ", ".join(missing))
        raise StoreConfigurationError(f"Missing required store settings: {', '.join(missing)}")

    try:
        settings = StoreSettings(**data)
    except ValidationError as e:
        logger.error("Store config validation failed: %s", e)
        raise StoreConfigurationError(f"Invalid store settings: {e}") from e

    logger.info("Loaded store settings for %s", settings.base_url)
    return settings
