"""
Configuration loader for party services (bridge selection, HTTP settings, logging).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "party_services.yml"


class BridgeConfig(BaseModel):
    """REST bridge configuration"""

    mode: Literal["mock", "real_http"] = "mock"
    base_url: str = "http://localhost:8080"
    timeout_seconds: float = Field(default=15.0, gt=0.0, le=300.0)
    api_key_env: str = "PARTY_BRIDGE_API_KEY"

    def api_key(self) -> str:
        return os.getenv(self.api_key_env, "")


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class PartyServicesConfig(BaseModel):
    bridge: BridgeConfig = Field(default_factory=BridgeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


_ENV_OVERRIDES = {
    "PARTY_BRIDGE_MODE": ("bridge", "mode"),
    "PARTY_BRIDGE_BASE_URL": ("bridge", "base_url"),
    "PARTY_BRIDGE_TIMEOUT_SECONDS": ("bridge", "timeout_seconds"),
    "PARTY_SERVICES_LOG_LEVEL": ("logging", "level"),
}


def load_party_services_config(config_path: Optional[Path] = None) -> PartyServicesConfig:
    """
    Load and validate party services configuration.

    Values come from the YAML file, then from environment variables (a .env
    file is honoured) which take precedence.

    Args:
        config_path: Path to config file. Defaults to config/party_services.yml;
            when the default file is absent the built-in defaults are used.

    Returns:
        Validated PartyServicesConfig object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    data: dict = {}
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Party services config file not found: {config_path}")

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        # an empty section ("bridge:") means defaults for that section
        if isinstance(data, dict):
            data = {name: section for name, section in data.items() if section is not None}
    else:
        logger.info("No party services config at %s, using defaults", path)

    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[section] = {**(data.get(section) or {}), key: value}

    try:
        cfg = PartyServicesConfig(**data)
        logger.info("Successfully loaded party services config from %s", path)
        return cfg
    except ValidationError as e:
        logger.error("Party services config validation failed: %s", e)
        raise


def configure_logging(cfg: PartyServicesConfig) -> None:
    logging.basicConfig(level=getattr(logging, cfg.logging.level))
