"""Runtime settings.

Sources, lowest precedence first: built-in defaults, the YAML file named by
MODEL_BRIDGE_CONFIG, then environment variables (a .env file is loaded into
the environment first, without overriding variables that are already set).
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from model_bridge.core.resolver import ResolverConfig

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "MODEL_BRIDGE_CONFIG"
DISABLE_MAPPING_ENV = "DISABLE_MODEL_MAPPING"
LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_CONFIG_PATH = Path("config") / "model_mapping.yaml"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    mapping_enabled: bool = True
    log_level: str = "INFO"

    def resolver_config(self) -> ResolverConfig:
        return ResolverConfig(mapping_enabled=self.mapping_enabled)


def _read_config_file(path: Path) -> dict:
    if not path.exists():
        logger.info(f"No config file at '{path}', using defaults")
        return {}
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file '{path}': {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file '{path}' must contain a mapping at the top level")
    logger.info(f"Loaded config file '{path}'")
    return data


def _section(data: dict, name: str, path: Path) -> dict:
    section = data.get(name)
    # An empty section ("mapping:" with nothing under it) loads as None
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config file '{path}': '{name}' must be a mapping")
    return section


def load_settings(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the config file and the environment.

    `environ` replaces os.environ (and skips .env loading) so tests can
    inject values without touching the real process environment.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config_path = Path(path or environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
    data = _read_config_file(config_path)

    values = {}
    mapping = _section(data, "mapping", config_path)
    if "enabled" in mapping:
        values["mapping_enabled"] = mapping["enabled"]
    log_config = _section(data, "logging", config_path)
    if "level" in log_config:
        values["log_level"] = log_config["level"]

    # Only "1" disables; any other value leaves the file/default in force
    if environ.get(DISABLE_MAPPING_ENV) == "1":
        values["mapping_enabled"] = False
    if environ.get(LOG_LEVEL_ENV):
        values["log_level"] = environ[LOG_LEVEL_ENV]

    settings = Settings(**values)
    logger.info(f"Model mapping {'enabled' if settings.mapping_enabled else 'disabled'}")
    return settings
