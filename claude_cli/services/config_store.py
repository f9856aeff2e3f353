"""
Config Store

Loads and saves the API key in the per-user JSON config file at
<config_dir>/claude-cli/config.json.
"""

import json
from pathlib import Path
from typing import Dict, Optional

from platformdirs import user_config_dir
from pydantic import TypeAdapter, ValidationError

from ..errors import ConfigDirNotFound
from ..utils.debug_logger import debug_logger

CONFIG_SUBPATH = Path("claude-cli") / "config.json"

_config_adapter = TypeAdapter(Dict[str, str])


def default_config_path() -> Path:
    """Resolve the config file path under the platform's per-user config directory"""
    config_dir = user_config_dir()
    if not config_dir:
        raise ConfigDirNotFound("Could not find config directory")
    return Path(config_dir) / CONFIG_SUBPATH


def _read_mapping(config_path: Path) -> Dict[str, str]:
    try:
        config_str = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        debug_logger.log_config("No readable config file, starting empty", path=config_path)
        return {}

    try:
        return _config_adapter.validate_json(config_str)
    except ValidationError:
        debug_logger.log_config("Config file is not a string mapping, ignoring it", path=config_path)
        return {}


class Config:
    """The persisted API key and the file it lives in"""

    def __init__(self, config_path: Path, api_key: Optional[str] = None):
        self.config_path = config_path
        self.api_key = api_key

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """
        Read the config file, treating a missing or corrupt file as empty

        Args:
            config_path: Explicit file location; defaults to the platform config directory

        Returns:
            Config with api_key set when the file holds one
        """
        if config_path is None:
            config_path = default_config_path()

        config = _read_mapping(config_path)
        debug_logger.log_config("Loaded config", path=config_path, has_key="api_key" in config)
        return cls(config_path, config.get("api_key"))

    def save(self) -> None:
        """Overwrite the config file, creating its directory tree if needed"""
        config: Dict[str, str] = {}
        if self.api_key is not None:
            config["api_key"] = self.api_key

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(json.dumps(config), encoding="utf-8")
        debug_logger.log_config("Saved config", path=self.config_path)

    def set_key(self, key: str) -> None:
        self.api_key = key
        self.save()
