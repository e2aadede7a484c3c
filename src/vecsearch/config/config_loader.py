"""
Configuration loader for vecsearch.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..contracts.models import StoreConfig
from ..core.exceptions import VecSearchConfigError


logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    "store": {
        "dimension": 768,
        "tie_break_by_identifier": True,
    },
    "query": {
        "top_n": 3,
    },
    "demo": {
        "phrase": "Ceci est un exemple de phrase",
        "seed": None,
    },
    "logging": {
        "level": "INFO",
        "structured": False,
    },
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class SearchConfig:
    """
    Configuration for vecsearch.

    Loads a YAML file over the built-in defaults, then applies
    VECSEARCH_* environment variable overrides.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (optional)
        """
        self.config_path = Path(config_path) if config_path else None
        loaded = self._load_config() if self.config_path else {}
        self.config = _deep_merge(DEFAULT_CONFIG, loaded)
        self._apply_env_overrides()
        self._validate()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            raise VecSearchConfigError(f"Config file not found: {self.config_path}")

        logger.info(f"Loading config from: {self.config_path}")

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise VecSearchConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise VecSearchConfigError(f"Config root must be a mapping: {self.config_path}")

        for section in DEFAULT_CONFIG:
            value = config.get(section)
            if value is None:
                # "section:" with no body means "use the defaults"
                config.pop(section, None)
            elif not isinstance(value, dict):
                raise VecSearchConfigError(
                    f"Config section '{section}' must be a mapping, got {type(value).__name__}"
                )
        return config

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides to loaded config."""
        overrides = {
            "VECSEARCH_DIMENSION": ("store", "dimension", int),
            "VECSEARCH_TOP_N": ("query", "top_n", int),
            "VECSEARCH_SEED": ("demo", "seed", int),
            "VECSEARCH_LOG_LEVEL": ("logging", "level", str.upper),
            "VECSEARCH_LOG_STRUCTURED": ("logging", "structured", lambda v: v.lower() in _TRUE_VALUES),
        }

        for env_var, (section, key, convert) in overrides.items():
            raw = os.environ.get(env_var)
            if raw is None or raw == "":
                continue
            try:
                value = convert(raw)
            except ValueError as e:
                raise VecSearchConfigError(f"Invalid value for {env_var}: {raw!r}") from e
            self.config.setdefault(section, {})[key] = value

    def _validate(self) -> None:
        top_n = self.get("query.top_n")
        if not isinstance(top_n, int) or top_n < 0:
            raise VecSearchConfigError(f"query.top_n must be a non-negative integer, got {top_n!r}")

        phrase = self.get("demo.phrase", "")
        if not isinstance(phrase, str):
            raise VecSearchConfigError(f"demo.phrase must be a string, got {phrase!r}")

        seed = self.get("demo.seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise VecSearchConfigError(f"demo.seed must be an integer, got {seed!r}")

        level = self.get("logging.level", "INFO")
        if not isinstance(logging.getLevelName(str(level).upper()), int):
            raise VecSearchConfigError(f"Unknown logging.level: {level!r}")

        try:
            self.get_store_config()
        except (TypeError, ValueError) as e:
            raise VecSearchConfigError(f"Invalid store configuration: {e}") from e

    def get_store_config(self) -> StoreConfig:
        """Get the store configuration."""
        return StoreConfig.from_dict(self.config.get("store", {}))

    def get_top_n(self) -> int:
        return self.get("query.top_n")

    def get_log_level(self) -> int:
        """Get the logging level as a logging module constant."""
        return logging.getLevelName(str(self.get("logging.level", "INFO")).upper())

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key."""
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

        return value if value is not None else default
