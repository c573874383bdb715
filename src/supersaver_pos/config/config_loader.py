"""
Configuration Loader
Loads POS configuration from various sources
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from supersaver_pos.config.pos_config import (
    PosConfig,
    DiscountPolicy,
    MalformedRowPolicy,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from supersaver_pos.config.config_validator import ConfigValidator
from supersaver_pos.exceptions import ConfigError


# Path-valued keys resolved against the directory of a config file
_PATH_KEYS = ("catalog_path", "receipts_dir", "log_file")


class ConfigLoader:
    """
    ConfigLoader class
    Provides multiple ways to load and merge configuration
    """

    def __init__(self) -> None:
        self._validator = ConfigValidator()

    def from_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load configuration from a JSON file

        Args:
            path: Path to JSON configuration file

        Returns:
            Loaded configuration dictionary

        Raises:
            ConfigError: If the file is missing, unreadable or not a JSON object
        """
        file_path = Path(path).resolve()

        if not file_path.exists():
            raise ConfigError(
                f"Configuration file not found: {file_path}",
                code="CONFIG_FILE_NOT_FOUND"
            )

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {file_path}",
                code="CONFIG_PARSE_ERROR",
                cause=e
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(
                f"Cannot read configuration file {file_path}: {e}",
                code="CONFIG_READ_ERROR",
                cause=e
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(
                f"Configuration file must contain a JSON object: {file_path}",
                code="CONFIG_PARSE_ERROR"
            )

        return self._process_relative_paths(config, file_path.parent)

    def from_environment(self) -> Dict[str, Any]:
        """
        Load configuration from environment variables

        Returns:
            Configuration dictionary from environment variables
        """
        config: Dict[str, Any] = {}

        for env_var, config_key in ENV_VAR_MAPPING.items():
            value = os.environ.get(env_var)
            if value is not None and value != "":
                config[config_key] = self._parse_env_value(config_key, value)

        return config

    def from_dict(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Take programmatic overrides, such as command line options

        Keys left as None count as not given. Keys that name no PosConfig
        field are refused rather than silently ignored.

        Raises:
            ConfigError: If a key is not a configuration field
        """
        unknown = sorted(set(config) - set(PosConfig.model_fields))
        if unknown:
            raise ConfigError(
                f"Unknown configuration option(s): {', '.join(unknown)}",
                code="CONFIG_UNKNOWN_OPTION"
            )
        return self._filter_none(config)

    def merge(self, *sources: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple configuration sources
        Priority: later sources override earlier sources

        Args:
            sources: Configuration dictionaries in order of increasing priority

        Returns:
            Merged configuration dictionary
        """
        merged: Dict[str, Any] = {}

        for source in sources:
            merged.update(self._filter_none(source))

        return merged

    def resolve(self, config: Dict[str, Any]) -> PosConfig:
        """
        Resolve configuration with defaults and validation

        Args:
            config: Partial configuration dictionary

        Returns:
            Fully resolved PosConfig object

        Raises:
            ValidationError: If configuration is invalid
        """
        self._validator.validate_or_raise(config)

        try:
            return PosConfig(**config)
        except PydanticValidationError as e:
            raise ConfigError(
                f"Invalid configuration: {e}",
                code="CONFIG_INVALID",
                cause=e
            ) from e

    def load(
        self,
        file: Optional[Union[str, Path]] = None,
        env: bool = True,
        config: Optional[Dict[str, Any]] = None,
    ) -> PosConfig:
        """
        Build a PosConfig from file, environment and overrides, in that order

        Args:
            file: Path to JSON configuration file (optional)
            env: Whether to load from environment variables (default: True)
            config: Overrides that win over file and environment (optional)

        Returns:
            Fully resolved PosConfig object
        """
        sources: List[Dict[str, Any]] = []

        if file is not None:
            sources.append(self.from_file(file))

        if env:
            sources.append(self.from_environment())

        if config is not None:
            sources.append(self.from_dict(config))

        merged = self.merge(*sources)
        return self.resolve(merged)

    def create_template(self, path: Union[str, Path]) -> None:
        """
        Create a configuration template file

        Args:
            path: Path to write template
        """
        template = {
            "catalog_path": "./items.csv",
            "receipts_dir": "./receipts",
            "store_name": ConfigDefaults.STORE_NAME,
            "currency_marker": ConfigDefaults.CURRENCY_MARKER,
            "receipt_prefix": ConfigDefaults.RECEIPT_PREFIX,
            "report_prefix": ConfigDefaults.REPORT_PREFIX,
            "pending_id_start": ConfigDefaults.PENDING_ID_START,
            "discount_policy": ConfigDefaults.DISCOUNT_POLICY.value,
            "max_discount": ConfigDefaults.MAX_DISCOUNT,
            "malformed_row_policy": ConfigDefaults.MALFORMED_ROW_POLICY.value,
            "log_level": ConfigDefaults.LOG_LEVEL,
            "log_file": "./logs/pos.log",
        }

        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(template, f, indent=2)

    def _parse_env_value(self, key: str, value: str) -> Any:
        """Parse environment variable value to appropriate type"""
        if key == "pending_id_start":
            try:
                return int(value)
            except ValueError:
                return value

        if key == "max_discount":
            try:
                return float(value)
            except ValueError:
                return value

        if key == "discount_policy":
            try:
                return DiscountPolicy(value.lower())
            except ValueError:
                return value

        if key == "malformed_row_policy":
            try:
                return MalformedRowPolicy(value.lower())
            except ValueError:
                return value

        if key == "log_level":
            return value.upper()

        return value

    def _process_relative_paths(
        self, config: Dict[str, Any], base_path: Path
    ) -> Dict[str, Any]:
        """Resolve relative file paths against the config file directory"""
        processed = config.copy()

        for key in _PATH_KEYS:
            value = processed.get(key)
            if isinstance(value, str) and value:
                value_path = Path(value)
                if not value_path.is_absolute():
                    processed[key] = str(base_path / value_path)

        return processed

    def _filter_none(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Filter out None values from config dictionary"""
        return {k: v for k, v in config.items() if v is not None}
