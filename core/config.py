"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import config

    length = config.get_int("PASSFORGE_DEFAULT_LENGTH", 12)
    policy = default_policy()
"""
import os
import re
import json
import logging
from typing import Any, Optional, Dict
from pathlib import Path

from dotenv import load_dotenv

from constants import GenerationLimits, PolicyLimits
from core.models import Policy
from core.singleton import SingletonMeta
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration file
    - Default values
    - Type conversion
    - Validation
    """

    def __init__(self, env_file: Optional[str] = None, config_file: Optional[str] = None):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._env_file_path = Path(env_file) if env_file else Path(".env")
        if config_file:
            self._config_file_path = Path(config_file)
        else:
            from core.paths import config_path
            self._config_file_path = config_path("settings.json")

        self._load_env()
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file_path.exists():
            load_dotenv(self._env_file_path)
            self._env_loaded = True
            logger.info(f"Environment variables loaded from {self._env_file_path}")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to load config file {self._config_file_path}",
                detail=str(e),
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {self._config_file_path} must contain a JSON object"
            )
        self._config_cache = data
        logger.info(f"Configuration loaded from {self._config_file_path}")

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Default value

        Raises:
            ConfigurationError: If required=True and key not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or {self._config_file_path}"
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.strip().lower() in ('true', '1', 'yes', 'on')

        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value"""
        value = self.get(key, default)

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def validate(self, schema: Dict[str, Dict[str, Any]]):
        """
        Validate configuration against schema.

        Example schema:
        {
            "PASSFORGE_MAX_ATTEMPTS": {
                "required": False,
                "pattern": r"^\\d+$",
                "min": 1,
            },
        }
        """
        errors = []

        for key, rules in schema.items():
            value = self.get(key)

            if value is None:
                if rules.get("required", False):
                    errors.append(f"Required config '{key}' is missing")
                continue

            if "type" in rules and not isinstance(value, rules["type"]):
                errors.append(
                    f"Config '{key}' must be {rules['type'].__name__}, "
                    f"got {type(value).__name__}"
                )
                continue

            if "pattern" in rules and not re.match(rules["pattern"], str(value)):
                errors.append(
                    f"Config '{key}' does not match pattern {rules['pattern']}"
                )
                continue

            if "min" in rules or "max" in rules:
                number = int(value)
                if "min" in rules and number < rules["min"]:
                    errors.append(f"Config '{key}' must be >= {rules['min']}, got {number}")
                if "max" in rules and number > rules["max"]:
                    errors.append(f"Config '{key}' must be <= {rules['max']}, got {number}")

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(f"- {e}" for e in errors)
            )


def get_config() -> Config:
    """Return the shared Config instance."""
    return Config.get_instance()


def get_log_level(default: str = "INFO") -> str:
    """Get logging level"""
    return str(get_config().get("LOG_LEVEL", default=default)).upper()


def get_log_dir() -> Optional[str]:
    """Log directory override, or None for the user data dir."""
    return get_config().get("LOG_DIR")


def get_log_to_file() -> bool:
    """Whether the CLI writes a rotating log file (LOG_TO_FILE)."""
    return get_config().get_bool("LOG_TO_FILE", True)


def get_log_retention_days() -> int:
    return get_config().get_int("LOG_RETENTION_DAYS", 30)


def get_max_attempts() -> int:
    """Weak-pattern retry bound for the generator."""
    return get_config().get_int("PASSFORGE_MAX_ATTEMPTS", GenerationLimits.MAX_ATTEMPTS)


def default_policy() -> Policy:
    """
    Policy used when the caller gives no explicit length: configured
    default length, every character class enabled.
    """
    length = get_config().get_int("PASSFORGE_DEFAULT_LENGTH", PolicyLimits.DEFAULT_LENGTH)
    return Policy(length=length)


# Configuration schema for validation
CONFIG_SCHEMA = {
    "PASSFORGE_DEFAULT_LENGTH": {
        "required": False,
        "pattern": r"^\d+$",
        "min": PolicyLimits.MIN_LENGTH,
        "max": PolicyLimits.MAX_LENGTH,
    },
    "PASSFORGE_MAX_ATTEMPTS": {
        "required": False,
        "pattern": r"^\d+$",
        "min": 1,
    },
    "LOG_LEVEL": {
        "required": False,
        "pattern": r"^(?i:DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    },
    "LOG_RETENTION_DAYS": {
        "required": False,
        "pattern": r"^\d+$",
        "min": 1,
    },
}


def validate_config():
    """Validate configuration on startup"""
    try:
        get_config().validate(CONFIG_SCHEMA)
        logger.debug("Configuration validated successfully")
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise
