"""
Configuration management for think_tool.
Handles loading configuration from a JSON file and environment variables,
and builds the per-run ConversationConfig.
"""
import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

from .constants import (
    API_KEY_ENV_VAR,
    CONFIG_FILE,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_TIMEOUT_SECONDS,
    OUTPUT_FORMATS,
)
from .errors import ConfigError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversationConfig:
    """Settings for one conversation run."""
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    prompt_template: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not isinstance(self.model, str) or not self.model:
            raise ConfigError("model must be a non-empty string", key="model")
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int):
            raise ConfigError(f"max_tokens must be an integer, got {self.max_tokens!r}", key="max_tokens")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ConfigError(f"timeout must be a number, got {self.timeout!r}", key="timeout")
        if self.prompt_template is not None and not isinstance(self.prompt_template, str):
            raise ConfigError("prompt_template must be a string", key="prompt_template")
        if self.max_tokens <= 0:
            raise ConfigError(f"max_tokens must be positive, got {self.max_tokens}", key="max_tokens")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}", key="timeout")


@dataclass
class AppConfig:
    """Main application configuration."""
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    prompt_template: Optional[str] = None
    output_format: str = DEFAULT_OUTPUT_FORMAT
    api_key: Optional[str] = None

    def conversation_config(self) -> ConversationConfig:
        """Build the immutable per-run settings."""
        return ConversationConfig(
            model=self.model,
            max_tokens=self.max_tokens,
            prompt_template=self.prompt_template or None,
            timeout=self.timeout,
        )


class ConfigManager:
    """
    Manages application configuration with support for a JSON file and
    environment variables.

    The environment variable takes precedence over the config file for the
    API key; explicit overrides (CLI flags) take precedence over both.
    """

    def __init__(self, config_file: Optional[Path] = None) -> None:
        self._config_file = Path(config_file) if config_file else CONFIG_FILE
        self._config: AppConfig = AppConfig()
        self._load_config()
        self._load_env_vars()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        if not self._config_file.exists():
            return

        try:
            with open(self._config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise TypeError("config root must be an object")
            known = {k: v for k, v in data.items() if k in AppConfig.__dataclass_fields__}
            self._config = AppConfig(**known)
        except (json.JSONDecodeError, TypeError, OSError) as e:
            logger.warning(f"Failed to load config file {self._config_file}: {e}")
            self._config = AppConfig()

    def _load_env_vars(self) -> None:
        """Load the API key from the environment."""
        value = os.environ.get(API_KEY_ENV_VAR)
        if value:
            self._config.api_key = value

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        return self._config

    def apply_overrides(self, **kwargs: Any) -> AppConfig:
        """
        Apply explicit overrides, ignoring None values.

        Returns:
            The updated configuration
        """
        updates = {
            key: value for key, value in kwargs.items()
            if value is not None and key in AppConfig.__dataclass_fields__
        }
        config = replace(self._config, **updates)
        if config.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output format '{config.output_format}'. Expected one of: {', '.join(OUTPUT_FORMATS)}",
                key='output_format',
            )
        self._config = config
        return self._config

    def require_api_key(self) -> str:
        """
        Get the API key or fail.

        Raises:
            ConfigError: If no key was configured anywhere
        """
        if not self._config.api_key:
            raise ConfigError(
                f"API key not found. Set it using the --apikey flag or {API_KEY_ENV_VAR} environment variable",
                key=API_KEY_ENV_VAR,
            )
        return self._config.api_key

    def conversation_config(self) -> ConversationConfig:
        """Build the per-run settings from the current configuration."""
        return self._config.conversation_config()


def get_config(config_file: Optional[Path] = None) -> ConfigManager:
    """Load the configuration manager for a config file."""
    return ConfigManager(config_file)
