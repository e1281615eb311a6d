"""
Configuration management system for the repo picker.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union, List
from dataclasses import dataclass, field, asdict
import logging

from ..error_handling import ConfigurationError

logger = logging.getLogger(__name__)

# The public listing endpoint never returns more than this per page.
MAX_PAGE_SIZE = 200


@dataclass
class GitHubConfig:
    """GitHub access configuration."""
    host: str = "github.com"
    api_base_url: str = "https://api.github.com"
    ssh_user: str = "git"
    page_size: int = MAX_PAGE_SIZE
    timeout: Optional[float] = None
    gh_executable: str = "gh"


@dataclass
class WorkspaceConfig:
    """Where working copies live and which tools must be installed."""
    directory: str = "."
    required_tools: List[str] = field(default_factory=lambda: ["git"])


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_file_size: int = 10  # MB
    backup_count: int = 5
    structured: bool = False


@dataclass
class AppConfig:
    """Complete application configuration."""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    workspace: WorkspaceConfig = field(default_factory=WorkspaceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ConfigManager:
    """
    Manages application configuration from multiple sources.

    Configuration is loaded in the following order (later sources override earlier):
    1. Default configuration
    2. Configuration file
    3. Environment variables
    4. Command-line arguments (when provided)
    """

    INTEGER_SETTINGS = {"github.page_size"}
    BOOLEAN_SETTINGS = {"logging.structured"}

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Path to a YAML configuration file
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Optional[AppConfig] = None
        self._env_var_mapping = self._create_env_var_mapping()

    def _create_env_var_mapping(self) -> Dict[str, str]:
        """Create mapping of environment variables to config paths."""
        return {
            "GITHUB_HOST": "github.host",
            "GITHUB_API_URL": "github.api_base_url",
            "REPO_PICKER_PAGE_SIZE": "github.page_size",
            "GH_EXECUTABLE": "github.gh_executable",
            "REPO_PICKER_WORKDIR": "workspace.directory",
            "LOG_LEVEL": "logging.level",
            "LOG_FILE": "logging.file",
            "LOG_STRUCTURED": "logging.structured",
        }

    def load_config(self, overrides: Optional[Dict[str, Any]] = None) -> AppConfig:
        """
        Load configuration from all sources.

        Args:
            overrides: Nested dictionary of command-line overrides

        Returns:
            Complete application configuration
        """
        if self._config is not None and not overrides:
            return self._config

        config_dict = AppConfig().to_dict()

        if self.config_file:
            file_config = self._load_config_file(self.config_file)
            config_dict = self._merge_configs(config_dict, file_config)

        env_config = self._load_env_config()
        config_dict = self._merge_configs(config_dict, env_config)

        if overrides:
            config_dict = self._merge_configs(config_dict, overrides)

        self._validate_config(config_dict)

        self._config = self._dict_to_config(config_dict)
        return self._config

    def _load_config_file(self, config_path: Path) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            Configuration dictionary

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load config file {config_path}: {e}", cause=e)

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")

        logger.info(f"Loaded configuration from {config_path}")
        return config

    def _load_env_config(self) -> Dict[str, Any]:
        """
        Load configuration from environment variables.

        Returns:
            Configuration dictionary from environment variables
        """
        env_config: Dict[str, Any] = {}

        for env_var, config_path in self._env_var_mapping.items():
            value = os.getenv(env_var)
            if value is not None:
                self._set_nested_value(env_config, config_path, self._convert_env_value(config_path, value))

        return env_config

    def _convert_env_value(self, config_path: str, value: str) -> Any:
        """Convert numeric and boolean settings; everything else stays a string."""
        if config_path in self.BOOLEAN_SETTINGS:
            lowered = value.strip().lower()
            if lowered in ("true", "1", "yes", "on"):
                return True
            if lowered in ("false", "0", "no", "off", ""):
                return False
            return value
        if config_path in self.INTEGER_SETTINGS:
            try:
                return int(value)
            except ValueError:
                return value
        return value

    def _set_nested_value(self, config: Dict[str, Any], path: str, value: Any) -> None:
        """
        Set a nested configuration value using dot notation.

        Args:
            config: Configuration dictionary
            path: Dot-separated path (e.g., 'github.host')
            value: Value to set
        """
        keys = path.split('.')
        current = config

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge two configuration dictionaries.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Merged configuration
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration values.

        Args:
            config: Configuration dictionary

        Raises:
            ConfigurationError: If configuration is invalid
        """
        known_sections = {"github", "workspace", "logging"}
        for section in config:
            if section not in known_sections:
                raise ConfigurationError(f"Unknown configuration section: {section}", key=section)
            if not isinstance(config[section], dict):
                raise ConfigurationError(f"Configuration section {section} must be a mapping", key=section)

        page_size = config.get("github", {}).get("page_size", MAX_PAGE_SIZE)
        if not isinstance(page_size, int) or isinstance(page_size, bool) or not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ConfigurationError(
                f"Invalid page size: {page_size}. Must be between 1 and {MAX_PAGE_SIZE}",
                key="github.page_size"
            )

        if not config.get("github", {}).get("host"):
            raise ConfigurationError("GitHub host must not be empty", key="github.host")

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        log_level = str(config.get("logging", {}).get("level", "WARNING")).upper()
        if log_level not in valid_levels:
            raise ConfigurationError(
                f"Invalid log level: {log_level}. Valid levels: {sorted(valid_levels)}",
                key="logging.level"
            )

        structured = config.get("logging", {}).get("structured", False)
        if not isinstance(structured, bool):
            raise ConfigurationError(
                f"Invalid structured logging flag: {structured!r}. Must be true or false",
                key="logging.structured"
            )

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        """
        Convert configuration dictionary to AppConfig object.

        Raises:
            ConfigurationError: If a section contains unknown keys
        """
        try:
            return AppConfig(
                github=GitHubConfig(**config_dict.get("github", {})),
                workspace=WorkspaceConfig(**config_dict.get("workspace", {})),
                logging=LoggingConfig(**config_dict.get("logging", {}))
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", cause=e)

    def get_config(self) -> AppConfig:
        """
        Get the current configuration.

        Returns:
            Application configuration
        """
        if self._config is None:
            return self.load_config()
        return self._config


# Global configuration manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_file: Optional[Union[str, Path]] = None) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Args:
        config_file: Path to configuration file (only used on first call)

    Returns:
        ConfigManager instance
    """
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(config_file)
    return _config_manager


def reset_config_manager() -> None:
    """Drop the global configuration manager."""
    global _config_manager
    _config_manager = None


def get_config() -> AppConfig:
    """
    Get the current application configuration.

    Returns:
        Application configuration
    """
    return get_config_manager().get_config()
