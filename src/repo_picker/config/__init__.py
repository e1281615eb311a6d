"""
Configuration management for the repo picker.
"""

from .config_manager import (
    ConfigManager, AppConfig, GitHubConfig, WorkspaceConfig, LoggingConfig,
    MAX_PAGE_SIZE, get_config_manager, reset_config_manager, get_config
)

__all__ = [
    "ConfigManager",
    "AppConfig",
    "GitHubConfig",
    "WorkspaceConfig",
    "LoggingConfig",
    "MAX_PAGE_SIZE",
    "get_config_manager",
    "reset_config_manager",
    "get_config"
]
