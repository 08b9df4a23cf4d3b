"""
Configuration management for task-list.

Handles loading, saving, and updating settings. Environment variables
(optionally from a .env file) override the config file.
"""

import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from task_list.models import TaskListConfig, TaskListSettings
from task_list.file_utils import AtomicFileWriter


logger = logging.getLogger(__name__)

# Default configuration paths
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "task-list"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"

# Environment overrides
ENV_TASKS_FILE = "TASK_LIST_FILE"
ENV_LOG_LEVEL = "TASK_LIST_LOG_LEVEL"
ENV_FILE = Path(".env")


class ConfigManager:
    """
    Manages task-list configuration.

    Loads the config from disk (or defaults), applies updates,
    and persists changes atomically.
    """

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Path to configuration file. Defaults to ~/.config/task-list/config.json
        """
        self.config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
        self.config = self._load_config()

    def _load_config(self) -> TaskListConfig:
        """Load configuration from file or create default."""
        data = AtomicFileWriter.read_json(self.config_file)

        if data is None:
            return TaskListConfig()

        try:
            return TaskListConfig(**data)
        except (TypeError, ValidationError) as e:
            logger.warning(f"Invalid config file {self.config_file}, using defaults: {e}")
            return TaskListConfig()

    def save_config(self) -> None:
        """Save configuration atomically."""
        AtomicFileWriter.write_json(self.config_file, self.config.model_dump(), indent=2)

    def reload(self) -> None:
        """Reload configuration from disk."""
        self.config = self._load_config()

    @property
    def settings(self) -> TaskListSettings:
        return self.config.settings

    def update_settings(self, **kwargs) -> None:
        """
        Update settings and save.

        Args:
            **kwargs: Settings to update (tasks_file, history_file, log_level)

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        data = self.config.settings.model_dump()
        for key, value in kwargs.items():
            if key not in TaskListSettings.model_fields:
                raise ValueError(f"Unknown setting: {key}")
            data[key] = value

        # Re-validate the whole block so bad values never reach disk
        self.config.settings = TaskListSettings(**data)
        self.config.touch()
        self.save_config()

    def effective_settings(self, env_file: Optional[Path] = None) -> TaskListSettings:
        """
        Settings with environment overrides applied.

        Args:
            env_file: .env file to load first (defaults to ./.env)
        """
        env_file = Path(env_file) if env_file else ENV_FILE
        if env_file.exists():
            load_dotenv(env_file)

        data = self.config.settings.model_dump()
        if os.environ.get(ENV_TASKS_FILE):
            data["tasks_file"] = os.environ[ENV_TASKS_FILE]
        if os.environ.get(ENV_LOG_LEVEL):
            data["log_level"] = os.environ[ENV_LOG_LEVEL]
        return TaskListSettings(**data)
