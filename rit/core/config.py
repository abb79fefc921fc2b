"""Configuration management for Rit VCS.

Repository configuration is kept in ``.rit/config`` in INI format.
"""

import os
import configparser
from pathlib import Path
from typing import Optional


class Config:
    """
    Manages the repository configuration file.

    Environment variables (``RIT_<SECTION>_<KEY>``) take precedence over
    the file.
    """

    def __init__(self, config_path: Path):
        """
        Initialize Config manager.

        Args:
            config_path: Path to repository config file
        """
        self.config_path = Path(config_path)
        self._config = None

    @property
    def config(self) -> configparser.ConfigParser:
        """Load and return repository configuration."""
        if self._config is None:
            self._config = configparser.ConfigParser()
            if self.config_path.exists():
                self._config.read(self.config_path)
        return self._config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (RIT_<SECTION>_<KEY>)
        2. Repository config
        3. Fallback value

        Args:
            section: Config section (e.g., 'remote')
            key: Config key (e.g., 'url')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"RIT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.config.has_option(section, key):
            return self.config.get(section, key)

        return fallback

    def set(self, section: str, key: str, value: str) -> None:
        """Set a configuration value and write the file."""
        config = self.config
        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(self.config_path, 'w') as f:
            config.write(f)

    def get_remote_url(self) -> Optional[str]:
        """Remote URL, or None when unset or empty."""
        return self.get('remote', 'url') or None

    def set_remote_url(self, url: str) -> None:
        self.set('remote', 'url', url)
