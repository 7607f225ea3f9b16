"""Configuration management for tinyvcs.

Repository-local and global settings are read from INI files, with
environment variables taking precedence over both.
"""

import os
import configparser
from pathlib import Path
from typing import Dict, Optional


class Config:
    """
    Manages tinyvcs configuration files.

    - Global config: ~/.vcsconfig
    - Repository config: .vcs/config
    - Environment: VCS_<SECTION>_<KEY>

    Environment beats repository config, which beats global config.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.vcsconfig'

    TRUE_VALUES = ('1', 'true', 'yes', 'on', 'always', 'auto')
    FALSE_VALUES = ('0', 'false', 'no', 'off', 'never')

    def __init__(self, repo_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            repo_config_path: Path to repository config file, if in a repo
        """
        self.repo_config_path = Path(repo_config_path) if repo_config_path else None
        self._global_config = None
        self._repo_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.GLOBAL_CONFIG_PATH.exists():
                self._global_config.read(self.GLOBAL_CONFIG_PATH)
        return self._global_config

    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = configparser.ConfigParser()
            if self.repo_config_path.exists():
                self._repo_config.read(self.repo_config_path)
        return self._repo_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Args:
            section: Config section (e.g., 'core', 'color')
            key: Config key (e.g., 'loglevel', 'ui')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_value = os.environ.get(f"VCS_{section.upper()}_{key.upper()}")
        if env_value is not None:
            return env_value

        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        return fallback

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """Get a configuration value interpreted as a boolean."""
        value = self.get(section, key)
        if value is None:
            return fallback
        value = value.strip().lower()
        if value in self.TRUE_VALUES:
            return True
        if value in self.FALSE_VALUES:
            return False
        raise ValueError(f"Not a boolean value for {section}.{key}: {value!r}")

    def _target(self, global_config: bool):
        if global_config:
            return self.global_config, self.GLOBAL_CONFIG_PATH
        if not self.repo_config_path:
            raise ValueError("No repository config path available")
        return self.repo_config, self.repo_config_path

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise repo config
        """
        config, config_path = self._target(global_config)

        if not config.has_section(section):
            config.add_section(section)
        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Returns:
            True if value was removed, False if it didn't exist
        """
        config, config_path = self._target(global_config)

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)
        if not config.options(section):
            config.remove_section(section)

        with open(config_path, 'w') as f:
            config.write(f)
        return True

    def list_all(self, global_only: bool = False, repo_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Repository values override global ones of the same name.

        Returns:
            Dict of sections to key-value dicts
        """
        result: Dict[str, Dict[str, str]] = {}

        sources = []
        if not repo_only:
            sources.append(self.global_config)
        if not global_only and self.repo_config:
            sources.append(self.repo_config)

        for config in sources:
            for section in config.sections():
                result.setdefault(section, {}).update(config.items(section))

        return result


def split_key(key: str):
    """Split ``section.key`` into its parts; bare keys live in ``core``."""
    if '.' in key:
        section, option = key.split('.', 1)
        return section, option
    return 'core', key


def get_config(repo=None) -> Config:
    """
    Get a Config instance.

    Args:
        repo: Repository instance, or None for global-only config
    """
    if repo:
        return Config(repo.config_file)
    return Config()
