#!/usr/bin/env python3
"""
Configuration module for GitLab Group Clone.

This module provides the settings file loader and the validation of the
parameters that must be present before any network activity starts.
"""

import os
import json
from dataclasses import dataclass
from typing import Optional, Dict, Any

from .errors import ConfigurationError
from .models import DEFAULT_GITLAB_URL


class Config:
    """Optional JSON settings file for GitLab Group Clone."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file (optional)
        """
        self.config_file = config_file or self._get_default_config_path()
        self.config = self._load_config()

    def _get_default_config_path(self) -> str:
        """Get default configuration file path."""
        return os.path.join(os.path.expanduser("~"), ".gitlab_group_clone.json")

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        A missing file is an empty configuration; a file that exists but
        cannot be read or parsed is an error.
        """
        if not os.path.exists(self.config_file):
            return {}
        try:
            with open(self.config_file, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(f"Could not read config file {self.config_file}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {self.config_file} must contain a JSON object")
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self.config.get(key, default)


def validate_gitlab_url(url: str) -> bool:
    if not url or not isinstance(url, str):
        return False
    return url.lower().startswith(('http://', 'https://'))


def validate_access_token(token: Optional[str]) -> bool:
    # GitLab personal access tokens typically start with 'glpat-',
    # but any non-blank string is accepted
    return bool(token) and len(token.strip()) > 0


@dataclass
class CloneSettings:
    """Everything a clone run needs, gathered from flags, environment and file."""

    token: Optional[str] = None
    destination: Optional[str] = None
    group_id: Optional[int] = None
    key_file: Optional[str] = None
    gitlab_url: str = DEFAULT_GITLAB_URL
    max_pages: Optional[int] = None

    @classmethod
    def from_sources(cls, config: Config, token: Optional[str] = None, destination: Optional[str] = None,
                     group_id: Optional[int] = None, key_file: Optional[str] = None,
                     gitlab_url: Optional[str] = None, max_pages: Optional[int] = None) -> "CloneSettings":
        """
        Merge command-line values with the settings file.

        Only ``gitlab_url`` and ``max_pages`` fall back to the file; the four
        required parameters have no defaults.
        """
        return cls(
            token=token,
            destination=destination,
            group_id=group_id,
            key_file=key_file,
            gitlab_url=gitlab_url or config.get('gitlab_url') or DEFAULT_GITLAB_URL,
            max_pages=max_pages if max_pages is not None else config.get('max_pages'),
        )

    def validate(self) -> None:
        """
        Check the settings, raising on the first problem found.

        Raises:
            ConfigurationError: naming the missing or invalid parameter
        """
        if not validate_access_token(self.token):
            raise ConfigurationError("Please set gitlab token with -token=glpat-xxxxx")
        if not self.destination:
            raise ConfigurationError("Please set destination with -dest=/home/Test/git")
        if not self.group_id:
            raise ConfigurationError("Please set groupID with -groupid=1020304")
        if not self.key_file:
            raise ConfigurationError("Please set SSH private key path with -key=file.pem")
        if not isinstance(self.gitlab_url, str):
            raise ConfigurationError(f"Invalid GitLab URL {self.gitlab_url!r}: must be a string")
        if not validate_gitlab_url(self.gitlab_url):
            raise ConfigurationError(f"Invalid GitLab URL '{self.gitlab_url}': must start with http:// or https://")
        if self.max_pages is not None:
            if isinstance(self.max_pages, bool) or not isinstance(self.max_pages, int) or self.max_pages < 1:
                raise ConfigurationError(f"Invalid max_pages '{self.max_pages}': must be a positive integer")
