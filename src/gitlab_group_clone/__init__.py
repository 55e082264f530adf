"""
GitLab Group Clone - clone every project of a GitLab group over SSH.

This package provides:
- GroupCloner: clone the projects of one group into a local directory
- list_all_projects: page through every project visible to a token
- load_key: verify an SSH private key for passphrase-less use
"""

__version__ = "1.0.0"

from .cloner import GroupCloner
from .config import CloneSettings, Config
from .projects import list_all_projects
from .ssh_keys import load_key

__all__ = ["GroupCloner", "CloneSettings", "Config", "list_all_projects", "load_key"]
