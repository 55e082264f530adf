"""
Exception types for GitLab Group Clone.

Every error raised by the library is a GitLabCloneError. The command-line
interface is the only place that turns one into a process exit.
"""


class GitLabCloneError(Exception):
    """Base class for all errors raised by gitlab_group_clone."""


class ConfigurationError(GitLabCloneError):
    """A required parameter is missing or a setting is invalid."""


class ClientSetupError(GitLabCloneError):
    """The GitLab API client could not be created or authenticated."""


class KeyFileError(GitLabCloneError):
    """The SSH private key file is missing, unreadable or unusable."""


class EnumerationError(GitLabCloneError):
    """A project listing request failed."""


class CloneError(GitLabCloneError):
    """Cloning a single project failed."""


class DuplicateDestinationError(CloneError):
    """Two matching projects resolve to the same local path."""
