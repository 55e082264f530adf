"""Data models and constants for gitlab_group_clone."""

import shlex
from dataclasses import dataclass
from typing import Any, Dict

# Constants
DEFAULT_GITLAB_URL = "https://gitlab.com"
PER_PAGE = 100
SSH_USER = "git"

# Listing options sent with every project page request
PROJECT_LIST_OPTIONS = {
    'order_by': 'created_at',
    'sort': 'asc',
    'archived': False,
    'membership': True,
}


@dataclass(frozen=True)
class ProjectRecord:
    """A GitLab project as seen by the cloner."""

    id: int
    name: str
    name_with_namespace: str
    namespace_id: int
    ssh_url_to_repo: str

    @classmethod
    def from_gitlab(cls, project: Any) -> "ProjectRecord":
        """
        Build a record from a python-gitlab project object.

        Args:
            project: Project returned by ``gl.projects.list``

        Returns:
            ProjectRecord holding the fields used for filtering and cloning
        """
        return cls(
            id=project.id,
            name=project.name,
            name_with_namespace=project.name_with_namespace,
            namespace_id=project.namespace['id'],
            ssh_url_to_repo=project.ssh_url_to_repo,
        )


@dataclass(frozen=True)
class SSHKey:
    """SSH key pair used to authenticate git clones."""

    path: str
    user: str = SSH_USER
    passphrase: str = ""

    def ssh_command(self) -> str:
        """Return the ssh invocation git should use for this key."""
        return " ".join([
            "ssh",
            "-i", shlex.quote(self.path),
            "-o", "IdentitiesOnly=yes",
            "-o", "BatchMode=yes",
            "-l", shlex.quote(self.user),
        ])

    def git_env(self) -> Dict[str, str]:
        return {'GIT_SSH_COMMAND': self.ssh_command()}
