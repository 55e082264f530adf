#!/usr/bin/env python3
"""
GitLab Group Clone

Clones every project owned by one GitLab group into a local directory over
SSH, one project at a time, stopping at the first failure.
"""

import sys
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, TextIO

from git import Repo, RemoteProgress
from git.exc import GitError

from .errors import CloneError, DuplicateDestinationError
from .models import ProjectRecord, SSHKey
from .projects import filter_by_group


class CloneProgress(RemoteProgress):
    """Stream git's progress output to a text stream as it arrives."""

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__()
        self.stream = stream if stream is not None else sys.stdout

    def update(self, op_code, cur_count, max_count=None, message=''):
        self.stream.write(self._cur_line + "\n")
        self.stream.flush()


class GroupCloner:
    """Clones the projects of a single GitLab group."""

    def __init__(self, destination_path: str, group_id: int, key: SSHKey,
                 progress_stream: Optional[TextIO] = None):
        """
        Initialize the group cloner.

        Args:
            destination_path: Local root directory for the clones
            group_id: Namespace ID of the group whose projects are cloned
            key: SSH key used to authenticate every clone
            progress_stream: Where git progress is written (stdout by default)
        """
        self.destination_path = Path(destination_path)
        self.group_id = group_id
        self.key = key
        self.progress_stream = progress_stream
        self.logger = logging.getLogger('gitlab_group_clone')

        # Destinations used in this run, mapped to the project that claimed them
        self._claimed: Dict[Path, ProjectRecord] = {}

        # Statistics
        self.stats = {
            'repositories_cloned': 0,
            'repositories_skipped': 0,
        }

    def destination_for(self, project: ProjectRecord) -> Path:
        return self.destination_path / project.name

    def clone_project(self, project: ProjectRecord) -> Path:
        """
        Clone a single project into ``<destination>/<project name>``.

        Args:
            project: Project to clone

        Returns:
            Path of the new working tree

        Raises:
            DuplicateDestinationError: if another project already used this path
            CloneError: if git fails
        """
        repo_path = self.destination_for(project)

        previous = self._claimed.get(repo_path)
        if previous is not None:
            raise DuplicateDestinationError(
                f"Cannot clone {project.name_with_namespace} (ID: {project.id}) to {repo_path}: "
                f"already used by {previous.name_with_namespace} (ID: {previous.id})"
            )
        self._claimed[repo_path] = project

        self.logger.info(f"Cloning: {project.name_with_namespace}")
        self.logger.debug(f"Clone URL: {project.ssh_url_to_repo}")

        try:
            Repo.clone_from(
                project.ssh_url_to_repo,
                str(repo_path),
                progress=CloneProgress(self.progress_stream),
                env=self.key.git_env(),
            )
        except GitError as e:
            raise CloneError(f"Git error cloning {project.name_with_namespace}: {e}") from e

        self.stats['repositories_cloned'] += 1
        return repo_path

    def clone_group(self, projects: Sequence[ProjectRecord]) -> List[Path]:
        """
        Clone every project owned by the configured group, in order.

        Projects from other namespaces are skipped without being logged. The first
        failure propagates and no further project is attempted.

        Returns:
            Paths of the cloned working trees
        """
        matching = list(filter_by_group(projects, self.group_id))
        self.stats['repositories_skipped'] = len(projects) - len(matching)
        self.logger.info(f"{len(matching)} of {len(projects)} projects belong to group {self.group_id}")

        cloned = [self.clone_project(project) for project in matching]

        self._print_statistics()
        return cloned

    def _print_statistics(self):
        """Print cloning statistics."""
        self.logger.info("=" * 50)
        self.logger.info("CLONING STATISTICS")
        self.logger.info("=" * 50)
        self.logger.info(f"Group ID: {self.group_id}")
        self.logger.info(f"Repositories cloned: {self.stats['repositories_cloned']}")
        self.logger.info(f"Projects in other groups: {self.stats['repositories_skipped']}")
        self.logger.info("=" * 50)
