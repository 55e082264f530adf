"""
Project enumeration for GitLab Group Clone.

Projects are fetched one page at a time until the server returns an empty
page, then filtered by owning namespace.
"""

import logging
from typing import Iterable, Iterator, List, Optional

import gitlab
import requests

from .errors import EnumerationError
from .models import PER_PAGE, PROJECT_LIST_OPTIONS, ProjectRecord

logger = logging.getLogger('gitlab_group_clone')


def list_all_projects(gl: gitlab.Gitlab, per_page: int = PER_PAGE,
                      max_pages: Optional[int] = None) -> List[ProjectRecord]:
    """
    Get all projects visible to the authenticated account.

    Projects are ordered by creation time, oldest first, and pages are
    appended in the order the server returns them.

    Args:
        gl: Authenticated GitLab client
        per_page: Number of projects requested per page
        max_pages: Optional cap on the number of pages requested

    Returns:
        List of every project across all pages

    Raises:
        EnumerationError: if any page request fails, or ``max_pages`` pages
            were fetched without reaching an empty page
    """
    projects: List[ProjectRecord] = []
    page = 1

    while True:
        if max_pages is not None and page > max_pages:
            raise EnumerationError(
                f"Stopped after {max_pages} pages without reaching the end of the project list"
            )

        logger.info(f"Fetching all projects. Page: {page}")
        try:
            chunk = gl.projects.list(per_page=per_page, page=page, get_all=False, **PROJECT_LIST_OPTIONS)
        except (gitlab.exceptions.GitlabError, requests.exceptions.RequestException) as e:
            raise EnumerationError(f"Failed to list projects (page {page}): {e}") from e

        if not chunk:
            break

        projects.extend(ProjectRecord.from_gitlab(project) for project in chunk)
        page += 1

    logger.info(f"Found {len(projects)} projects")
    return projects


def filter_by_group(projects: Iterable[ProjectRecord], group_id: int) -> Iterator[ProjectRecord]:
    """Yield the projects owned by ``group_id``, keeping their order."""
    for project in projects:
        if project.namespace_id == group_id:
            yield project
