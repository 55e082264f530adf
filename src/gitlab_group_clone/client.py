"""GitLab API client setup."""

import logging
from typing import Optional

import gitlab
import requests

from .errors import ClientSetupError
from .models import DEFAULT_GITLAB_URL

logger = logging.getLogger('gitlab_group_clone')


def create_client(token: str, gitlab_url: str = DEFAULT_GITLAB_URL) -> gitlab.Gitlab:
    """
    Create a GitLab client authenticated with a private token.

    Args:
        token: GitLab API access token
        gitlab_url: Base URL of the GitLab instance

    Returns:
        Configured python-gitlab client

    Raises:
        ClientSetupError: if the client cannot be constructed
    """
    try:
        gl = gitlab.Gitlab(gitlab_url.rstrip('/'), private_token=token)
    except (gitlab.exceptions.GitlabError, ValueError) as e:
        raise ClientSetupError(f"Could not create GitLab client for {gitlab_url}: {e}") from e
    logger.debug(f"Created GitLab client for {gitlab_url}")
    return gl


def authenticate(gl: gitlab.Gitlab) -> Optional[str]:
    """
    Test GitLab authentication.

    A rejected token is fatal. A token that may list projects but lacks the
    scope to read ``/user`` (HTTP 403) only logs a warning, since listing
    projects is all a clone run needs.

    Returns:
        Username of the authenticated account, or None if it could not be read
    """
    try:
        gl.auth()
    except gitlab.exceptions.GitlabAuthenticationError as e:
        raise ClientSetupError(f"Authentication failed: {e}") from e
    except gitlab.exceptions.GitlabError as e:
        if e.response_code == 403:
            logger.warning(f"Token cannot read the current user, continuing without it: {e}")
            return None
        raise ClientSetupError(f"Authentication failed: {e}") from e
    except requests.exceptions.RequestException as e:
        raise ClientSetupError(f"Authentication failed: {e}") from e
    username = gl.user.username
    logger.info(f"Successfully authenticated as: {username}")
    return username
