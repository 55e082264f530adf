#!/usr/bin/env python3
"""
Command-line interface for GitLab Group Clone.
"""

import sys
import logging
from typing import Optional

import click

from .client import authenticate, create_client
from .cloner import GroupCloner
from .config import CloneSettings, Config
from .errors import GitLabCloneError
from .projects import list_all_projects
from .ssh_keys import load_key


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Setup logging configuration."""
    logger = logging.getLogger('gitlab_group_clone')

    # In quiet mode, only show WARNING and ERROR level logs
    if verbose:
        log_level = logging.DEBUG
    elif quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    logger.setLevel(log_level)

    if not logger.handlers:
        # Create console handler
        handler = logging.StreamHandler()

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def run(settings: CloneSettings) -> int:
    """
    Clone every project of the configured group.

    Returns:
        Number of projects cloned
    """
    gl = create_client(settings.token, settings.gitlab_url)
    key = load_key(settings.key_file)
    authenticate(gl)

    projects = list_all_projects(gl, max_pages=settings.max_pages)

    cloner = GroupCloner(settings.destination, settings.group_id, key)
    return len(cloner.clone_group(projects))


@click.command()
@click.option('-token', '--token', 'token', envvar='GITLAB_TOKEN', help='GitLab API access token (or GITLAB_TOKEN)')
@click.option('-dest', '--dest', 'destination', help='Local destination path for cloned repositories')
@click.option('-groupid', '--groupid', 'group_id', type=int, help='Numeric ID of the group whose projects are cloned')
@click.option('-key', '--key', 'key_file', help='Path to the SSH private key used for cloning')
@click.option('--gitlab-url', envvar='GITLAB_URL', help='GitLab base URL (default: https://gitlab.com)')
@click.option('--max-pages', type=int, help='Stop with an error after this many project pages')
@click.option('--config', 'config_file', type=click.Path(dir_okay=False), help='JSON settings file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Quiet mode - show only warnings and errors')
def main(token: Optional[str], destination: Optional[str], group_id: Optional[int], key_file: Optional[str],
         gitlab_url: Optional[str], max_pages: Optional[int], config_file: Optional[str],
         verbose: bool, quiet: bool):
    """
    Clone every GitLab project owned by one group over SSH.

    All projects visible to the token are listed, oldest first, and each one
    whose group matches -groupid is cloned into DEST/<project name>. The run
    stops at the first error.
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = CloneSettings.from_sources(
            Config(config_file),
            token=token,
            destination=destination,
            group_id=group_id,
            key_file=key_file,
            gitlab_url=gitlab_url,
            max_pages=max_pages,
        )
        settings.validate()
        cloned = run(settings)
    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user")
        sys.exit(1)
    except GitLabCloneError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Done: {cloned} repositories cloned")
    sys.exit(0)


if __name__ == '__main__':
    main()
