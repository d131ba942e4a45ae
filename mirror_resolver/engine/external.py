"""
External Classification — Decide whether a repository lives off this host.

A repository is external when its URL host is neither ``localhost`` nor
``127.0.0.1`` and its scheme is not ``file``. Only the ``external:*``
token of a mirrorOf pattern consults this.
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from ..models.mirror import Repository

logger = logging.getLogger(__name__)

LOCAL_HOSTS = ("localhost", "127.0.0.1")


def is_external_url(url: str) -> bool:
    """
    Classify a repository URL.

    A URL that cannot be parsed is never external, so a catch-all
    ``external:*`` rule cannot pick up a malformed repository. The parse
    failure is logged, not raised; URL validation happens upstream.

    Args:
        url: Repository URL

    Returns:
        True if the URL points at a remote, non-file location
    """
    if not isinstance(url, str):
        logger.debug(f"Not classifying non-string repository URL: {url!r}")
        return False

    try:
        parts = urlsplit(url)
        # Accessing .port validates the port component
        parts.port
    except ValueError as e:
        logger.debug(f"Malformed repository URL {url!r}: {e}")
        return False

    if not parts.scheme:
        logger.debug(f"Malformed repository URL {url!r}: no scheme")
        return False

    if parts.scheme == "file":
        return False

    # "C:/m2/repo" and "localhost:8081/repo" split into a scheme and a bare path
    host = parts.hostname
    if not host:
        logger.debug(f"Malformed repository URL {url!r}: no host")
        return False

    return host not in LOCAL_HOSTS


def is_external_repo(repository: Repository) -> bool:
    """Check whether a repository is external."""
    return is_external_url(repository.url)
