"""
L2 Resolver — Latest release lookup.

One GET against the GitHub "latest release" endpoint. No caching,
no retry, no pagination.
"""

from __future__ import annotations

import json
import logging
import re
import urllib.error
import urllib.request

from opennow_installer.core.models.release import ReleaseMetadata
from opennow_installer.core.models.settings import InstallerSettings

logger = logging.getLogger(__name__)

_TAG_NAME_RE = re.compile(r'"tag_name"\s*:\s*"([^"]*)"')


def parse_tag_name(body: str) -> str | None:
    """Extract the first ``tag_name`` value from a release document.

    Parses JSON when possible; otherwise takes the first
    ``"tag_name": "..."`` occurrence in the raw text.

    Returns:
        The tag, or None if absent or empty.
    """
    try:
        data = json.loads(body)
    except ValueError:
        data = None

    if isinstance(data, dict):
        tag = data.get("tag_name")
        if isinstance(tag, str) and tag.strip():
            return tag.strip()
        return None

    match = _TAG_NAME_RE.search(body)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return None


def fetch_latest_release(settings: InstallerSettings) -> ReleaseMetadata | None:
    """Query the repository for its latest published release.

    Args:
        settings: Source repository, API base URL, UA and timeout.

    Returns:
        ReleaseMetadata, or None if the request failed or the
        response carried no usable ``tag_name``.
    """
    url = settings.latest_release_endpoint
    req = urllib.request.Request(
        url,
        headers={
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": settings.user_agent,
        },
    )
    logger.debug("GET %s", url)

    kwargs = {} if settings.http_timeout is None else {"timeout": settings.http_timeout}
    try:
        with urllib.request.urlopen(req, **kwargs) as resp:
            body = resp.read().decode("utf-8", errors="replace")
    except (urllib.error.URLError, OSError) as exc:
        logger.warning("Release lookup failed for %s: %s", settings.repository, exc)
        return None

    tag = parse_tag_name(body)
    if tag is None:
        logger.warning("No tag_name in release response from %s", url)
        return None
    return ReleaseMetadata(tag_name=tag)
