"""Find the version of the newest published appender release.

``site bump`` only needs one fact from GitHub: the version string that the
dependency snippets in ``docs/index.md`` should show. This module asks the
``releases/latest`` endpoint for it and turns the tag into that version.

Example
-------
>>> from loki4j_site.releases import fetch_latest_release
>>> fetch_latest_release("loki4j/loki-logback-appender").version  # doctest: +SKIP
'1.6.0'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from http import HTTPStatus

import requests

DEFAULT_API_BASE = "https://api.github.com"
_HEADERS = {
    "Accept": "application/vnd.github+json",
    "User-Agent": "loki4j-site/0.1",
}


class GitHubReleaseError(RuntimeError):
    """Raised when the latest release cannot be read from GitHub."""


@dc.dataclass(frozen=True, slots=True)
class ReleaseInfo:
    """Version recorded for the newest release and when it was published."""

    version: str
    published_at: str | None = None

    @classmethod
    def from_tag(cls, tag: str, published_at: str | None = None) -> ReleaseInfo:
        """Build the record from a git tag such as ``v1.6.0``."""
        version = tag[1:] if len(tag) > 1 and tag[0] in "vV" else tag
        return cls(version=version, published_at=published_at)


def fetch_latest_release(
    repo: str,
    *,
    token: str | None = None,
    api_base: str = DEFAULT_API_BASE,
    session: requests.Session | None = None,
    timeout: float = 10.0,
) -> ReleaseInfo | None:
    """Return the newest release of ``owner/name``, or ``None`` if it has none.

    GitHub answers 404 for repositories without a published release; that
    is not an error for the site, which simply keeps its recorded version.
    There are no retries.

    Raises
    ------
    GitHubReleaseError
        If GitHub cannot be reached, answers with another error status, or
        returns a payload without a tag.
    """
    url = f"{api_base.rstrip('/') or DEFAULT_API_BASE}/repos/{repo}/releases/latest"
    headers = dict(_HEADERS)
    if token:
        headers["Authorization"] = f"Bearer {token}"

    try:
        response = (session or requests).get(url, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        msg = f"Failed to reach GitHub releases for '{repo}': {exc}"
        raise GitHubReleaseError(msg) from exc

    if response.status_code == HTTPStatus.NOT_FOUND:
        return None
    if response.status_code >= HTTPStatus.BAD_REQUEST:
        msg = (
            f"GitHub release lookup for '{repo}' failed with "
            f"status {response.status_code}: {response.text[:200]}"
        )
        raise GitHubReleaseError(msg)

    try:
        payload: dict[str, typ.Any] = response.json()
    except ValueError as exc:
        msg = f"GitHub response for '{repo}' was not valid JSON"
        raise GitHubReleaseError(msg) from exc

    tag = payload.get("tag_name")
    if not isinstance(tag, str) or not tag:
        msg = f"Latest release of '{repo}' has no tag"
        raise GitHubReleaseError(msg)
    return ReleaseInfo.from_tag(tag, payload.get("published_at"))


__all__ = [
    "DEFAULT_API_BASE",
    "GitHubReleaseError",
    "ReleaseInfo",
    "fetch_latest_release",
]
