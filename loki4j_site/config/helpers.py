"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import datetime as dt
from urllib.parse import urlsplit

GITHUB_HOSTS = frozenset({"github.com", "www.github.com"})


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _str_or_empty(value: object | None) -> str:
    """Return a stripped string value, substituting ``""`` for missing values."""
    return _optional_str(value) or ""


def _string_tuple(value: str | list[object] | None) -> tuple[str, ...]:
    """Normalize a scalar or list entry into a tuple of non-empty strings."""
    if isinstance(value, str):
        return (value.strip(),) if value.strip() else ()
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return tuple(normalized)
    return ()


def _github_slug(repo_url: str | None) -> str | None:
    """Return ``owner/name`` for a github.com repository URL, or None."""
    if not repo_url:
        return None
    parts = urlsplit(repo_url)
    if parts.netloc.lower() not in GITHUB_HOSTS:
        return None
    segments = [segment for segment in parts.path.split("/") if segment]
    if len(segments) < 2:
        return None
    owner, name = segments[0], segments[1]
    name = name.removesuffix(".git")
    return f"{owner}/{name}"


def _default_stargazers_path(github_repo: str | None) -> str | None:
    """Return the GitHub buttons ``data-count-href`` for ``owner/name``."""
    if not github_repo:
        return None
    return f"/{github_repo}/stargazers"


def _expand_copyright(text: str, *, today: dt.date | None = None) -> str:
    """Replace the ``{year}`` placeholder with the current year."""
    year = (today or dt.datetime.now(dt.UTC).date()).year
    return text.replace("{year}", str(year))


__all__ = [
    "GITHUB_HOSTS",
    "_default_stargazers_path",
    "_expand_copyright",
    "_github_slug",
    "_optional_str",
    "_str_or_empty",
    "_string_tuple",
]
