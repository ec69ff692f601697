"""Derive site-relative links for docs and static pages.

Every page, the header, and the footer build their links through these two
helpers so the concatenation rule lives in exactly one place. Neither helper
escapes or validates its inputs: a malformed base URL produces a malformed
link.

Examples
--------
>>> doc_url("/loki-logback-appender/", "configuration")
'/loki-logback-appender/configuration'
>>> doc_url("/", "configuration", docs_url="docs", language="en")
'/docs/en/configuration'
>>> page_url("/", "users.html", language="fr")
'/fr/users.html'
"""

from __future__ import annotations

import posixpath


def doc_url(
    base_url: str, doc: str, *, docs_url: str | None = "", language: str | None = ""
) -> str:
    """Return the link for documentation page ``doc``.

    Parameters
    ----------
    base_url : str
        Site base URL; expected to end with ``/``.
    doc : str
        Document identifier appended verbatim.
    docs_url : str or None, optional
        Docs path segment, followed by ``/`` when non-empty.
    language : str or None, optional
        Language segment, followed by ``/`` when non-empty.

    Returns
    -------
    str
        ``base_url`` + docs segment + language segment + ``doc``.
    """
    docs_part = f"{docs_url}/" if docs_url else ""
    lang_part = f"{language}/" if language else ""
    return f"{base_url}{docs_part}{lang_part}{doc}"


def page_url(
    base_url: str, page: str, *, language: str | None = "", clean_url: bool = True
) -> str:
    """Return the link for a static site page such as ``help`` or ``users.html``.

    When ``clean_url`` is false an ``.html`` suffix is added to pages given
    without an extension.
    """
    lang_part = f"{language}/" if language else ""
    target = page
    if not clean_url and not posixpath.splitext(page)[1]:
        target = f"{page}.html"
    return f"{base_url}{lang_part}{target}"


__all__ = ["doc_url", "page_url"]
