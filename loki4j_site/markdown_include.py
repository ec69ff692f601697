r"""Include an external markdown document with the artifact version filled in.

The landing page embeds ``docs/index.md`` from the appender repository. That
file refers to the published artifact as ``%version%`` so the dependency
snippets never go stale; this module swaps the token for the configured
version and renders the result with :class:`HtmlContentRenderer`.

A missing document is a build failure: :func:`load_markdown` lets the
``FileNotFoundError`` propagate so the ``site generate`` run aborts.

Example
-------
>>> substitute_version("version: %version%", "1.6.0")
'version: 1.6.0'
>>> substitute_version("no token here", "1.6.0")
'no token here'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import VERSION_TOKEN

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .renderer import HtmlContentRenderer


@dc.dataclass(frozen=True, slots=True)
class IncludedDocument:
    """Markdown document prepared for embedding into a page.

    Attributes
    ----------
    markdown : str
        Source markdown after version substitution.
    html : str
        Rendered HTML for ``markdown``.
    metadata : dict[str, object]
        Presentation flags passed to the template alongside the content
        (``title``, ``hide_title``, ``custom_edit_url``).
    """

    markdown: str
    html: str
    metadata: dict[str, object] = dc.field(default_factory=dict)


def substitute_version(text: str, version: str) -> str:
    """Replace every literal ``%version%`` token in ``text`` with ``version``."""
    return text.replace(VERSION_TOKEN, version)


def load_markdown(path: Path, version: str) -> str:
    """Read ``path`` as UTF-8 and substitute the artifact version.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    """
    if not path.exists():
        msg = f"Included markdown document '{path}' not found."
        raise FileNotFoundError(msg)
    return substitute_version(path.read_text(encoding="utf-8"), version)


def include_markdown(
    path: Path,
    version: str,
    renderer: HtmlContentRenderer,
    *,
    title: str = "index",
) -> IncludedDocument:
    """Load, substitute, and render the markdown document at ``path``."""
    source = load_markdown(path, version)
    return IncludedDocument(
        markdown=source,
        html=renderer.markdown(source),
        metadata={"custom_edit_url": None, "hide_title": True, "title": title},
    )


__all__ = [
    "IncludedDocument",
    "include_markdown",
    "load_markdown",
    "substitute_version",
]
