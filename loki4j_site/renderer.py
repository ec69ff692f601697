"""Render markdown copy and code samples into styled HTML."""

from __future__ import annotations

import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

CODE_CSS_CLASS = "codehilite"


class LabelledCodeFormatter(HtmlFormatter):
    """Pygments formatter that tags each code wrapper with its language.

    Python-Markdown's codehilite hands custom formatter classes the block
    language as ``lang_str``. Fenced blocks (backtick or tilde) and indented
    blocks all pass through here, so every wrapper carries a
    ``data-language`` attribute; blocks without a language get ``text``.
    """

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.lang_str = lang_str or "text"

    def _wrap_div(
        self, inner: typ.Iterator[tuple[int, str]]
    ) -> typ.Iterator[tuple[int, str]]:
        language = escape(self.lang_str, quote=True)
        yield 0, f'<div class="{self.cssclass}" data-language="{language}">'
        yield from inner
        yield 0, "</div>\n"


class HtmlContentRenderer:
    """Render markdown with syntax-highlighted code blocks."""

    def __init__(self, pygments_style: str = "default") -> None:
        """Initialize a renderer for the given Pygments style.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"default"``, matching the highlight theme of the site.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass=CODE_CSS_CLASS)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(f".{CODE_CSS_CLASS}")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists", "toc"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": CODE_CSS_CLASS,
                    "lang_prefix": "",
                    "pygments_style": self.pygments_style,
                    "pygments_formatter": LabelledCodeFormatter,
                }
            },
        )
        return md.convert(text)


__all__ = ["HtmlContentRenderer", "LabelledCodeFormatter"]
