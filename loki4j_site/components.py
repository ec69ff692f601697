"""Shared rendering plumbing for the site pages, header, and footer.

Every page is a pure function of the site configuration and a language code:
:class:`PageBuilder` assembles the common template context (link helpers,
resolved header links, highlight stylesheet), renders a Jinja template, and
optionally persists the result under the output directory. The header and
footer are Jinja partials included by ``base.jinja``; :func:`render_header`
and :func:`render_footer` expose them on their own for callers that only need
the fragment.

Templates live under ``loki4j_site/templates`` unless a custom directory is
provided. The Jinja environment enables autoescape and trims block
whitespace.

Example
-------
>>> from loki4j_site.config import SiteConfig
>>> site = SiteConfig(title="Loki4j Logback", start_doc="configuration")
>>> 'class="nav-footer"' in render_footer(site)
True
"""

from __future__ import annotations

import functools
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .renderer import HtmlContentRenderer
from .urls import doc_url, page_url

if typ.TYPE_CHECKING:
    from .config import HeaderLinkConfig, SiteConfig

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment used by every page and partial."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def resolve_header_link(
    site: SiteConfig, link: HeaderLinkConfig, *, language: str = ""
) -> str:
    """Return the href for a header link according to its target kind."""
    if link.doc:
        return doc_url(
            site.base_url, link.doc, docs_url=site.docs_url, language=language
        )
    if link.page:
        return page_url(
            site.base_url, link.page, language=language, clean_url=site.clean_url
        )
    return link.href or ""


def base_context(site: SiteConfig, *, language: str = "") -> dict[str, typ.Any]:
    """Build the template context shared by pages, the header, and the footer."""
    return {
        "site": site,
        "language": language,
        "doc_url": functools.partial(
            doc_url, site.base_url, docs_url=site.docs_url, language=language
        ),
        "page_url": functools.partial(
            page_url, site.base_url, language=language, clean_url=site.clean_url
        ),
        "asset_url": site.asset_url,
        "header_links": [
            {
                "label": link.label,
                "href": resolve_header_link(site, link, language=language),
                "external": bool(link.href),
            }
            for link in site.header_links
        ],
    }


def render_header(
    site: SiteConfig, *, language: str = "", env: Environment | None = None
) -> str:
    """Render the navigation header fragment for ``site``."""
    template = (env or build_environment()).get_template("header.jinja")
    return template.render(**base_context(site, language=language))


def render_footer(
    site: SiteConfig, *, language: str = "", env: Environment | None = None
) -> str:
    """Render the footer fragment for ``site``."""
    template = (env or build_environment()).get_template("footer.jinja")
    return template.render(**base_context(site, language=language))


class PageBuilder:
    """Render one site page from the configuration and a language code.

    Subclasses name their template and output file and contribute
    page-specific context through :meth:`page_context`.
    """

    template_name: typ.ClassVar[str]
    filename: typ.ClassVar[str]

    def __init__(
        self,
        site: SiteConfig,
        *,
        language: str = "",
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
        renderer: HtmlContentRenderer | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration shared by every page.
        language : str, optional
            Language code inserted into derived links and the output path.
            The empty string renders the untranslated site.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``loki4j_site/templates``.
        output_dir : Path, optional
            Override for ``site.output_dir``.
        renderer : HtmlContentRenderer, optional
            Markdown renderer; one is created when not supplied.
        """
        self.site = site
        self.language = language
        self.output_dir = output_dir or site.output_dir
        self.renderer = renderer or HtmlContentRenderer()
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template(self.template_name)

    def page_context(self) -> dict[str, typ.Any]:
        """Return page-specific template context."""
        return {}

    def render(self) -> str:
        """Render the page HTML without touching the filesystem."""
        context = base_context(self.site, language=self.language)
        context["pygments_css"] = self.renderer.stylesheet
        context.update(self.page_context())
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    @property
    def output_path(self) -> Path:
        """Return the file the page is written to."""
        if self.language:
            return self.output_dir / self.language / self.filename
        return self.output_dir / self.filename

    def run(self) -> Path:
        """Render and write the page HTML, returning the output path.

        Parent directories are created as needed; filesystem errors and
        missing included documents propagate to the caller.
        """
        html = self.render()
        output_path = self.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "PageBuilder",
    "base_context",
    "build_environment",
    "render_footer",
    "render_header",
    "resolve_header_link",
]
