"""Typed dataclasses describing the documentation site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from loki4j_site._constants import DEFAULT_INDEX_DOC, DEFAULT_OUTPUT_DIR


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class ColorsConfig:
    """Brand colors exposed to the stylesheet as CSS custom properties."""

    primary_color: str = "#7e1324"
    secondary_color: str = "#580d19"


@dc.dataclass(frozen=True, slots=True)
class HeaderLinkConfig:
    """Top navigation entry pointing at a doc, a site page, or a raw URL.

    Exactly one of ``doc``, ``page`` and ``href`` is set.
    """

    label: str
    doc: str | None = None
    page: str | None = None
    href: str | None = None


@dc.dataclass(frozen=True, slots=True)
class ShowcaseUser:
    """Third-party adopter entry shown on the landing and users pages."""

    caption: str
    image: str
    info_link: str
    pinned: bool = False


@dc.dataclass(frozen=True, slots=True)
class FeatureBlockConfig:
    """Landing page feature block rendered as an image and markdown copy."""

    title: str
    content: str
    image: str | None = None
    image_align: str = "left"
    background: str | None = None
    block_id: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site-wide constants consumed by every page, the header, and the footer."""

    title: str
    start_doc: str
    tagline: str = ""
    url: str = ""
    base_url: str = "/"
    docs_url: str = ""
    repo_url: str | None = None
    github_repo: str | None = None
    copyright: str = ""
    header_icon: str | None = None
    footer_icon: str | None = None
    favicon: str | None = None
    colors: ColorsConfig = dc.field(default_factory=ColorsConfig)
    header_links: tuple[HeaderLinkConfig, ...] = ()
    users: tuple[ShowcaseUser, ...] = ()
    features: tuple[FeatureBlockConfig, ...] = ()
    twitter_username: str | None = None
    linkedin_profile: str | None = None
    stackoverflow_tag: str | None = None
    stargazers_path: str | None = None
    artifact_version: str = ""
    scripts: tuple[str, ...] = ()
    og_image: str | None = None
    twitter_image: str | None = None
    ga_tracking_id: str | None = None
    clean_url: bool = True
    languages: tuple[str, ...] = ("",)
    index_doc: Path = Path(DEFAULT_INDEX_DOC)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)

    def asset_url(self, path: str | None) -> str | None:
        """Return ``path`` prefixed with the base URL, or None when unset."""
        if not path:
            return None
        return f"{self.base_url}{path}"


__all__ = [
    "ColorsConfig",
    "FeatureBlockConfig",
    "HeaderLinkConfig",
    "ShowcaseUser",
    "SiteConfig",
    "SiteConfigError",
]
