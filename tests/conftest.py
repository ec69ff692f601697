"""Shared fixtures for the site builder test suite."""

from __future__ import annotations

import typing as typ

import pytest

from loki4j_site.config import ShowcaseUser, SiteConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

INDEX_MARKDOWN = (
    "version: %version%\n\n"
    "## Quick start\n\n"
    "```xml\n"
    "<version>%version%</version>\n"
    "```\n"
)


@pytest.fixture
def index_doc(tmp_path: Path) -> Path:
    """Write a markdown document containing ``%version%`` tokens."""
    path = tmp_path / "docs" / "index.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(INDEX_MARKDOWN, encoding="utf-8")
    return path


@pytest.fixture
def site_config(tmp_path: Path, index_doc: Path) -> SiteConfig:
    """Build a site configuration mirroring the appender website."""
    return SiteConfig(
        title="Loki4j Logback",
        tagline="Pure Java Logback appender for Grafana Loki",
        base_url="/loki-logback-appender/",
        start_doc="configuration",
        repo_url="https://github.com/loki4j/loki-logback-appender",
        github_repo="loki4j/loki-logback-appender",
        stargazers_path="/loki4j/loki-logback-appender/stargazers",
        copyright="Copyright © 2020-2026 Anton Nekhaev and Contributors",
        footer_icon="img/logo.svg",
        users=(
            ShowcaseUser(
                caption="Acme",
                image="/img/acme.svg",
                info_link="https://acme.example",
                pinned=True,
            ),
            ShowcaseUser(
                caption="Globex",
                image="/img/globex.svg",
                info_link="https://globex.example",
            ),
            ShowcaseUser(
                caption="Initech",
                image="/img/initech.svg",
                info_link="https://initech.example",
            ),
        ),
        twitter_username="arnehaev",
        stackoverflow_tag="loki4j",
        artifact_version="1.6.0",
        index_doc=index_doc,
        output_dir=tmp_path / "public",
    )
