"""Cyclopts CLI entrypoint for building the Loki4j documentation website.

The ``site`` console script defined here renders the landing, help, and users
pages for every configured language and can refresh the artifact version
recorded in ``site.yaml`` from the latest GitHub release. Typical usage
involves running ``site bump`` after a release and ``site generate`` locally
or in CI.

Examples
--------
Generate every page for the default configuration:

>>> from loki4j_site.cli import main
>>> main()  # doctest: +SKIP

Render only the untranslated pages into a custom directory:

>>> from loki4j_site.cli import app
>>> app(["generate", "--language", "", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import functools
import os
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .bump import bump_artifact_version
from .config import load_site_config
from .help_page import HelpPageBuilder
from .homepage import HomePageBuilder
from .releases import DEFAULT_API_BASE, fetch_latest_release
from .renderer import HtmlContentRenderer
from .users_page import UsersPageBuilder

DEFAULT_CONFIG = Path("config/site.yaml")
PAGE_BUILDERS = (HomePageBuilder, HelpPageBuilder, UsersPageBuilder)

app = App(name="site", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


@app.command(help="Render the landing, help, and users pages to static HTML.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    language: typ.Annotated[
        str | None,
        Parameter(
            help="Render a single language (empty for the untranslated site)",
            env_var="INPUT_LANGUAGE",
        ),
    ] = None,
) -> None:
    """Render every site page for the configured languages.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.
    language : str or None, optional
        Render only this language instead of every configured one.

    Returns
    -------
    None
        Writes rendered pages and prints the generated paths.

    Raises
    ------
    FileNotFoundError
        If the configuration file or the included markdown document is
        missing; the build stops at the first failure.
    """
    site_config = load_site_config(config)
    languages = [language] if language is not None else list(site_config.languages)
    renderer = HtmlContentRenderer()
    for lang in languages:
        for builder_cls in PAGE_BUILDERS:
            builder = builder_cls(
                site_config, language=lang, output_dir=output_dir, renderer=renderer
            )
            written = builder.run()
            print(f"wrote {_format_path(written)}")


@app.command(help="Record the latest GitHub release as the artifact version.")
def bump(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    github_token: typ.Annotated[
        str | None,
        Parameter(
            help="Optional GitHub token (falls back to GITHUB_TOKEN)",
            env_var="INPUT_GITHUB_TOKEN",
        ),
    ] = None,
    github_api_url: typ.Annotated[
        str,
        Parameter(
            help="Override the GitHub API base URL", env_var="INPUT_GITHUB_API_URL"
        ),
    ] = DEFAULT_API_BASE,
) -> None:
    """Update ``artifact_version`` with the latest GitHub release.

    Parameters
    ----------
    config : Path, optional
        Path to the site configuration file; defaults to ``config/site.yaml``.
    github_token : str or None, optional
        GitHub token for authenticated release queries. Falls back to the
        ``GITHUB_TOKEN`` or ``GH_TOKEN`` environment variables.
    github_api_url : str, optional
        Base URL for the GitHub API.
    """
    token = github_token or os.getenv("GITHUB_TOKEN") or os.getenv("GH_TOKEN")
    fetch_release = functools.partial(
        fetch_latest_release, token=token, api_base=github_api_url
    )
    release = bump_artifact_version(config_path=config, fetch_release=fetch_release)
    if release:
        label = release.version
        if release.published_at:
            label = f"{label} ({release.published_at})"
        print(f"artifact_version: {label}")
    else:
        print("artifact_version: no releases found")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``site`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
