"""Landing page rendering pipeline.

This module turns the site configuration into the static ``index.html``
artefact: the splash banner with the project title and call-to-action
buttons, optional feature blocks, the embedded ``docs/index.md`` document
with ``%version%`` replaced by the configured artifact version, and the
showcase of pinned adopters. The main entry point is ``HomePageBuilder``.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from loki4j_site.config import load_site_config
>>> builder = HomePageBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> output_path = builder.run()  # doctest: +SKIP

Side effects include reading the included markdown document and writing the
rendered HTML to disk. A missing markdown document aborts the build with
``FileNotFoundError``.
"""

from __future__ import annotations

import typing as typ

from ._constants import HOME_PAGE_FILENAME, USERS_PAGE_FILENAME
from .components import PageBuilder
from .markdown_include import include_markdown
from .showcase import pinned_users
from .urls import page_url


class HomePageBuilder(PageBuilder):
    """Render the landing page from structured config data."""

    template_name = "home_page.jinja"
    filename = HOME_PAGE_FILENAME

    def page_context(self) -> dict[str, typ.Any]:
        """Return the splash, feature, index document, and showcase context."""
        included = include_markdown(
            self.site.index_doc, self.site.artifact_version, self.renderer
        )
        return {
            "included_doc": included,
            "features": self._build_features(),
            "showcase": pinned_users(self.site.users),
            "users_page_href": self._users_page_href(),
        }

    def _build_features(self) -> list[dict[str, typ.Any]]:
        """Render feature block copy and resolve their image URLs."""
        return [
            {
                "title": block.title,
                "html": self.renderer.markdown(block.content),
                "image": self.site.asset_url(block.image),
                "image_align": block.image_align,
                "background": block.background,
                "id": block.block_id,
            }
            for block in self.site.features
        ]

    def _users_page_href(self) -> str:
        return page_url(
            self.site.base_url,
            USERS_PAGE_FILENAME,
            language=self.language,
            clean_url=self.site.clean_url,
        )


__all__ = ["HomePageBuilder"]
