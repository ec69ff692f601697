"""Help page rendering pipeline.

``HelpPageBuilder`` renders ``help.html``: a short header followed by a
three-column grid of support blocks. The docs block is always present; the
community and news blocks only appear when ``stackoverflow_tag`` and
``twitter_username`` are configured.
"""

from __future__ import annotations

import typing as typ

from ._constants import HELP_PAGE_FILENAME
from .components import PageBuilder
from .urls import doc_url


class HelpPageBuilder(PageBuilder):
    """Render the help page from structured config data."""

    template_name = "help_page.jinja"
    filename = HELP_PAGE_FILENAME

    def page_context(self) -> dict[str, typ.Any]:
        """Return the rendered support blocks."""
        return {
            "support_links": [
                {
                    "title": entry["title"],
                    "html": self.renderer.markdown(entry["content"]),
                }
                for entry in self.support_links()
            ]
        }

    def support_links(self) -> list[dict[str, str]]:
        """Return support block titles with their markdown content."""
        start_url = doc_url(
            self.site.base_url,
            self.site.start_doc,
            docs_url=self.site.docs_url,
            language=self.language,
        )
        links = [
            {
                "title": "Browse Docs",
                "content": (
                    f"Learn more using the [documentation on this site.]({start_url})"
                ),
            }
        ]
        if self.site.stackoverflow_tag:
            tag = self.site.stackoverflow_tag
            questions = f"https://stackoverflow.com/questions/tagged/{tag}"
            links.append(
                {
                    "title": "Join the community",
                    "content": (
                        f"[Ask questions]({questions}) "
                        "about the documentation and project"
                    ),
                }
            )
        if self.site.twitter_username:
            links.append(
                {
                    "title": "Stay up to date",
                    "content": (
                        f"[Find out](https://twitter.com/{self.site.twitter_username}) "
                        "what's new with this project"
                    ),
                }
            )
        return links


__all__ = ["HelpPageBuilder"]
