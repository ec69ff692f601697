"""Users page rendering pipeline."""

from __future__ import annotations

import typing as typ

from ._constants import USERS_PAGE_FILENAME
from .components import PageBuilder


class UsersPageBuilder(PageBuilder):
    """Render ``users.html`` listing every configured adopter, pinned or not."""

    template_name = "users_page.jinja"
    filename = USERS_PAGE_FILENAME

    def page_context(self) -> dict[str, typ.Any]:
        """Return every user in configuration order."""
        return {"users": list(self.site.users)}


__all__ = ["UsersPageBuilder"]
