"""Select the adopters shown in the landing page showcase."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import ShowcaseUser


def pinned_users(users: cabc.Iterable[ShowcaseUser]) -> list[ShowcaseUser]:
    """Return the pinned users in configuration order."""
    return [user for user in users if user.pinned]


__all__ = ["pinned_users"]
