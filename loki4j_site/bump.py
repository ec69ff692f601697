"""Record the latest appender release as the site's artifact version.

The landing page substitutes ``artifact_version`` into the included
``docs/index.md`` dependency snippets. ``bump_artifact_version`` keeps that
value current: it looks up the newest GitHub release of the configured
repository and writes its version (tag without the leading ``v``) back into
``site.yaml`` using ruamel's round-trip mode so comments and key order
survive.

Example
-------
.. code-block:: python

    from pathlib import Path
    from loki4j_site.bump import bump_artifact_version
    from loki4j_site.releases import fetch_latest_release

    release = bump_artifact_version(
        config_path=Path("config/site.yaml"),
        fetch_release=fetch_latest_release,
    )
    if release:
        print(release.version)

"""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from .config.helpers import _github_slug, _optional_str

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .releases import ReleaseInfo

_VERSION_ANCHORS = ("repo_url", "start_doc", "title")


class SiteConfigUpdateError(ValueError):
    """Raised when the site configuration cannot be updated."""


def bump_artifact_version(
    *,
    config_path: Path,
    fetch_release: typ.Callable[[str], ReleaseInfo | None],
) -> ReleaseInfo | None:
    """Look up the latest release and store its version as ``artifact_version``.

    Returns the recorded :class:`ReleaseInfo`, or ``None`` when the
    repository has no releases; in that case the file is left untouched.

    Raises
    ------
    SiteConfigUpdateError
        If the document is not a mapping or no GitHub repository can be
        derived from ``github_repo`` or ``repo_url``.
    """
    yaml = _build_roundtrip_yaml()
    with config_path.open("r", encoding="utf-8") as handle:
        document = yaml.load(handle) or CommentedMap()
    if not isinstance(document, CommentedMap):
        msg = "Top-level configuration must be a mapping"
        raise SiteConfigUpdateError(msg)

    repo = _resolve_repo(document)
    if not repo:
        msg = "Site configuration needs 'github_repo' or a github.com 'repo_url'"
        raise SiteConfigUpdateError(msg)

    release = fetch_release(repo)
    if release is None:
        return None

    _upsert_key(document, "artifact_version", release.version, _VERSION_ANCHORS)
    with config_path.open("w", encoding="utf-8") as handle:
        yaml.dump(document, handle)
    return release


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.preserve_quotes = True
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _resolve_repo(document: CommentedMap) -> str | None:
    explicit = _optional_str(document.get("github_repo"))
    if explicit:
        return explicit
    return _github_slug(_optional_str(document.get("repo_url")))


def _upsert_key(
    document: CommentedMap, key: str, value: str, anchors: tuple[str, ...]
) -> None:
    if key in document:
        document[key] = value
        return

    insert_index = None
    existing_keys = list(document.keys())
    for anchor in anchors:
        if anchor in document:
            insert_index = existing_keys.index(anchor) + 1
            break

    if insert_index is None:
        document[key] = value
    else:
        document.insert(insert_index, key, value)


__all__ = ["SiteConfigUpdateError", "bump_artifact_version"]
