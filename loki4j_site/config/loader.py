"""Load the site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from loki4j_site._constants import DEFAULT_INDEX_DOC, DEFAULT_OUTPUT_DIR

from .helpers import (
    _default_stargazers_path,
    _expand_copyright,
    _github_slug,
    _optional_str,
    _str_or_empty,
    _string_tuple,
)
from .models import (
    ColorsConfig,
    FeatureBlockConfig,
    HeaderLinkConfig,
    ShowcaseUser,
    SiteConfig,
    SiteConfigError,
)

IMAGE_ALIGNMENTS = ("left", "right", "top")


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the documentation site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative ``index_doc`` and ``output_dir``
        entries resolve against the directory holding this file.

    Returns
    -------
    SiteConfig
        Parsed site configuration with defaults applied to every optional
        field.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required fields are missing or invalid (for example, a
        ``base_url`` without a trailing slash).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from loki4j_site.config import load_site_config
    >>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> site.start_doc  # doctest: +SKIP
    'configuration'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return _build_site_config(dict(loaded), base_dir=path.parent)


def _build_site_config(
    raw: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> SiteConfig:
    """Build a SiteConfig from a parsed YAML mapping."""
    title = _optional_str(raw.get("title"))
    if not title:
        msg = "Site configuration requires a 'title'."
        raise SiteConfigError(msg)
    start_doc = _optional_str(raw.get("start_doc"))
    if not start_doc:
        msg = "Site configuration requires a 'start_doc'."
        raise SiteConfigError(msg)

    base_url = _str_or_empty(raw.get("base_url")) or "/"
    if not base_url.endswith("/"):
        msg = f"'base_url' must end with '/', got {base_url!r}."
        raise SiteConfigError(msg)

    repo_url = _optional_str(raw.get("repo_url"))
    github_repo = _optional_str(raw.get("github_repo")) or _github_slug(repo_url)
    stargazers_path = _optional_str(
        raw.get("stargazers_path")
    ) or _default_stargazers_path(github_repo)

    index_doc = base_dir / Path(raw.get("index_doc") or DEFAULT_INDEX_DOC)
    output_dir = base_dir / Path(raw.get("output_dir") or DEFAULT_OUTPUT_DIR)

    return SiteConfig(
        title=title,
        start_doc=start_doc,
        tagline=_str_or_empty(raw.get("tagline")),
        url=_str_or_empty(raw.get("url")),
        base_url=base_url,
        docs_url=_str_or_empty(raw.get("docs_url")).strip("/"),
        repo_url=repo_url,
        github_repo=github_repo,
        copyright=_expand_copyright(_str_or_empty(raw.get("copyright"))),
        header_icon=_optional_str(raw.get("header_icon")),
        footer_icon=_optional_str(raw.get("footer_icon")),
        favicon=_optional_str(raw.get("favicon")),
        colors=_build_colors(raw.get("colors")),
        header_links=_build_header_links(raw.get("header_links")),
        users=_build_users(raw.get("users")),
        features=_build_features(raw.get("features")),
        twitter_username=_optional_str(raw.get("twitter_username")),
        linkedin_profile=_optional_str(raw.get("linkedin_profile")),
        stackoverflow_tag=_optional_str(raw.get("stackoverflow_tag")),
        stargazers_path=stargazers_path,
        artifact_version=_str_or_empty(raw.get("artifact_version")),
        scripts=_string_tuple(raw.get("scripts")),
        og_image=_optional_str(raw.get("og_image")),
        twitter_image=_optional_str(raw.get("twitter_image")),
        ga_tracking_id=_optional_str(raw.get("ga_tracking_id")),
        clean_url=_build_flag(raw.get("clean_url"), key="clean_url", default=True),
        languages=_build_languages(raw.get("languages")),
        index_doc=index_doc,
        output_dir=output_dir,
    )


def _build_colors(payload: typ.Mapping[str, object] | None) -> ColorsConfig:
    """Build the color palette, keeping defaults for missing entries."""
    base = ColorsConfig()
    match payload:
        case None:
            return base
        case dict() as data:
            pass
        case _:
            msg = "'colors' must be a mapping."
            raise SiteConfigError(msg)
    return ColorsConfig(
        primary_color=_optional_str(data.get("primary_color")) or base.primary_color,
        secondary_color=_optional_str(data.get("secondary_color"))
        or base.secondary_color,
    )


def _build_header_links(
    entries: list[typ.Mapping[str, object]] | None,
) -> tuple[HeaderLinkConfig, ...]:
    """Build top navigation links; each entry needs a label and one target."""
    links: list[HeaderLinkConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return ()
    for entry in iterable:
        match entry:
            case {"label": label, **rest}:
                pass
            case _:
                label, rest = None, {}
        targets = {
            key: _optional_str(rest.get(key)) for key in ("doc", "page", "href")
        }
        chosen = [key for key, value in targets.items() if value]
        if not label or len(chosen) != 1:
            msg = (
                "Header links require a 'label' and exactly one of "
                "'doc', 'page', or 'href'."
            )
            raise SiteConfigError(msg)
        links.append(HeaderLinkConfig(label=str(label), **targets))
    return tuple(links)


def _build_users(
    entries: list[typ.Mapping[str, object]] | None,
) -> tuple[ShowcaseUser, ...]:
    """Build showcase users in configuration order."""
    users: list[ShowcaseUser] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return ()
    for entry in iterable:
        match entry:
            case {"caption": caption, "image": image, "info_link": info_link, **rest}:
                pass
            case _:
                msg = "Users require 'caption', 'image', and 'info_link'."
                raise SiteConfigError(msg)
        users.append(
            ShowcaseUser(
                caption=str(caption),
                image=str(image),
                info_link=str(info_link),
                pinned=_build_flag(
                    rest.get("pinned"), key="users.pinned", default=False
                ),
            )
        )
    return tuple(users)


def _build_features(
    entries: list[typ.Mapping[str, object]] | None,
) -> tuple[FeatureBlockConfig, ...]:
    """Build landing page feature blocks."""
    blocks: list[FeatureBlockConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return ()
    for entry in iterable:
        match entry:
            case {"title": title, "content": content, **rest}:
                pass
            case _:
                msg = "Feature blocks require 'title' and 'content'."
                raise SiteConfigError(msg)
        image_align = _optional_str(rest.get("image_align")) or "left"
        if image_align not in IMAGE_ALIGNMENTS:
            msg = (
                f"Feature '{title}' has image_align {image_align!r}; "
                f"expected one of {', '.join(IMAGE_ALIGNMENTS)}."
            )
            raise SiteConfigError(msg)
        blocks.append(
            FeatureBlockConfig(
                title=str(title),
                content=str(content),
                image=_optional_str(rest.get("image")),
                image_align=image_align,
                background=_optional_str(rest.get("background")),
                block_id=_optional_str(rest.get("id")),
            )
        )
    return tuple(blocks)


def _build_flag(value: object | None, *, key: str, default: bool) -> bool:
    """Return a boolean setting; a missing or null value keeps the default."""
    match value:
        case None:
            return default
        case bool():
            return value
        case _:
            msg = f"'{key}' must be true or false, got {value!r}."
            raise SiteConfigError(msg)


def _build_languages(value: object | None) -> tuple[str, ...]:
    """Return configured language codes; ``""`` stands for the untranslated site."""
    match value:
        case list() as items if items:
            return tuple(_str_or_empty(item) for item in items)
        case str() as text:
            return (text.strip(),)
        case _:
            return ("",)


__all__ = ["load_site_config"]
