"""Load and validate the documentation site configuration YAML.

This subpackage parses the project's ``site.yaml`` file, applies defaults to
every optional field, derives the GitHub repository slug and stargazer link
from ``repo_url``, and produces typed dataclasses (:class:`SiteConfig`,
:class:`ShowcaseUser`, etc.) that the page builders consume. The primary
entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from loki4j_site.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.base_url  # doctest: +SKIP
'/loki-logback-appender/'
"""

from .loader import load_site_config
from .models import (
    ColorsConfig,
    FeatureBlockConfig,
    HeaderLinkConfig,
    ShowcaseUser,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "ColorsConfig",
    "FeatureBlockConfig",
    "HeaderLinkConfig",
    "ShowcaseUser",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
