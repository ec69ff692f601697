"""Behaviour tests for the landing page showcase.

The scenarios in ``features/showcase.feature`` render the landing page for a
configuration with three users and check that only pinned users are shown,
and that the whole section disappears when nobody is pinned.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from loki4j_site.homepage import HomePageBuilder

if typ.TYPE_CHECKING:
    from loki4j_site.config import SiteConfig

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "showcase.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a site config with three users of which one is pinned")
def given_one_pinned(
    site_config: SiteConfig, scenario_state: dict[str, object]
) -> None:
    """Use the shared fixture config, which pins only its first user."""
    assert sum(user.pinned for user in site_config.users) == 1
    scenario_state["site"] = site_config


@given("a site config with three users of which none are pinned")
def given_none_pinned(
    site_config: SiteConfig, scenario_state: dict[str, object]
) -> None:
    """Unpin every user in the shared fixture config."""
    users = tuple(dc.replace(user, pinned=False) for user in site_config.users)
    scenario_state["site"] = dc.replace(site_config, users=users)


@when("I render the landing page")
def when_render(scenario_state: dict[str, object]) -> None:
    """Render the landing page without writing it."""
    site = typ.cast("SiteConfig", scenario_state["site"])
    html = HomePageBuilder(site).render()
    scenario_state["soup"] = BeautifulSoup(html, "html.parser")


@then("the showcase renders exactly one image link")
def then_one_link(scenario_state: dict[str, object]) -> None:
    """Verify exactly one linked logo is present."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    assert len(soup.select(".logos a > img")) == 1


@then("the landing page has no showcase section")
def then_no_showcase(scenario_state: dict[str, object]) -> None:
    """Verify the showcase markup is absent."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    assert soup.select_one(".showcaseSection") is None
    assert soup.select_one(".more-users") is None
