"""Behaviour tests for resolving page metadata across a request.

These scenarios mirror how a site uses the resolver: a controller records the
metadata key and placeholder values during request handling, and the page
head later renders whatever the resolver returns. Each scenario writes a
Spanish metadata table and a router resource to a temporary configuration
directory.

Usage:
    pytest tests/bdd/test_metadata_resolution.py -v

Prerequisites:
    - The ``test`` extra installed (pytest-bdd and BeautifulSoup).
    - The feature file at ``features/metadata_resolution.feature``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from page_meta.config import ConfigLoader
from page_meta.domains import RequestContext
from page_meta.head import HeadRenderer
from page_meta.resolver import MetadataResolver
from page_meta.routing import load_router

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "metadata_resolution.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]

METADATA_TABLE = """
default:
  title: Inicio
  description: Bienvenido
test:
  title: "%name% - %section%. YourBrandName"
  description: "Description of %name% - %section%"
  keywords: "%name%,%section%"
product:
  title: "Producto %name%"
  keywords: "%name%,productos"
"""


@pytest.fixture
def scenario_state(tmp_path: Path) -> ScenarioState:
    """Return mutable state shared across steps, seeded with the config dir."""
    return {"config_dir": tmp_path, "routes": {}}


@given(parsers.parse('a metadata table for "{language}"'))
def given_metadata_table(scenario_state: ScenarioState, language: str) -> None:
    """Write the metadata table for ``language``."""
    lang_dir = scenario_state["config_dir"] / "lang"
    lang_dir.mkdir(parents=True, exist_ok=True)
    (lang_dir / f"metadata_{language}.yaml").write_text(
        dedent(METADATA_TABLE).strip() + "\n", encoding="utf-8"
    )


@given(parsers.parse('the route "{name}" serves "{pattern}"'))
def given_route(scenario_state: ScenarioState, name: str, pattern: str) -> None:
    """Declare a route and rewrite the router resource."""
    scenario_state["routes"][name] = pattern
    lines = [f"{route}: {value}" for route, value in scenario_state["routes"].items()]
    (scenario_state["config_dir"] / "router.yaml").write_text(
        "\n".join(lines) + "\n", encoding="utf-8"
    )


@given(parsers.parse('a request for "{path}" in "{language}"'))
def given_request(scenario_state: ScenarioState, path: str, language: str) -> None:
    """Create the request context and its resolver."""
    loader = ConfigLoader(scenario_state["config_dir"])
    context = RequestContext(path=path, language=language)
    scenario_state["resolver"] = MetadataResolver.for_request(
        context, loader, load_router(loader)
    )


@when(parsers.parse('the controller sets the metadata key "{key}"'))
def when_set_key(scenario_state: ScenarioState, key: str) -> None:
    """Record the explicit metadata key."""
    scenario_state["resolver"].set_key(key)


@when(parsers.parse('the controller sets the value "{name}" to "{value}"'))
def when_set_value(scenario_state: ScenarioState, name: str, value: str) -> None:
    """Record a placeholder value."""
    scenario_state["resolver"].set_values(name, value)


@then(parsers.parse('the metadata title is "{expected}"'))
def then_title(scenario_state: ScenarioState, expected: str) -> None:
    """Verify the resolved title."""
    actual = scenario_state["resolver"].get()["title"]
    assert actual == expected, f"expected title {expected!r}, got {actual!r}"


@then(parsers.parse('the metadata keywords are "{expected}"'))
def then_keywords(scenario_state: ScenarioState, expected: str) -> None:
    """Verify the resolved keywords."""
    actual = scenario_state["resolver"].get()["keywords"]
    assert actual == expected, f"expected keywords {expected!r}, got {actual!r}"


@then(parsers.parse('the rendered head has the title "{expected}"'))
def then_head_title(scenario_state: ScenarioState, expected: str) -> None:
    """Verify the title element of the rendered head fragment."""
    html = HeadRenderer().render(scenario_state["resolver"].get())
    title = BeautifulSoup(html, "html.parser").find("title")
    assert title is not None, "expected a <title> element in the head fragment"
    assert title.get_text() == expected, (
        f"expected head title {expected!r}, got {title.get_text()!r}"
    )
