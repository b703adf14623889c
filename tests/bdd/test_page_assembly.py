"""Behaviour tests for assembling issues into page lists.

These pytest-bdd scenarios build small issues in memory and check the
absolute and visible projections produced by ``build_pages``: hidden pages
drop out of the visible list with contiguous re-indexing, a missing note
leaves no gap, and unregistered section types still get a thumbnail through
the generic image probe.

Usage
-----
Run ``pytest tests/bdd/test_page_assembly.py -v``. The scenarios live in
``features/page_assembly.feature`` and need no external services.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from issue_pages.config import Document, HiddenPages, Section, ThumbnailConfig
from issue_pages.pages import PageDescriptor, build_pages

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "page_assembly.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _sections(names: str) -> tuple[Section, ...]:
    return tuple(
        Section(id=name, type="featured-story", title=name)
        for name in (part.strip() for part in names.split(","))
        if name
    )


def _describe(pages: list[PageDescriptor]) -> str:
    labels = [
        f"{page.section.id if page.section else page.kind}@{page.ordinal}"
        for page in pages
    ]
    return ", ".join(labels)


@given(parsers.parse('an issue with a note and sections "{names}"'))
def given_issue_with_note(scenario_state: ScenarioState, names: str) -> None:
    scenario_state["document"] = Document(
        id="issue", title="Issue", note="Hello", sections=_sections(names)
    )


@given(parsers.parse('an issue without a note and sections "{names}"'))
def given_issue_without_note(scenario_state: ScenarioState, names: str) -> None:
    scenario_state["document"] = Document(
        id="issue", title="Issue", sections=_sections(names)
    )


@given(
    parsers.parse('section "{section_id}" has type "{section_type}" with image "{url}"')
)
def given_section_type(
    scenario_state: ScenarioState, section_id: str, section_type: str, url: str
) -> None:
    """Replace one section's type and content, keeping its position."""
    document: Document = scenario_state["document"]
    sections = tuple(
        dc.replace(section, type=section_type, content={"image": url})
        if section.id == section_id
        else section
        for section in document.sections
    )
    scenario_state["document"] = dc.replace(document, sections=sections)


@given("a thumbnail config that hides the note")
def given_hidden_note(scenario_state: ScenarioState) -> None:
    scenario_state["config"] = ThumbnailConfig(hidden=HiddenPages(note=True))


@given("no thumbnail config")
def given_no_config(scenario_state: ScenarioState) -> None:
    scenario_state["config"] = None


@when("I build the absolute and visible page lists")
def when_build(scenario_state: ScenarioState) -> None:
    document = scenario_state["document"]
    config = scenario_state["config"]
    scenario_state["absolute"] = build_pages(document, config, True)
    scenario_state["visible"] = build_pages(document, config, False)


@then(parsers.parse('the absolute list is "{expected}"'))
def then_absolute(scenario_state: ScenarioState, expected: str) -> None:
    actual = _describe(scenario_state["absolute"])
    assert actual == expected, f"expected absolute list {expected!r}, got {actual!r}"


@then(parsers.parse('the visible list is "{expected}"'))
def then_visible(scenario_state: ScenarioState, expected: str) -> None:
    actual = _describe(scenario_state["visible"])
    assert actual == expected, f"expected visible list {expected!r}, got {actual!r}"


@then(parsers.parse('the thumbnail of section "{section_id}" is "{url}"'))
def then_thumbnail(scenario_state: ScenarioState, section_id: str, url: str) -> None:
    pages: list[PageDescriptor] = scenario_state["absolute"]
    match = next(
        page for page in pages if page.section and page.section.id == section_id
    )
    assert match.thumbnail == url, (
        f"expected thumbnail {url!r} for section {section_id!r}, got {match.thumbnail!r}"
    )
