"""Unit tests for the view session that ties pages to the cursor."""

from __future__ import annotations

from issue_pages.config import Document, HiddenPages, Section, ThumbnailConfig
from issue_pages.viewer import ViewSession


def _issue() -> Document:
    return Document(
        id="spring",
        title="Spring Issue",
        note="Welcome",
        sections=(
            Section(id="a", type="featured-story", title="Story A"),
            Section(id="b", type="featured-story", title="Story B"),
        ),
    )


def test_cursor_ranges_over_visible_pages() -> None:
    config = ThumbnailConfig(hidden=HiddenPages(note=True))
    session = ViewSession(_issue(), config, locator="9")
    assert len(session.absolute_pages) == 5
    assert len(session.visible_pages) == 4
    assert session.state.ordinal == 3
    assert session.current_page is not None
    assert session.current_page.title == "Story B"


def test_navigation_updates_current_page() -> None:
    session = ViewSession(_issue())
    assert session.current_page is not None
    assert session.current_page.kind == "cover"
    assert session.go_next() == "1"
    assert session.current_page.kind == "toc"
    assert session.navigate(-4) == ""
    assert session.current_page.kind == "cover"
    assert session.go_prev() == ""


def test_refresh_reprojects_and_reclamps() -> None:
    session = ViewSession(_issue(), locator="4")
    assert session.current_page is not None
    assert session.current_page.title == "Story B"
    hide_b = ThumbnailConfig(hidden=HiddenPages(sections=frozenset({"b"})))
    session.refresh(session.document, hide_b)
    assert session.state.total == 4
    assert session.state.ordinal == 3
    assert session.current_page is not None
    assert session.current_page.title == "Story A"


def test_locator_points_elsewhere_after_hidden_set_edit() -> None:
    """Ordinals are positional, so an old locator can address a different page."""
    before = ViewSession(_issue(), locator="3")
    assert before.current_page is not None
    assert before.current_page.title == "Story A"
    after = ViewSession(
        _issue(), ThumbnailConfig(hidden=HiddenPages(note=True)), locator="3"
    )
    assert after.current_page is not None
    assert after.current_page.title == "Story B"


def test_everything_hidden_has_no_current_page() -> None:
    config = ThumbnailConfig(
        hidden=HiddenPages(
            cover=True, toc=True, note=True, sections=frozenset({"a", "b"})
        )
    )
    session = ViewSession(_issue(), config, locator="2")
    assert session.current_page is None
    assert session.state.total == 0
    assert session.navigate(1) == ""
