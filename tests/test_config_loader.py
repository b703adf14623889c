"""Unit tests for loading issue YAML into dataclasses."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from issue_pages.config import (
    IssueConfigError,
    ThumbnailConfig,
    build_thumbnail_config,
    load_issue,
)


def _write_issue(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "issue.yaml"
    path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_load_issue_with_thumbnails(tmp_path: Path) -> None:
    path = _write_issue(
        tmp_path,
        """
        issue:
          id: spring
          title: Spring Issue
          cover_image: https://cdn/cover.jpg
          note: Welcome
          note_toc_title: From the editor
          sections:
            - id: a
              type: featured-story
              title: Story A
              toc_title: A
              content:
                heroImage: https://cdn/a.jpg
            - id: b
              type: quote-wall
        thumbnails:
          layout: landscape
          cover: https://cdn/cover-thumb.jpg
          sections:
            a: https://cdn/a-thumb.jpg
            b: ""
          hidden:
            note: true
            sections: [b]
        """,
    )
    bundle = load_issue(path)
    document = bundle.document
    assert document.id == "spring"
    assert document.note_toc_title == "From the editor"
    assert [section.id for section in document.sections] == ["a", "b"]
    assert document.sections[0].content == {"heroImage": "https://cdn/a.jpg"}
    assert document.sections[1].content == {}
    thumbnails = bundle.thumbnails
    assert thumbnails is not None
    assert thumbnails.layout == "landscape"
    assert thumbnails.aspect_ratio == "4/3"
    assert thumbnails.cover_thumbnail == "https://cdn/cover-thumb.jpg"
    assert dict(thumbnails.section_thumbnails) == {"a": "https://cdn/a-thumb.jpg"}
    assert thumbnails.hidden.note
    assert thumbnails.hidden.sections == frozenset({"b"})


def test_missing_thumbnails_block_is_none(tmp_path: Path) -> None:
    path = _write_issue(
        tmp_path,
        """
        issue:
          id: bare
          title: Bare
        """,
    )
    bundle = load_issue(path)
    assert bundle.thumbnails is None
    assert bundle.document.sections == ()
    assert not bundle.document.has_note


def test_empty_thumbnail_payload_uses_defaults() -> None:
    assert build_thumbnail_config(None) == ThumbnailConfig()
    assert build_thumbnail_config({}) == ThumbnailConfig()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_issue(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    ("body", "fragment"),
    [
        ("- just\n- a list\n", "mapping"),
        ("other: 1\n", "no 'issue' block"),
        ("issue:\n  title: No id\n", "'id'"),
        ("issue:\n  id: x\n  sections:\n    - type: featured-story\n", "'id'"),
        ("issue:\n  id: x\n  sections:\n    - id: a\n", "'type'"),
        (
            "issue:\n  id: x\n  sections:\n    - {id: a, type: t}\n    - {id: a, type: t}\n",
            "Duplicate",
        ),
        ("issue:\n  id: x\n  sections: nope\n", "list"),
        ("issue:\n  id: x\nthumbnails:\n  layout: diagonal\n", "layout"),
        ("issue:\n  id: x\nthumbnails:\n  hidden: [cover]\n", "hidden"),
    ],
)
def test_structural_errors(tmp_path: Path, body: str, fragment: str) -> None:
    path = tmp_path / "issue.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(IssueConfigError, match=fragment):
        load_issue(path)


def test_hidden_sections_accepts_single_string() -> None:
    config = build_thumbnail_config({"hidden": {"sections": "a"}})
    assert config.hidden.sections == frozenset({"a"})


@pytest.mark.parametrize("flag", ['"no"', '"false"', "1", "off"])
def test_hidden_flags_reject_non_boolean_values(tmp_path: Path, flag: str) -> None:
    path = tmp_path / "issue.yaml"
    path.write_text(
        f"issue:\n  id: x\nthumbnails:\n  hidden:\n    cover: {flag}\n",
        encoding="utf-8",
    )
    with pytest.raises(IssueConfigError, match="Hidden flag 'cover'"):
        load_issue(path)


def test_hidden_flags_accept_booleans_and_default_to_visible() -> None:
    config = build_thumbnail_config({"hidden": {"cover": True, "toc": False}})
    assert config.hidden.cover is True
    assert config.hidden.toc is False
    assert config.hidden.note is False
