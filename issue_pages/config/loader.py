"""Load issue YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _normalize_ids,
    _normalize_layout,
    _normalize_url_map,
    _optional_bool,
    _optional_str,
    _require_str,
)
from .models import (
    Document,
    HiddenPages,
    IssueBundle,
    IssueConfigError,
    Section,
    ThumbnailConfig,
)


def load_issue(path: Path) -> IssueBundle:
    """Load an issue document and its thumbnail configuration from YAML.

    Parameters
    ----------
    path : Path
        Filesystem path to the issue YAML file. The file holds an ``issue``
        mapping and an optional ``thumbnails`` mapping.

    Returns
    -------
    IssueBundle
        The parsed :class:`Document` and its :class:`ThumbnailConfig`, or
        ``None`` for the latter when the file has no ``thumbnails`` block.

    Raises
    ------
    FileNotFoundError
        If the file does not exist at ``path``.
    IssueConfigError
        If the top-level structure is not a mapping, the ``issue`` block is
        missing, or the issue or thumbnail data is structurally invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from issue_pages.config import load_issue
    >>> bundle = load_issue(Path("issues/spring.yaml"))  # doctest: +SKIP
    >>> bundle.document.sections[0].id  # doctest: +SKIP
    'opening-story'
    """
    if not path.exists():
        msg = f"Issue file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise IssueConfigError(msg)

    issue_raw = loaded.get("issue")
    if not issue_raw:
        msg = f"Issue file '{path}' has no 'issue' block."
        raise IssueConfigError(msg)

    document = build_document(issue_raw)
    thumbnails_raw = loaded.get("thumbnails")
    thumbnails = (
        build_thumbnail_config(thumbnails_raw) if thumbnails_raw is not None else None
    )
    return IssueBundle(document=document, thumbnails=thumbnails)


def build_document(payload: typ.Mapping[str, typ.Any]) -> Document:
    """Build a Document from an ``issue`` mapping."""
    match payload:
        case dict() as data:
            issue_id = _require_str(data, "id", "Issue")
        case _:
            msg = "Issue data must be a mapping."
            raise IssueConfigError(msg)

    sections = _build_sections(data.get("sections"))
    return Document(
        id=issue_id,
        title=_optional_str(data.get("title")) or "",
        sections=sections,
        note=_optional_str(data.get("note")),
        note_toc_title=_optional_str(data.get("note_toc_title")),
        note_toc_subtitle=_optional_str(data.get("note_toc_subtitle")),
        cover_image=_optional_str(data.get("cover_image")),
        cover_background_image=_optional_str(data.get("cover_background_image")),
        description_image=_optional_str(data.get("description_image")),
    )


def _build_sections(entries: list[typ.Any] | None) -> tuple[Section, ...]:
    """Build the ordered section tuple, rejecting missing or duplicate ids."""
    match entries:
        case None:
            return ()
        case list() as items:
            pass
        case _:
            msg = "Issue 'sections' must be a list."
            raise IssueConfigError(msg)

    sections: list[Section] = []
    seen: set[str] = set()
    for index, entry in enumerate(items, start=1):
        if not isinstance(entry, dict):
            msg = f"Section #{index} must be a mapping."
            raise IssueConfigError(msg)
        section_id = _require_str(entry, "id", f"Section #{index}")
        if section_id in seen:
            msg = f"Duplicate section id '{section_id}'."
            raise IssueConfigError(msg)
        seen.add(section_id)
        content = entry.get("content")
        sections.append(
            Section(
                id=section_id,
                type=_require_str(entry, "type", f"Section '{section_id}'"),
                title=_optional_str(entry.get("title")) or "",
                subtitle=_optional_str(entry.get("subtitle")),
                toc_title=_optional_str(entry.get("toc_title")),
                toc_subtitle=_optional_str(entry.get("toc_subtitle")),
                content=content if isinstance(content, dict) else {},
            )
        )
    return tuple(sections)


def build_thumbnail_config(payload: typ.Mapping[str, typ.Any] | None) -> ThumbnailConfig:
    """Build a ThumbnailConfig from a ``thumbnails`` mapping.

    An empty or ``None`` payload yields the all-defaults configuration with
    nothing hidden.
    """
    match payload:
        case None:
            return ThumbnailConfig()
        case dict() as data:
            pass
        case _:
            msg = "Thumbnail configuration must be a mapping."
            raise IssueConfigError(msg)

    hidden_raw = data.get("hidden") or {}
    if not isinstance(hidden_raw, dict):
        msg = "Thumbnail 'hidden' block must be a mapping."
        raise IssueConfigError(msg)

    return ThumbnailConfig(
        layout=_normalize_layout(data.get("layout")),
        cover_thumbnail=_optional_str(data.get("cover")),
        toc_thumbnail=_optional_str(data.get("toc")),
        note_thumbnail=_optional_str(data.get("note")),
        section_thumbnails=_normalize_url_map(data.get("sections")),
        hidden=HiddenPages(
            cover=_optional_bool(hidden_raw.get("cover"), "cover"),
            toc=_optional_bool(hidden_raw.get("toc"), "toc"),
            note=_optional_bool(hidden_raw.get("note"), "note"),
            sections=_normalize_ids(hidden_raw.get("sections")),
        ),
    )


__all__ = ["build_document", "build_thumbnail_config", "load_issue"]
