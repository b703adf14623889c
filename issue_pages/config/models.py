"""Typed dataclasses describing issue documents and thumbnail configuration."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

ThumbnailLayout = typ.Literal["portrait", "landscape"]
THUMBNAIL_LAYOUTS: tuple[str, ...] = ("portrait", "landscape")


class IssueConfigError(ValueError):
    """Raised when issue data or thumbnail configuration is structurally invalid."""


@dc.dataclass(frozen=True, slots=True)
class Section:
    """One typed content block within an issue.

    Attributes
    ----------
    id : str
        Identifier unique within the issue; keys thumbnail overrides and the
        hidden set.
    type : str
        Section type tag selecting the thumbnail extraction strategy.
    title : str
        Section heading.
    subtitle : str or None
        Optional secondary heading.
    toc_title : str or None
        Title shown in the table of contents and navigation, when set.
    toc_subtitle : str or None
        Subtitle shown in the table of contents, when set.
    content : Mapping[str, Any]
        Opaque payload whose shape depends on ``type``.
    """

    id: str
    type: str
    title: str = ""
    subtitle: str | None = None
    toc_title: str | None = None
    toc_subtitle: str | None = None
    content: cabc.Mapping[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class Document:
    """Immutable snapshot of an issue for the duration of a view session."""

    id: str
    title: str
    sections: tuple[Section, ...] = ()
    note: str | None = None
    note_toc_title: str | None = None
    note_toc_subtitle: str | None = None
    cover_image: str | None = None
    cover_background_image: str | None = None
    description_image: str | None = None

    @property
    def has_note(self) -> bool:
        """Return whether the issue carries an editor's note page."""
        return bool(self.note and self.note.strip())


@dc.dataclass(frozen=True, slots=True)
class HiddenPages:
    """Pages removed from the visible addressing space."""

    cover: bool = False
    toc: bool = False
    note: bool = False
    sections: frozenset[str] = frozenset()


@dc.dataclass(frozen=True, slots=True)
class ThumbnailConfig:
    """Admin-authored thumbnail overrides and visibility flags."""

    layout: ThumbnailLayout = "portrait"
    cover_thumbnail: str | None = None
    toc_thumbnail: str | None = None
    note_thumbnail: str | None = None
    section_thumbnails: cabc.Mapping[str, str] = dc.field(default_factory=dict)
    hidden: HiddenPages = dc.field(default_factory=HiddenPages)

    @property
    def aspect_ratio(self) -> str:
        """Return the CSS aspect ratio for thumbnails in this layout."""
        return "4/3" if self.layout == "landscape" else "3/4"


DEFAULT_THUMBNAIL_CONFIG = ThumbnailConfig()


@dc.dataclass(frozen=True, slots=True)
class IssueBundle:
    """An issue document paired with its optional thumbnail configuration."""

    document: Document
    thumbnails: ThumbnailConfig | None = None


__all__ = [
    "DEFAULT_THUMBNAIL_CONFIG",
    "THUMBNAIL_LAYOUTS",
    "Document",
    "HiddenPages",
    "IssueBundle",
    "IssueConfigError",
    "Section",
    "ThumbnailConfig",
    "ThumbnailLayout",
]
