"""Assemble an issue into ordered, addressable pages.

The builder merges the structural pages (cover, table of contents, and the
optional editor's note) with the issue's typed sections into one canonical
sequence. It is a pure projection: the same document and thumbnail
configuration always produce the same list, and ordinals are assigned from the
position in the filtered output on every call, never carried over.

Two projections are used by a view session:

* the **absolute** list (``include_hidden=True``) holds every page, so hidden
  pages remain reachable by sequential step count;
* the **visible** list (``include_hidden=False``) drops pages hidden in the
  thumbnail configuration and drives the thumbnail strip and the public page
  count.

Ordinals are derived per call and never persisted, so a locator bookmarked
before an admin hides or unhides a page may point at a different page
afterwards.

Example
-------
>>> from issue_pages.config import Document, Section
>>> from issue_pages.pages import build_pages
>>> issue = Document(id="i1", title="Spring", sections=(Section("a", "featured-story", "A"),))
>>> [(page.ordinal, page.kind) for page in build_pages(issue, None, include_hidden=False)]
[(0, 'cover'), (1, 'toc'), (2, 'section')]
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import COVER_LABEL, NOTE_LABEL, SECTION_LABEL_TEMPLATE, TOC_LABEL
from .config import DEFAULT_THUMBNAIL_CONFIG, Document, Section, ThumbnailConfig
from .thumbnails import DEFAULT_RESOLVER, ThumbnailResolver, extract_cover_thumbnail

PageKind = typ.Literal["cover", "toc", "note", "section"]

_KIND_FALLBACK_LETTERS: dict[str, str] = {"cover": "C", "toc": "T", "note": "E"}


@dc.dataclass(frozen=True, slots=True)
class PageDescriptor:
    """One navigable page derived from an issue.

    Attributes
    ----------
    ordinal : int
        0-based position within the list that produced this descriptor.
    kind : {"cover", "toc", "note", "section"}
        Structural role of the page.
    title : str
        Navigation label.
    thumbnail : str or None
        Preview URL, or ``None`` when the viewer should show a placeholder.
    subtitle : str or None
        Secondary label shown in the table of contents.
    section : Section or None
        The backing section for ``kind == "section"`` pages.
    """

    ordinal: int
    kind: PageKind
    title: str
    thumbnail: str | None = None
    subtitle: str | None = None
    section: Section | None = None

    @property
    def key(self) -> str:
        """Return a stable identity for matching a page across projections."""
        if self.section is not None:
            return f"section:{self.section.id}"
        return self.kind

    @property
    def fallback_label(self) -> str:
        """Return the letter displayed in place of a missing thumbnail."""
        letter = _KIND_FALLBACK_LETTERS.get(self.kind)
        if letter:
            return letter
        title = self.title.strip()
        return title[:1].upper() if title else "?"


@dc.dataclass(frozen=True, slots=True)
class TocEntry:
    """A table-of-contents line for one section."""

    section_id: str
    title: str
    subtitle: str | None = None


@dc.dataclass(slots=True)
class _PageDraft:
    kind: PageKind
    title: str
    thumbnail: str | None
    subtitle: str | None = None
    section: Section | None = None


def prefer(*candidates: str | None) -> str | None:
    """Return the first non-empty candidate, implementing ``override ?? extracted ?? None``."""
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def section_title(section: Section, position: int) -> str:
    """Return the navigation title: TOC title, then title, then ``Section N``."""
    return (
        prefer(section.toc_title, section.title)
        or SECTION_LABEL_TEMPLATE.format(number=position)
    )


def build_pages(
    document: Document,
    config: ThumbnailConfig | None = None,
    include_hidden: bool = False,
    *,
    resolver: ThumbnailResolver = DEFAULT_RESOLVER,
) -> list[PageDescriptor]:
    """Build the ordered page list for an issue.

    Parameters
    ----------
    document : Document
        Issue snapshot supplying the cover fields, the optional note, and the
        ordered sections.
    config : ThumbnailConfig or None, optional
        Admin thumbnail overrides and hidden-page flags. ``None`` means all
        defaults with nothing hidden.
    include_hidden : bool, optional
        When ``True`` build the absolute list; when ``False`` (default) drop
        pages hidden in ``config``.
    resolver : ThumbnailResolver, optional
        Strategy registry used for section thumbnails that have no override.

    Returns
    -------
    list[PageDescriptor]
        Pages in structural order (cover, table of contents, note, sections)
        with ordinals ``0..len-1``.
    """
    settings = config or DEFAULT_THUMBNAIL_CONFIG
    hidden = settings.hidden
    drafts: list[_PageDraft] = []

    if include_hidden or not hidden.cover:
        drafts.append(
            _PageDraft(
                kind="cover",
                title=COVER_LABEL,
                thumbnail=prefer(
                    settings.cover_thumbnail, extract_cover_thumbnail(document)
                ),
            )
        )

    if include_hidden or not hidden.toc:
        drafts.append(
            _PageDraft(
                kind="toc",
                title=TOC_LABEL,
                thumbnail=prefer(settings.toc_thumbnail),
            )
        )

    if document.has_note and (include_hidden or not hidden.note):
        drafts.append(
            _PageDraft(
                kind="note",
                title=prefer(document.note_toc_title) or NOTE_LABEL,
                thumbnail=prefer(settings.note_thumbnail),
                subtitle=prefer(document.note_toc_subtitle),
            )
        )

    for position, section in enumerate(document.sections, start=1):
        if not include_hidden and section.id in hidden.sections:
            continue
        drafts.append(
            _PageDraft(
                kind="section",
                title=section_title(section, position),
                thumbnail=prefer(
                    settings.section_thumbnails.get(section.id),
                    resolver.resolve(section.type, section.content),
                ),
                subtitle=prefer(section.toc_subtitle, section.subtitle),
                section=section,
            )
        )

    return [
        PageDescriptor(
            ordinal=ordinal,
            kind=draft.kind,
            title=draft.title,
            thumbnail=draft.thumbnail,
            subtitle=draft.subtitle,
            section=draft.section,
        )
        for ordinal, draft in enumerate(drafts)
    ]


def build_toc_entries(document: Document) -> list[TocEntry]:
    """Return table-of-contents entries for every section, in issue order."""
    return [
        TocEntry(
            section_id=section.id,
            title=section_title(section, position),
            subtitle=prefer(section.toc_subtitle, section.subtitle),
        )
        for position, section in enumerate(document.sections, start=1)
    ]


@dc.dataclass(frozen=True, slots=True)
class PageProjection:
    """The absolute and visible page lists computed from one issue snapshot."""

    absolute: tuple[PageDescriptor, ...]
    visible: tuple[PageDescriptor, ...]

    @property
    def total(self) -> int:
        """Return the public page count (length of the visible list)."""
        return len(self.visible)

    def visible_ordinal(self, absolute_ordinal: int) -> int | None:
        """Map an absolute ordinal to its visible ordinal, or ``None`` when hidden."""
        if not 0 <= absolute_ordinal < len(self.absolute):
            return None
        key = self.absolute[absolute_ordinal].key
        for page in self.visible:
            if page.key == key:
                return page.ordinal
        return None

    def absolute_ordinal(self, visible_ordinal: int) -> int | None:
        """Map a visible ordinal back to its absolute ordinal."""
        if not 0 <= visible_ordinal < len(self.visible):
            return None
        key = self.visible[visible_ordinal].key
        for page in self.absolute:
            if page.key == key:
                return page.ordinal
        return None


def project_pages(
    document: Document,
    config: ThumbnailConfig | None = None,
    *,
    resolver: ThumbnailResolver = DEFAULT_RESOLVER,
) -> PageProjection:
    """Build both projections of an issue with a single inclusion rule each."""
    return PageProjection(
        absolute=tuple(build_pages(document, config, True, resolver=resolver)),
        visible=tuple(build_pages(document, config, False, resolver=resolver)),
    )


__all__ = [
    "PageDescriptor",
    "PageKind",
    "PageProjection",
    "TocEntry",
    "build_pages",
    "build_toc_entries",
    "prefer",
    "project_pages",
    "section_title",
]
