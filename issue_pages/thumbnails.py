"""Resolve preview thumbnails from typed section content.

Each section type registers an ordered tuple of extractors, small callables
that pull a candidate image value out of the section's content mapping. The
resolver evaluates the candidates in order and returns the first value that
normalizes to a usable URL. Types without a registry entry fall back to a
generic probe over common image field names.

Image values arrive in two shapes: a bare URL string, or a mapping with a
primary ``url`` and an optional ``originalUrl`` recorded before cropping. The
primary field wins when both are present.

Resolution never raises. Unknown types, malformed content, and extractors
that trip over unexpected shapes all degrade to ``None``, which the viewer
renders as a placeholder.

Examples
--------
>>> from issue_pages.thumbnails import resolve_thumbnail
>>> resolve_thumbnail("featured-story", {"heroImage": {"url": "https://x/a.jpg"}})
'https://x/a.jpg'
>>> resolve_thumbnail("unknown-type", {"image": "https://x/y.png"})
'https://x/y.png'
>>> resolve_thumbnail("featured-story", None) is None
True
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

if typ.TYPE_CHECKING:
    from .config import Document

Content = cabc.Mapping[str, typ.Any]
Extractor = cabc.Callable[[Content], object]

PRIMARY_URL_FIELD = "url"
SOURCE_URL_FIELD = "originalUrl"
GENERIC_IMAGE_FIELDS: tuple[str, ...] = ("image", "heroImage", "coverImage")

_LOOKUP_ERRORS = (AttributeError, IndexError, KeyError, TypeError, ValueError)


def normalize_image_url(value: object) -> str | None:
    """Return a usable URL from a bare string or an image mapping.

    Parameters
    ----------
    value : object
        Either a URL string or a mapping exposing ``url`` and, optionally,
        ``originalUrl``.

    Returns
    -------
    str or None
        The stripped, non-empty URL, or ``None`` when nothing usable exists.
    """
    match value:
        case str() as text:
            stripped = text.strip()
            return stripped or None
        case cabc.Mapping():
            for key in (PRIMARY_URL_FIELD, SOURCE_URL_FIELD):
                candidate = value.get(key)
                if isinstance(candidate, str) and candidate.strip():
                    return candidate.strip()
            return None
        case _:
            return None


def field(*path: str | int) -> Extractor:
    """Build an extractor that walks ``path`` through nested mappings and lists.

    String segments index mappings; integer segments index sequences. A missing
    key, a short list, or a shape mismatch yields ``None``.

    >>> field("mainStory", "backgroundImage")({"mainStory": {"backgroundImage": "a"}})
    'a'
    >>> field("stories", 0, "image")({"stories": []}) is None
    True
    """

    def _extract(content: Content) -> object:
        current: object = content
        for segment in path:
            match segment, current:
                case str(), cabc.Mapping():
                    current = current.get(segment)
                case int(), list() | tuple():
                    if not -len(current) <= segment < len(current):
                        return None
                    current = current[segment]
                case _:
                    return None
            if current is None:
                return None
        return current

    return _extract


def first_item(list_field: str, item_field: str, **criteria: object) -> Extractor:
    """Build an extractor returning ``item_field`` from the first matching list item.

    Items must be mappings; when ``criteria`` are given every key/value pair must
    equal the item's value for that key.
    """

    def _extract(content: Content) -> object:
        items = content.get(list_field)
        if not isinstance(items, list | tuple):
            return None
        for item in items:
            if not isinstance(item, cabc.Mapping):
                continue
            if all(item.get(key) == expected for key, expected in criteria.items()):
                return item.get(item_field)
        return None

    return _extract


DEFAULT_EXTRACTORS: dict[str, tuple[Extractor, ...]] = {
    "cover-pro-feature": (field("coverImage"), field("professionalImage")),
    "rising-star": (field("starImage"),),
    "editors-corner": (
        field("mainStory", "backgroundImage"),
        field("authorImage"),
    ),
    "top-treatment": (field("heroImage"),),
    "top-product-spotlight": (field("productImage"),),
    "reader-stories": (field("stories", 0, "image"),),
    "spotlight-city": (field("cityImage"),),
    "magazine-closing": (field("nextIssueCover"),),
    "featured-story": (field("heroImage"),),
    "custom-section": (first_item("contentBlocks", "image", type="image"),),
}


class ThumbnailResolver:
    """Map section types to ordered image extractors with a generic fallback."""

    def __init__(
        self,
        registry: cabc.Mapping[str, cabc.Sequence[Extractor]] | None = None,
        *,
        generic_fields: cabc.Sequence[str] = GENERIC_IMAGE_FIELDS,
    ) -> None:
        """Initialize the resolver.

        Parameters
        ----------
        registry : Mapping[str, Sequence[Extractor]], optional
            Section type to candidate extractors. Defaults to
            :data:`DEFAULT_EXTRACTORS`.
        generic_fields : Sequence[str], optional
            Field names probed, in order, for unregistered section types.
        """
        source = DEFAULT_EXTRACTORS if registry is None else registry
        self._registry: dict[str, tuple[Extractor, ...]] = {
            section_type: tuple(extractors) for section_type, extractors in source.items()
        }
        self._generic = tuple(field(name) for name in generic_fields)

    @property
    def known_types(self) -> frozenset[str]:
        """Return the section types with a dedicated extraction strategy."""
        return frozenset(self._registry)

    def register(self, section_type: str, *extractors: Extractor) -> None:
        """Register the ordered extractors for ``section_type``, replacing any entry."""
        self._registry[section_type] = tuple(extractors)

    def resolve(self, section_type: str, content: object) -> str | None:
        """Return the preview URL for a section, or ``None`` when none is available."""
        if not isinstance(content, cabc.Mapping):
            return None
        candidates = self._generic
        if isinstance(section_type, str):
            candidates = self._registry.get(section_type, self._generic)
        for extractor in candidates:
            try:
                value = extractor(content)
            except _LOOKUP_ERRORS:
                continue
            url = normalize_image_url(value)
            if url is not None:
                return url
        return None


DEFAULT_RESOLVER = ThumbnailResolver()


def resolve_thumbnail(section_type: str, content: object) -> str | None:
    """Resolve a section thumbnail with the default extractor registry."""
    return DEFAULT_RESOLVER.resolve(section_type, content)


def extract_cover_thumbnail(document: Document) -> str | None:
    """Return the cover preview: description image, background cover, then cover."""
    for value in (
        document.description_image,
        document.cover_background_image,
        document.cover_image,
    ):
        url = normalize_image_url(value)
        if url is not None:
            return url
    return None


__all__ = [
    "DEFAULT_EXTRACTORS",
    "DEFAULT_RESOLVER",
    "GENERIC_IMAGE_FIELDS",
    "Extractor",
    "ThumbnailResolver",
    "extract_cover_thumbnail",
    "field",
    "first_item",
    "normalize_image_url",
    "resolve_thumbnail",
]
