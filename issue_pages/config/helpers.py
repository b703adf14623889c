"""Utility helpers shared by the issue configuration loader."""

from __future__ import annotations

import typing as typ

from .models import THUMBNAIL_LAYOUTS, IssueConfigError, ThumbnailLayout


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, context: str) -> str:
    """Return a required non-empty string field or raise IssueConfigError."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"{context} requires a non-empty '{key}'."
        raise IssueConfigError(msg)
    return value


def _optional_bool(value: object | None, field: str) -> bool:
    """Return a YAML boolean flag, treating a missing value as ``False``."""
    match value:
        case None:
            return False
        case bool() as flag:
            return flag
        case _:
            msg = f"Hidden flag '{field}' must be true or false, got {value!r}."
            raise IssueConfigError(msg)


def _normalize_ids(value: str | list[object] | None) -> frozenset[str]:
    """Normalize a section id list into a frozenset of non-empty strings."""
    match value:
        case str() as text:
            segments: list[object] = [text]
        case list() as items:
            segments = items
        case _:
            return frozenset()
    normalized: set[str] = set()
    for segment in segments:
        text = _optional_str(segment)
        if text:
            normalized.add(text)
    return frozenset(normalized)


def _normalize_url_map(value: object | None) -> dict[str, str]:
    """Return a mapping of section id to thumbnail URL, dropping empty URLs."""
    if not isinstance(value, dict):
        return {}
    result: dict[str, str] = {}
    for key, url in value.items():
        section_id = _optional_str(key)
        text = _optional_str(url)
        if section_id and text:
            result[section_id] = text
    return result


def _normalize_layout(value: object | None) -> ThumbnailLayout:
    """Return a validated thumbnail layout name, defaulting to portrait."""
    text = _optional_str(value)
    if text is None:
        return "portrait"
    layout = text.lower()
    if layout not in THUMBNAIL_LAYOUTS:
        allowed = ", ".join(THUMBNAIL_LAYOUTS)
        msg = f"Unknown thumbnail layout '{text}'. Expected one of: {allowed}"
        raise IssueConfigError(msg)
    return typ.cast("ThumbnailLayout", layout)


__all__ = [
    "_normalize_ids",
    "_normalize_layout",
    "_normalize_url_map",
    "_optional_bool",
    "_optional_str",
    "_require_str",
]
