"""Load and validate issue YAML for the page navigation engine.

This subpackage parses an issue file into the immutable dataclasses the
engine consumes: a :class:`Document` with its ordered :class:`Section`
entries and an optional :class:`ThumbnailConfig` holding admin overrides and
the hidden-page set. The primary entry point is :func:`load_issue`, which
rejects structurally invalid data with :class:`IssueConfigError` and returns
an :class:`IssueBundle` ready for :func:`issue_pages.pages.build_pages`.

Examples
--------
>>> from pathlib import Path
>>> from issue_pages.config import load_issue
>>> bundle = load_issue(Path("issues/spring.yaml"))  # doctest: +SKIP
>>> bundle.document.title  # doctest: +SKIP
'Spring Issue'
"""

from .loader import build_document, build_thumbnail_config, load_issue
from .models import (
    DEFAULT_THUMBNAIL_CONFIG,
    Document,
    HiddenPages,
    IssueBundle,
    IssueConfigError,
    Section,
    ThumbnailConfig,
    ThumbnailLayout,
)

__all__ = [
    "DEFAULT_THUMBNAIL_CONFIG",
    "Document",
    "HiddenPages",
    "IssueBundle",
    "IssueConfigError",
    "Section",
    "ThumbnailConfig",
    "ThumbnailLayout",
    "build_document",
    "build_thumbnail_config",
    "load_issue",
]
