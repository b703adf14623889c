"""Page assembly and navigation engine for multi-section magazine issues.

This package turns an issue document and its admin thumbnail configuration
into addressable pages (cover, table of contents, editor's note, and typed
sections), keeps the absolute and visible addressing spaces in step, and
drives a clamped, deep-linkable navigation cursor. The ``issue-pages``
console script exposes the engine for inspection and static rendering.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from issue_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
