"""Bounded page cursor with deep-linkable locators.

The controller tracks a single ordinal over the visible page list. Every input
is clamped into ``[0, total - 1]`` and malformed locators default to the first
page, so no operation here raises.

Locators are the textual form carried in the host's addressable state (for
example the ``page`` query parameter). The first page encodes as the empty
locator so the default view keeps a clean address, and the empty locator
decodes back to ``0``.

Examples
--------
>>> from issue_pages.navigation import NavigationController, decode_locator, encode_locator
>>> encode_locator(0), encode_locator(3)
('', '3')
>>> decode_locator("7", total=4)
3
>>> nav = NavigationController(total=4)
>>> nav.navigate(10)
'3'
>>> nav.can_go_next
False
"""

from __future__ import annotations

import dataclasses as dc
import re

from ._constants import INDICATOR_TEMPLATE, LOCATOR_PARAM

_LOCATOR_PATTERN = re.compile(r"\d+", re.ASCII)


def clamp_ordinal(ordinal: int, total: int) -> int:
    """Clamp ``ordinal`` into ``[0, total - 1]``; an empty list pins it to ``0``."""
    upper = max(total - 1, 0)
    return min(max(ordinal, 0), upper)


def decode_locator(locator: str | None, total: int) -> int:
    """Parse a locator into an in-range ordinal.

    Parameters
    ----------
    locator : str or None
        External locator text. Missing or empty values select the first page.
    total : int
        Length of the visible page list.

    Returns
    -------
    int
        ``0`` for missing, unparseable, or negative locators; ``total - 1``
        for values past the end; the parsed value otherwise.
    """
    if not isinstance(locator, str):
        return 0
    text = locator.strip()
    if not _LOCATOR_PATTERN.fullmatch(text):
        return 0
    digits = text.lstrip("0") or "0"
    if len(digits) > len(str(max(total, 0))):
        return clamp_ordinal(total, total)
    return clamp_ordinal(int(digits), total)


def encode_locator(ordinal: int) -> str:
    """Return the locator for ``ordinal``; the first page is the empty locator."""
    if ordinal <= 0:
        return ""
    return str(ordinal)


def locator_query(locator: str) -> str:
    """Return the query string carrying ``locator``, or ``""`` for the first page."""
    if not locator:
        return ""
    return f"?{LOCATOR_PARAM}={locator}"


@dc.dataclass(frozen=True, slots=True)
class NavigationState:
    """Snapshot of the cursor handed to the renderer."""

    ordinal: int
    total: int
    locator: str
    can_go_next: bool
    can_go_prev: bool

    @property
    def page_number(self) -> int:
        """Return the 1-based page number shown to readers."""
        return self.ordinal + 1 if self.total else 0

    @property
    def indicator(self) -> str:
        """Return the ``Page X of N`` label."""
        return INDICATOR_TEMPLATE.format(number=self.page_number, total=self.total)


class NavigationController:
    """Stateful cursor over a page list of known length."""

    def __init__(self, total: int, locator: str | None = None) -> None:
        """Initialize the cursor from an optional initial locator.

        Parameters
        ----------
        total : int
            Number of visible pages. Negative values are treated as ``0``.
        locator : str, optional
            Locator decoded at session start; ``None`` selects the first page.
        """
        self._total = max(total, 0)
        self._ordinal = decode_locator(locator, self._total)

    @property
    def ordinal(self) -> int:
        """Return the current 0-based ordinal."""
        return self._ordinal

    @property
    def total(self) -> int:
        """Return the number of pages the cursor ranges over."""
        return self._total

    @property
    def locator(self) -> str:
        """Return the locator for the current ordinal."""
        return encode_locator(self._ordinal)

    @property
    def can_go_next(self) -> bool:
        return self._ordinal < self._total - 1

    @property
    def can_go_prev(self) -> bool:
        return self._ordinal > 0

    def navigate(self, ordinal: int) -> str:
        """Move to ``ordinal`` (clamped) and return the new locator."""
        self._ordinal = clamp_ordinal(ordinal, self._total)
        return self.locator

    def go_next(self) -> str:
        """Step forward one page; stays put on the last page."""
        return self.navigate(self._ordinal + 1)

    def go_prev(self) -> str:
        """Step back one page; stays put on the first page."""
        return self.navigate(self._ordinal - 1)

    def resize(self, total: int) -> int:
        """Change the page count and re-clamp the cursor, returning the ordinal."""
        self._total = max(total, 0)
        self._ordinal = clamp_ordinal(self._ordinal, self._total)
        return self._ordinal

    def state(self) -> NavigationState:
        """Return an immutable snapshot of the cursor."""
        return NavigationState(
            ordinal=self._ordinal,
            total=self._total,
            locator=self.locator,
            can_go_next=self.can_go_next,
            can_go_prev=self.can_go_prev,
        )


__all__ = [
    "NavigationController",
    "NavigationState",
    "clamp_ordinal",
    "decode_locator",
    "encode_locator",
    "locator_query",
]
