"""Per-view session wiring the page projection to the navigation cursor."""

from __future__ import annotations

import typing as typ

from .navigation import NavigationController, NavigationState
from .pages import PageDescriptor, PageProjection, project_pages
from .thumbnails import DEFAULT_RESOLVER, ThumbnailResolver

if typ.TYPE_CHECKING:
    from .config import Document, ThumbnailConfig


class ViewerHost(typ.Protocol):
    """Obligations of the rendering layer that displays a session.

    After a navigation selects a new current page, the host calls
    :meth:`present` and then :meth:`reset_transient_state`. The reset must run
    after the new page's layout is committed and strictly before the next
    paint, so readers never see the previous page's scroll offset on the new
    page. In a windowing toolkit this is a post-layout, pre-present hook. The
    session itself never schedules rendering.
    """

    def present(self, page: PageDescriptor | None, state: NavigationState) -> None:
        """Lay out ``page`` with the navigation chrome described by ``state``."""
        ...

    def reset_transient_state(self) -> None:
        """Reset page-local view state such as the scroll offset."""
        ...


class ViewSession:
    """Hold one issue snapshot, its two projections, and the reader's cursor.

    The session is rebuilt from scratch through :meth:`refresh` whenever the
    document or thumbnail configuration changes; the projections are never
    patched in place.

    Examples
    --------
    >>> from issue_pages.config import Document
    >>> session = ViewSession(Document(id="i1", title="Spring"), locator="1")
    >>> session.current_page.kind
    'toc'
    >>> session.state.indicator
    'Page 2 of 2'
    """

    def __init__(
        self,
        document: Document,
        config: ThumbnailConfig | None = None,
        *,
        locator: str | None = None,
        resolver: ThumbnailResolver = DEFAULT_RESOLVER,
    ) -> None:
        self.document = document
        self.config = config
        self._resolver = resolver
        self.projection: PageProjection = project_pages(
            document, config, resolver=resolver
        )
        self.controller = NavigationController(self.projection.total, locator)

    @property
    def absolute_pages(self) -> tuple[PageDescriptor, ...]:
        return self.projection.absolute

    @property
    def visible_pages(self) -> tuple[PageDescriptor, ...]:
        return self.projection.visible

    @property
    def state(self) -> NavigationState:
        """Return the current navigation snapshot."""
        return self.controller.state()

    @property
    def current_page(self) -> PageDescriptor | None:
        """Return the visible page under the cursor, or ``None`` when none is visible."""
        if not self.projection.visible:
            return None
        return self.projection.visible[self.controller.ordinal]

    def navigate(self, ordinal: int) -> str:
        """Move the cursor to ``ordinal`` (clamped) and return the new locator."""
        return self.controller.navigate(ordinal)

    def go_next(self) -> str:
        return self.controller.go_next()

    def go_prev(self) -> str:
        return self.controller.go_prev()

    def refresh(self, document: Document, config: ThumbnailConfig | None) -> None:
        """Re-run the projection for new inputs and re-clamp the cursor.

        The cursor keeps its ordinal when it is still in range; ordinals are
        positional, so the page at that ordinal may differ after a hidden-set
        edit.
        """
        self.document = document
        self.config = config
        self.projection = project_pages(document, config, resolver=self._resolver)
        self.controller.resize(self.projection.total)


__all__ = ["ViewSession", "ViewerHost"]
