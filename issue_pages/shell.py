"""Render a static viewer shell for an issue.

The shell is the host side of a view session in its simplest form: one HTML
file per visible page carrying the thumbnail strip, previous/next arrows, the
``Page X of N`` indicator, and a minimal page body. Section types get a
placeholder body; their visual design belongs to the section renderers.

File names follow the locator encoding, so the first page is ``index.html``
and every other page is ``page-<locator>.html``.

Typical usage pairs the loader with the builder:

>>> from pathlib import Path
>>> from issue_pages.config import load_issue
>>> from issue_pages.shell import ViewerShellBuilder
>>> bundle = load_issue(Path("issues/spring.yaml"))  # doctest: +SKIP
>>> ViewerShellBuilder(bundle, output_dir=Path("public/spring")).run()  # doctest: +SKIP
[PosixPath('public/spring/index.html'), ...]
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import markdown

from ._constants import SHELL_INDEX_FILENAME, SHELL_PAGE_TEMPLATE
from .config import DEFAULT_THUMBNAIL_CONFIG
from .navigation import encode_locator
from .pages import build_toc_entries
from .viewer import ViewSession

if typ.TYPE_CHECKING:
    from .config import IssueBundle
    from .pages import PageDescriptor


def shell_filename(ordinal: int) -> str:
    """Return the shell file name for a visible ordinal."""
    locator = encode_locator(ordinal)
    if not locator:
        return SHELL_INDEX_FILENAME
    return SHELL_PAGE_TEMPLATE.format(locator=locator)


class ViewerShellBuilder:
    """Write one themed HTML file per visible page of an issue."""

    def __init__(
        self,
        bundle: IssueBundle,
        *,
        output_dir: Path,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        bundle : IssueBundle
            Issue document and optional thumbnail configuration.
        output_dir : Path
            Directory receiving the generated HTML files.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``issue_pages/templates``.
        """
        self.bundle = bundle
        self.output_dir = output_dir
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("viewer_page.jinja")
        self._markdown_extensions = ["sane_lists", "tables"]

    def run(self) -> list[Path]:
        """Render every visible page and return the written paths in page order."""
        session = ViewSession(self.bundle.document, self.bundle.thumbnails)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        strip = [
            {"page": page, "href": shell_filename(page.ordinal)}
            for page in session.visible_pages
        ]
        toc_links = self._toc_links(session)
        note_html = self._render_note()
        settings = self.bundle.thumbnails or DEFAULT_THUMBNAIL_CONFIG

        written: list[Path] = []
        for page in session.visible_pages:
            session.navigate(page.ordinal)
            state = session.state
            context = {
                "issue": self.bundle.document,
                "page": page,
                "state": state,
                "strip": strip,
                "aspect_ratio": settings.aspect_ratio,
                "layout": settings.layout,
                "prev_href": shell_filename(state.ordinal - 1)
                if state.can_go_prev
                else None,
                "next_href": shell_filename(state.ordinal + 1)
                if state.can_go_next
                else None,
                "toc_links": toc_links,
                "note_html": note_html,
            }
            html = self.template.render(**context)
            if not html.endswith("\n"):
                html += "\n"
            output_path = self.output_dir / shell_filename(page.ordinal)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        return written

    def _toc_links(self, session: ViewSession) -> list[dict[str, str | None]]:
        """Pair TOC entries with shell links; hidden sections carry no link."""
        visible_by_section: dict[str, PageDescriptor] = {
            page.section.id: page
            for page in session.visible_pages
            if page.section is not None
        }
        links: list[dict[str, str | None]] = []
        for entry in build_toc_entries(self.bundle.document):
            target = visible_by_section.get(entry.section_id)
            links.append(
                {
                    "title": entry.title,
                    "subtitle": entry.subtitle,
                    "href": shell_filename(target.ordinal) if target else None,
                }
            )
        return links

    def _render_note(self) -> str:
        text = (self.bundle.document.note or "").strip()
        if not text:
            return ""
        return markdown(
            text, extensions=self._markdown_extensions, output_format="html5"
        )


__all__ = ["ViewerShellBuilder", "shell_filename"]
