"""Cyclopts CLI entrypoint for inspecting and rendering paginated issues.

The ``issue-pages`` console script loads an issue YAML file, assembles its
pages, and either lists them, resolves a deep-link locator to the page it
addresses, or writes the static viewer shell. Options can also be supplied
through ``INPUT_*`` environment variables, which keeps CI invocations short.

Examples
--------
List the visible pages of an issue:

>>> from issue_pages.cli import app
>>> app(["pages", "--issue", "issues/spring.yaml"])  # doctest: +SKIP

Render the viewer shell into a custom directory:

>>> app(
...     ["render", "--issue", "issues/spring.yaml", "--output-dir", "dist"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .config import load_issue
from .pages import PageDescriptor, build_pages
from .shell import ViewerShellBuilder
from .viewer import ViewSession

DEFAULT_ISSUE = Path("config/issue.yaml")
DEFAULT_OUTPUT_DIR = Path("public")

app = App(name="issue-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _page_payload(page: PageDescriptor) -> dict[str, typ.Any]:
    """Return the JSON-ready mapping for a page descriptor."""
    return {
        "ordinal": page.ordinal,
        "kind": page.kind,
        "title": page.title,
        "subtitle": page.subtitle,
        "thumbnail": page.thumbnail,
        "section_id": page.section.id if page.section else None,
        "section_type": page.section.type if page.section else None,
    }


def _format_page_line(page: PageDescriptor) -> str:
    thumbnail = page.thumbnail or f"[{page.fallback_label}]"
    return f"{page.ordinal:>3}  {page.kind:<7}  {page.title}  {thumbnail}"


@app.command(help="List the pages of an issue in navigation order.")
def pages(
    *,
    issue: typ.Annotated[
        Path, Parameter(help="Path to the issue YAML", env_var="INPUT_ISSUE")
    ] = DEFAULT_ISSUE,
    include_hidden: typ.Annotated[
        bool,
        Parameter(
            name=["--all", "--include-hidden"],
            help="List the absolute page list, hidden pages included",
        ),
    ] = False,
    as_json: typ.Annotated[
        bool, Parameter(name="--json", help="Emit the page list as JSON")
    ] = False,
) -> None:
    """Print the visible (or absolute) page list for an issue.

    Parameters
    ----------
    issue : Path, optional
        Issue YAML file (overridable via ``INPUT_ISSUE``).
    include_hidden : bool, optional
        When ``True`` list every page, including those hidden in the
        thumbnail configuration.
    as_json : bool, optional
        Emit a JSON array instead of aligned text lines.
    """
    bundle = load_issue(issue)
    page_list = build_pages(bundle.document, bundle.thumbnails, include_hidden)
    if as_json:
        encoded = msgspec_json.encode([_page_payload(page) for page in page_list])
        print(msgspec_json.format(encoded, indent=2).decode("utf-8"))
        return
    for page in page_list:
        print(_format_page_line(page))


@app.command(help="Resolve a page locator to the page it addresses.")
def locate(
    locator: typ.Annotated[
        str, Parameter(help="Locator text, e.g. the page query value")
    ] = "",
    *,
    issue: typ.Annotated[
        Path, Parameter(help="Path to the issue YAML", env_var="INPUT_ISSUE")
    ] = DEFAULT_ISSUE,
) -> None:
    """Decode ``locator`` against the visible page list and print the result.

    Malformed or out-of-range locators are clamped, matching what a reader
    following the link would see.
    """
    bundle = load_issue(issue)
    session = ViewSession(bundle.document, bundle.thumbnails, locator=locator)
    page = session.current_page
    state = session.state
    if page is None:
        print("no visible pages")
        return
    print(f"{state.indicator}: {page.title} ({page.kind})")
    print(f"locator: {state.locator or '(none)'}")


@app.command(help="Write the static viewer shell for an issue.")
def render(
    *,
    issue: typ.Annotated[
        Path, Parameter(help="Path to the issue YAML", env_var="INPUT_ISSUE")
    ] = DEFAULT_ISSUE,
    output_dir: typ.Annotated[
        Path, Parameter(help="Output folder", env_var="INPUT_OUTPUT_DIR")
    ] = DEFAULT_OUTPUT_DIR,
) -> None:
    """Render one HTML file per visible page and log the written paths."""
    bundle = load_issue(issue)
    written = ViewerShellBuilder(bundle, output_dir=output_dir).run()
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``issue-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
