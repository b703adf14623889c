"""Common literal values used across issue_pages.

These constants keep default page labels, the locator query parameter, and
shell filenames centralized so the page builder, the viewer shell, and tests
import the same values without drifting. Intended for internal use within the
issue_pages package.

Examples
--------
>>> from issue_pages import _constants
>>> _constants.SECTION_LABEL_TEMPLATE.format(number=3)
'Section 3'
>>> _constants.SHELL_PAGE_TEMPLATE.format(locator="4")
'page-4.html'
"""

COVER_LABEL = "Cover"
TOC_LABEL = "Table of Contents"
NOTE_LABEL = "Editor's Note"
SECTION_LABEL_TEMPLATE = "Section {number}"

LOCATOR_PARAM = "page"
INDICATOR_TEMPLATE = "Page {number} of {total}"

SHELL_INDEX_FILENAME = "index.html"
SHELL_PAGE_TEMPLATE = "page-{locator}.html"
