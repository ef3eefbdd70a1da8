"""
Body sections.

Releases mark section titles with ``<strong class="mfn-heading-1">`` or
``<strong class="mfn-heading-2">``.  Each heading starts a section whose
body runs until the next heading of any level, the first footer div, or
the end of the document.
"""

from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup, Tag

from .locate import is_footer, is_heading
from .schema import Section
from .text import render_text_after

HEADING_CLASSES = ["mfn-heading-1", "mfn-heading-2"]

_WHITESPACE = re.compile(r"\s+")


def _section_end(tag: Tag) -> bool:
    return is_heading(tag) or is_footer(tag)


def segment_sections(document: BeautifulSoup) -> List[Section]:
    """Split the document body into (heading, text) pairs.

    Headings with no text after them (for instance a heading directly
    followed by the footers) are dropped.  Repeated headings are kept.
    """
    sections: List[Section] = []
    for heading in document.find_all("strong", class_=HEADING_CLASSES):
        title = _WHITESPACE.sub(" ", heading.get_text(" ", strip=True))
        body = render_text_after(heading, stop=_section_end)
        if title and body:
            sections.append(Section(heading=title, text=body))
    return sections
