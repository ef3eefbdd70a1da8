"""
Structured content of one press release.

`extract_content` is the single entry point of the extractor.  It
parses the markup once and hands the tree to each stage:

* contacts: located by `CONTACT_STRATEGIES`, classified line by line and
  grouped by the contact assembler;
* about company: located by `ABOUT_STRATEGIES`;
* regulatory disclosure: the regulatory footer;
* certified adviser: looked up in the normalized text of the whole
  document;
* sections: headings and the text under them.

The function is total.  Markup that matches none of the known publisher
conventions yields empty lists and ``None`` values, never an exception.
"""

from __future__ import annotations

import logging

from .contacts import assemble_contacts
from .lines import classify_block
from .locate import ABOUT_STRATEGIES, CONTACT_STRATEGIES, locate
from .scalars import find_certified_adviser, find_regulatory_disclosure
from .schema import ExtractedContent
from .sections import segment_sections
from .text import parse_markup, render_text

logger = logging.getLogger(__name__)


def extract_content(html: str) -> ExtractedContent:
    """Extract contacts, boilerplate and sections from release markup.

    Args:
        html: Body markup of one press release.  May be empty or
            malformed.

    Returns:
        An immutable `ExtractedContent`.
    """
    document = parse_markup(html)

    contact_block = locate(document, CONTACT_STRATEGIES)
    lines = classify_block(contact_block.text if contact_block else None)
    contacts = assemble_contacts(lines).contacts

    about = locate(document, ABOUT_STRATEGIES)
    sections = segment_sections(document)

    content = ExtractedContent(
        contacts=tuple(contacts),
        about_company=about.text if about is not None else None,
        certified_adviser=find_certified_adviser(render_text(document)),
        regulatory_disclosure=find_regulatory_disclosure(document),
        sections=tuple(sections),
    )
    logger.debug(
        "Extracted %d contacts and %d sections (contact block: %s)",
        len(content.contacts),
        len(content.sections),
        contact_block.strategy if contact_block else "none",
    )
    return content
