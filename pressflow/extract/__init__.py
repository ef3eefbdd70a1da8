"""
Structured-content extraction for press-release markup.

The package turns the body markup of one press release into an
`ExtractedContent` value.  The stages, leaf first, are:

* `text` – markup to normalized plain text;
* `locate` – ordered cascades that find the contact, about-company and
  regulatory footers;
* `lines` – classification of contact-block lines by shape;
* `contacts` – grouping of classified lines into `Contact` records;
* `sections` – heading-delimited body sections;
* `scalars` – certified adviser and regulatory disclosure lookups.

`content.extract_content` wires the stages together.
"""

from .schema import Contact, ExtractedContent, Section  # noqa: F401
from .content import extract_content  # noqa: F401
