"""
pressflow: structured facts from press-release markup.

Press releases from the news-distribution feed arrive as loosely
structured HTML whose footers differ from publisher to publisher.  This
package turns one release body into a typed result.

The high-level flow is:

1. **feed** – Load a saved feed item (or a raw HTML body) into a
   `PressRelease`.  Network access is left to other tools.
2. **extract** – Normalize the markup, locate the contact, about and
   regulatory footers, classify contact lines and group them into
   `Contact` records, and split the body into titled sections.  The
   result is an immutable `ExtractedContent`.
3. **report** – Render the extracted content as a readable text report.
4. **cli** – Command line entry point wiring together the above.
"""

from .extract import Contact, ExtractedContent, Section, extract_content  # noqa: F401
