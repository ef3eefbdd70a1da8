"""
Plain-text report of an extracted release.

`render_report` lays out the release header, the extracted contacts,
about-company text, certified adviser, regulatory disclosure, sections
and attachments in the format printed by ``pressflow report``.  Long
texts are cut to the configured preview lengths.
"""

from __future__ import annotations

from typing import List

from .extract.schema import ExtractedContent
from .feed.item import PressRelease

RULE = "=" * 70
NONE_FOUND = "  (none found)"


def _preview(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def render_report(
    release: PressRelease,
    content: ExtractedContent,
    *,
    about_limit: int = 500,
    section_limit: int = 200,
) -> str:
    """Render the report for one release.

    Args:
        release: Release metadata (company, title, attachments ...).
        content: Result of `extract_content` on ``release.html``.
        about_limit: Characters of about-company text to show.
        section_limit: Characters of each section's text to show.

    Returns:
        The report text, newline separated, without a trailing newline.
    """
    out: List[str] = [
        RULE,
        f"Company: {release.company or '-'}",
        f"Title:   {release.title or '-'}",
        f"Date:    {release.timestamp or '-'}",
        f"Type:    {release.type or '-'} | Lang: {release.lang or '-'}",
        f"Tags:    {', '.join(release.tags) or '-'}",
        RULE,
        "",
        f"--- Contacts ({len(content.contacts)}) ---",
    ]
    if not content.contacts:
        out.append(NONE_FOUND)
    for contact in content.contacts:
        out.append(f"  Name:  {contact.name}")
        if contact.role:
            out.append(f"  Role:  {contact.role}")
        if contact.email:
            out.append(f"  Email: {contact.email}")
        if contact.phone:
            out.append(f"  Phone: {contact.phone}")
        out.append("")

    out.append("--- About Company ---")
    out.append(f"  {_preview(content.about_company, about_limit)}" if content.about_company else NONE_FOUND)

    if content.certified_adviser:
        out.extend(["", "--- Certified Adviser ---", f"  {content.certified_adviser}"])

    out.extend(["", "--- Regulatory Disclosure ---"])
    out.append(f"  {content.regulatory_disclosure}" if content.regulatory_disclosure else NONE_FOUND)

    out.extend(["", f"--- Sections ({len(content.sections)}) ---"])
    if not content.sections:
        out.append(NONE_FOUND)
    for section in content.sections:
        out.append(f"  [{section.heading}]")
        out.append(f"  {_preview(section.text, section_limit)}")
        out.append("")

    out.append(f"--- Attachments ({len(release.attachments)}) ---")
    if not release.attachments:
        out.append("  (none)")
    for attachment in release.attachments:
        out.append(f"  {attachment.title or '(untitled)'}")
        out.append(f"  URL:  {attachment.url}")
        out.append(f"  Tags: {', '.join(attachment.tags) or '-'}")
        out.append("")
    return "\n".join(out).rstrip("\n")
