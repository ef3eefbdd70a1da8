"""
Contact assembly.

The assembler makes a single forward pass over the classified lines of
a contact block.  At every line that has not yet been attributed to a
contact it tries four grouping patterns in order:

A. ``Name, Role`` (optionally with inline email/phone), followed by
   email and phone lines.
B. A department header ("Mediakontakt", "Investor Relations" ...)
   followed by a name, a title, email and phone.
C. A name line followed by a line carrying a job title.
D. A name or department line followed directly by an email line.

The first pattern that matches emits one `Contact` and marks every line
it used in the consumed mask, so no line (and in particular no phone
number or address) is ever attributed to two contacts.  Lines no
pattern accepts are skipped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .lines import (
    EMAIL_IN_TEXT,
    PHONE_IN_TEXT,
    UPPER,
    ClassifiedLine,
    LineTag,
)
from .schema import Contact

logger = logging.getLogger(__name__)

NAME_ROLE_LOOKAHEAD = 5
DEPARTMENT_LOOKAHEAD = 5
NAME_TITLE_LOOKAHEAD = 3

# Titles that may follow a name inside a department block.
DEPARTMENT_TITLE = re.compile(
    r"^(?:CEO|CFO|CTO|COO|VD|VP|Head|Chief|Director|Chef|Kommunikation|Finans)", re.I
)
# Title keywords that make a line read as the role of the name above it.
ROLE_KEYWORDS = re.compile(
    r"(?:VD|CEO|CFO|CTO|COO|VP|Head|Chief|Director|Chef|direktör|ansvarig|ordförande|"
    r"Chairman|Manager|Officer|Investor|Communications|IR\b)",
    re.I,
)
PERSON_NAME = re.compile(rf"^[{UPPER}][\w\s.-]+$")


@dataclass(frozen=True)
class _Match:
    """Outcome of a pattern at one index.

    ``contact`` is ``None`` when the pattern claimed the line but found
    nothing worth emitting; the line is then skipped.
    """

    contact: Optional[Contact]
    lines: Tuple[int, ...] = ()


@dataclass
class Assembly:
    """Contacts found in a block plus the bookkeeping that produced them.

    Attributes:
        contacts: Contacts in the order their first line appeared.
        spans: ``spans[k]`` holds the line indices used by ``contacts[k]``.
        consumed: ``consumed[i]`` is true once line ``i`` is attributed.
    """

    contacts: List[Contact] = field(default_factory=list)
    spans: List[Tuple[int, ...]] = field(default_factory=list)
    consumed: List[bool] = field(default_factory=list)


Pattern = Callable[[Sequence[ClassifiedLine], Sequence[bool], int], Optional[_Match]]


def _window(consumed: Sequence[bool], start: int, size: int) -> Iterator[int]:
    """Unconsumed indices in ``[start, start + size)``."""
    for j in range(start, min(start + size, len(consumed))):
        if not consumed[j]:
            yield j


def _tidy_role(role: str) -> str:
    # drop empty comma-separated pieces left behind by cut-out details
    return ", ".join(part.strip() for part in role.split(",") if part.strip())


def name_with_role(lines: Sequence[ClassifiedLine], consumed: Sequence[bool], i: int) -> Optional[_Match]:
    """Pattern A: ``"Name, Role[, email][, phone]"`` plus detail lines."""
    if lines[i].tag is not LineTag.NAME_WITH_ROLE:
        return None
    name, role = lines[i].value()
    email: Optional[str] = None
    phone: Optional[str] = None

    # Flat Capital style: "Name, CFO, name@example.com, +46 8 ..."
    inline_email = EMAIL_IN_TEXT.search(role)
    if inline_email:
        email = inline_email.group(1)
        role = _tidy_role(role.replace(inline_email.group(0), "", 1))
    inline_phone = PHONE_IN_TEXT.search(role)
    if inline_phone:
        phone = inline_phone.group(1).strip()
        role = _tidy_role(role.replace(inline_phone.group(0), "", 1))

    used = [i]
    for j in _window(consumed, i + 1, NAME_ROLE_LOOKAHEAD):
        line = lines[j]
        if email is None and line.tag is LineTag.EMAIL:
            email = line.value()
            used.append(j)
        elif phone is None and line.tag is LineTag.PHONE:
            phone = line.value()
            used.append(j)
        elif line.opens_entry:
            break
    return _Match(Contact(name=name, role=role or None, email=email, phone=phone), tuple(used))


def department_block(lines: Sequence[ClassifiedLine], consumed: Sequence[bool], i: int) -> Optional[_Match]:
    """Pattern B: ``"Mediakontakt\\nName\\nTitle\\nphone\\nemail"``."""
    if lines[i].tag is not LineTag.DEPARTMENT:
        return None
    department = lines[i].text
    name: Optional[str] = None
    role: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    used = [i]
    for j in _window(consumed, i + 1, DEPARTMENT_LOOKAHEAD):
        line = lines[j]
        if line.tag is LineTag.EMAIL:
            if email is None:
                email = line.value()
                used.append(j)
        elif line.tag is LineTag.PHONE:
            if phone is None:
                phone = line.value()
                used.append(j)
        elif line.tag is LineTag.DEPARTMENT:
            break
        elif name is None and line.opens_entry:
            if line.tag is LineTag.NAME_WITH_ROLE:
                name, role = line.value()
                role = role or None
            else:
                name = line.text
            used.append(j)
        elif name is not None and role is None and DEPARTMENT_TITLE.match(line.text):
            role = line.text
            used.append(j)

    if name is not None:
        return _Match(Contact(name=name, role=role or department, email=email, phone=phone), tuple(used))
    if email is not None:
        # no person under the header: the department itself is the contact
        return _Match(Contact(name=department, role=None, email=email, phone=phone), tuple(used))
    return _Match(None)


def name_then_title(lines: Sequence[ClassifiedLine], consumed: Sequence[bool], i: int) -> Optional[_Match]:
    """Pattern C: a name line followed by a title line (e.g. Nattaro).

    ``"Fredrik Trulsson\\nVerkställande direktör, Nattaro Labs AB\\n+46-73 ..."``
    """
    line = lines[i]
    if line.tag is not LineTag.CAPITALIZED or not PERSON_NAME.match(line.text):
        return None
    nxt = i + 1
    if nxt >= len(lines) or consumed[nxt]:
        return None
    title = lines[nxt]
    if title.is_detail or not ROLE_KEYWORDS.search(title.text):
        return None

    email: Optional[str] = None
    phone: Optional[str] = None
    used = [i, nxt]
    for j in _window(consumed, i + 2, NAME_TITLE_LOOKAHEAD):
        detail = lines[j]
        if email is None and detail.tag is LineTag.EMAIL:
            email = detail.value()
            used.append(j)
        elif phone is None and detail.tag is LineTag.PHONE:
            phone = detail.value()
            used.append(j)
        elif detail.opens_entry:
            break
    return _Match(Contact(name=line.text, role=title.text, email=email, phone=phone), tuple(used))


def name_then_email(lines: Sequence[ClassifiedLine], consumed: Sequence[bool], i: int) -> Optional[_Match]:
    """Pattern D: a name or department line directly followed by an email.

    ``"Hexicon's Communications Department\\ncommunications@hexicongroup.com"``
    """
    if lines[i].tag is not LineTag.CAPITALIZED:
        return None
    nxt = i + 1
    if nxt >= len(lines) or consumed[nxt] or lines[nxt].tag is not LineTag.EMAIL:
        return None
    used = [i, nxt]
    phone: Optional[str] = None
    after = i + 2
    if after < len(lines) and not consumed[after] and lines[after].tag is LineTag.PHONE:
        phone = lines[after].value()
        used.append(after)
    contact = Contact(name=lines[i].text, role=None, email=lines[nxt].value(), phone=phone)
    return _Match(contact, tuple(used))


PATTERNS: Tuple[Pattern, ...] = (
    name_with_role,
    department_block,
    name_then_title,
    name_then_email,
)


def assemble_contacts(lines: Sequence[ClassifiedLine]) -> Assembly:
    """Group classified lines into contacts.

    Args:
        lines: Output of `classify_block`.

    Returns:
        An `Assembly` with the contacts, the lines each one used and the
        final consumed mask.
    """
    assembly = Assembly(consumed=[False] * len(lines))
    for i in range(len(lines)):
        if assembly.consumed[i]:
            continue
        for pattern in PATTERNS:
            match = pattern(lines, assembly.consumed, i)
            if match is None:
                continue
            if match.contact is not None:
                for j in match.lines:
                    assembly.consumed[j] = True
                assembly.contacts.append(match.contact)
                assembly.spans.append(match.lines)
                logger.debug("%s matched line %d: %s", pattern.__name__, i, match.contact)
            break
    return assembly
