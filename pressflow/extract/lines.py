"""
Line classification for contact blocks.

A located contact block is split into lines, separator and boilerplate
opener lines are dropped, and every remaining line is given exactly one
`LineTag`.  Tags are assigned from `LINE_RULES`, an ordered table of
named rules; the first rule whose predicate accepts the line wins.  Each
rule also carries an extraction function that pulls the useful value out
of a line with that shape (the bare address of an email line, the number
of a phone line, the name/role pair of a "Name, Role" line).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .text import split_lines

UPPER = "A-ZÅÄÖÆØÉÈÊÜ"

EMAIL_LINE = re.compile(r"^(?:E-?(?:mail|post):\s*)?[\w.+-]+@[\w.-]+\.\w+$", re.I)
EMAIL_IN_TEXT = re.compile(r"([\w.+-]+@[\w.-]+\.\w+)")
PHONE_LABEL = re.compile(r"^(?:Phone|Tel(?:efon)?|Mobile?)[:.]?\s*", re.I)
PHONE_LINE = re.compile(r"^(?:(?:Phone|Tel(?:efon)?|Mobile?)[:.]?\s*)?[+0][\s()\d-]{7,}", re.I)
PHONE_IN_TEXT = re.compile(r"([+0][\s()\d-]{7,})")
FIELD_LABEL = re.compile(r"^(?:E-?(?:mail|post)|Phone|Tel(?:efon)?|Mobile?)[:.]?\s*$", re.I)
NAME_WITH_ROLE = re.compile(rf"^([{UPPER}][\w\s.-]{{1,50}}),\s*(.+?)$")
DEPARTMENT_HEADER = re.compile(
    r"^(?:Mediakontakt|Företagskontakt|Investor Relations|Pressansvarig|"
    r"Press\s*contact|Media\s*contact|Communications?\s*Department)",
    re.I,
)
CAPITALIZED = re.compile(rf"^[{UPPER}]")

_SEPARATOR = re.compile(r"^(?:-+|_+)$")
_OPENER = re.compile(r"^(?:FOR (?:MORE|FURTHER)|För (?:mer|ytterligare|vidare)|KONTAKT|Contact)", re.I)

MAX_NAME_ROLE_LINE = 200


class LineTag(Enum):
    """Shape of a single contact-block line."""

    EMAIL = "bare-email"
    PHONE = "bare-phone"
    NAME_WITH_ROLE = "name-with-role"
    DEPARTMENT = "department-header"
    CAPITALIZED = "standalone-capitalized"
    NOISE = "noise"


def is_email(line: str) -> bool:
    return bool(EMAIL_LINE.match(line))


def is_phone(line: str) -> bool:
    return bool(PHONE_LINE.match(line))


def is_field_label(line: str) -> bool:
    return bool(FIELD_LABEL.match(line))


def is_name_with_role(line: str) -> bool:
    return len(line) <= MAX_NAME_ROLE_LINE and bool(NAME_WITH_ROLE.match(line))


def is_department_header(line: str) -> bool:
    return bool(DEPARTMENT_HEADER.match(line))


def is_capitalized(line: str) -> bool:
    return bool(CAPITALIZED.match(line))


def extract_email(line: str) -> str:
    """The address on an email line, without any label."""
    match = EMAIL_IN_TEXT.search(line)
    return match.group(1) if match else line


def extract_phone(line: str) -> str:
    """The number on a phone line, without any label."""
    return PHONE_LABEL.sub("", line).strip()


def split_name_role(line: str) -> Tuple[str, str]:
    """Split ``"Jane Doe, CEO"`` into ``("Jane Doe", "CEO")``."""
    match = NAME_WITH_ROLE.match(line)
    if match is None:
        return line.strip(), ""
    return match.group(1).strip(), match.group(2).strip()


def _same(line: str) -> str:
    return line


@dataclass(frozen=True)
class LineRule:
    """A named line shape: how to recognise it and what to extract."""

    tag: LineTag
    matches: Callable[[str], bool]
    extract: Callable[[str], object]


LINE_RULES = (
    LineRule(LineTag.EMAIL, is_email, extract_email),
    LineRule(LineTag.PHONE, is_phone, extract_phone),
    # "E-mail:" with the value on the following line
    LineRule(LineTag.NOISE, is_field_label, _same),
    LineRule(LineTag.NAME_WITH_ROLE, is_name_with_role, split_name_role),
    LineRule(LineTag.DEPARTMENT, is_department_header, _same),
    LineRule(LineTag.CAPITALIZED, is_capitalized, _same),
)


@dataclass(frozen=True)
class ClassifiedLine:
    """A normalized line and its tag."""

    text: str
    tag: LineTag

    @property
    def is_detail(self) -> bool:
        """Email or phone line."""
        return self.tag in (LineTag.EMAIL, LineTag.PHONE)

    @property
    def opens_entry(self) -> bool:
        """Capitalized line that is neither a detail nor noise.

        Lookahead windows stop at such a line because it most likely
        starts the next contact.
        """
        return self.tag in _ENTRY_TAGS and is_capitalized(self.text)

    def value(self) -> object:
        """Value pulled out by the rule that tagged this line.

        Lines that fell through every rule are returned as they are.
        """
        rule = _RULE_BY_TAG.get(self.tag)
        return rule.extract(self.text) if rule is not None else self.text


_ENTRY_TAGS = (LineTag.NAME_WITH_ROLE, LineTag.DEPARTMENT, LineTag.CAPITALIZED)

_RULE_BY_TAG = {rule.tag: rule for rule in LINE_RULES}


def classify_line(line: str) -> LineTag:
    """Tag a single line using the first matching rule."""
    for rule in LINE_RULES:
        if rule.matches(line):
            return rule.tag
    return LineTag.NOISE


def is_boilerplate(line: str) -> bool:
    """Separators ("-----") and block openers ("För mer information")."""
    return bool(_SEPARATOR.match(line) or _OPENER.match(line))


def classify_block(text: Optional[str]) -> List[ClassifiedLine]:
    """Split a normalized block into tagged lines."""
    if not text:
        return []
    return [
        ClassifiedLine(line, classify_line(line))
        for line in split_lines(text)
        if not is_boilerplate(line)
    ]
