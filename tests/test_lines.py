"""Tests for contact-line classification."""

from __future__ import annotations

import pytest  # type: ignore

from pressflow.extract.lines import (
    LINE_RULES,
    ClassifiedLine,
    LineTag,
    classify_block,
    classify_line,
    extract_email,
    extract_phone,
    split_name_role,
)


@pytest.mark.parametrize(
    "line, tag",
    [
        ("jane@example.com", LineTag.EMAIL),
        ("E-mail: jane@example.com", LineTag.EMAIL),
        ("E-post: anna.berg@example.se", LineTag.EMAIL),
        ("+46 70 123 45 67", LineTag.PHONE),
        ("Tel: 08-123 456 78", LineTag.PHONE),
        ("Telefon: +46 (0)8 123 45", LineTag.PHONE),
        ("E-mail:", LineTag.NOISE),
        ("Phone:", LineTag.NOISE),
        ("Jane Doe, CEO", LineTag.NAME_WITH_ROLE),
        ("Mediakontakt, Jane Doe", LineTag.NAME_WITH_ROLE),
        ("Investor Relations", LineTag.DEPARTMENT),
        ("Press contact", LineTag.DEPARTMENT),
        ("Communications Department", LineTag.DEPARTMENT),
        ("Anna Berg", LineTag.CAPITALIZED),
        ("Åsa Öberg", LineTag.CAPITALIZED),
        ("visit our website for more", LineTag.NOISE),
        ("+46 70", LineTag.NOISE),
    ],
)
def test_classify_line(line: str, tag: LineTag) -> None:
    assert classify_line(line) is tag


def test_rules_are_ordered_by_priority() -> None:
    assert [rule.tag for rule in LINE_RULES] == [
        LineTag.EMAIL,
        LineTag.PHONE,
        LineTag.NOISE,
        LineTag.NAME_WITH_ROLE,
        LineTag.DEPARTMENT,
        LineTag.CAPITALIZED,
    ]


def test_long_lines_are_not_name_with_role() -> None:
    prose = "Acme, " + "a very long sentence " * 10
    assert len(prose) > 200
    assert classify_line(prose) is LineTag.CAPITALIZED


def test_name_segment_is_limited() -> None:
    line = "A" + "b" * 60 + ", CEO"
    assert classify_line(line) is LineTag.CAPITALIZED


def test_extractors() -> None:
    assert extract_email("E-mail: jane@example.com") == "jane@example.com"
    assert extract_phone("Tel: +46 8 123 45 67") == "+46 8 123 45 67"
    assert extract_phone("Mobile: 070-123 45 67") == "070-123 45 67"
    assert split_name_role("John Smith, CFO, Acme AB") == ("John Smith", "CFO, Acme AB")


def test_classified_line_value_uses_rule_extractor() -> None:
    assert ClassifiedLine("Jane Doe, CEO", LineTag.NAME_WITH_ROLE).value() == ("Jane Doe", "CEO")
    assert ClassifiedLine("Email: a@b.se", LineTag.EMAIL).value() == "a@b.se"


def test_opens_entry() -> None:
    assert ClassifiedLine("Anna Berg", LineTag.CAPITALIZED).opens_entry
    assert ClassifiedLine("Jane Doe, CEO", LineTag.NAME_WITH_ROLE).opens_entry
    assert not ClassifiedLine("E-mail:", LineTag.NOISE).opens_entry
    assert not ClassifiedLine("Jane@example.com", LineTag.EMAIL).opens_entry
    assert not ClassifiedLine("press contact", LineTag.DEPARTMENT).opens_entry


def test_classify_block_drops_separators_and_openers() -> None:
    block = "\n".join(
        [
            "FOR MORE INFORMATION PLEASE CONTACT",
            "-----",
            "KONTAKT",
            "För mer information, kontakta:",
            "Jane Doe, CEO",
            "________",
            "jane@example.com",
        ]
    )
    lines = classify_block(block)
    assert [line.text for line in lines] == ["Jane Doe, CEO", "jane@example.com"]
    assert [line.tag for line in lines] == [LineTag.NAME_WITH_ROLE, LineTag.EMAIL]


def test_classify_block_handles_empty() -> None:
    assert classify_block(None) == []
    assert classify_block("") == []
