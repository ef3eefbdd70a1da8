"""Tests for section segmentation and the single-value lookups."""

from __future__ import annotations

from pressflow.extract.scalars import find_certified_adviser, find_regulatory_disclosure
from pressflow.extract.schema import Section
from pressflow.extract.sections import segment_sections
from pressflow.extract.text import parse_markup

import releases


def test_two_headings_in_document_order() -> None:
    sections = segment_sections(parse_markup(releases.LABELED_FOOTER))
    assert sections == [
        Section(heading="Q1 Results", text="Revenue grew 12% compared with the same quarter last year."),
        Section(heading="Outlook", text="We expect continued growth & stable margins."),
    ]


def test_heading_followed_only_by_footer_is_dropped() -> None:
    html = (
        '<p><strong class="mfn-heading-1">Summary</strong></p><p>Body text.</p>'
        '<p><strong class="mfn-heading-2">Contacts</strong></p>'
        '<div class="mfn-footer mfn-contacts"><p>Jane Doe, CEO</p></div>'
    )
    assert segment_sections(parse_markup(html)) == [Section(heading="Summary", text="Body text.")]


def test_unterminated_section_runs_to_end() -> None:
    html = '<strong class="mfn-heading-1">Background</strong><p>The company was founded'
    assert segment_sections(parse_markup(html)) == [
        Section(heading="Background", text="The company was founded")
    ]


def test_repeated_headings_are_kept() -> None:
    html = (
        '<strong class="mfn-heading-2">Update</strong><p>First.</p>'
        '<strong class="mfn-heading-2">Update</strong><p>Second.</p>'
    )
    assert [s.text for s in segment_sections(parse_markup(html))] == ["First.", "Second."]


def test_other_strong_elements_do_not_start_sections() -> None:
    html = '<p><strong>Highlights</strong></p><p>Text.</p><strong class="mfn-heading-3">Minor</strong><p>x</p>'
    assert segment_sections(parse_markup(html)) == []


def test_certified_adviser_until_about_section() -> None:
    text = "Body.\n\nCertified Adviser:\nFNCA Sweden AB, info@fnca.se, +46 8 528 00 399\nAbout Climeon\nClimeon is ..."
    assert find_certified_adviser(text) == "FNCA Sweden AB, info@fnca.se, +46 8 528 00 399"


def test_certified_adviser_until_blank_line() -> None:
    text = "Certified Adviser\nRedeye AB\ncertifiedadviser@redeye.se\n\nOther text"
    assert find_certified_adviser(text) == "Redeye AB\ncertifiedadviser@redeye.se"


def test_certified_adviser_needs_a_line_break_after_label() -> None:
    assert find_certified_adviser("The company's Certified Adviser is FNCA.") is None
    assert find_certified_adviser("") is None


def test_regulatory_disclosure() -> None:
    text = find_regulatory_disclosure(parse_markup(releases.LABELED_FOOTER))
    assert text is not None and "EU Market Abuse Regulation" in text
    assert find_regulatory_disclosure(parse_markup(releases.BARE_FOOTER)) is None
