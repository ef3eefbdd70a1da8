"""End-to-end tests for `extract_content` on publisher layouts."""

from __future__ import annotations

import threading

from pressflow.extract import Contact, ExtractedContent, Section, extract_content

import releases


def test_empty_input() -> None:
    content = extract_content("")
    assert content == ExtractedContent(
        contacts=(), about_company=None, certified_adviser=None, regulatory_disclosure=None, sections=()
    )


def test_garbage_input_does_not_raise() -> None:
    for html in ["<<<>>>", "</div></div>", "<div class='mfn-footer", "&amp;&&", "<strong>contact", "\x00\x01"]:
        assert isinstance(extract_content(html), ExtractedContent)


def test_labeled_footer_release() -> None:
    content = extract_content(releases.LABELED_FOOTER)
    assert content.contacts == (
        Contact(name="Jane Doe", role="CEO", email="jane.doe@egetis.com", phone="+46 70 123 45 67"),
        Contact(name="John Smith", role="CFO", email="john.smith@egetis.com", phone="+46 70 765 43 21"),
    )
    assert content.about_company == "About Egetis\n\nEgetis Therapeutics is a pharmaceutical company."
    assert content.regulatory_disclosure.startswith("This information is information")
    assert content.certified_adviser is None
    assert [s.heading for s in content.sections] == ["Q1 Results", "Outlook"]


def test_hashed_footer_release() -> None:
    content = extract_content(releases.HASHED_FOOTER)
    assert content.contacts == (
        Contact(
            name="Hexicon's Communications Department",
            email="communications@hexicongroup.com",
            phone="+46 8 000 00 00",
        ),
    )
    assert content.about_company == "About Hexicon\n\nHexicon is a floating wind developer."
    assert content.regulatory_disclosure is None
    assert content.sections == ()


def test_bare_footer_release() -> None:
    content = extract_content(releases.BARE_FOOTER)
    assert content.contacts == (
        Contact(
            name="Anna Svensson",
            role="Head of Communications",
            email="anna.svensson@sivers.com",
            phone="+46 8 123 456 78",
        ),
    )
    assert content.about_company is None


def test_inline_contacts_release() -> None:
    content = extract_content(releases.INLINE_CONTACTS)
    assert content.contacts == (
        Contact(
            name="Fredrik Trulsson",
            role="Verkställande direktör, Nattaro Labs AB",
            email="fredrik.trulsson@nattarolabs.se",
            phone="+46-73 517 58 33",
        ),
    )
    assert content.about_company.startswith("Om Nattaro Labs")
    assert content.certified_adviser == "FNCA Sweden AB, info@fnca.se, +46 8 528 00 399"


def test_department_release() -> None:
    content = extract_content(releases.DEPARTMENTS)
    assert [c.name for c in content.contacts] == ["Anna Berg", "Per Ek"]
    assert content.contacts[0].role == "Kommunikationschef"


def test_labeled_footer_beats_inline_contacts() -> None:
    html = (
        "<p>For questions, <strong>contact us</strong> at any time.</p>"
        "<p>Bob Body, Press Officer<br>bob@example.com</p>\n" + releases.LABELED_FOOTER
    )
    names = [c.name for c in extract_content(html).contacts]
    assert names == ["Jane Doe", "John Smith"]


def test_extraction_is_idempotent() -> None:
    assert extract_content(releases.INLINE_CONTACTS) == extract_content(releases.INLINE_CONTACTS)


def test_result_is_immutable_and_serializable() -> None:
    content = extract_content(releases.LABELED_FOOTER)
    data = content.to_dict()
    assert data["contacts"][0] == {
        "name": "Jane Doe",
        "role": "CEO",
        "email": "jane.doe@egetis.com",
        "phone": "+46 70 123 45 67",
    }
    assert data["sections"][1] == {"heading": "Outlook", "text": "We expect continued growth & stable margins."}
    assert data["certified_adviser"] is None
    try:
        content.about_company = "changed"  # type: ignore[misc]
    except AttributeError:
        pass
    else:  # pragma: no cover
        raise AssertionError("ExtractedContent should be frozen")


def test_parallel_extraction_gives_same_results() -> None:
    documents = [releases.LABELED_FOOTER, releases.HASHED_FOOTER, releases.INLINE_CONTACTS] * 4
    expected = [extract_content(html) for html in documents]
    results = [None] * len(documents)

    def work(index: int) -> None:
        results[index] = extract_content(documents[index])

    threads = [threading.Thread(target=work, args=(i,)) for i in range(len(documents))]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert results == expected


def test_section_dataclass_fields() -> None:
    section = Section(heading="Outlook", text="Growth.")
    assert (section.heading, section.text) == ("Outlook", "Growth.")


def test_deeply_nested_markup() -> None:
    assert extract_content("<div>" * 3000 + "Body" + "</div>" * 3000) == ExtractedContent()
    html = (
        '<div class="mfn-footer mfn-contacts">'
        + "<div>" * 2000
        + "<p>Jane Doe, CEO<br>jane@x.com</p>"
        + "</div>" * 2000
        + "</div>"
    )
    assert extract_content(html).contacts == (Contact(name="Jane Doe", role="CEO", email="jane@x.com"),)
