"""
Result types for the structured-content extractor.

An extraction run produces exactly one `ExtractedContent` value.  All
types here are frozen dataclasses and the sequences they hold are
tuples, so a result can be shared between threads or cached without
copying.  Absent values are always ``None`` so that callers can tell
"not found" apart from "found but empty".
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Contact:
    """A press or investor contact named in a release footer."""

    name: str
    role: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass(frozen=True)
class Section:
    """A titled content section of the release body."""

    heading: str
    text: str


@dataclass(frozen=True)
class ExtractedContent:
    """Everything the extractor found in one press release.

    Attributes:
        contacts: Contacts in the order their first line appeared.
        about_company: Company boilerplate ("Om ..." / "About ...").
        certified_adviser: Text following a "Certified Adviser" label.
        regulatory_disclosure: Text of the regulatory footer.
        sections: Titled body sections in document order.
    """

    contacts: Tuple[Contact, ...] = ()
    about_company: Optional[str] = None
    certified_adviser: Optional[str] = None
    regulatory_disclosure: Optional[str] = None
    sections: Tuple[Section, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-ready dictionary of the result."""
        data = asdict(self)
        data["contacts"] = list(data["contacts"])
        data["sections"] = list(data["sections"])
        return data
