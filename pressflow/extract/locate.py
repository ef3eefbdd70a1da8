"""
Footer and block location.

Publishers mark their contact, about-company and regulatory footers in
several incompatible ways.  Each region is therefore located by an
ordered tuple of matcher functions.  A matcher takes the parsed
document and returns the normalized text of the block it found, or
``None`` when its convention is not present.  `locate` runs the
matchers in order and the first one that matches wins; later matchers
are not evaluated.

A matcher that finds its element but no text inside it returns ``""``,
which still counts as a match.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from .text import render_text, render_text_after

logger = logging.getLogger(__name__)

Matcher = Callable[[BeautifulSoup], Optional[str]]

FOOTER_CLASS = "mfn-footer"

_HASHED_FOOTER = re.compile(r"mfn-[a-f0-9]+")
_CONTACT_KEYWORDS = re.compile(r"CONTACT|kontakta|INFORMATION", re.I)
_CONTACT_OPENERS = re.compile(
    r"(?:Mediakontakt|Företagskontakt|Investor Relations|Pressansvarig|"
    r"Press\s*contact|Media\s*contact|CONTACT|kontakta|INFORMATION)",
    re.I,
)
_INLINE_CONTACT_LABEL = re.compile(r"kontakt[a-zåäö]*|(?:please )?contact", re.I)
_ABOUT_OPENERS = re.compile(r"(?:Om|About)\s", re.I)


@dataclass(frozen=True)
class BlockMatch:
    """The block found by a cascade and the matcher that found it."""

    strategy: str
    text: str


def locate(document: BeautifulSoup, strategies: Sequence[Matcher]) -> Optional[BlockMatch]:
    """Run ``strategies`` in order and return the first match."""
    for strategy in strategies:
        text = strategy(document)
        if text is not None:
            logger.debug("Block located by %s", strategy.__name__)
            return BlockMatch(strategy=strategy.__name__, text=text)
    return None


# ---------------------------------------------------------------------------
# Footer helpers
# ---------------------------------------------------------------------------


def _classes(tag: Tag) -> List[str]:
    return list(tag.get("class") or [])


def _footers(document: BeautifulSoup) -> List[Tag]:
    """Footer divs in document order."""
    return [div for div in document.find_all("div") if _classes(div)[:1] == [FOOTER_CLASS]]


def _footer_kind(footer: Tag) -> Optional[str]:
    """Second class of a footer div (``mfn-contacts``, ``mfn-9f3a`` ...)."""
    classes = _classes(footer)
    return classes[1] if len(classes) > 1 else None


def _labeled_footer(document: BeautifulSoup, label: str) -> Optional[Tag]:
    for footer in _footers(document):
        kind = _footer_kind(footer)
        if kind is not None and kind.startswith(label):
            return footer
    return None


def _hashed_footers(document: BeautifulSoup) -> List[Tag]:
    return [
        footer
        for footer in _footers(document)
        if len(_classes(footer)) == 2 and _HASHED_FOOTER.fullmatch(_footer_kind(footer) or "")
    ]


def _bare_footers(document: BeautifulSoup) -> List[Tag]:
    return [footer for footer in _footers(document) if len(_classes(footer)) == 1]


def _leading_text(tag: Tag) -> str:
    return tag.get_text(" ", strip=True)


def is_footer(tag: Tag) -> bool:
    """True for any publisher footer div."""
    return tag.name == "div" and FOOTER_CLASS in _classes(tag)


def is_heading(tag: Tag) -> bool:
    """True for any ``mfn-heading*`` strong element."""
    return tag.name == "strong" and any(c.startswith("mfn-heading") for c in _classes(tag))


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


def labeled_contacts_footer(document: BeautifulSoup) -> Optional[str]:
    """``<div class="mfn-footer mfn-contacts">`` (e.g. Egetis)."""
    footer = _labeled_footer(document, "mfn-contacts")
    return render_text(footer) if footer is not None else None


def keyword_contacts_footer(document: BeautifulSoup) -> Optional[str]:
    """Hashed footer whose text mentions contacts (e.g. Climeon, Hexicon)."""
    for footer in _hashed_footers(document):
        if _CONTACT_KEYWORDS.search(footer.get_text()):
            return render_text(footer)
    return None


def bare_contacts_footer(document: BeautifulSoup) -> Optional[str]:
    """Class-less footer opening with a contact heading (e.g. Sivers)."""
    for footer in _bare_footers(document):
        if _CONTACT_OPENERS.match(_leading_text(footer)):
            return render_text(footer)
    return None


def inline_contacts(document: BeautifulSoup) -> Optional[str]:
    """Text after a bold "kontakta"/"contact" phrase in the body.

    The run ends at the next footer div or section heading.  Nested
    markup inside the bold element is allowed (e.g. Nattaro:
    ``<strong><span>kontakta:</span></strong>``).
    """
    for strong in document.find_all("strong"):
        if _INLINE_CONTACT_LABEL.search(strong.get_text()):
            return render_text_after(strong, stop=lambda tag: is_footer(tag) or is_heading(tag))
    return None


CONTACT_STRATEGIES = (
    labeled_contacts_footer,
    keyword_contacts_footer,
    bare_contacts_footer,
    inline_contacts,
)


# ---------------------------------------------------------------------------
# About company
# ---------------------------------------------------------------------------


def labeled_about_footer(document: BeautifulSoup) -> Optional[str]:
    """``<div class="mfn-footer mfn-about">``."""
    footer = _labeled_footer(document, "mfn-about")
    return render_text(footer) if footer is not None else None


def headed_about_footer(document: BeautifulSoup) -> Optional[str]:
    """Hashed footer that opens with "Om <company>" or "About <company>"."""
    for footer in _hashed_footers(document):
        if _ABOUT_OPENERS.match(_leading_text(footer)):
            return render_text(footer)
    return None


ABOUT_STRATEGIES = (labeled_about_footer, headed_about_footer)


# ---------------------------------------------------------------------------
# Regulatory disclosure
# ---------------------------------------------------------------------------


def regulatory_footer(document: BeautifulSoup) -> Optional[str]:
    """``<div class="mfn-footer mfn-regulatory">``."""
    footer = _labeled_footer(document, "mfn-regulatory")
    return render_text(footer) if footer is not None else None


REGULATORY_STRATEGIES = (regulatory_footer,)
