"""
Single-value lookups: certified adviser and regulatory disclosure.
"""

from __future__ import annotations

import re
from typing import Optional

from bs4 import BeautifulSoup

from .locate import REGULATORY_STRATEGIES, locate

# "Certified Adviser:" on its own line, then everything up to a blank
# line or the start of the "Om <company>" / "About <company>" boilerplate.
CERTIFIED_ADVISER = re.compile(
    r"(?i:certified adviser)[:\s]*\n(.*?)(?=\n\n|\b(?:Om|About) |\Z)",
    re.S,
)


def find_certified_adviser(text: str) -> Optional[str]:
    """Adviser text from the normalized full document, if labeled.

    Example: ``"FNCA Sweden AB, info@fnca.se, +46 8 528 00 399"``.
    """
    match = CERTIFIED_ADVISER.search(text)
    return match.group(1).strip() if match else None


def find_regulatory_disclosure(document: BeautifulSoup) -> Optional[str]:
    """Text of the regulatory footer, if the release has one."""
    block = locate(document, REGULATORY_STRATEGIES)
    return block.text if block is not None else None
