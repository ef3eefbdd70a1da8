"""
Saved press releases.

The news-distribution API delivers releases as JSON feed items.  This
module reads such an item from disk, either a whole saved feed response
(``{"items": [...]}``, the first item is used), a single saved item, or
a raw ``.html`` body, into a `PressRelease`.  Fetching from the network
is not done here.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

HTML_EXTENSIONS = {".html", ".htm"}


@dataclass
class Attachment:
    """A file attached to a release."""

    title: str
    url: str
    tags: List[str] = field(default_factory=list)


@dataclass
class PressRelease:
    """The parts of a feed item the report needs."""

    news_id: str
    title: str
    timestamp: str
    company: str
    html: str
    lang: Optional[str] = None
    type: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    attachments: List[Attachment] = field(default_factory=list)


def _dict(value: object) -> Dict[str, object]:
    return value if isinstance(value, dict) else {}


def parse_press_release(item: Dict[str, object]) -> PressRelease:
    """Build a `PressRelease` from one JSON feed item.

    Both feed shapes seen in the wild are accepted: ``title`` and
    ``timestamp`` on the item itself, or ``title`` and ``publish_date``
    inside ``content``.  Attachment titles may be ``file_title`` or
    ``title``.
    """
    author = _dict(item.get("author"))
    properties = _dict(item.get("properties"))
    content = _dict(item.get("content"))
    attachments = [
        Attachment(
            title=str(att.get("file_title") or att.get("title") or ""),
            url=str(att.get("url") or ""),
            tags=list(att.get("tags") or []),
        )
        for att in content.get("attachments") or []
        if isinstance(att, dict)
    ]
    return PressRelease(
        news_id=str(item.get("news_id") or ""),
        title=str(item.get("title") or content.get("title") or ""),
        timestamp=str(item.get("timestamp") or content.get("publish_date") or ""),
        company=str(author.get("name") or ""),
        html=str(content.get("html") or ""),
        lang=properties.get("lang"),
        type=properties.get("type"),
        tags=list(properties.get("tags") or []),
        attachments=attachments,
    )


def load_press_release(path: str) -> PressRelease:
    """Read a saved release from ``path``.

    Args:
        path: A JSON feed response, a single JSON feed item, or an HTML
            file holding the release body.

    Returns:
        The parsed `PressRelease`.  For an HTML file only ``html`` is set.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If a JSON file holds no feed item.
    """
    ext = os.path.splitext(path)[1].lower()
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    if ext in HTML_EXTENSIONS:
        name = os.path.splitext(os.path.basename(path))[0]
        logger.debug("Loaded raw HTML release from %s", path)
        return PressRelease(news_id=name, title="", timestamp="", company="", html=raw)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is neither HTML nor JSON: {exc}") from exc
    if isinstance(data, dict) and "items" in data:
        items = data.get("items") or []
        if not items:
            raise ValueError(f"No press releases found in {path}")
        data = items[0]
    if not isinstance(data, dict) or "content" not in data:
        raise ValueError(f"{path} does not contain a feed item")
    release = parse_press_release(data)
    logger.debug("Loaded release %s (%s) from %s", release.news_id, release.title, path)
    return release
