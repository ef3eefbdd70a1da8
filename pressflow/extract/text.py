"""
Markup to plain text.

Publisher markup is turned into text by walking the BeautifulSoup tree
and emitting a newline for every opening and closing tag, so adjacent
elements never merge their words.  Entities are decoded by the parser.
Runs of three or more newlines are collapsed to a single blank line and
the result is trimmed.

Besides whole subtrees, the walker can render the run of content that
*follows* an element up to a stop element.  Inline contact blocks and
body sections are both defined that way.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import PreformattedString

logger = logging.getLogger(__name__)

OPEN = "open"
CLOSE = "close"
TEXT = "text"

Event = Tuple[str, Union[Tag, NavigableString]]
Node = Union[Tag, NavigableString]

_BLANK_RUN = re.compile(r"\n{3,}")


def parse_markup(markup: str) -> BeautifulSoup:
    """Parse a markup string with the stdlib-backed ``html.parser``.

    Markup the parser refuses outright is replaced by an empty document.
    """
    try:
        return BeautifulSoup(markup or "", "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning("Markup rejected by parser, treating as empty: %s", exc)
        return BeautifulSoup("", "html.parser")


def _is_void(tag: Tag) -> bool:
    # <br>, <img> and friends have no closing tag in the source
    return tag.is_empty_element


def iter_events(node: Node) -> Iterator[Event]:
    """Yield open/text/close events for ``node`` and its descendants."""
    if isinstance(node, NavigableString):
        if not isinstance(node, PreformattedString):
            yield TEXT, node
        return
    # stack of open tags; nesting depth is not limited by recursion
    if not isinstance(node, BeautifulSoup):
        yield OPEN, node
    stack: List[Tuple[Tag, Iterator[Node]]] = [(node, iter(node.children))]
    while stack:
        tag, children = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            if not isinstance(tag, BeautifulSoup) and not _is_void(tag):
                yield CLOSE, tag
        elif isinstance(child, NavigableString):
            if not isinstance(child, PreformattedString):
                yield TEXT, child
        else:
            yield OPEN, child
            stack.append((child, iter(child.children)))


def iter_events_after(node: Node) -> Iterator[Event]:
    """Yield the events that follow ``node`` up to the end of the document.

    The walk leaves ``node`` (and its descendants) out, continues with its
    following siblings and then climbs to each ancestor, emitting the
    ancestor's closing tag before moving on to the ancestor's siblings.
    """
    current = node
    while current is not None:
        for sibling in current.next_siblings:
            yield from iter_events(sibling)
        parent = current.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return
        if not _is_void(parent):
            yield CLOSE, parent
        current = parent


def clean_text(text: str) -> str:
    """Collapse blank-line runs and trim."""
    return _BLANK_RUN.sub("\n\n", text).strip()


def render_events(
    events: Iterable[Event], stop: Optional[Callable[[Tag], bool]] = None
) -> str:
    """Render an event stream to text, halting at the first ``stop`` tag."""
    parts: List[str] = []
    for kind, node in events:
        if kind == TEXT:
            parts.append(str(node))
            continue
        if kind == OPEN and stop is not None and stop(node):
            break
        parts.append("\n")
    return clean_text("".join(parts))


def render_text(node: Node) -> str:
    """Plain text of a parsed node (a whole document, a tag or a string)."""
    return render_events(iter_events(node))


def render_text_after(node: Node, stop: Optional[Callable[[Tag], bool]] = None) -> str:
    """Plain text of what follows ``node``, bounded by ``stop``."""
    return render_events(iter_events_after(node), stop)


def strip_markup(markup: str) -> str:
    """Convert a markup fragment to plain text.

    >>> strip_markup("<p>Fish &amp; Chips</p><p>Ltd</p>")
    'Fish & Chips\\n\\nLtd'
    """
    return render_text(parse_markup(markup))


def split_lines(text: str) -> List[str]:
    """Trimmed, non-empty lines of a normalized block."""
    return [line.strip() for line in text.split("\n") if line.strip()]
