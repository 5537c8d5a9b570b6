"""Inline link grammar for Undermark.

Handles: [text](destination) and [text](destination "title")

A link is recognized only when:
- the first ``]`` after ``[`` is immediately followed by ``(``
- a ``)`` follows the ``(``
- the link text is non-empty
- no backslash appears anywhere inside the span

The backslash rule keeps escaped delimiters literal: in ``[l\\](x)`` the
``]`` is escaped, so the bracket never closes the link text.

Thread Safety:
All functions are pure. Safe for concurrent use.

"""

from __future__ import annotations

from typing import NamedTuple

from undermark.tags import ESCAPE_PREFIX


class LinkParts(NamedTuple):
    """Pieces of a link span, extracted for rendering.

    Attributes:
        text: The link text between the brackets.
        destination: The href value.
        title: The quoted title, or None when the span has none.

    """

    text: str
    destination: str
    title: str | None


def find_link_end(text: str, pos: int) -> int:
    """Find the end of a link span starting at text[pos] == "[".

    Args:
        text: Paragraph text
        pos: Position of the opening bracket

    Returns:
        Index one past the closing ``)``, or -1 if no link starts here.
    """
    text_end = text.find("]", pos + 1)
    if text_end <= pos + 1:
        # No closing bracket, or empty link text
        return -1

    paren_start = text_end + 1
    if paren_start >= len(text) or text[paren_start] != "(":
        return -1

    paren_end = text.find(")", paren_start + 1)
    if paren_end == -1:
        return -1

    if text.find(ESCAPE_PREFIX, pos, paren_end) != -1:
        return -1

    return paren_end + 1


def split_link(span: str) -> LinkParts:
    """Split a recognized link span into text, destination and title.

    The title is the first ``"..."`` pair inside the parenthesis; the
    destination is everything before its opening quote, right-stripped.

    Args:
        span: A span accepted by find_link_end(), e.g. '[l](https://x/ "T")'

    Returns:
        LinkParts for the span.
    """
    text_end = span.index("]")
    text = span[1:text_end]
    target = span[text_end + 2 : span.rindex(")")]

    title_start = target.find('"')
    if title_start != -1:
        title_end = target.find('"', title_start + 1)
        if title_end != -1:
            return LinkParts(
                text=text,
                destination=target[:title_start].rstrip(),
                title=target[title_start + 1 : title_end],
            )

    return LinkParts(text=text, destination=target, title=None)
