"""Character sets and neighbor probes for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Neighbor probes look at the character of an adjacent tag that touches the
tag being examined: the last character of the left neighbor and the first
character of the right neighbor. A missing neighbor (paragraph start or end)
reads as BOUNDARY, which behaves exactly like a space.

Usage:
    from undermark.parsing.charsets import ESCAPABLE

    if char in ESCAPABLE:  # O(1) lookup
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from undermark.tags import Tag

# Characters a backslash can escape
ESCAPABLE: frozenset[str] = frozenset("_#\\[]")

SPACE = " "

# Neutral value for a neighbor that does not exist
BOUNDARY = SPACE

HEADER_MARKER = "# "
EMPHASIS_MARKER = "_"
STRONG_MARKER = "__"


def is_letter(char: str) -> bool:
    return char.isalpha()


def is_digit(char: str) -> bool:
    return char.isdecimal()


def is_letter_or_digit(char: str) -> bool:
    return char.isalpha() or char.isdecimal()


def char_before(tags: list[Tag], index: int) -> str:
    """Return the character touching tags[index] from the left.

    Reads BOUNDARY at the paragraph start or when the neighbor is empty.
    """
    if index <= 0:
        return BOUNDARY
    content = tags[index - 1].content
    return content[-1] if content else BOUNDARY


def char_after(tags: list[Tag], index: int) -> str:
    """Return the character touching tags[index] from the right.

    Reads BOUNDARY at the paragraph end or when the neighbor is empty.
    """
    if index + 1 >= len(tags):
        return BOUNDARY
    content = tags[index + 1].content
    return content[0] if content else BOUNDARY


def is_letter_digit_pair(before: str, after: str) -> bool:
    """Check if a letter sits on one side and a digit on the other."""
    return (is_letter(before) and is_digit(after)) or (is_digit(before) and is_letter(after))
