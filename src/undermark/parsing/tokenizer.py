"""Tokenizer: paragraph text to candidate tags.

Scans left to right and emits one tag per recognized span, covering the
whole paragraph with no gaps or overlaps. Joining ``tag.source`` over the
result reproduces the paragraph exactly.

Dispatch at each unconsumed position:
- "# " at position 0 opens a header
- "__" opens strong, a lone "_" opens emphasis
- backslash + one of ``_ # \\ [ ]`` is an escape (content is the escaped char)
- "[" starting a well-formed link is consumed whole as a link
- anything else is a one-character text tag

Thread Safety:
Pure function of its arguments. Safe for concurrent use.

"""

from undermark.config import ParseConfig, get_parse_config
from undermark.parsing.charsets import (
    EMPHASIS_MARKER,
    ESCAPABLE,
    HEADER_MARKER,
    STRONG_MARKER,
)
from undermark.parsing.links import find_link_end
from undermark.tags import ESCAPE_PREFIX, Tag, TagKind, TagRole


def tokenize(paragraph: str, config: ParseConfig | None = None) -> list[Tag]:
    """Split a paragraph into candidate tags.

    Args:
        paragraph: One paragraph of source text (no newlines)
        config: Parse configuration (defaults to the active context config)

    Returns:
        Ordered list of candidate tags.
    """
    if config is None:
        config = get_parse_config()

    tags: list[Tag] = []
    tags_append = tags.append  # Local reference for speed
    pos = 0
    text_len = len(paragraph)

    while pos < text_len:
        char = paragraph[pos]

        # Header: only at the very start of the paragraph
        if (
            char == "#"
            and pos == 0
            and config.headings_enabled
            and paragraph.startswith(HEADER_MARKER)
        ):
            tags_append(Tag(TagKind.HEADER, TagRole.OPENING, HEADER_MARKER))
            pos += len(HEADER_MARKER)
            continue

        if char == "_":
            if paragraph.startswith(STRONG_MARKER, pos):
                tags_append(Tag(TagKind.STRONG, TagRole.OPENING, STRONG_MARKER))
                pos += len(STRONG_MARKER)
            else:
                tags_append(Tag(TagKind.EMPHASIS, TagRole.OPENING, EMPHASIS_MARKER))
                pos += 1
            continue

        if char == ESCAPE_PREFIX:
            if pos + 1 < text_len and paragraph[pos + 1] in ESCAPABLE:
                tags_append(Tag(TagKind.ESCAPE, TagRole.COMPLETED, paragraph[pos + 1]))
                pos += 2
            else:
                # Backslash before anything else, or at the end: literal
                tags_append(Tag.text(char))
                pos += 1
            continue

        if char == "[" and config.links_enabled:
            link_end = find_link_end(paragraph, pos)
            if link_end != -1:
                tags_append(Tag(TagKind.LINK, TagRole.SINGLE, paragraph[pos:link_end]))
                pos = link_end
                continue

        tags_append(Tag.text(char))
        pos += 1

    return tags
