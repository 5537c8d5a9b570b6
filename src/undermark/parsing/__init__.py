"""Paragraph parsing for Undermark.

The core is four passes over one list of tags:

1. tokenize(): paragraph text to candidate tags
2. discard_cross_word_markers(): drop in-word markers paired across words
3. resolve_borders(): stack-based opener/closer matching
4. discard_empty_spans(): drop pairs around punctuation-only content

Passes 2-4 mutate the list produced by pass 1.

Thread Safety:
All per-paragraph state is local to build_tags(). Paragraphs can be
converted concurrently from different threads.

"""

from undermark.config import ParseConfig
from undermark.parsing.borders import BorderResolver, resolve_borders
from undermark.parsing.spans import discard_empty_spans
from undermark.parsing.tokenizer import tokenize
from undermark.parsing.words import discard_cross_word_markers
from undermark.tags import Tag
from undermark.utils.logger import get_logger

logger = get_logger(__name__)


def build_tags(paragraph: str, config: ParseConfig | None = None) -> list[Tag]:
    """Build the resolved tag sequence for one paragraph.

    Args:
        paragraph: One paragraph of source text
        config: Parse configuration (defaults to the active context config)

    Returns:
        Resolved tags, ready for rendering.

    Example:
        >>> [tag.role.name for tag in build_tags("_a_")]
        ['OPENING', 'NONE', 'CLOSING']
    """
    tags = tokenize(paragraph, config)
    discard_cross_word_markers(tags)
    resolve_borders(tags)
    discard_empty_spans(tags)
    logger.debug("Resolved %d tag(s) from %d character(s)", len(tags), len(paragraph))
    return tags


__all__ = [
    "BorderResolver",
    "build_tags",
    "discard_cross_word_markers",
    "discard_empty_spans",
    "resolve_borders",
    "tokenize",
]
