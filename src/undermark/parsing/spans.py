"""Empty-span filter: suppress emphasis/strong around nothing.

A resolved emphasis or strong pair is demoted back to text when none of the
tags strictly between its opener and closer contains a letter or a digit, or
is longer than two characters. This keeps ``____`` and ``_,_`` literal.

Pairs are recovered with a stack (the resolver leaves them well nested), and
a running count of meaningful tags makes each span check O(1).

Thread Safety:
Mutates only the tag list it is given.

"""

from itertools import accumulate

from undermark.parsing.charsets import is_letter_or_digit
from undermark.tags import PAIRABLE_KINDS, Tag, TagRole
from undermark.utils.logger import get_logger

logger = get_logger(__name__)

# Content longer than this counts as meaningful regardless of its characters
_MAX_TRIVIAL_LENGTH = 2


def _is_meaningful(tag: Tag) -> bool:
    content = tag.content
    return len(content) > _MAX_TRIVIAL_LENGTH or any(is_letter_or_digit(c) for c in content)


def discard_empty_spans(tags: list[Tag]) -> None:
    """Demote emphasis/strong pairs that enclose no meaningful content.

    Args:
        tags: Resolved tags, mutated in place.
    """
    # meaningful[i] = number of meaningful tags in tags[:i]
    meaningful = [0, *accumulate(_is_meaningful(tag) for tag in tags)]

    openers: list[int] = []
    for index, tag in enumerate(tags):
        if tag.kind not in PAIRABLE_KINDS:
            continue
        if tag.role is TagRole.OPENING:
            openers.append(index)
        elif tag.role is TagRole.CLOSING and openers:
            start = openers.pop()
            if meaningful[index] == meaningful[start + 1]:
                logger.debug("Suppressing empty %s span at %d..%d", tag.kind.name, start, index)
                tags[start].demote()
                tag.demote()
