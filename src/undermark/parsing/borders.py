"""Border resolution: decide which candidates really open and close.

Walks the candidate tags with an explicit stack of open markers and a
per-kind "is open" flag, matching openers to closers and demoting every
candidate that cannot take part in a well-formed pair.

Rules, applied to each header/strong/emphasis candidate in order:

1. Shape check. A candidate is demoted when it
   - would close (its kind is open) but looks like an opener:
     space before, non-space after;
   - would open (its kind is not open) but looks like a closer:
     non-space before, space after;
   - sits between a letter and a digit;
   - has spaces on both sides.
   The paragraph start and end read as spaces.
2. Matching. If the candidate's kind is open, the top of the stack is
   popped. Same kind: the pair is closed. Different kind: the spans cross,
   so the popped tag, the candidate and everything left on the stack are
   demoted.
3. Nesting. Strong may not open inside an open emphasis.
4. Otherwise the candidate is pushed as an opener.

At the end of the paragraph an open header is closed by appending a
synthetic closing tag; any other marker still open is demoted.

Thread Safety:
All state lives on the BorderResolver instance, created per paragraph.
Safe for concurrent use when each instance is used by one thread.

"""

from undermark.parsing.charsets import (
    SPACE,
    char_after,
    char_before,
    is_letter_digit_pair,
)
from undermark.tags import BORDER_KINDS, OPAQUE_KINDS, Tag, TagKind, TagRole
from undermark.utils.logger import get_logger

logger = get_logger(__name__)


class BorderResolver:
    """Stack machine pairing opener and closer candidates of one paragraph.

    Usage:
        >>> from undermark.parsing.tokenizer import tokenize
        >>> tags = tokenize("__a _b_ c__")
        >>> BorderResolver(tags).resolve()

    Thread Safety:
        Single-use and not thread-safe. Create one per paragraph.

    """

    __slots__ = ("_tags", "_stack", "_open")

    def __init__(self, tags: list[Tag]) -> None:
        """Initialize resolver state for one paragraph.

        Args:
            tags: Candidate tags, mutated in place by resolve()
        """
        self._tags = tags
        self._stack: list[Tag] = []
        self._open: dict[TagKind, bool] = dict.fromkeys(BORDER_KINDS, False)

    def resolve(self) -> None:
        """Pair openers with closers and demote everything else."""
        tags = self._tags
        stack = self._stack
        is_open = self._open

        # Iterate by index; the synthetic header closer is appended afterwards
        for index in range(len(tags)):
            tag = tags[index]
            if tag.is_text or tag.kind in OPAQUE_KINDS:
                continue

            if self._is_not_a_tag(index):
                tag.demote()
                continue

            if stack and is_open[tag.kind]:
                opener = stack.pop()
                if opener.kind is tag.kind:
                    tag.close()
                    is_open[tag.kind] = False
                else:
                    self._invalidate(opener, tag)
                continue

            if stack and stack[-1].kind is TagKind.EMPHASIS and tag.kind is TagKind.STRONG:
                tag.demote()
                continue

            stack.append(tag)
            is_open[tag.kind] = True

        self._close_remaining()

    def _is_not_a_tag(self, index: int) -> bool:
        """Check whether the candidate at index cannot be a marker here."""
        before = char_before(self._tags, index)
        after = char_after(self._tags, index)

        if self._open[self._tags[index].kind]:
            # Expected to close, but shaped like an opener
            if before == SPACE and after != SPACE:
                return True
        elif before != SPACE and after == SPACE:
            # Expected to open, but shaped like a closer
            return True

        if is_letter_digit_pair(before, after):
            return True

        return before == SPACE and after == SPACE

    def _invalidate(self, opener: Tag, closer: Tag) -> None:
        """Demote a crossing pair and every marker still open below it."""
        logger.debug(
            "Crossing %s/%s markers, demoting %d open marker(s)",
            opener.kind.name,
            closer.kind.name,
            len(self._stack) + 1,
        )
        for tag in (opener, closer, *self._stack):
            self._open[tag.kind] = False
            tag.demote()
        self._stack.clear()

    def _close_remaining(self) -> None:
        """Close an open header and demote any other unmatched opener."""
        while self._stack:
            tag = self._stack.pop()
            self._open[tag.kind] = False
            if tag.kind is TagKind.HEADER:
                self._tags.append(Tag(TagKind.HEADER, TagRole.CLOSING, ""))
            else:
                tag.demote()


def resolve_borders(tags: list[Tag]) -> None:
    """Resolve opener/closer borders of one paragraph in place.

    Args:
        tags: Candidate tags, mutated in place.
    """
    BorderResolver(tags).resolve()
