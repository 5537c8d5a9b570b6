"""Candidate tags flowing through the Undermark pipeline.

The tokenizer turns a paragraph into a list of Tag records. The word filter,
the border resolver and the empty-span filter then mutate those same records
in place, so a demotion made by one pass is visible to every later pass and
to the renderer.

Lifecycle:
A tag list is built once per paragraph, mutated by the three resolution
passes, rendered, and discarded. No tag outlives one paragraph.

Thread Safety:
Tags are mutable and must not be shared between concurrent conversions.
Each build_tags() call produces a fresh list.

"""

from dataclasses import dataclass
from enum import Enum, auto

# Prefix consumed by the tokenizer in front of an escaped character
ESCAPE_PREFIX = "\\"


class TagKind(Enum):
    """What a tag represents."""

    TEXT = auto()
    HEADER = auto()  # "# " at paragraph start
    EMPHASIS = auto()  # _
    STRONG = auto()  # __
    ESCAPE = auto()  # \_ \# \\ \[ \]
    LINK = auto()  # [text](destination "title")


class TagRole(Enum):
    """How a tag participates in pairing.

    OPENING/CLOSING tags must be matched. COMPLETED (escapes) and SINGLE
    (links) are self-contained. NONE is plain text.

    """

    OPENING = auto()
    CLOSING = auto()
    COMPLETED = auto()
    SINGLE = auto()
    NONE = auto()


# Kinds matched by the word filter and the empty-span filter
PAIRABLE_KINDS: frozenset[TagKind] = frozenset({TagKind.EMPHASIS, TagKind.STRONG})

# Kinds tracked by the border resolver's open flags
BORDER_KINDS: tuple[TagKind, ...] = (TagKind.HEADER, TagKind.STRONG, TagKind.EMPHASIS)

# Kinds the border resolver never looks inside
OPAQUE_KINDS: frozenset[TagKind] = frozenset({TagKind.ESCAPE, TagKind.LINK})


@dataclass(slots=True)
class Tag:
    """A provisionally-typed span of a paragraph.

    Attributes:
        kind: What the span represents.
        role: Pairing role (see TagRole).
        content: Literal text of the span. For text and escape tags this is
            emitted verbatim; for markup tags it is the delimiter itself; for
            links it is the whole ``[text](target)`` span.

    """

    kind: TagKind
    role: TagRole
    content: str

    @classmethod
    def text(cls, content: str) -> "Tag":
        """Create a plain text tag."""
        return cls(TagKind.TEXT, TagRole.NONE, content)

    @property
    def is_text(self) -> bool:
        return self.kind is TagKind.TEXT

    @property
    def source(self) -> str:
        """The paragraph characters this tag was scanned from."""
        if self.kind is TagKind.ESCAPE:
            return ESCAPE_PREFIX + self.content
        return self.content

    def demote(self) -> None:
        """Turn the tag into plain text, keeping its content.

        Demotion is permanent: nothing in the pipeline re-types text back
        into markup.
        """
        self.kind = TagKind.TEXT
        self.role = TagRole.NONE

    def close(self) -> None:
        """Mark an opener as the closer of a matched pair."""
        self.role = TagRole.CLOSING


__all__ = [
    "BORDER_KINDS",
    "ESCAPE_PREFIX",
    "OPAQUE_KINDS",
    "PAIRABLE_KINDS",
    "Tag",
    "TagKind",
    "TagRole",
]
