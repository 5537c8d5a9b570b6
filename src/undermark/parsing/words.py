"""Word-boundary filter for emphasis and strong candidates.

A marker sitting inside a word (letters on both sides) may only pair with a
marker of the same kind in that same word. For each kind, consecutive
candidates are taken two at a time; when the two fall in different words,
whichever of them is inside a word is demoted to text.

Markers on the edge of a word are left alone here. Whether they really open
or close is decided by the border resolver.

Thread Safety:
Mutates only the tag list it is given.

"""

from typing import NamedTuple

from undermark.parsing.charsets import SPACE, char_after, char_before, is_letter
from undermark.tags import PAIRABLE_KINDS, Tag, TagKind


class _Placement(NamedTuple):
    word: int
    inside_word: bool
    index: int


def discard_cross_word_markers(tags: list[Tag]) -> None:
    """Demote in-word markers whose partner lies in another word.

    Args:
        tags: Candidate tags from tokenize(), mutated in place.
    """
    placements: dict[TagKind, list[_Placement]] = {kind: [] for kind in PAIRABLE_KINDS}

    word = 0
    for index, tag in enumerate(tags):
        if tag.is_text and tag.content == SPACE:
            word += 1
        run = placements.get(tag.kind)
        if run is not None:
            inside_word = is_letter(char_before(tags, index)) and is_letter(
                char_after(tags, index)
            )
            run.append(_Placement(word, inside_word, index))

    for run in placements.values():
        i = 0
        while i < len(run) - 1:
            current, following = run[i], run[i + 1]
            if current.word == following.word:
                # Same word: leave the pair for the resolver
                i += 2
                continue
            if current.inside_word:
                tags[current.index].demote()
            if following.inside_word:
                tags[following.index].demote()
            i += 1
