"""Tests for the word-boundary filter."""

from __future__ import annotations

from undermark.parsing.tokenizer import tokenize
from undermark.parsing.words import discard_cross_word_markers
from undermark.tags import TagKind


def filtered_marker_kinds(paragraph: str, marker: str = "_") -> list[TagKind]:
    """Kinds of the tags whose content is the given marker, after filtering."""
    tags = tokenize(paragraph)
    discard_cross_word_markers(tags)
    return [tag.kind for tag in tags if tag.content == marker]


class TestCrossWordMarkers:
    """In-word markers paired across words are demoted."""

    def test_both_inside_different_words(self) -> None:
        assert filtered_marker_kinds("ра_зных сл_овах") == [TagKind.TEXT, TagKind.TEXT]

    def test_only_inside_marker_demoted(self) -> None:
        assert filtered_marker_kinds("ра_зных _сл_овах") == [
            TagKind.TEXT,
            TagKind.EMPHASIS,
            TagKind.EMPHASIS,
        ]

    def test_strong_filtered_independently(self) -> None:
        assert filtered_marker_kinds("ра__зных сл__овах", "__") == [TagKind.TEXT, TagKind.TEXT]


class TestMarkersLeftAlone:
    """Markers this filter does not decide on."""

    def test_word_edges_across_words(self) -> None:
        assert filtered_marker_kinds("_a b_") == [TagKind.EMPHASIS, TagKind.EMPHASIS]

    def test_same_word_pair(self) -> None:
        assert filtered_marker_kinds("сер_еди_не") == [TagKind.EMPHASIS, TagKind.EMPHASIS]

    def test_marker_next_to_digit_is_not_inside_word(self) -> None:
        """Only the letter-flanked partner is demoted."""
        assert filtered_marker_kinds("a_1 b_c") == [TagKind.EMPHASIS, TagKind.TEXT]

    def test_other_kind_does_not_interfere(self) -> None:
        kinds = filtered_marker_kinds("сл_ово __a b__")
        assert kinds == [TagKind.EMPHASIS]
