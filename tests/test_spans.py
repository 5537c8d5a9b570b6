"""Tests for the empty-span filter."""

from __future__ import annotations

import pytest

from undermark.parsing import build_tags
from undermark.parsing.spans import discard_empty_spans
from undermark.tags import Tag, TagKind, TagRole


def has_markup(tags: list[Tag]) -> bool:
    return any(tag.role in (TagRole.OPENING, TagRole.CLOSING) for tag in tags)


class TestEmptySpans:
    """Pairs around nothing meaningful are demoted."""

    @pytest.mark.parametrize("paragraph", ["____", "_,_", "_..._", "__-__"])
    def test_punctuation_only_span(self, paragraph: str) -> None:
        assert not has_markup(build_tags(paragraph))

    def test_span_with_letter_kept(self) -> None:
        assert has_markup(build_tags("_a_"))

    def test_span_with_digit_kept(self) -> None:
        assert has_markup(build_tags("_1_"))

    def test_span_with_link_kept(self) -> None:
        assert has_markup(build_tags("_[l](u)_"))

    def test_inner_span_demoted_outer_kept(self) -> None:
        tags = build_tags("__a _,_ ,__")
        markup = [(tag.kind, tag.role) for tag in tags if not tag.is_text]
        assert markup == [
            (TagKind.STRONG, TagRole.OPENING),
            (TagKind.STRONG, TagRole.CLOSING),
        ]


class TestFilterScope:
    """Only emphasis and strong are filtered."""

    def test_header_pair_untouched(self) -> None:
        tags = [
            Tag(TagKind.HEADER, TagRole.OPENING, "# "),
            Tag(TagKind.HEADER, TagRole.CLOSING, ""),
        ]
        discard_empty_spans(tags)
        assert [tag.kind for tag in tags] == [TagKind.HEADER, TagKind.HEADER]

    def test_long_punctuation_tag_is_meaningful(self) -> None:
        tags = [
            Tag(TagKind.EMPHASIS, TagRole.OPENING, "_"),
            Tag.text("..."),
            Tag(TagKind.EMPHASIS, TagRole.CLOSING, "_"),
        ]
        discard_empty_spans(tags)
        assert tags[0].kind is TagKind.EMPHASIS
        assert tags[2].role is TagRole.CLOSING

    def test_empty_sequence(self) -> None:
        tags: list[Tag] = []
        discard_empty_spans(tags)
        assert tags == []
