"""Tests for the high-level Undermark API."""

from __future__ import annotations

import pytest

from undermark import Markdown, TagKind, build_tags, render

SCENARIOS = [
    pytest.param(
        "_окруженный с двух сторон_",
        "<em>окруженный с двух сторон</em>",
        id="emphasis-around-phrase",
    ),
    pytest.param(
        "__Выделенный двумя символами текст__",
        "<strong>Выделенный двумя символами текст</strong>",
        id="strong-around-phrase",
    ),
    pytest.param("\\_Вот это\\_", "_Вот это_", id="escaped-underscores"),
    pytest.param(
        "Здесь сим\\волы экранирования\\ \\должны остаться.\\",
        "Здесь сим\\волы экранирования\\ \\должны остаться.\\",
        id="backslashes-before-plain-chars",
    ),
    pytest.param(
        "\\\\_вот это будет выделено тегом_",
        "\\<em>вот это будет выделено тегом</em>",
        id="escaped-backslash-before-marker",
    ),
    pytest.param(
        "__двойного выделения _одинарное_ тоже__",
        "<strong>двойного выделения <em>одинарное</em> тоже</strong>",
        id="emphasis-inside-strong",
    ),
    pytest.param(
        "Но не наоборот — внутри _одинарного __двойное__ не_ работает",
        "Но не наоборот — внутри <em>одинарного __двойное__ не</em> работает",
        id="no-strong-inside-emphasis",
    ),
    pytest.param("цифрами_12_3", "цифрами_12_3", id="markers-among-digits"),
    pytest.param("_12_3", "<em>12</em>3", id="leading-digits"),
    pytest.param(
        "_нач_але, и в сер_еди_не, и в кон_це._",
        "<em>нач</em>але, и в сер<em>еди</em>не, и в кон<em>це.</em>",
        id="parts-of-words",
    ),
    pytest.param("ра_зных сл_овах", "ра_зных сл_овах", id="across-words"),
    pytest.param("__Непарные_ символы", "__Непарные_ символы", id="unpaired"),
    pytest.param(
        "эти_ подчерки_ не считаются выделением",
        "эти_ подчерки_ не считаются выделением",
        id="closers-without-openers",
    ),
    pytest.param(
        "эти _подчерки _не считаются окончанием",
        "эти _подчерки _не считаются окончанием",
        id="openers-without-closers",
    ),
    pytest.param(
        "__пересечения _двойных__ и одинарных_",
        "__пересечения _двойных__ и одинарных_",
        id="crossing",
    ),
    pytest.param(
        "Если внутри подчерков пустая строка ____",
        "Если внутри подчерков пустая строка ____",
        id="empty-strong",
    ),
    pytest.param(
        "# Заголовок __с _разными_ символами__",
        "<h1>Заголовок <strong>с <em>разными</em> символами</strong></h1>",
        id="header-with-markup",
    ),
    pytest.param("ра_зных _сл_овах", "ра_зных <em>сл</em>овах", id="inner-word-only"),
    pytest.param("# Заголовки\n", "<h1>Заголовки</h1>\n", id="header-trailing-newline"),
    pytest.param("[]()", "[]()", id="empty-link"),
    pytest.param(
        '[l](https://yandex.ru/ "F")',
        '<a href="https://yandex.ru/" title="F">l</a>',
        id="link-with-title",
    ),
    pytest.param(
        "[l](https://yandex.ru/)",
        '<a href="https://yandex.ru/">l</a>',
        id="link-without-title",
    ),
    pytest.param(
        "\\[l](https://yandex.ru/)", "[l](https://yandex.ru/)", id="escaped-open-bracket"
    ),
    pytest.param(
        "[l\\](https://yandex.ru/)", "[l](https://yandex.ru/)", id="escaped-close-bracket"
    ),
    pytest.param(
        "[l]\\(https://yandex.ru/)",
        "[l]\\(https://yandex.ru/)",
        id="backslash-before-parenthesis",
    ),
    pytest.param(
        "# Заголовок _[l](https://yandex.ru/)_",
        '<h1>Заголовок <em><a href="https://yandex.ru/">l</a></em></h1>',
        id="header-emphasized-link",
    ),
    pytest.param("____", "____", id="four-underscores"),
    pytest.param("__a _b_ c__", "<strong>a <em>b</em> c</strong>", id="nested"),
    pytest.param("_a __b__ c_", "<em>a __b__ c</em>", id="strong-in-emphasis-literal"),
    pytest.param("# Title", "<h1>Title</h1>", id="header"),
    pytest.param(
        '[l](https://x/ "T")', '<a href="https://x/" title="T">l</a>', id="link-title-short"
    ),
    pytest.param("\\_x\\_", "_x_", id="escape-round-trip"),
]


class TestRenderFunction:
    """Tests for the render() function."""

    @pytest.mark.parametrize(("source", "expected"), SCENARIOS)
    def test_scenarios(self, source: str, expected: str) -> None:
        assert render(source) == expected

    def test_empty_source(self) -> None:
        assert render("") == ""

    def test_paragraphs_rendered_independently(self) -> None:
        assert render("_a\nb_") == "_a\nb_"

    def test_paragraph_separators_preserved(self) -> None:
        assert render("# A\n\n__b__\n") == "<h1>A</h1>\n\n<strong>b</strong>\n"

    def test_header_only_at_paragraph_start(self) -> None:
        assert render("a # b") == "a # b"

    def test_bare_header_marker(self) -> None:
        assert render("# ") == "# "


class TestBuildTags:
    """Tests for build_tags()."""

    def test_returns_resolved_tags(self) -> None:
        tags = build_tags("__a__")
        assert [tag.kind for tag in tags] == [TagKind.STRONG, TagKind.TEXT, TagKind.STRONG]

    def test_fresh_list_per_call(self) -> None:
        assert build_tags("_a_") is not build_tags("_a_")


class TestMarkdownClass:
    """Tests for the Markdown class."""

    def test_basic_usage(self) -> None:
        md = Markdown()
        assert md("__a _b_ c__") == "<strong>a <em>b</em> c</strong>"

    def test_headings_disabled(self) -> None:
        assert Markdown(headings=False)("# Title") == "# Title"

    def test_links_disabled(self) -> None:
        assert Markdown(links=False)("_a_ [b](c)") == "<em>a</em> [b](c)"

    def test_text_transformer(self) -> None:
        md = Markdown(text_transformer=lambda s: s * 2)
        assert md("ab\\_") == "abab_"

    def test_tags(self) -> None:
        tags = Markdown(headings=False).tags("# T")
        assert TagKind.HEADER not in [tag.kind for tag in tags]

    def test_render_many(self) -> None:
        assert Markdown().render_many(["_a_", "__b__", ""]) == [
            "<em>a</em>",
            "<strong>b</strong>",
            "",
        ]

    def test_instance_reusable(self) -> None:
        md = Markdown()
        first = md("_a_")
        md("__x _y")
        assert md("_a_") == first
