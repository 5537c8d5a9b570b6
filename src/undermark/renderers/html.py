"""HTML renderer using StringBuilder pattern.

Maps a resolved tag sequence to an HTML string in one pass:
- runs of text tags are joined (and transformed) as one string
- escape tags emit their content verbatim
- header/strong/emphasis openers and closers emit <h1>, <strong>, <em>
- link tags emit <a href="..."> with an optional title attribute

No escaping is applied; the output carries the source characters as-is.

Thread Safety:
The renderer holds only immutable settings. Multiple threads can share one
HtmlRenderer instance and call render() concurrently.
"""

from collections.abc import Callable, Sequence

from undermark.errors import RenderError
from undermark.parsing.links import split_link
from undermark.stringbuilder import StringBuilder
from undermark.tags import Tag, TagKind, TagRole

_ELEMENTS: dict[TagKind, str] = {
    TagKind.HEADER: "h1",
    TagKind.STRONG: "strong",
    TagKind.EMPHASIS: "em",
}


def render_link(span: str) -> str:
    """Render a link span as an anchor element.

    Example:
        >>> render_link('[l](https://x/ "T")')
        '<a href="https://x/" title="T">l</a>'
    """
    parts = split_link(span)
    if parts.title is not None:
        return f'<a href="{parts.destination}" title="{parts.title}">{parts.text}</a>'
    return f'<a href="{parts.destination}">{parts.text}</a>'


class HtmlRenderer:
    """Render resolved tags to HTML.

    Usage:
        >>> from undermark.parsing import build_tags
        >>> HtmlRenderer().render(build_tags("__a _b_ c__"))
        '<strong>a <em>b</em> c</strong>'

    """

    __slots__ = ("_text_transformer",)

    def __init__(self, *, text_transformer: Callable[[str], str] | None = None) -> None:
        """Initialize renderer.

        Args:
            text_transformer: Optional callback applied once to each run of plain text
        """
        self._text_transformer = text_transformer

    def render(self, tags: Sequence[Tag]) -> str:
        """Render one paragraph's tags to an HTML string.

        Args:
            tags: Resolved tag sequence

        Returns:
            HTML string

        Raises:
            RenderError: A tag's kind and role cannot be rendered together.
        """
        sb = StringBuilder()
        # Consecutive text tags form one run, flushed before any other tag
        run: list[str] = []
        for index, tag in enumerate(tags):
            kind = tag.kind
            if kind is TagKind.TEXT:
                run.append(tag.content)
                continue
            if run:
                self._flush_text(sb, run)
            if kind is TagKind.ESCAPE:
                sb.append(tag.content)
            elif kind is TagKind.LINK:
                if tag.role is not TagRole.SINGLE:
                    raise RenderError(f"link tag with role {tag.role.name}", index)
                sb.append(render_link(tag.content))
            elif tag.role is TagRole.OPENING:
                sb.append(f"<{_ELEMENTS[kind]}>")
            elif tag.role is TagRole.CLOSING:
                sb.append(f"</{_ELEMENTS[kind]}>")
            else:
                raise RenderError(f"{kind.name} tag with role {tag.role.name}", index)
        if run:
            self._flush_text(sb, run)
        return sb.build()

    def _flush_text(self, sb: StringBuilder, run: list[str]) -> None:
        """Emit a run of plain text, passing it whole to the transformer."""
        text = "".join(run)
        run.clear()
        if self._text_transformer is not None:
            text = self._text_transformer(text)
        sb.append(text)
