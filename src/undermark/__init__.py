"""
Undermark — underscore-flavored Markdown to HTML

Converts a small Markdown dialect paragraph by paragraph:
headers (``# ``), emphasis (``_``), strong emphasis (``__``),
inline links (``[text](url "title")``) and backslash escapes.

Quick Start:
    >>> from undermark import render
    >>> render("# Hello __World__")
    '<h1>Hello <strong>World</strong></h1>'

    >>> # Or use the high-level Markdown class
    >>> from undermark import Markdown
    >>> md = Markdown(links=False)
    >>> md("_a_ [b](c)")
    '<em>a</em> [b](c)'

Inspecting resolution:
    >>> from undermark import build_tags
    >>> [(t.kind.name, t.role.name) for t in build_tags("_a_")]
    [('EMPHASIS', 'OPENING'), ('TEXT', 'NONE'), ('EMPHASIS', 'CLOSING')]

Installation:
    pip install undermark              # zero deps
"""

from collections.abc import Callable, Iterable

from undermark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from undermark.errors import ConfigError, RenderError, UndermarkError
from undermark.parsing import BorderResolver, build_tags, tokenize
from undermark.profiling import RenderAccumulator, get_render_accumulator, profiled_render
from undermark.renderers.html import HtmlRenderer
from undermark.tags import Tag, TagKind, TagRole

__version__ = "0.1.0"

# Separator between paragraphs, kept as-is in the output
PARAGRAPH_SEPARATOR = "\n"


def _convert(source: str, config: ParseConfig, renderer: HtmlRenderer) -> str:
    """Convert every paragraph of source and rejoin them."""
    acc = get_render_accumulator()
    rendered: list[str] = []
    for paragraph in source.split(PARAGRAPH_SEPARATOR):
        tags = build_tags(paragraph, config)
        rendered.append(renderer.render(tags))
        if acc is not None:
            acc.record_paragraph(source_length=len(paragraph), tag_count=len(tags))
    return PARAGRAPH_SEPARATOR.join(rendered)


def render(source: str) -> str:
    """Convert Markdown source to HTML using the active configuration.

    Args:
        source: Markdown text; paragraphs are separated by newlines

    Returns:
        HTML string, one rendered paragraph per input paragraph

    Example:
        >>> render("_a_ __b__")
        '<em>a</em> <strong>b</strong>'
    """
    config = get_parse_config()
    renderer = HtmlRenderer(text_transformer=config.text_transformer)
    return _convert(source, config, renderer)


class Markdown:
    """High-level Markdown processor combining parser and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("__a _b_ c__")
        '<strong>a <em>b</em> c</strong>'

        >>> # Access the resolved tags
        >>> tags = md.tags("# Heading")
        >>> tags[0].kind
        <TagKind.HEADER: 2>

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        headings: bool = True,
        links: bool = True,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            headings: Recognize "# " at paragraph start as a header
            links: Recognize [text](url) links
            text_transformer: Optional callback applied to plain text on render

        Raises:
            ConfigError: text_transformer is not callable.
        """
        # Build immutable config once (thread-safe, reused across calls)
        self._config = ParseConfig(
            headings_enabled=headings,
            links_enabled=links,
            text_transformer=text_transformer,
        )
        self._renderer = HtmlRenderer(text_transformer=text_transformer)

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Convert Markdown source to HTML.

        Args:
            source: Markdown source text

        Returns:
            HTML string
        """
        set_parse_config(self._config)
        try:
            return _convert(source, self._config, self._renderer)
        finally:
            reset_parse_config()

    def tags(self, paragraph: str) -> list[Tag]:
        """Return the resolved tags for one paragraph."""
        return build_tags(paragraph, self._config)

    def render_many(self, sources: Iterable[str]) -> list[str]:
        """Convert multiple Markdown sources.

        Sets config once, converts all, resets once.

        Example:
            >>> Markdown().render_many(["_a_", "__b__"])
            ['<em>a</em>', '<strong>b</strong>']
        """
        set_parse_config(self._config)
        try:
            return [_convert(source, self._config, self._renderer) for source in sources]
        finally:
            reset_parse_config()


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "render",
    "build_tags",
    "tokenize",
    "Markdown",
    # Tags
    "Tag",
    "TagKind",
    "TagRole",
    # Parser components
    "BorderResolver",
    # Renderer
    "HtmlRenderer",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Profiling
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
    # Errors
    "UndermarkError",
    "ConfigError",
    "RenderError",
    # Constants
    "PARAGRAPH_SEPARATOR",
]
