"""Undermark RenderAccumulator — opt-in profiling for Markdown conversion.

This module provides accumulated metrics during conversion:
- Total elapsed time
- Paragraphs converted
- Source length
- Tags produced

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from undermark import render
    from undermark.profiling import profiled_render

    with profiled_render() as metrics:
        html = render("# Hello __World__")

    print(metrics.summary())
    # {"total_ms": 0.1, "paragraphs": 1, "source_length": 16, "tag_count": 15}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics during Markdown conversion.

    Attributes:
        start_time: Profiling start timestamp.
        paragraphs: Number of paragraphs converted.
        source_length: Total length of converted paragraphs.
        tag_count: Total number of resolved tags.

    """

    start_time: float = field(default_factory=perf_counter)
    paragraphs: int = 0
    source_length: int = 0
    tag_count: int = 0

    def record_paragraph(self, source_length: int, tag_count: int) -> None:
        """Record one converted paragraph."""
        self.paragraphs += 1
        self.source_length += source_length
        self.tag_count += tag_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of conversion metrics.

        Returns:
            Dict with total_ms, paragraphs, source_length, tag_count.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "paragraphs": self.paragraphs,
            "source_length": self.source_length,
            "tag_count": self.tag_count,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled conversion.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    Yields:
        RenderAccumulator that will be populated during conversions.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
