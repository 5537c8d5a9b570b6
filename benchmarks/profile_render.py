"""cProfile wrapper and scaling check for Undermark conversion.

Run with:
    python benchmarks/profile_render.py

Doubles the input size repeatedly and prints the time ratio between
consecutive sizes; a ratio near 2 means linear growth.
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys
from time import perf_counter

FRAGMENTS = ["_Курс_ ", "__Куhc__ ", "КУрс ", "# Заголовок __с _разными_ символами__ "]


def time_render(source: str, repeat: int = 3) -> float:
    """Best-of-N wall time for one render() call, in seconds."""
    from undermark import render

    best = float("inf")
    for _ in range(repeat):
        start = perf_counter()
        render(source)
        best = min(best, perf_counter() - start)
    return best


def scaling(fragment: str, max_power: int = 12) -> list[float]:
    """Time ratios between consecutive doublings of a repeated fragment."""
    timings = [time_render(fragment * 2**power) for power in range(4, max_power + 1)]
    return [later / earlier for earlier, later in zip(timings, timings[1:])]


def main() -> None:
    """Print scaling ratios and a cProfile summary."""
    print("Undermark Profiling")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")

    for fragment in FRAGMENTS:
        ratios = ", ".join(f"{r:.2f}" for r in scaling(fragment))
        print(f"{fragment!r:45} {ratios}")

    from undermark import render

    source = "".join(FRAGMENTS) * 2000
    profiler = cProfile.Profile()
    profiler.enable()
    render(source)
    profiler.disable()

    print("\n" + "=" * 60)
    print("TOP 20 FUNCTIONS BY CUMULATIVE TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.CUMULATIVE).print_stats(20)
    print(s.getvalue())


if __name__ == "__main__":
    main()
