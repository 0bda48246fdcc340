"""Text rendering of detected cycles for terminal output."""
from __future__ import annotations

from typing import Hashable, Iterable, Sequence


def format_cycle(path: Iterable[Hashable], separator: str = ".") -> str:
    """``[a, b, a]`` -> ``a.b.a``"""
    return separator.join(str(node) for node in path)


def format_cycles(
    cycles: Iterable[Iterable[Hashable]],
    separator: str = ".",
    cycle_separator: str = ";",
) -> str:
    return cycle_separator.join(format_cycle(c, separator) for c in cycles)


def format_report(
    cycles: Sequence[Sequence[Hashable]],
    label: str = "Cycles",
    separator: str = ".",
) -> str:
    """Format the cycles as a readable report, one cycle per line.

    Cycles are listed in the order given; no sorting or deduplication.
    """
    lines = [
        f"=== {label} ===",
        f"cycles={len(cycles)}",
    ]
    for i, cycle in enumerate(cycles, start=1):
        lines.append(f"  {i:>3}. {format_cycle(cycle, separator)}  (length {len(cycle) - 1})")
    return "\n".join(lines)
