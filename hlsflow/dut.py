"""The simple point-to-point design: multiply each 8-bit input by seven."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

INPUT_WIDTH = 8
OUTPUT_WIDTH = 11
FACTOR = 7


def to_uint(value: int, width: int) -> int:
    """Truncate ``value`` to an unsigned integer of ``width`` bits."""
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    return value & ((1 << width) - 1)


def compute(value: int) -> int:
    """Apply the design's computation to one input sample."""
    return to_uint(to_uint(value, INPUT_WIDTH) * FACTOR, OUTPUT_WIDTH)


def run_dut(values: Iterable[int]) -> Iterator[int]:
    """Process a stream of input samples in order."""
    for value in values:
        yield compute(value)