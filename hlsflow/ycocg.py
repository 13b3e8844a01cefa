"""Single-pixel RGB to YCoCg colour-space conversion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_SAMPLE_WIDTH = 16
_INTERNAL_WIDTH = 32


def _to_signed(value: int, width: int) -> int:
    """Wrap ``value`` into a two's-complement integer of ``width`` bits."""
    mask = (1 << width) - 1
    value &= mask
    if value >> (width - 1):
        value -= 1 << width
    return value


@dataclass(frozen=True)
class YCoCgPixel:
    """One pixel in YCoCg colour space."""

    y: int
    co: int
    cg: int

    def __str__(self) -> str:
        return f"({self.y}, {self.co}, {self.cg})"


def rgb2ycocg_pixel(r: int, g: int, b: int, bits: int) -> YCoCgPixel:
    """Convert one RGB pixel of ``bits`` bits per component to YCoCg.

    At 16 bits per component the chroma is halved so that it keeps the
    sample width; otherwise chroma is offset by twice the mid value.
    """
    if bits < 1:
        raise ValueError(f"bit depth must be positive, got {bits}")
    half = 1 << (bits - 1)

    co = r - b
    t = b + (co >> 1)
    cg = g - t
    y = t + (cg >> 1)

    if bits == 16:
        co = ((co + 1) >> 1) + half
        cg = ((cg + 1) >> 1) + half
    else:
        co += half * 2
        cg += half * 2
    return YCoCgPixel(y, co, cg)


def rgb2ycocg_pixel_sc(r: int, g: int, b: int, bits: int) -> YCoCgPixel:
    """Convert one pixel with the fixed-width arithmetic of the hardware block.

    Inputs and outputs are 16-bit signed samples; intermediate results are
    held in 32-bit signed registers.
    """

    def w32(value: int) -> int:
        return _to_signed(value, _INTERNAL_WIDTH)

    r, g, b, bits = (_to_signed(v, _SAMPLE_WIDTH) for v in (r, g, b, bits))
    if not 1 <= bits < _INTERNAL_WIDTH:
        raise ValueError(f"bit depth must be between 1 and {_INTERNAL_WIDTH - 1}, got {bits}")
    half = w32(1 << (bits - 1))

    co = w32(r - b)
    t = w32(b + (co >> 1))
    cg = w32(g - t)
    y = w32(t + (cg >> 1))

    if bits == 16:
        co = w32(((co + 1) >> 1) + half)
        cg = w32(((cg + 1) >> 1) + half)
    else:
        co = w32(co + half * 2)
        cg = w32(cg + half * 2)

    return YCoCgPixel(
        _to_signed(y, _SAMPLE_WIDTH),
        _to_signed(co, _SAMPLE_WIDTH),
        _to_signed(cg, _SAMPLE_WIDTH),
    )


def convert_stream(samples: Iterable[tuple[int, int, int, int]]) -> Iterator[YCoCgPixel]:
    """Convert a stream of ``(r, g, b, bits)`` samples, one pixel at a time."""
    for r, g, b, bits in samples:
        yield rgb2ycocg_pixel_sc(r, g, b, bits)