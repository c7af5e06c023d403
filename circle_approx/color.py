"""
color.py

RGB color model, the per-pixel distance used for scoring, and the palette
type that can constrain random color sampling.
"""

from __future__ import annotations
import math
from typing import Iterable, Iterator, NamedTuple, Optional, Tuple
import numpy as np


class _RGB(NamedTuple):
    r: int
    g: int
    b: int


class Color(_RGB):
    """8-bit RGB triple, no alpha. Channels must be ints in [0, 255]."""

    __slots__ = ()

    def __new__(cls, r: int, g: int, b: int):
        for name, v in (("r", r), ("g", g), ("b", b)):
            if not isinstance(v, int) or isinstance(v, bool):
                raise ValueError(f"Color channel {name} must be an int, got {v!r}")
            if not 0 <= v <= 255:
                raise ValueError(f"Color channel {name} out of range [0, 255]: {v}")
        return super().__new__(cls, r, g, b)

    @classmethod
    def black(cls) -> "Color":
        return cls(0, 0, 0)

    @classmethod
    def sample(cls, rng: np.random.Generator, palette: Optional["Palette"] = None) -> "Color":
        """
        Random color. With a palette, a uniformly chosen entry; otherwise each
        channel is drawn independently from [0, 255].
        """
        if palette is not None:
            return palette[int(rng.integers(0, len(palette)))]
        r, g, b = rng.integers(0, 256, size=3)
        return cls(int(r), int(g), int(b))

    def distance(self, other: "Color") -> int:
        """Euclidean distance in RGB space, truncated to an int."""
        dr = abs(self.r - other.r)
        dg = abs(self.g - other.g)
        db = abs(self.b - other.b)
        return int(math.sqrt(dr * dr + dg * dg + db * db))


def color_distances(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Element-wise :meth:`Color.distance` over two (..., 3) arrays.

    The square root is taken per pixel and truncated, so summing the result
    gives the same score as summing individual ``Color.distance`` calls.
    """
    diff = a.astype(np.int64) - b.astype(np.int64)
    return np.sqrt((diff * diff).sum(axis=-1)).astype(np.int64)


class Palette:
    """Ordered, non-empty set of colors that candidate circles draw from."""

    def __init__(self, colors: Iterable[Tuple[int, int, int]]):
        # Color rejects out-of-range channels
        self._colors: Tuple[Color, ...] = tuple(Color(*(int(v) for v in c)) for c in colors)
        if not self._colors:
            raise ValueError("A palette needs at least one color.")

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, index: int) -> Color:
        return self._colors[index]

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._colors == other._colors

    def __repr__(self) -> str:
        return f"Palette({list(self._colors)!r})"
