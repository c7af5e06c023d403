"""
shapes.py

Candidate circles: random generation, integer containment test, and the
bounding box clamped to the grid that scoring and mutation both iterate over.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np

from .color import Color, Palette


@dataclass(frozen=True)
class Circle:
    """
    Solid circle with an integer center and radius.

    The center may lie outside the canvas; the radius is never negative.
    """

    x: int
    y: int
    r: int
    color: Color

    def __post_init__(self):
        for name in ("x", "y", "r"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise ValueError(f"Circle {name} must be an int, got {v!r}")
        if not isinstance(self.color, Color):
            raise ValueError(f"Circle color must be a Color, got {self.color!r}")
        if self.r < 0:
            raise ValueError(f"Circle radius must be >= 0, got {self.r}")

    @classmethod
    def sample(cls, rng: np.random.Generator, width: int, height: int,
               palette: Optional[Palette] = None) -> "Circle":
        """
        Random circle over a width x height canvas.

        Center is uniform over the canvas, radius uniform in [0, width // 4).
        Canvases narrower than 4 pixels only ever get radius 0.
        """
        color = Color.sample(rng, palette)
        x = int(rng.integers(0, width))
        y = int(rng.integers(0, height))
        r = int(rng.integers(0, max(1, width // 4)))
        return cls(x, y, r, color)

    def contains(self, x: int, y: int) -> bool:
        dx = self.x - x
        dy = self.y - y
        return dx * dx + dy * dy <= self.r * self.r

    @property
    def left(self) -> int:
        return self.x - self.r

    @property
    def right(self) -> int:
        return self.x + self.r

    @property
    def top(self) -> int:
        return self.y - self.r

    @property
    def bottom(self) -> int:
        return self.y + self.r

    def clamped_bounds(self, width: int, height: int) -> Tuple[int, int, int, int]:
        """
        Half-open box ``(xmin, xmax, ymin, ymax)`` intersected with the grid.

        The right and bottom edges are exclusive, so column ``right`` and
        row ``bottom`` are never visited. Empty intersections come back with
        ``xmin == xmax`` or ``ymin == ymax``.
        """
        xmin = min(max(0, self.left), width)
        xmax = max(xmin, min(width, self.right))
        ymin = min(max(0, self.top), height)
        ymax = max(ymin, min(height, self.bottom))
        return xmin, xmax, ymin, ymax

    def coverage_mask(self, xmin: int, xmax: int, ymin: int, ymax: int) -> np.ndarray:
        """Boolean (rows, cols) mask of the box, True where :meth:`contains` holds."""
        ys = np.arange(ymin, ymax, dtype=np.int64)[:, None] - self.y
        xs = np.arange(xmin, xmax, dtype=np.int64)[None, :] - self.x
        return xs * xs + ys * ys <= self.r * self.r
