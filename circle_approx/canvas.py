"""
canvas.py

Pixel grids are numpy arrays of shape (height, width, 3), dtype uint8, RGB.
Pixel (x, y) lives at ``grid[y, x]``.
"""

from __future__ import annotations
import numpy as np

from .shapes import Circle


def blank_canvas(width: int, height: int) -> np.ndarray:
    """All-black grid."""
    return np.zeros((height, width, 3), dtype=np.uint8)

def blank_like(target: np.ndarray) -> np.ndarray:
    h, w = target.shape[:2]
    return blank_canvas(w, h)

def apply(canvas: np.ndarray, circle: Circle) -> None:
    """
    Paint ``circle`` onto ``canvas`` in place.

    Only pixels inside both the circle and the grid are touched. The caller
    is expected to have checked the circle with ``shape_improves`` against
    this same canvas state.
    """
    h, w = canvas.shape[:2]
    xmin, xmax, ymin, ymax = circle.clamped_bounds(w, h)
    if xmin == xmax or ymin == ymax:
        return
    mask = circle.coverage_mask(xmin, xmax, ymin, ymax)
    canvas[ymin:ymax, xmin:xmax][mask] = circle.color
