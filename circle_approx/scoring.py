"""
scoring.py

Acceptance test for candidate circles.

The score of a region is the sum over its pixels of the truncated Euclidean
RGB distance to the target. The square root is applied per pixel before
summing; that is the metric the search has always used, and switching to a
squared-error sum would change which circles get accepted.
"""

from __future__ import annotations
import numpy as np

from .color import color_distances
from .shapes import Circle
from .utils import ensure


def shape_improves(target: np.ndarray, canvas: np.ndarray, circle: Circle) -> bool:
    """
    True if painting ``circle`` would strictly lower the score over its
    clamped bounding box. Ties are rejected. Neither grid is modified.
    """
    ensure(target.shape == canvas.shape,
           f"Target and canvas shapes differ: {target.shape} vs {canvas.shape}", ValueError)
    h, w = canvas.shape[:2]
    xmin, xmax, ymin, ymax = circle.clamped_bounds(w, h)
    if xmin == xmax or ymin == ymax:
        return False

    tgt = target[ymin:ymax, xmin:xmax]
    cur = canvas[ymin:ymax, xmin:xmax]
    mask = circle.coverage_mask(xmin, xmax, ymin, ymax)
    if not mask.any():
        return False

    # pixels outside the circle contribute equally to both scores
    original_score = int(color_distances(cur[mask], tgt[mask]).sum())
    cand = np.array(circle.color, dtype=np.uint8)
    modified_score = int(color_distances(cand[None, :], tgt[mask]).sum())
    return modified_score < original_score

def total_error(target: np.ndarray, canvas: np.ndarray) -> int:
    """Score of the whole canvas against the target."""
    ensure(target.shape == canvas.shape,
           f"Target and canvas shapes differ: {target.shape} vs {canvas.shape}", ValueError)
    return int(color_distances(canvas, target).sum())
