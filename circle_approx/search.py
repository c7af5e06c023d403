"""
search.py

Hill-climbing driver. Each iteration proposes one random circle, keeps it
if it strictly lowers the local error, and otherwise throws it away. There
is no restart and no backtracking, so the canvas error never increases.
"""

from __future__ import annotations
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO
import numpy as np

from .canvas import apply, blank_like
from .color import Palette
from .config import PROGRESS_BACKSPACES
from .scoring import shape_improves
from .shapes import Circle
from .utils import ensure

ProgressCallback = Callable[[int], None]


@dataclass
class SearchResult:
    canvas: np.ndarray
    kept: int
    iterations: int


class ConsoleProgress:
    """Percentage counter redrawn in place on a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def __call__(self, pct: int) -> None:
        self.stream.write("\b" * PROGRESS_BACKSPACES + f"{pct:3}%")
        self.stream.flush()

    def finish(self) -> None:
        self.stream.write("\n")
        self.stream.flush()


def approximate(
    target: np.ndarray,
    iterations: int,
    rng: np.random.Generator,
    palette: Optional[Palette] = None,
    progress: Optional[ProgressCallback] = None,
) -> SearchResult:
    """
    Run ``iterations`` rounds of propose / score / commit against ``target``.

    Args:
        target: (H, W, 3) uint8 RGB grid. Read only.
        iterations: Number of candidates to try. Must be >= 0.
        rng: Source of randomness for every candidate.
        palette: Restrict candidate colors to these, or ``None`` for any color.
        progress: Called with the percentage done, only when it increases.

    Returns:
        SearchResult with the final canvas and the number of kept circles.
    """
    ensure(iterations >= 0, f"iterations must be >= 0, got {iterations}", ValueError)
    h, w = target.shape[:2]
    canvas = blank_like(target)
    kept = 0
    last_pct = 0

    for iteration in range(iterations):
        candidate = Circle.sample(rng, w, h, palette)
        if shape_improves(target, canvas, candidate):
            apply(canvas, candidate)
            kept += 1

        current_pct = iteration * 100 // iterations + 1
        if current_pct > last_pct:
            if progress is not None:
                progress(current_pct)
            last_pct = current_pct

    return SearchResult(canvas=canvas, kept=kept, iterations=iterations)
