"""
image_io.py

OpenCV adapter between image files and RGB pixel grids.
"""

from __future__ import annotations
import os
import cv2
import numpy as np

from .utils import ImageIOError, ensure


def load_target(path: str) -> np.ndarray:
    """
    Decode ``path`` into a read-only (H, W, 3) uint8 RGB grid.
    Alpha, if present, is discarded.
    """
    ensure(os.path.isfile(path), f"Input image not found: {path}", ImageIOError)
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    ensure(img is not None, f"Image loading failed for path: {path}", ImageIOError)
    rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    rgb.flags.writeable = False
    return rgb

def save_canvas(canvas: np.ndarray, path: str) -> None:
    """Encode ``canvas`` to ``path``; the format follows the file extension."""
    bgr = cv2.cvtColor(np.ascontiguousarray(canvas), cv2.COLOR_RGB2BGR)
    try:
        ok = cv2.imwrite(path, bgr)
    except cv2.error as e:
        raise ImageIOError(f"Failed to save image to {path}: {e}") from e
    ensure(ok, f"Failed to save image to {path}", ImageIOError)
