"""
Test utilities for building pixel grids and image files.
"""

import cv2
import numpy as np


def solid(width, height, rgb):
    grid = np.zeros((height, width, 3), dtype=np.uint8)
    grid[:, :] = rgb
    return grid


def write_rgb(path, grid):
    """Write an RGB grid to disk (OpenCV expects BGR)."""
    assert cv2.imwrite(str(path), cv2.cvtColor(grid, cv2.COLOR_RGB2BGR))
    return str(path)


def read_rgb(path):
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    assert img is not None
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
