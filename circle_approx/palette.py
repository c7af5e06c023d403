"""
palette.py

Palette switch: cluster the target's pixels and restrict candidate circles
to the cluster centers.
"""

from __future__ import annotations
from typing import List, Tuple
import numpy as np
from sklearn.cluster import KMeans

from .color import Palette
from .config import DEFAULT_PALETTE_SIZE, KMEANS_N_INIT, KMEANS_RANDOM_STATE
from .utils import ensure


def extract_palette(target: np.ndarray, size: int = DEFAULT_PALETTE_SIZE) -> Palette:
    """
    K-means quantization of ``target`` into at most ``size`` colors.

    When the image holds fewer distinct colors than ``size`` the cluster
    count drops to match, so every center is a real color. Centers are
    rounded to uint8 and de-duplicated, keeping cluster order.
    """
    ensure(size >= 1, f"Palette size must be >= 1, got {size}", ValueError)
    flat = target.reshape(-1, 3)
    ensure(flat.shape[0] > 0, "Cannot extract a palette from an empty image.", ValueError)

    distinct = np.unique(flat, axis=0)
    n_clusters = min(size, distinct.shape[0])
    if n_clusters == distinct.shape[0]:
        centers = distinct
    else:
        pixels = flat.astype(np.float32)
        kmeans = KMeans(n_clusters=n_clusters, n_init=KMEANS_N_INIT, random_state=KMEANS_RANDOM_STATE)
        kmeans.fit(pixels)
        centers = np.clip(np.rint(kmeans.cluster_centers_), 0, 255).astype(np.uint8)

    colors: List[Tuple[int, int, int]] = []
    for c in centers:
        rgb = (int(c[0]), int(c[1]), int(c[2]))
        if rgb not in colors:
            colors.append(rgb)
    return Palette(colors)
