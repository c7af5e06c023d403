"""
config.py

Defaults for a run and the optional YAML config file.

Example config.yaml::

    iterations: 5000
    seed: 7
    palette:
      enabled: true
      size: 12
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import yaml

from .utils import ArgumentError, ensure

# =========================
# Configurable constants
# =========================
DEFAULT_ITERATIONS = 100
DEFAULT_PALETTE_SIZE = 16

# K-means parameters (palette extraction)
KMEANS_N_INIT = 10
KMEANS_RANDOM_STATE = 42

# Progress counter: "NNN%" is redrawn after this many backspaces
PROGRESS_BACKSPACES = 4

DEFAULTS: Dict[str, Any] = {
    "iterations": DEFAULT_ITERATIONS,
    "seed": None,
    "palette": {
        "enabled": False,
        "size": DEFAULT_PALETTE_SIZE,
    },
}


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read a YAML config and merge it over :data:`DEFAULTS`.

    With no path, a copy of the defaults is returned. Any problem with the
    file or its values raises :class:`ArgumentError`.
    """
    cfg = {"iterations": DEFAULTS["iterations"],
           "seed": DEFAULTS["seed"],
           "palette": dict(DEFAULTS["palette"])}
    if path is None:
        return cfg

    try:
        with open(path, "r") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ArgumentError(f"Failed to read config: {e}") from e

    if raw is None:
        return cfg
    ensure(isinstance(raw, dict), "Config must be a YAML mapping.", ArgumentError)
    unknown = set(raw) - set(DEFAULTS)
    ensure(not unknown, f"Unknown config keys: {sorted(unknown)}", ArgumentError)

    if "iterations" in raw:
        ensure(_is_int(raw["iterations"]) and raw["iterations"] >= 0,
               "iterations must be a non-negative integer.", ArgumentError)
        cfg["iterations"] = raw["iterations"]
    if "seed" in raw:
        ensure(raw["seed"] is None or (_is_int(raw["seed"]) and raw["seed"] >= 0),
               "seed must be a non-negative integer or null.", ArgumentError)
        cfg["seed"] = raw["seed"]
    if "palette" in raw:
        pal = raw["palette"]
        if isinstance(pal, bool):
            pal = {"enabled": pal}
        ensure(isinstance(pal, dict), "palette must be a boolean or a mapping.", ArgumentError)
        unknown = set(pal) - set(DEFAULTS["palette"])
        ensure(not unknown, f"Unknown palette keys: {sorted(unknown)}", ArgumentError)
        if "enabled" in pal:
            ensure(isinstance(pal["enabled"], bool), "palette.enabled must be true or false.", ArgumentError)
            cfg["palette"]["enabled"] = pal["enabled"]
        if "size" in pal:
            ensure(_is_int(pal["size"]) and pal["size"] >= 1,
                   "palette.size must be a positive integer.", ArgumentError)
            cfg["palette"]["size"] = pal["size"]
    return cfg
