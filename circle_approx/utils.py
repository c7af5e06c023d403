"""
utils.py

Error taxonomy and console helpers shared by the engine and the CLI.

Every failure that reaches the process boundary is one of two kinds:
:class:`ArgumentError` (bad command line or config) or :class:`ImageIOError`
(input could not be decoded, output could not be written).
"""

from __future__ import annotations
from typing import Any, Dict, Type


class ApproximationError(RuntimeError):
    """Base class for fatal errors surfaced to the command line."""

    exit_code = 1


class ArgumentError(ApproximationError):
    """Missing or malformed argument or config value."""

    exit_code = 2


class ImageIOError(ApproximationError):
    """Image could not be read, decoded, encoded or written."""

    exit_code = 1


# =========================
# Utility helpers
# =========================
def announce(step: str, inputs: Dict[str, Any]):
    """
    Log a structured event to stdout.
    Called before each significant stage with the inputs it runs on.
    """
    print(f"[STEP] {step} | inputs: " + ", ".join(f"{k}={v}" for k, v in inputs.items()))

def ensure(cond: bool, msg: str, exc: Type[Exception] = RuntimeError):
    if not cond:
        raise exc(msg)
