#!/usr/bin/env python3

"""
circle_approx_cli.py

CLI for approximating an input image with solid circles.

Starting from a black canvas, random circles are proposed one at a time and
kept only when they bring the canvas closer to the input. The final canvas
is written to the output path in whatever format its extension names.

Typical usage:
    $ python3 circle_approx_cli.py input.jpg output.png 5000 --seed 7

The public entry point is :func:`main`.

Exit status is 0 on success, 2 for bad arguments or config, and 1 when the
input cannot be decoded or the output cannot be written.
"""

from __future__ import annotations
import argparse, sys
from typing import List, Optional
import numpy as np

from circle_approx.config import load_config
from circle_approx.image_io import load_target, save_canvas
from circle_approx.palette import extract_palette
from circle_approx.scoring import total_error
from circle_approx.search import ConsoleProgress, approximate
from circle_approx.utils import ApproximationError, announce


# =========================
# CLI
# =========================
def _non_negative_int(text: str) -> int:
    """Plain ASCII digits with an optional leading '+'; no spaces or underscores."""
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        raise argparse.ArgumentTypeError(f"not a non-negative integer: {text!r}")
    return int(digits)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Approximate an image with randomly placed solid circles.")
    p.add_argument("input", help="Path to the target image.")
    p.add_argument("output", help="Path for the result; format follows the extension.")
    p.add_argument("iterations", nargs="?", type=_non_negative_int, default=None,
                   help="Number of candidate circles to try (default: 100).")
    p.add_argument("--seed", type=_non_negative_int, default=None, help="Random seed for reproducible runs.")
    p.add_argument("--palette", action="store_true", help="Only use colors clustered from the input image.")
    p.add_argument("--config", default=None, help="Path to YAML config file.")
    return p.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the circle approximation command-line interface.

    Parses arguments, loads the target, runs the hill-climbing search with a
    live percentage counter, prints the kept count and writes the canvas.

    Returns:
        Process exit status.
    """
    args = parse_args(argv)

    try:
        cfg = load_config(args.config)
        iterations = args.iterations if args.iterations is not None else cfg["iterations"]
        seed = args.seed if args.seed is not None else cfg["seed"]
        use_palette = args.palette or cfg["palette"]["enabled"]

        announce("LOAD_IMAGE", {"img_path": args.input})
        target = load_target(args.input)
        h, w = target.shape[:2]
        print(f"[OK] Image loaded ({w}x{h}).")

        rng = np.random.default_rng(seed)

        palette = None
        if use_palette:
            announce("EXTRACT_PALETTE", {"size": cfg["palette"]["size"], "pixels": h * w})
            palette = extract_palette(target, cfg["palette"]["size"])
            print(f"[OK] Palette extracted: {len(palette)} colors.")

        announce("APPROXIMATE", {"iterations": iterations, "seed": seed, "palette": use_palette})
        progress = ConsoleProgress(sys.stdout)
        result = approximate(target, iterations, rng, palette=palette, progress=progress)
        progress.finish()
        print(f"kept {result.kept} of {result.iterations} iterations")
        print(f"[OK] Remaining error: {total_error(target, result.canvas)}")

        announce("SAVE_IMAGE", {"path": args.output, "size": (w, h)})
        save_canvas(result.canvas, args.output)
        print("[OK] Image saved.")
    except ApproximationError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
