"""Unit tests for the OpenCV image adapter."""

import cv2
import numpy as np
import pytest

from helpers import read_rgb, solid, write_rgb

from circle_approx.image_io import load_target, save_canvas
from circle_approx.utils import ImageIOError


def test_load_returns_read_only_rgb(tmp_path):
    path = write_rgb(tmp_path / "red.png", solid(5, 3, (255, 0, 0)))
    target = load_target(path)

    assert target.shape == (3, 5, 3)
    assert target.dtype == np.uint8
    assert tuple(target[0, 0]) == (255, 0, 0)
    with pytest.raises(ValueError):
        target[0, 0] = (0, 0, 0)


def test_load_drops_alpha(tmp_path):
    bgra = np.zeros((4, 4, 4), dtype=np.uint8)
    bgra[..., 1] = 200
    bgra[..., 3] = 10
    path = tmp_path / "alpha.png"
    assert cv2.imwrite(str(path), bgra)

    target = load_target(str(path))
    assert target.shape == (4, 4, 3)
    assert tuple(target[2, 2]) == (0, 200, 0)


def test_load_missing_or_garbage(tmp_path):
    with pytest.raises(ImageIOError):
        load_target(str(tmp_path / "missing.png"))

    junk = tmp_path / "junk.png"
    junk.write_text("definitely not a png")
    with pytest.raises(ImageIOError):
        load_target(str(junk))


def test_save_round_trips_png(tmp_path):
    canvas = solid(6, 2, (10, 20, 30))
    path = tmp_path / "out.png"
    save_canvas(canvas, str(path))
    assert np.array_equal(read_rgb(path), canvas)


def test_save_accepts_read_only_grid(tmp_path):
    canvas = solid(3, 3, (1, 2, 3))
    canvas.flags.writeable = False
    save_canvas(canvas, str(tmp_path / "ro.png"))


def test_save_failures(tmp_path):
    canvas = solid(3, 3, (1, 2, 3))
    with pytest.raises(ImageIOError):
        save_canvas(canvas, str(tmp_path / "out.unknownext"))
    with pytest.raises(ImageIOError):
        save_canvas(canvas, str(tmp_path / "no" / "such" / "dir" / "out.png"))
