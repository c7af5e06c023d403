"""Unit tests for the RGB color model and palettes."""

import numpy as np
import pytest

from circle_approx.color import Color, Palette, color_distances


def test_black():
    assert Color.black() == Color(0, 0, 0)


def test_distance_truncates_per_pixel_sqrt():
    assert Color(0, 0, 0).distance(Color(255, 0, 0)) == 255
    assert Color(3, 4, 0).distance(Color(0, 0, 0)) == 5
    assert Color(1, 1, 0).distance(Color(0, 0, 0)) == 1  # sqrt(2)
    assert Color(10, 20, 30).distance(Color(10, 20, 30)) == 0


def test_distance_is_symmetric():
    a, b = Color(200, 13, 77), Color(5, 250, 100)
    assert a.distance(b) == b.distance(a)


def test_color_distances_matches_scalar_distance():
    gen = np.random.default_rng(0)
    a = gen.integers(0, 256, size=(50, 3), dtype=np.uint8)
    b = gen.integers(0, 256, size=(50, 3), dtype=np.uint8)

    got = color_distances(a, b)
    expected = [Color(*map(int, x)).distance(Color(*map(int, y))) for x, y in zip(a, b)]

    assert got.tolist() == expected


def test_sample_without_palette_stays_in_range(rng):
    samples = [Color.sample(rng) for _ in range(500)]
    for c in samples:
        assert all(0 <= v <= 255 for v in c)
        assert all(isinstance(v, int) for v in c)
    assert len(set(samples)) > 400


def test_sample_is_reproducible_with_seed():
    a = [Color.sample(np.random.default_rng(5)) for _ in range(3)]
    b = [Color.sample(np.random.default_rng(5)) for _ in range(3)]
    assert a == b


def test_sample_with_palette_only_returns_palette_colors(rng):
    palette = Palette([(255, 0, 0), (0, 255, 0), (0, 0, 255)])
    seen = {Color.sample(rng, palette) for _ in range(200)}
    assert seen == set(palette)


def test_single_color_palette():
    palette = Palette([(1, 2, 3)])
    assert Color.sample(np.random.default_rng(0), palette) == Color(1, 2, 3)


def test_palette_rejects_empty_and_out_of_range():
    with pytest.raises(ValueError):
        Palette([])
    with pytest.raises(ValueError):
        Palette([(0, 0, 256)])


def test_palette_sequence_behaviour():
    palette = Palette([(1, 2, 3), (4, 5, 6)])
    assert len(palette) == 2
    assert palette[1] == Color(4, 5, 6)
    assert list(palette) == [Color(1, 2, 3), Color(4, 5, 6)]
    assert palette == Palette([(1, 2, 3), (4, 5, 6)])


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (300, -5, 0), (0, 0, 1.5), (True, 0, 0)])
def test_color_rejects_bad_channels(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_color_accepts_channel_extremes():
    assert Color(0, 255, 0) == (0, 255, 0)
    assert repr(Color(1, 2, 3)) == "Color(r=1, g=2, b=3)"
