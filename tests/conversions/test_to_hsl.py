import itertools

import numpy as np
import pytest

from chromacss.conversions.to_hsl import rgb_to_hsl, np_rgb_to_hsl
from samples import samples_rgb_hsl

def test_rgb_to_hsl():
    for (r, g, b), expected in samples_rgb_hsl.items():
        assert rgb_to_hsl(r, g, b) == expected

def test_rgb_to_hsl_returns_ints():
    h, s, l = rgb_to_hsl(67, 122, 134)
    assert (h, s, l) == (191, 33, 39)
    assert all(isinstance(v, int) for v in (h, s, l))

def test_rgb_to_hsl_wraps_rounded_hue_of_360():
    # hue is 359.76 before rounding
    h, _, _ = rgb_to_hsl(255, 0, 1)
    assert h == 0

def test_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    result = np_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.array_equal(result, expected)

def test_rgb_to_hsl_numpy_matches_scalar():
    steps = range(0, 256, 17)
    grid = np.array(list(itertools.product(steps, steps, steps)))
    result = np_rgb_to_hsl(grid[..., 0], grid[..., 1], grid[..., 2])
    expected = np.array([rgb_to_hsl(*rgb) for rgb in grid.tolist()])
    assert result.shape == (len(grid), 3)
    assert np.array_equal(result, expected)

def test_rgb_to_hsl_numpy_broadcasts_scalars():
    result = np_rgb_to_hsl(np.array([255, 0]), 0, 0)
    assert np.array_equal(result, [[0, 100, 50], [0, 0, 0]])

def test_rgb_to_hsl_numpy_clips_with_warning():
    with pytest.warns(UserWarning, match="clipped"):
        result = np_rgb_to_hsl(np.array([300]), np.array([-5]), np.array([0]))
    assert np.array_equal(result, [[0, 100, 50]])
