import sys
import os

import pytest

# Make the shared sample tables importable as ``samples``
tests_dir = os.path.dirname(os.path.abspath(__file__))
if tests_dir not in sys.path:
    sys.path.insert(0, tests_dir)

from chromacss import Color


@pytest.fixture
def orange():
    return Color.from_rgb(255, 128, 0, 0.7)


@pytest.fixture
def teal():
    return Color.from_css("hsl(180, 50%, 50%)")
