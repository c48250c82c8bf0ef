"""
Shared test fixtures for abstract-shapes.
"""
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for testing

import pytest

from abstract_shapes.shapes.counter import IdCounter


@pytest.fixture
def counter():
    """Fresh id counter starting at 0."""
    return IdCounter()
