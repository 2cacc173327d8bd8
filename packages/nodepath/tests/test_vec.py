"""Tests for vector helpers."""
import pytest
from nodepath.vec import lerp, project, zero


def test_lerp_endpoints_and_midpoint():
    a, b = (0.0, 10.0), (10.0, 20.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 0.5) == (5.0, 15.0)
    assert lerp(a, b, 1.0) == b


def test_lerp_three_components():
    assert lerp((0.0, 0.0, 0.0), (2.0, 4.0, 8.0), 0.25) == (0.5, 1.0, 2.0)


def test_lerp_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        lerp((0.0, 0.0), (1.0, 1.0, 1.0), 0.5)


def test_project_truncates():
    assert project((1, 2, 3), 2) == (1.0, 2.0)


def test_project_pads():
    """Missing components are filled with zeros."""
    assert project((1, 2), 3) == (1.0, 2.0, 0.0)


def test_zero():
    assert zero(3) == (0.0, 0.0, 0.0)
