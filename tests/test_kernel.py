import math
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from pyvector.types import kernel


@pytest.mark.parametrize("a, b", [
    ((2.0, -3.0), (1.0, 2.5)),
    ((2.0, -3.0, 1.0), (1.0, 2.5, -1.0)),
    ((2.0, -3.0, 1.0, -1.0), (1.0, 2.5, -1.0, 1.0)),
])
def test_formulas_are_arity_independent(a, b):
    assert kernel.sub(kernel.add(a, b), b) == pytest.approx(a)
    assert kernel.dot(a, b) == kernel.dot(b, a)
    assert kernel.distance(a, b) == pytest.approx(kernel.magnitude(kernel.sub(a, b)))
    assert kernel.magnitude(kernel.normalize(a)) == pytest.approx(1.0, abs=1e-6)
    assert len(kernel.scale(a, 2.0)) == len(a)


def test_magnitude_overflows_to_infinity():
    assert kernel.magnitude((1e200, 1e200)) == math.inf


def test_divide_by_zero():
    x, y, z = kernel.divide((1.0, -2.0, 0.0), 0.0)
    assert x == math.inf
    assert y == -math.inf
    assert math.isnan(z)


def test_normalize_zero_vector_is_nan():
    assert all(math.isnan(c) for c in kernel.normalize((0.0, 0.0, 0.0)))


def test_project_onto_zero_vector_is_nan():
    assert all(math.isnan(c) for c in kernel.project((1.0, 2.0), (0.0, 0.0)))


def test_angle_between_clamps_cosine():
    # 0.1 * 3 style rounding must not leave acos' domain.
    v = (0.1, 0.2, 0.3)
    assert kernel.angle_between(v, v) == pytest.approx(0.0, abs=1e-7)
    assert kernel.angle_between(v, kernel.negate(v)) == pytest.approx(math.pi)


def test_angle_between_zero_operand_is_nan():
    assert math.isnan(kernel.angle_between((0.0, 0.0), (1.0, 0.0)))


def test_cross_is_right_handed():
    assert kernel.cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)
    assert kernel.cross((2.0, -3.0, 1.0), (1.0, 2.5, -1.0)) == (0.5, 3.0, 8.0)


def test_lerp_extrapolates():
    assert kernel.lerp((0.0, 10.0), (10.0, 20.0), 1.5) == (15.0, 25.0)
    assert kernel.lerp((0.0, 10.0), (10.0, 20.0), -0.5) == (-5.0, 5.0)


def test_project_on_plane_removes_normal_component():
    assert kernel.project_on_plane((3.0, 4.0, 5.0), (0.0, 0.0, 2.0)) == (3.0, 4.0, 0.0)
