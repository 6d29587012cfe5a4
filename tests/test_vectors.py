import math

import numpy as np
import pytest

from aprilkit import vectors as V


A = [1.5, -2.0, 3.25]
B = [0.5, 4.0, -1.0]


def test_add_subtract_round_trip():
    assert V.subtract(V.add(A, B), B) == pytest.approx(A)
    assert V.add(A, B) == pytest.approx(list(np.add(A, B)))


def test_scale_equals_repeated_add():
    assert V.scale(2.0, A) == pytest.approx(V.add(A, A))


def test_dot_matches_numpy_and_is_symmetric():
    assert V.dot(A, B) == pytest.approx(float(np.dot(A, B)))
    assert V.dot(A, B) == pytest.approx(V.dot(B, A))


def test_distance_relations():
    d = V.distance(A, B)
    assert d == pytest.approx(V.magnitude(V.subtract(A, B)))
    assert V.squared_distance(A, B) == pytest.approx(d * d)
    assert V.distance(A, A) == 0.0


def test_magnitude_pythagorean_triple():
    assert V.magnitude([3.0, 4.0]) == 5.0
    assert V.squared_magnitude(A) == pytest.approx(V.dot(A, A))


def test_normalize_gives_unit_vector_in_same_direction():
    n = V.normalize(A)
    assert V.magnitude(n) == pytest.approx(1.0)
    assert V.scale(V.magnitude(A), n) == pytest.approx(A)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        V.normalize([0.0, 0.0, 0.0])


def test_cross_product_orthogonal_and_matches_numpy():
    c = V.cross_product(A, B)
    assert V.dot(c, A) == pytest.approx(0.0, abs=1e-12)
    assert V.dot(c, B) == pytest.approx(0.0, abs=1e-12)
    assert c == pytest.approx(list(np.cross(A, B)))


def test_cross_matrix_reproduces_cross_product():
    m = V.cross_matrix(A)
    assert V.mat_ab_vector(m, B) == pytest.approx(V.cross_product(A, B))
    assert np.allclose(np.array(m), -np.array(m).T)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        V.add([1.0, 2.0], [1.0])
    with pytest.raises(ValueError):
        V.dot([1.0], [1.0, 2.0])


RNG = np.random.default_rng(42)
MA = RNG.normal(size=(2, 3))
MB = RNG.normal(size=(3, 4))
MC = RNG.normal(size=(4, 2))
MD = RNG.normal(size=(2, 3))


def test_mat_add_matches_numpy():
    assert np.allclose(V.mat_add(MA.tolist(), MD.tolist()), MA + MD)


def test_mat_ab_matches_numpy():
    assert np.allclose(V.mat_ab(MA.tolist(), MB.tolist()), MA @ MB)


def test_mat_abt_matches_numpy():
    assert np.allclose(V.mat_abt(MA.tolist(), MD.tolist()), MA @ MD.T)


def test_mat_abc_matches_numpy():
    assert np.allclose(V.mat_abc(MA.tolist(), MB.tolist(), MC.tolist()), MA @ MB @ MC)


def test_mat_atb_matches_numpy():
    assert np.allclose(V.mat_atb(MA.tolist(), MD.tolist()), MA.T @ MD)


def test_mat_ab_vector_matches_numpy():
    v = [1.0, -2.0, 0.5]
    assert np.allclose(V.mat_ab_vector(MA.tolist(), v), MA @ np.array(v))


def test_identity_is_neutral_for_product():
    eye = np.eye(3).tolist()
    assert np.allclose(V.mat_ab(MA.tolist(), eye), MA)


@pytest.mark.parametrize(
    "call",
    [
        lambda: V.mat_add(MA.tolist(), MB.tolist()),
        lambda: V.mat_ab(MA.tolist(), MC.tolist()),
        lambda: V.mat_abt(MA.tolist(), MB.tolist()),
        lambda: V.mat_atb(MA.tolist(), MB.tolist()),
        lambda: V.mat_ab_vector(MA.tolist(), [1.0, 2.0]),
        lambda: V.mat_add([[1.0, 2.0], [3.0]], [[1.0, 2.0], [3.0]]),
    ],
)
def test_shape_mismatch_raises(call):
    with pytest.raises(ValueError):
        call()


def test_distance_is_translation_invariant():
    shift = [10.0, -3.0, 7.5]
    assert math.isclose(
        V.distance(V.add(A, shift), V.add(B, shift)), V.distance(A, B), rel_tol=1e-12
    )