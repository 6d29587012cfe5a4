import numpy as np
import pytest

from aprilkit.linalg33 import mat33_chol, mat33_lower_tri_inv, mat33_sym_solve


def _spd(seed):
    rng = np.random.default_rng(seed)
    m = rng.normal(size=(3, 3))
    return m @ m.T + np.eye(3)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_chol_reconstructs_matrix(seed):
    a = _spd(seed)
    lower = np.array(mat33_chol(a.tolist()))
    assert np.allclose(lower @ lower.T, a)
    assert np.allclose(np.triu(lower, 1), 0.0)
    assert np.all(np.diag(lower) > 0)


def test_chol_of_identity_is_identity():
    assert np.allclose(mat33_chol(np.eye(3).tolist()), np.eye(3))


@pytest.mark.parametrize("seed", [4, 5, 6])
def test_lower_tri_inv_is_inverse(seed):
    lower = np.array(mat33_chol(_spd(seed).tolist()))
    inv = np.array(mat33_lower_tri_inv(lower.tolist()))
    assert np.allclose(inv @ lower, np.eye(3))
    assert np.allclose(np.triu(inv, 1), 0.0)


@pytest.mark.parametrize("seed", [7, 8, 9])
def test_sym_solve_matches_numpy(seed):
    a = _spd(seed)
    b = np.random.default_rng(seed + 100).normal(size=3)
    x = np.array(mat33_sym_solve(a.tolist(), b.tolist()))
    assert np.allclose(a @ x, b)
    assert np.allclose(x, np.linalg.solve(a, b))


def test_chol_rejects_non_positive_definite():
    with pytest.raises(ValueError):
        mat33_chol([[1.0, 2.0, 0.0], [2.0, 1.0, 0.0], [0.0, 0.0, 1.0]])


def test_lower_tri_inv_rejects_singular():
    with pytest.raises(ValueError):
        mat33_lower_tri_inv([[1.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 1.0]])


def test_sym_solve_rejects_indefinite():
    with pytest.raises(ValueError):
        mat33_sym_solve([[-1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]], [1.0, 1.0, 1.0])