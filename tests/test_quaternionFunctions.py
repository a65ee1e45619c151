import numpy as np
import pytest

from quatlib import (
    DegenerateQuaternionError, Quaternion, config,
    quatConjugate, quatInverse, quatMultiply, quatNorm, quatSquareNorm, vectNormalize,
)


def test_quat_multiply_matches_hamilton_product():
    a = np.array([1.0, 2.0, 3.0, 4.0])
    b = np.array([5.0, 6.0, 7.0, 8.0])
    np.testing.assert_allclose(quatMultiply(a, b), [-60.0, 12.0, 30.0, 24.0])
    np.testing.assert_allclose(quatMultiply(b, a), [-60.0, 20.0, 14.0, 32.0])
    np.testing.assert_allclose(quatMultiply(a, b), (Quaternion(*a) * Quaternion(*b)).q)


def test_quat_multiply_basis():
    i = [0, 1, 0, 0]
    j = [0, 0, 1, 0]
    np.testing.assert_array_equal(quatMultiply(i, j), [0, 0, 0, 1])
    np.testing.assert_array_equal(quatMultiply(j, i), [0, 0, 0, -1])


def test_conjugate_and_norm():
    q = np.array([1.0, 2.0, 3.0, 4.0])
    np.testing.assert_array_equal(quatConjugate(q), [1.0, -2.0, -3.0, -4.0])
    assert quatSquareNorm(q) == 30.0
    assert quatNorm(q) == np.sqrt(30.0)


def test_inverse():
    q = np.array([1.0, 2.0, 3.0, 4.0])
    np.testing.assert_allclose(quatInverse(q), Quaternion(*q).inverse().q)
    np.testing.assert_allclose(quatMultiply(q, quatInverse(q)), [1.0, 0.0, 0.0, 0.0], atol=config.DEFAULT_TOLERANCE)


def test_normalize():
    q = vectNormalize([3.0, 0.0, 4.0, 0.0])
    np.testing.assert_allclose(q, [0.6, 0.0, 0.8, 0.0])
    assert abs(quatNorm(q) - 1.0) < config.DEFAULT_TOLERANCE


def test_zero_quaternion():
    zero = np.zeros(4)
    assert np.all(np.isnan(vectNormalize(zero)))
    assert np.all(np.isnan(quatInverse(zero)))


def test_zero_quaternion_strict(monkeypatch):
    monkeypatch.setattr(config, "strictDegenerate", True)
    with pytest.raises(DegenerateQuaternionError):
        vectNormalize(np.zeros(4))
    with pytest.raises(DegenerateQuaternionError):
        quatInverse(np.zeros(4))


def test_normalize_uses_quaternion_norm():
    q = np.array([1.0, 2.0, 3.0, 4.0])
    np.testing.assert_allclose(vectNormalize(q), Quaternion(*q).normalized().q)


def test_tiny_quaternion_strict(monkeypatch):
    monkeypatch.setattr(config, "strictDegenerate", True)
    q = np.array([1e-200, 0.0, 0.0, 0.0])
    assert quatSquareNorm(q) == 0.0
    quatInverse(q)
