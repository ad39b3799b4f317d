"""
Tests for the 3x3 linear algebra primitives.
"""

from __future__ import annotations

import numpy as np
import pytest

from chromaspace.linalg import Matrix3x3, Vector3


def _sample_matrix() -> Matrix3x3:
    return Matrix3x3([[2.0, 0.5, -1.0], [0.25, 3.0, 0.0], [1.0, -2.0, 4.0]])


def test_from_columns_places_vectors_as_columns() -> None:
    m = Matrix3x3.from_columns(Vector3(1, 2, 3), Vector3(4, 5, 6), Vector3(7, 8, 9))
    np.testing.assert_array_equal(m.to_numpy(), [[1, 4, 7], [2, 5, 8], [3, 6, 9]])
    assert m.column(1) == Vector3(4.0, 5.0, 6.0)


def test_matrix_vector_product() -> None:
    m = _sample_matrix()
    v = Vector3(1.0, -2.0, 0.5)
    expected = m.to_numpy() @ v.to_numpy()
    np.testing.assert_allclose((m @ v).to_numpy(), expected)


def test_matrix_product_composes_right_to_left() -> None:
    a = _sample_matrix()
    b = Matrix3x3.diagonal(1.0, 2.0, 3.0)
    v = Vector3(0.3, 0.2, 0.1)
    np.testing.assert_allclose(((a @ b) @ v).to_numpy(), (a @ (b @ v)).to_numpy())


def test_matrix_applies_to_trailing_axis_of_arrays() -> None:
    m = _sample_matrix()
    img = np.random.default_rng(0).random((4, 5, 3))
    out = m @ img
    assert out.shape == img.shape
    np.testing.assert_allclose(out[2, 3], (m @ Vector3.from_iterable(img[2, 3])).to_numpy())


def test_array_with_wrong_last_dimension_raises() -> None:
    with pytest.raises(ValueError):
        _sample_matrix() @ np.zeros((4, 2))


def test_inverse_matches_numpy() -> None:
    m = _sample_matrix()
    np.testing.assert_allclose(m.inverse().to_numpy(), np.linalg.inv(m.to_numpy()), atol=1e-12)
    assert (m @ m.inverse()).allclose(Matrix3x3.identity(), atol=1e-12)


def test_determinant_matches_numpy() -> None:
    m = _sample_matrix()
    assert np.isclose(m.determinant(), np.linalg.det(m.to_numpy()))


def test_singular_inverse_is_not_finite() -> None:
    singular = Matrix3x3([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [0.0, 1.0, 1.0]])
    assert singular.determinant() == 0.0
    assert not singular.inverse().is_finite()


def test_structural_equality_and_hash() -> None:
    assert _sample_matrix() == _sample_matrix()
    assert hash(_sample_matrix()) == hash(_sample_matrix())
    assert _sample_matrix() != Matrix3x3.identity()


def test_signed_zero_matrices_are_equal_and_hash_alike() -> None:
    negative = Matrix3x3.diagonal(1.0, -0.0, 1.0)
    positive = Matrix3x3.diagonal(1.0, 0.0, 1.0)
    assert negative == positive
    assert hash(negative) == hash(positive)
    assert len({negative, positive}) == 1


def test_matrix_is_immutable() -> None:
    m = _sample_matrix()
    copy = m.to_numpy()
    copy[0, 0] = 100.0
    assert m.to_numpy()[0, 0] == 2.0
    with pytest.raises(ValueError):
        m._data[0, 0] = 5.0


def test_invalid_shape_raises() -> None:
    with pytest.raises(ValueError):
        Matrix3x3([[1.0, 2.0], [3.0, 4.0]])


def test_vector_scaling() -> None:
    assert Vector3(1.0, 2.0, 3.0) * 2.0 == Vector3(2.0, 4.0, 6.0)
    assert 0.5 * Vector3(2.0, 4.0, 6.0) == Vector3(1.0, 2.0, 3.0)
