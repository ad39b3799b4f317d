"""
Immutable 3x3 matrix with a closed-form inverse.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from chromaspace.linalg.vector import Vector3


class Matrix3x3:
    """
    3x3 linear map stored as a write-protected float64 array.

    ``m @ v`` applies the map to a :class:`Vector3`, ``m @ n`` composes two
    maps (``n`` is applied first) and ``m @ array`` applies the map to every
    trailing 3-vector of an array shaped ``(..., 3)``.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Union[np.ndarray, Sequence[Sequence[float]]]) -> None:
        array = np.array(data, dtype=np.float64)
        if array.shape != (3, 3):
            raise ValueError(f"Matrix3x3 expects shape (3, 3), got {array.shape}")
        array.setflags(write=False)
        self._data = array

    @classmethod
    def from_columns(cls, c0: Vector3, c1: Vector3, c2: Vector3) -> "Matrix3x3":
        return cls(np.column_stack([c0.to_numpy(), c1.to_numpy(), c2.to_numpy()]))

    @classmethod
    def from_rows(cls, r0: Vector3, r1: Vector3, r2: Vector3) -> "Matrix3x3":
        return cls(np.vstack([r0.to_numpy(), r1.to_numpy(), r2.to_numpy()]))

    @classmethod
    def identity(cls) -> "Matrix3x3":
        return cls(np.eye(3))

    @classmethod
    def diagonal(cls, a: float, b: float, c: float) -> "Matrix3x3":
        return cls(np.diag([a, b, c]))

    def column(self, index: int) -> Vector3:
        return Vector3.from_iterable(self._data[:, index])

    def to_numpy(self) -> np.ndarray:
        """Return a writable copy of the underlying array."""

        return self._data.copy()

    def determinant(self) -> float:
        c0, c1, c2 = self._data.T
        return float(np.dot(c0, np.cross(c1, c2)))

    def inverse(self) -> "Matrix3x3":
        """
        Closed-form inverse from cofactors.

        The rows of the inverse are the pairwise cross products of the
        columns divided by the determinant. A singular matrix yields
        ``inf``/``nan`` entries instead of an error.
        """

        c0, c1, c2 = self._data.T
        cofactors = np.vstack([np.cross(c1, c2), np.cross(c2, c0), np.cross(c0, c1)])
        det = np.dot(c0, cofactors[0])
        with np.errstate(divide="ignore", invalid="ignore"):
            return Matrix3x3(cofactors / det)

    def is_finite(self) -> bool:
        return bool(np.isfinite(self._data).all())

    def allclose(self, other: "Matrix3x3", atol: float = 1e-9) -> bool:
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=atol))

    def __matmul__(self, other):
        if isinstance(other, Matrix3x3):
            return Matrix3x3(self._data @ other._data)
        if isinstance(other, Vector3):
            return Vector3.from_iterable(self._data @ other.to_numpy())
        if isinstance(other, np.ndarray):
            if other.shape[-1:] != (3,):
                raise ValueError(f"Expected array with last dimension 3, got shape {other.shape}")
            return np.dot(other, self._data.T)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        # Adding 0.0 folds -0.0 into 0.0 so equal matrices hash alike.
        return hash(tuple((self._data + 0.0).ravel().tolist()))

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(repr(float(v)) for v in row) + "]" for row in self._data
        )
        return f"Matrix3x3([{rows}])"
