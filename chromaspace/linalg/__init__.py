"""Small fixed-size linear algebra used by the color space derivations."""

from chromaspace.linalg.matrix import Matrix3x3
from chromaspace.linalg.vector import Vector3

__all__ = ["Matrix3x3", "Vector3"]
