"""Chromatic adaptation transforms."""

from chromaspace.adaptation.chromatic import (
    CONE_RESPONSE_MATRICES,
    ChromaticAdaptation,
    cone_response_matrices,
)

__all__ = ["CONE_RESPONSE_MATRICES", "ChromaticAdaptation", "cone_response_matrices"]
