"""Transfer-function codecs."""

from chromaspace.transfer.dispatch import delinearize, linearize
from chromaspace.transfer.srgb import linear_to_srgb, srgb_to_linear

__all__ = ["delinearize", "linear_to_srgb", "linearize", "srgb_to_linear"]
