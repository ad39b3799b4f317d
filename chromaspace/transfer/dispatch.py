"""
Select the codec for a :class:`TransferFunction`.
"""

from __future__ import annotations

import numpy as np

from chromaspace.core.config import TransferFunction
from chromaspace.transfer.srgb import ArrayLike, linear_to_srgb, srgb_to_linear


def linearize(values: ArrayLike, transfer_function: TransferFunction) -> ArrayLike:
    """Stored (possibly nonlinear) RGB -> linear RGB."""

    if transfer_function == TransferFunction.SRGB:
        return srgb_to_linear(values)

    if transfer_function == TransferFunction.NONE:
        return float(values) if np.ndim(values) == 0 else np.asarray(values, dtype=np.float64)

    raise ValueError(f"Unknown transfer function: {transfer_function}")


def delinearize(values: ArrayLike, transfer_function: TransferFunction) -> ArrayLike:
    """Linear RGB -> stored RGB."""

    if transfer_function == TransferFunction.SRGB:
        return linear_to_srgb(values)

    if transfer_function == TransferFunction.NONE:
        return float(values) if np.ndim(values) == 0 else np.asarray(values, dtype=np.float64)

    raise ValueError(f"Unknown transfer function: {transfer_function}")
