"""
sRGB opto-electronic transfer function and its inverse.

Both directions are mirrored around zero so that extended-range values
(negative or above 1) survive a decode/encode cycle.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from chromaspace.core.constants import (
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_OFFSET,
    SRGB_SCALE,
)

ArrayLike = Union[float, np.ndarray]


def _restore_kind(result: np.ndarray, like: ArrayLike) -> ArrayLike:
    if np.ndim(like) == 0:
        return float(result)
    return result


def srgb_to_linear(u: ArrayLike) -> ArrayLike:
    r"""
    Decode sRGB values to linear light.

    .. math::
        C_{\text{linear}} = \operatorname{sign}(C) \begin{cases}
            |C| / 12.92 & \text{if } |C| \leq 0.04045 \\
            \left(\frac{|C| + 0.055}{1.055}\right)^{2.4} & \text{otherwise}
        \end{cases}

    Parameters
    ----------
    u : float or np.ndarray
        Encoded values. Values outside [0, 1] are allowed.
    """

    values = np.asarray(u, dtype=np.float64)
    magnitude = np.abs(values)
    result = np.where(
        magnitude <= SRGB_DECODE_THRESHOLD,
        magnitude / SRGB_LINEAR_SLOPE,
        ((magnitude + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA,
    )
    return _restore_kind(np.copysign(result, values), u)


def linear_to_srgb(u: ArrayLike) -> ArrayLike:
    r"""
    Encode linear light to sRGB values.

    .. math::
        C = \operatorname{sign}(C_{\text{linear}}) \begin{cases}
            12.92 |C_{\text{linear}}| & \text{if } |C_{\text{linear}}| \leq 0.0031308 \\
            1.055 |C_{\text{linear}}|^{1/2.4} - 0.055 & \text{otherwise}
        \end{cases}
    """

    values = np.asarray(u, dtype=np.float64)
    magnitude = np.abs(values)
    result = np.where(
        magnitude <= SRGB_ENCODE_THRESHOLD,
        magnitude * SRGB_LINEAR_SLOPE,
        SRGB_SCALE * magnitude ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET,
    )
    return _restore_kind(np.copysign(result, values), u)
