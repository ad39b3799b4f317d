"""
GPU-capable chromaspace conversions backed by PyTorch.
"""

from chromaspace.torch.color import TorchColorSpace, TorchColorSpaceConverter

__all__ = ["TorchColorSpace", "TorchColorSpaceConverter"]
