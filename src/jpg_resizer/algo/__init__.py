"""Pillow-backed image primitives used by the conversion stages."""

from .image_convert import reformat_and_strip, reformat_same_size
from .image_resize import resize, target_size

__all__ = ["reformat_and_strip", "reformat_same_size", "resize", "target_size"]
