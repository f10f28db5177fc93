"""Bounded numeric value types backing every color channel."""

from .ratio import Ratio, round_half_up
from .angle import Angle

__all__ = ["Ratio", "Angle", "round_half_up"]
