from __future__ import annotations
from typing import Dict, Tuple, Type

from ..types.color_types import ColorSpace, validate_space
from .color_base import ColorBase
from .rgb import rgb_space_to_class
from .hsl import hsl_space_to_class

unified_space_to_class: Dict[str, Type[ColorBase]] = {**rgb_space_to_class, **hsl_space_to_class}


def color_class(space: ColorSpace) -> Type[ColorBase]:
    """Look up the color class for a space name ("rgb", "rgba", "hsl", "hsla")."""
    return unified_space_to_class[validate_space(space)]


def color_convert(color: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    """
    Convert a color to a different color space.

    Args:
        color: Any color instance
        to_space: Target color space; defaults to the color's own space

    Returns:
        New color instance in the target space
    """
    if not isinstance(color, ColorBase):
        raise TypeError(f"Expected a color, got {type(color).__name__}")
    return color.convert(to_space or color.mode)


def convert(
    color: Tuple[int, ...],
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> Tuple[int, ...]:
    """
    Convert a channel tuple between spaces, in construction units.

    >>> convert((255, 99, 71), "rgb", "hsla")
    (9, 100, 64, 255)
    """
    cls = color_class(from_space)
    if len(color) != cls.num_channels:
        raise ValueError(f"{cls.mode} expects {cls.num_channels} channels, got {len(color)}")
    return color_convert(cls(*color), to_space).value
