from __future__ import annotations
from typing import Literal, Tuple

RGBChannels = Tuple[int, int, int]
RGBAChannels = Tuple[int, int, int, int]
ColorSpace = Literal["rgb", "rgba", "hsl", "hsla"]
COLOR_SPACES = ("rgb", "rgba", "hsl", "hsla")
HUE_SPACES = {"hsl", "hsla"}
ALPHA_SPACES = {"rgba", "hsla"}


def validate_space(color_space: str) -> str:
    """
    Normalise a color space name.

    Args:
        color_space: Color space string, any case
    Returns:
        The lower-cased name
    Raises:
        ValueError: if the name is not one of ``COLOR_SPACES``
    """
    space = color_space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown color space: {color_space!r}, expected one of {COLOR_SPACES}")
    return space
