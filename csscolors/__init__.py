"""csscolors: CSS color models with Less/Sass-style color operations."""

from .numbers import Ratio, Angle
from .colors.rgb import RGB, RGBA
from .colors.hsl import HSL, HSLA
from .colors.color_base import ColorBase
from .colors.color import color_convert, color_class, convert
from .formatting import to_css
from .types.format_type import FormatType
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    mix_channels,
    np_convert,
)

__version__ = "1.0.0"

__all__ = [
    # value types
    "Ratio",
    "Angle",
    # color classes
    "ColorBase",
    "RGB",
    "RGBA",
    "HSL",
    "HSLA",
    "color_convert",
    "color_class",
    "convert",
    "to_css",
    "FormatType",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "mix_channels",
    "np_convert",
]
