"""
csscolors Color Classes
=======================

Immutable value types for the RGB, RGBA, HSL and HSLA color models, all
implementing the same conversion and transformation contract.

Usage
-----
>>> from csscolors.colors import RGB, HSL
>>> tomato = RGB(255, 99, 71)
>>> tomato.to_hsl() == HSL(9, 100, 64)
True
>>> tomato.fade(128).to_css()
'rgba(255, 99, 71, 0.50)'

Color Classes
-------------
    - RGB:  r, g, b bytes (0-255)
    - RGBA: RGB plus an alpha byte
    - HSL:  hue degrees (0-360), saturation and lightness percentages (0-100)
    - HSLA: HSL plus an alpha byte

Notes
-----
- Channels are stored as Ratio (8-bit fraction) and Angle (degrees) values
- Out-of-range constructor arguments are clamped, never rejected
- Transformations a model lacks natively round-trip through HSL/HSLA
- ``mix`` always works in RGBA; ``spin`` always returns RGB
"""

from .rgb import RGB, RGBA
from .hsl import HSL, HSLA
from .color_base import ColorBase
from .color import color_convert, color_class, convert


__all__ = ['RGB', 'RGBA', 'HSL', 'HSLA', 'ColorBase', 'color_convert', 'color_class', 'convert']
