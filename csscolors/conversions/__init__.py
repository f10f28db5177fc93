"""
csscolors Color Space Conversions
=================================

Primitive RGB <-> HSL conversions and the alpha-aware mixing algorithm that
every color model is built on, with scalar (``Ratio``/``Angle``) and
vectorized (numpy) variants.

RGB -> HSL:
    rgb_to_hsl(r, g, b)
        Scalar conversion on Ratio channels, returns (Angle, Ratio, Ratio)
    np_rgb_to_hsl(rgb)
        Vectorized conversion on byte arrays of shape (..., 3)

HSL -> RGB:
    hsl_to_rgb(h, s, l)
        Scalar conversion, returns (Ratio, Ratio, Ratio)
    np_hsl_to_rgb(hsl)
        Vectorized conversion on byte arrays of shape (..., 3)
    hue_to_channel(degrees, temp_1, temp_2)
        Piecewise hue profile used for each channel

Mixing:
    mix_channels(lhs, rhs, weight)
        Weighted mix of two (r, g, b, a) Ratio tuples
    rgb_weight(weight, alpha_lhs, alpha_rhs)
        Alpha-aware combined weight

High-Level API
-------------
    np_convert(color, from_space, to_space)
        Vectorized converter between rgb, rgba, hsl and hsla arrays

Examples
--------
>>> from csscolors.numbers import Ratio
>>> from csscolors.conversions import rgb_to_hsl
>>> h, s, l = rgb_to_hsl(Ratio(255), Ratio(99), Ratio(71))
>>> h.degrees, s.as_percentage(), l.as_percentage()
(9, 100, 64)
"""

from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsl_to_rgb, np_hsl_to_rgb, hue_to_channel
from .mix import mix_channels, rgb_weight
from .wrapper import np_convert

__all__ = [
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'hue_to_channel',
    'mix_channels',
    'rgb_weight',
    'np_convert',
]
