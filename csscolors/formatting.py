"""
CSS text rendering for the four color models.

RGB channels render as bytes, saturation and lightness as whole percentages,
alpha as a two-decimal fraction of 1:

>>> from csscolors import RGBA, HSL
>>> to_css(RGBA(5, 10, 255, 128))
'rgba(5, 10, 255, 0.50)'
>>> to_css(HSL(6, 93, 71))
'hsl(6, 93%, 71%)'
"""
from __future__ import annotations
from typing import Any, Callable, Dict

from .numbers import Angle, Ratio
from .types.format_type import FormatType


def format_alpha(a: Ratio) -> str:
    return f"{a.as_format(FormatType.FLOAT):.2f}"


def _byte(c: Ratio) -> int:
    return c.as_format(FormatType.INT)


def _percent(c: Ratio) -> str:
    return f"{c.as_format(FormatType.PERCENTAGE)}%"


def format_rgb(r: Ratio, g: Ratio, b: Ratio) -> str:
    return f"rgb({_byte(r)}, {_byte(g)}, {_byte(b)})"


def format_rgba(r: Ratio, g: Ratio, b: Ratio, a: Ratio) -> str:
    return f"rgba({_byte(r)}, {_byte(g)}, {_byte(b)}, {format_alpha(a)})"


def format_hsl(h: Angle, s: Ratio, l: Ratio) -> str:
    return f"hsl({h}, {_percent(s)}, {_percent(l)})"


def format_hsla(h: Angle, s: Ratio, l: Ratio, a: Ratio) -> str:
    return f"hsla({h}, {_percent(s)}, {_percent(l)}, {format_alpha(a)})"


CSS_FORMATTERS: Dict[str, Callable[..., str]] = {
    "rgb": format_rgb,
    "rgba": format_rgba,
    "hsl": format_hsl,
    "hsla": format_hsla,
}


def to_css(color: Any) -> str:
    """Render any color model as its canonical CSS string."""
    try:
        formatter = CSS_FORMATTERS[color.mode]
    except (AttributeError, KeyError):
        raise TypeError(f"Cannot render {type(color).__name__} as CSS") from None
    return formatter(*(getattr(color, name) for name in color.channels))
