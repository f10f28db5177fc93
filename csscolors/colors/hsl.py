from __future__ import annotations
import operator
import warnings
from typing import ClassVar, Tuple

from ..conversions import hsl_to_rgb
from ..numbers import Angle, Ratio
from ..types.color_types import ColorSpace
from ..types.format_type import BYTE_MAX, HUE_360
from .color_base import ColorBase, WithAlpha, WithHue, build_registry
from .rgb import RGB, RGBA


class HSL(WithHue, ColorBase):
    """
    Hue in degrees (0-360), saturation and lightness in percent (0-100).

    Saturation and lightness are stored as 8-bit Ratios, so ``HSL(6, 93, 71)``
    keeps ``s=Ratio(237)`` and ``l=Ratio(181)``.

    >>> HSL(10, 90, 50).spin(30)
    RGB(r=Ratio(243), g=Ratio(166), b=Ratio(13))
    """

    __slots__ = ('h', 's', 'l')

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "hsl"
    channels: ClassVar[Tuple[str, ...]] = ('h', 's', 'l')

    h: Angle
    s: Ratio
    l: Ratio

    def __init__(self, h: int, s: int, l: int) -> None:
        object.__setattr__(self, 'h', Angle(h))
        object.__setattr__(self, 's', Ratio.from_percentage(s))
        object.__setattr__(self, 'l', Ratio.from_percentage(l))
        object.__setattr__(self, '_is_frozen', True)

    @property
    def value(self) -> Tuple[int, int, int]:
        return (self.h.degrees, self.s.as_percentage(), self.l.as_percentage())

    def to_rgb(self) -> RGB:
        return RGB._from_channels(*hsl_to_rgb(self.h, self.s, self.l))

    def to_rgba(self) -> RGBA:
        return self.to_rgb().to_rgba()

    def to_hsl(self) -> HSL:
        return self

    def to_hsla(self) -> HSLA:
        return HSLA(self.h.degrees, self.s.as_percentage(), self.l.as_percentage(), BYTE_MAX)

    def spin(self, amount: int) -> RGB:
        """
        Rotate the hue by ``amount`` degrees and return the result as RGB.

        Positive amounts rotate clockwise, negative counter-clockwise. An
        amount of 360 or more is a caller error and raises ValueError. Only
        that upper bound is checked: amounts of -360 or less wrap modulo 360
        with a RuntimeWarning.
        """
        amount = operator.index(amount)
        if amount >= HUE_360:
            raise ValueError(f"Invalid spin amount: {amount} (must be below {HUE_360})")

        if amount < 0:
            if amount <= -HUE_360:
                warnings.warn(
                    f"Spin amount {amount} exceeds a full revolution; rotating by {-(-amount % HUE_360)} instead",
                    RuntimeWarning,
                    stacklevel=2,
                )
            new_hue = self.h - Angle(-amount)
        else:
            new_hue = self.h + Angle(amount)

        return HSL._from_channels(new_hue, self.s, self.l).to_rgb()

    def mix(self, other: ColorBase, weight: int = 50) -> HSLA:
        # Passing through HSLA re-quantises s and l to whole percentages first.
        return self.to_hsla().mix(other, weight)


class HSLA(WithHue, WithAlpha, ColorBase):
    """
    HSL with an alpha byte (0 transparent, 255 opaque).

    >>> HSLA(6, 93, 71, 128).to_css()
    'hsla(6, 93%, 71%, 0.50)'
    """

    __slots__ = ('h', 's', 'l', 'a')

    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "hsla"
    channels: ClassVar[Tuple[str, ...]] = ('h', 's', 'l', 'a')

    h: Angle
    s: Ratio
    l: Ratio
    a: Ratio

    def __init__(self, h: int, s: int, l: int, a: int) -> None:
        object.__setattr__(self, 'h', Angle(h))
        object.__setattr__(self, 's', Ratio.from_percentage(s))
        object.__setattr__(self, 'l', Ratio.from_percentage(l))
        object.__setattr__(self, 'a', Ratio.from_byte(a))
        object.__setattr__(self, '_is_frozen', True)

    @property
    def value(self) -> Tuple[int, int, int, int]:
        return (self.h.degrees, self.s.as_percentage(), self.l.as_percentage(), self.a.as_byte())

    def to_rgb(self) -> RGB:
        return self.to_hsl().to_rgb()

    def to_rgba(self) -> RGBA:
        r, g, b = self.to_rgb()._channel_values()
        return RGBA._from_channels(r, g, b, self.a)

    def to_hsl(self) -> HSL:
        return HSL._from_channels(self.h, self.s, self.l)

    def to_hsla(self) -> HSLA:
        return self


HSL.alpha_type = HSLA
HSLA.alpha_type = HSLA

hsl_space_to_class = build_registry(HSL, HSLA)
