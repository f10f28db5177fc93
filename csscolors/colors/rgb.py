from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions import rgb_to_hsl, mix_channels
from ..numbers import Ratio
from ..types.color_types import ColorSpace, RGBChannels, RGBAChannels
from ..types.format_type import BYTE_MAX
from .color_base import ColorBase, WithAlpha, build_registry


class RGB(ColorBase):
    """
    Red, green and blue channels, each a byte (0-255).

    >>> RGB(255, 99, 71).to_hsl()
    HSL(h=Angle(9), s=Ratio(255), l=Ratio(163))
    """

    __slots__ = ('r', 'g', 'b')

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    channels: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b')

    r: Ratio
    g: Ratio
    b: Ratio

    def __init__(self, r: int, g: int, b: int) -> None:
        object.__setattr__(self, 'r', Ratio.from_byte(r))
        object.__setattr__(self, 'g', Ratio.from_byte(g))
        object.__setattr__(self, 'b', Ratio.from_byte(b))
        # freeze instance, no more writes allowed
        object.__setattr__(self, '_is_frozen', True)

    @property
    def value(self) -> RGBChannels:
        return (self.r.as_byte(), self.g.as_byte(), self.b.as_byte())

    def to_rgb(self) -> RGB:
        return self

    def to_rgba(self) -> RGBA:
        return RGBA._from_channels(self.r, self.g, self.b, Ratio(BYTE_MAX))

    def to_hsl(self):
        from .hsl import HSL  # local import to avoid cycles
        return HSL._from_channels(*rgb_to_hsl(self.r, self.g, self.b))

    def to_hsla(self):
        from .hsl import HSLA  # local import to avoid cycles
        h, s, l = self.to_hsl()._channel_values()
        return HSLA(h.degrees, s.as_percentage(), l.as_percentage(), BYTE_MAX)


class RGBA(WithAlpha, ColorBase):
    """
    RGB with an alpha byte (0 transparent, 255 opaque).

    >>> RGBA(0, 0, 255, 128).tint(50)
    RGBA(r=Ratio(191), g=Ratio(191), b=Ratio(255), a=Ratio(191))
    """

    __slots__ = ('r', 'g', 'b', 'a')

    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    channels: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b', 'a')

    r: Ratio
    g: Ratio
    b: Ratio
    a: Ratio

    def __init__(self, r: int, g: int, b: int, a: int) -> None:
        for name, channel in zip(self.channels, (r, g, b, a)):
            object.__setattr__(self, name, Ratio.from_byte(channel))
        object.__setattr__(self, '_is_frozen', True)

    @property
    def value(self) -> RGBAChannels:
        return (self.r.as_byte(), self.g.as_byte(), self.b.as_byte(), self.a.as_byte())

    def to_rgb(self) -> RGB:
        return RGB._from_channels(self.r, self.g, self.b)

    def to_rgba(self) -> RGBA:
        return self

    def to_hsl(self):
        return self.to_rgb().to_hsl()

    def to_hsla(self):
        from .hsl import HSLA  # local import to avoid cycles
        h, s, l = self.to_hsl()._channel_values()
        return HSLA(h.degrees, s.as_percentage(), l.as_percentage(), self.a.as_byte())

    def mix(self, other: ColorBase, weight: int = 50) -> RGBA:
        """
        Mix ``self`` with any other color, taking opacity into account.

        Non-alpha operands count as fully opaque. ``weight`` is the share of
        ``self`` in percent: 100 returns ``self``, 0 returns ``other.to_rgba()``.
        """
        if not isinstance(other, ColorBase):
            raise TypeError(f"Cannot mix with {type(other).__name__}; expected a color")
        rhs = other.to_rgba()
        return RGBA._from_channels(*mix_channels(self._channel_values(), rhs._channel_values(), weight))

    def tint(self, weight: int = 50) -> RGBA:
        return self.mix(WHITE, weight)

    def shade(self, weight: int = 50) -> RGBA:
        return self.mix(BLACK, weight)


WHITE = RGBA(255, 255, 255, 255)
BLACK = RGBA(0, 0, 0, 255)

RGB.alpha_type = RGBA
RGBA.alpha_type = RGBA

rgb_space_to_class = build_registry(RGB, RGBA)
