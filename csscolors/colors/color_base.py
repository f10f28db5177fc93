from __future__ import annotations
from abc import ABC
from typing import Any, ClassVar, Dict, Tuple, Type

from ..numbers import Angle, Ratio
from ..types.color_types import ALPHA_SPACES, ColorSpace, HUE_SPACES, validate_space
from ..types.format_type import BYTE_MAX
from ..formatting import to_css


class ColorBase:
    """
    Shared contract for the four color models.

    Instances are immutable values compared by channel. Every transformation
    returns a new instance; transformations a model cannot perform natively
    round-trip through its HSL (or HSLA) counterpart.
    """

    __slots__ = ('_is_frozen',)

    num_channels: ClassVar[int]
    mode:         ClassVar[ColorSpace]
    channels:     ClassVar[Tuple[str, ...]]
    # The model with an alpha channel this one fades/mixes into (RGB -> RGBA, HSL -> HSLA).
    alpha_type:   ClassVar[Type["ColorBase"]]

    def __setattr__(self, name, value):
        """Block attribute changes after construction."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    @classmethod
    def _from_channels(cls, *values: Any):
        """Build an instance straight from Ratio/Angle channels, skipping unit scaling."""
        if len(values) != cls.num_channels:
            raise ValueError(f"{cls.mode} expects {cls.num_channels} channels, got {len(values)}")
        obj = cls.__new__(cls)
        for name, value in zip(cls.channels, values):
            object.__setattr__(obj, name, value)
        object.__setattr__(obj, '_is_frozen', True)
        return obj

    def _channel_values(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.channels)

    def _replace(self, **changes: Any):
        values: Dict[str, Any] = {name: getattr(self, name) for name in self.channels}
        values.update(changes)
        return self._from_channels(*(values[name] for name in self.channels))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[int, ...]:
        """Channels in construction units."""
        raise NotImplementedError

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode in ALPHA_SPACES

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    # ------------------ CONVERSIONS ------------------
    def to_rgb(self):
        raise NotImplementedError

    def to_rgba(self):
        raise NotImplementedError

    def to_hsl(self):
        raise NotImplementedError

    def to_hsla(self):
        raise NotImplementedError

    def convert(self, to_space: ColorSpace):
        """Convert to the model named by ``to_space`` ("rgb", "rgba", "hsl", "hsla")."""
        space = validate_space(to_space)
        return getattr(self, f"to_{space}")()

    def to_css(self) -> str:
        return to_css(self)

    # ------------------ TRANSFORMATIONS ------------------
    def _hsl_counterpart(self):
        return self.to_hsla() if self.has_alpha else self.to_hsl()

    def saturate(self, amount: int):
        """Increase saturation by an absolute percentage, preserving alpha."""
        return self._hsl_counterpart().saturate(amount).convert(self.mode)

    def desaturate(self, amount: int):
        """Decrease saturation by an absolute percentage, preserving alpha."""
        return self._hsl_counterpart().desaturate(amount).convert(self.mode)

    def lighten(self, amount: int):
        """Increase lightness by an absolute percentage, preserving alpha."""
        return self._hsl_counterpart().lighten(amount).convert(self.mode)

    def darken(self, amount: int):
        """Decrease lightness by an absolute percentage, preserving alpha."""
        return self._hsl_counterpart().darken(amount).convert(self.mode)

    def greyscale(self):
        """
        Remove all saturation; same as ``desaturate(100)``.

        Alpha models keep their alpha rather than round-tripping through
        the opaque HSL model and coming back at 255.
        """
        return self._hsl_counterpart().greyscale().convert(self.mode)

    def fadein(self, amount: int):
        # Opaque models have no transparency to remove.
        return self

    def fadeout(self, amount: int):
        return self

    def fade(self, amount: int):
        """Set absolute opacity (0-255), producing the alpha-bearing model."""
        return self.alpha_type._from_channels(*self._channel_values(), Ratio.from_byte(amount))

    def spin(self, amount: int):
        """Rotate the hue by ``amount`` degrees; always returns RGB."""
        return self.to_hsl().spin(amount)

    def mix(self, other: ColorBase, weight: int = 50):
        """
        Mix with ``other`` in RGBA space, weighting ``self`` by ``weight`` percent.

        Returns the alpha-bearing counterpart of this model (RGBA or HSLA).
        """
        return self.to_rgba().mix(other, weight).convert(self.alpha_type.mode)

    def tint(self, weight: int = 50):
        """Mix with opaque white; always returns RGBA."""
        return self.to_rgba().tint(weight)

    def shade(self, weight: int = 50):
        """Mix with opaque black; always returns RGBA."""
        return self.to_rgba().shade(weight)

    def with_alpha(self, alpha: int = BYTE_MAX):
        """Return the alpha-bearing model with the given alpha byte."""
        return self.fade(alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._channel_values() == other._channel_values()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._channel_values()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.channels)
        return f"{self.__class__.__name__}({fields})"

    def __str__(self) -> str:
        return self.to_css()

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (self.__class__._from_channels, self._channel_values())


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel, stored as a Ratio named ``a``.
    """

    __slots__ = ()

    a: Ratio
    _replace: Any

    @property
    def alpha(self) -> int:
        """Alpha as a byte (0-255)."""
        return self.a.as_byte()

    def fadein(self, amount: int):
        """Make more opaque by ``amount`` (bytes); saturates at 255."""
        return self._replace(a=self.a + Ratio.from_byte(amount))

    def fadeout(self, amount: int):
        """Make more transparent by ``amount`` (bytes); saturates at 0."""
        return self._replace(a=self.a - Ratio.from_byte(amount))

    def fade(self, amount: int):
        return self._replace(a=Ratio.from_byte(amount))

    def with_alpha(self, alpha: int = BYTE_MAX):
        return self.fade(alpha)


class WithHue(ABC):
    """
    Mixin for the HSL models: saturation and lightness transforms act on the
    stored channels directly.
    """

    __slots__ = ()

    h: Angle
    s: Ratio
    l: Ratio
    _replace: Any

    def saturate(self, amount: int):
        return self._replace(s=self.s + Ratio.from_percentage(amount))

    def desaturate(self, amount: int):
        return self._replace(s=self.s - Ratio.from_percentage(amount))

    def lighten(self, amount: int):
        return self._replace(l=self.l + Ratio.from_percentage(amount))

    def darken(self, amount: int):
        return self._replace(l=self.l - Ratio.from_percentage(amount))

    def greyscale(self):
        # Hue is kept even though it no longer affects the color.
        return self._replace(s=Ratio(0))


def build_registry(*classes: Type[ColorBase]) -> Dict[str, Type[ColorBase]]:
    return {
        cls.mode: cls
        for cls in classes
    }
