from __future__ import annotations
import operator

from ..types.format_type import HUE_360


class Angle:
    """
    A hue position in degrees, always normalised into ``[0, 360)``.

    Both operands of ``+`` and ``-`` are already normalised, so a single
    modulo keeps the result on the circle.

    >>> Angle(350) + Angle(20)
    Angle(10)
    >>> Angle(10) - Angle(30)
    Angle(340)
    """

    __slots__ = ("_degrees", "_is_frozen")

    def __init__(self, degrees: int = 0) -> None:
        object.__setattr__(self, "_degrees", operator.index(degrees) % HUE_360)
        object.__setattr__(self, "_is_frozen", True)

    def __setattr__(self, name, value):
        if getattr(self, "_is_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    @property
    def degrees(self) -> int:
        return self._degrees

    def distance_to(self, other: Angle) -> int:
        """Shortest arc between two angles, in degrees (0-180)."""
        forward = (other._degrees - self._degrees) % HUE_360
        return min(forward, HUE_360 - forward)

    def __add__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle((self._degrees + other._degrees) % HUE_360)

    def __sub__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle((self._degrees + HUE_360 - other._degrees) % HUE_360)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._degrees == other._degrees

    def __hash__(self) -> int:
        return hash((Angle, self._degrees))

    def __repr__(self) -> str:
        return f"Angle({self._degrees})"

    def __str__(self) -> str:
        return str(self._degrees)

    def __copy__(self) -> Angle:
        return self

    def __deepcopy__(self, memo) -> Angle:
        return self

    def __reduce__(self):
        return (Angle, (self._degrees,))
