from __future__ import annotations
import math
import operator
from typing import Union

from boundednumbers.functions import clamp

from ..types.format_type import BYTE_MAX, PERCENT_MAX, FormatType


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero (127.5 -> 128, -0.5 -> -1)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def _saturate(n: int) -> int:
    return int(clamp(n, 0, BYTE_MAX))


class Ratio:
    """
    A fraction in ``[0, 1]`` stored as an 8-bit numerator over 255.

    ``Ratio`` is the channel type for r, g, b, saturation, lightness and alpha.
    Addition and subtraction saturate at the bounds instead of wrapping;
    multiplication goes through floats and is re-quantised, so it is the one
    lossy operation.

    >>> Ratio.from_percentage(50)
    Ratio(128)
    >>> Ratio.from_byte(200) + Ratio.from_byte(100)
    Ratio(255)
    >>> str(Ratio.from_byte(128))
    '50%'
    """

    __slots__ = ("_n", "_is_frozen")

    def __init__(self, n: int = 0) -> None:
        object.__setattr__(self, "_n", _saturate(operator.index(n)))
        object.__setattr__(self, "_is_frozen", True)

    def __setattr__(self, name, value):
        if getattr(self, "_is_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_byte(cls, n: int) -> Ratio:
        return cls(n)

    @classmethod
    def from_percentage(cls, p: int) -> Ratio:
        """
        Scale a 0-100 percentage onto the 0-255 numerator.

        Values above 100 are not rejected; they scale past 255 and saturate.
        The scaling is exact integer arithmetic so ties (10%, 30%, 50%...)
        always round up.
        """
        p = operator.index(p)
        return cls((p * BYTE_MAX * 2 + PERCENT_MAX) // (PERCENT_MAX * 2))

    @classmethod
    def from_float(cls, x: float) -> Ratio:
        """Quantise a unit float; anything outside ``[0, 1]`` saturates."""
        scaled = float(x) * BYTE_MAX
        if math.isnan(scaled):
            return cls(0)
        if math.isinf(scaled):
            return cls(BYTE_MAX if scaled > 0 else 0)
        return cls(round_half_up(scaled))

    # ------------------ ACCESSORS ------------------
    def as_byte(self) -> int:
        return self._n

    def as_percentage(self) -> int:
        # n * 100 / 255 can never land exactly on .5, so floor division is exact rounding
        return (self._n * PERCENT_MAX * 2 + BYTE_MAX) // (BYTE_MAX * 2)

    def as_float(self) -> float:
        return self._n / BYTE_MAX

    def as_format(self, format_type: Union[FormatType, str]) -> Union[int, float]:
        """Render the ratio in the units selected by ``format_type``."""
        format_type = FormatType(format_type)
        if format_type == FormatType.INT:
            return self.as_byte()
        if format_type == FormatType.PERCENTAGE:
            return self.as_percentage()
        return self.as_float()

    # ------------------ ARITHMETIC ------------------
    def __add__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(self._n + other._n)

    def __sub__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(self._n - other._n)

    def __mul__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio.from_float(self.as_float() * other.as_float())

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self._n == other._n

    def __hash__(self) -> int:
        return hash((Ratio, self._n))

    def __repr__(self) -> str:
        return f"Ratio({self._n})"

    def __str__(self) -> str:
        return f"{self.as_percentage()}%"

    def __copy__(self) -> Ratio:
        return self

    def __deepcopy__(self, memo) -> Ratio:
        return self

    def __reduce__(self):
        return (Ratio, (self._n,))
