from __future__ import annotations
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..numbers import Angle, Ratio
from ..types.format_type import BYTE_MAX, HUE_360

_ROTATION = Angle(120)


def hue_to_channel(degrees: int, temp_1: float, temp_2: float) -> float:
    """
    Map a rotated hue onto one RGB channel (trapezoidal hue profile).

    Args:
        degrees: Hue rotated for the channel, in [0, 360)
        temp_1: Upper plateau of the profile
        temp_2: Lower plateau of the profile

    Returns:
        Channel value in [0, 1]
    """
    value = degrees / HUE_360

    if value > 2.0 / 3.0:
        return temp_2
    if value > 1.0 / 2.0:
        return temp_2 + (temp_1 - temp_2) * (2.0 / 3.0 - value) * 6.0
    if value > 1.0 / 6.0:
        return temp_1
    return temp_2 + (temp_1 - temp_2) * value * 6.0


def _plateaus(s: float, l: float) -> Tuple[float, float]:
    if l < 0.5:
        temp_1 = l * (1.0 + s)
    else:
        temp_1 = (l + s) - (l * s)
    temp_2 = 2.0 * l - temp_1
    return temp_1, temp_2


def hsl_to_rgb(h: Angle, s: Ratio, l: Ratio) -> Tuple[Ratio, Ratio, Ratio]:
    """
    Convert HSL channels to RGB.

    Args:
        h: Hue
        s: Saturation
        l: Lightness

    Returns:
        Tuple[Ratio, Ratio, Ratio]: (r, g, b)
    """
    # No saturation means a grey: every channel equals the lightness.
    if s.as_byte() == 0:
        return l, l, l

    temp_1, temp_2 = _plateaus(s.as_float(), l.as_float())

    red = hue_to_channel((h + _ROTATION).degrees, temp_1, temp_2)
    green = hue_to_channel(h.degrees, temp_1, temp_2)
    blue = hue_to_channel((h - _ROTATION).degrees, temp_1, temp_2)

    return Ratio.from_float(red), Ratio.from_float(green), Ratio.from_float(blue)


def _np_hue_to_channel(degrees: NDArray, temp_1: NDArray, temp_2: NDArray) -> NDArray:
    value = degrees / HUE_360
    return np.select(
        [value > 2.0 / 3.0, value > 1.0 / 2.0, value > 1.0 / 6.0],
        [temp_2, temp_2 + (temp_1 - temp_2) * (2.0 / 3.0 - value) * 6.0, temp_1],
        default=temp_2 + (temp_1 - temp_2) * value * 6.0,
    )


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert byte HSL to byte RGB.

    Args:
        hsl: array of shape (..., 3): (hue degrees, saturation 0-255, lightness 0-255)

    Returns:
        rgb: int array of shape (..., 3) with channels in 0-255
    """
    hsl = np.asarray(hsl)
    if hsl.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {hsl.shape}")
    hsl = hsl.astype(np.int64)
    h = hsl[..., 0] % HUE_360
    s_byte = np.clip(hsl[..., 1], 0, BYTE_MAX)
    l_byte = np.clip(hsl[..., 2], 0, BYTE_MAX)
    s = s_byte / BYTE_MAX
    l = l_byte / BYTE_MAX

    temp_1 = np.where(l < 0.5, l * (1.0 + s), (l + s) - (l * s))
    temp_2 = 2.0 * l - temp_1

    channels = [
        _np_hue_to_channel((h + 120) % HUE_360, temp_1, temp_2),
        _np_hue_to_channel(h, temp_1, temp_2),
        _np_hue_to_channel((h + HUE_360 - 120) % HUE_360, temp_1, temp_2),
    ]
    rgb = np.stack(
        [np.clip(np.floor(c * BYTE_MAX + 0.5), 0, BYTE_MAX) for c in channels], axis=-1
    ).astype(np.int64)

    grey = s_byte == 0
    return np.where(grey[..., None], l_byte[..., None], rgb)
