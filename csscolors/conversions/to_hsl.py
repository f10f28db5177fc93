from __future__ import annotations
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..numbers import Angle, Ratio, round_half_up
from ..types.format_type import BYTE_MAX, HUE_360


def _channel_extrema(r: int, g: int, b: int) -> Tuple[int, int]:
    # Pairwise comparisons rather than max()/min(); ties resolve toward the later channel.
    if r > g and r > b:
        max_c = r
    elif g > b:
        max_c = g
    else:
        max_c = b

    if r < g and r < b:
        min_c = r
    elif g < b:
        min_c = g
    else:
        min_c = b
    return max_c, min_c


def rgb_to_hsl(r: Ratio, g: Ratio, b: Ratio) -> Tuple[Angle, Ratio, Ratio]:
    """
    Convert RGB channels to HSL.

    Saturation and hue are ratios of channel differences, so they are computed
    directly on the byte numerators; lightness is the byte midpoint of the
    extreme channels, rounded half up.

    Args:
        r: Red channel
        g: Green channel
        b: Blue channel

    Returns:
        Tuple[Angle, Ratio, Ratio]: (hue, saturation, lightness)
    """
    # Greys have no hue or saturation, and the general formula would divide by zero.
    if r == g and g == b:
        return Angle(0), Ratio(0), r

    rn, gn, bn = r.as_byte(), g.as_byte(), b.as_byte()
    max_c, min_c = _channel_extrema(rn, gn, bn)
    delta = max_c - min_c
    total = max_c + min_c

    lightness = Ratio((total + 1) // 2)

    if total < BYTE_MAX:
        saturation = delta / total
    else:
        saturation = delta / (2 * BYTE_MAX - total)

    if max_c == rn:
        hue = (gn - bn) / delta
    elif max_c == gn:
        hue = 2.0 + (bn - rn) / delta
    else:
        hue = 4.0 + (rn - gn) / delta

    hue *= 60.0
    if hue <= 0.0:
        hue += HUE_360

    return Angle(round_half_up(hue)), Ratio.from_float(saturation), lightness


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert byte RGB to byte HSL.

    Args:
        rgb: array of shape (..., 3) with channels in 0-255

    Returns:
        hsl: int array of shape (..., 3): (hue degrees [0,360), saturation 0-255, lightness 0-255)
    """
    rgb = np.asarray(rgb)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {rgb.shape}")
    rgb = np.clip(rgb.astype(np.int64), 0, BYTE_MAX)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = np.where((r > g) & (r > b), r, np.where(g > b, g, b))
    min_c = np.where((r < g) & (r < b), r, np.where(g < b, g, b))
    delta = max_c - min_c
    total = max_c + min_c
    grey = (r == g) & (g == b)

    # Greys are patched afterwards; silence their 0/0 along the way.
    safe_delta = np.where(grey, 1, delta)
    denominator = np.where(total < BYTE_MAX, total, 2 * BYTE_MAX - total)
    saturation = delta / np.where(grey, 1, denominator)

    hue = np.where(
        max_c == r,
        (g - b) / safe_delta,
        np.where(max_c == g, 2.0 + (b - r) / safe_delta, 4.0 + (r - g) / safe_delta),
    )
    hue = hue * 60.0
    hue = np.where(hue <= 0.0, hue + HUE_360, hue)

    h_out = np.floor(hue + 0.5).astype(np.int64) % HUE_360
    s_out = np.clip(np.floor(saturation * BYTE_MAX + 0.5), 0, BYTE_MAX).astype(np.int64)
    l_out = (total + 1) // 2

    h_out = np.where(grey, 0, h_out)
    s_out = np.where(grey, 0, s_out)
    l_out = np.where(grey, r, l_out)
    return np.stack([h_out, s_out, l_out], axis=-1)
