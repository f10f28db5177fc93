from __future__ import annotations
from typing import Tuple

from ..numbers import Ratio

RatioRGBA = Tuple[Ratio, Ratio, Ratio, Ratio]

_FULL = Ratio.from_float(1.0)


def rgb_weight(weight: Ratio, alpha_lhs: Ratio, alpha_rhs: Ratio) -> float:
    """
    Combine the requested weight with the alpha difference of two colors.

    Follows the Sass/Less ``mix`` formula: both the weight and the alpha
    difference are scaled to [-1, 1], combined, and scaled back to [0, 1].
    When ``w * a == -1`` the combination is undefined and the plain weight
    is used instead.

    Args:
        weight: Balance point; 1.0 keeps only the left-hand color
        alpha_lhs: Alpha of the left-hand color
        alpha_rhs: Alpha of the right-hand color

    Returns:
        Weight of the left-hand color's RGB channels, in [0, 1]
    """
    w = weight.as_float() * 2.0 - 1.0
    a = alpha_lhs.as_float() - alpha_rhs.as_float()

    if w * a == -1.0:
        combined = w
    else:
        combined = (w + a) / (1.0 + w * a)

    return (combined + 1.0) / 2.0


def mix_channels(lhs: RatioRGBA, rhs: RatioRGBA, weight: int = 50) -> RatioRGBA:
    """
    Mix two RGBA channel sets, taking opacity into account.

    Args:
        lhs: (r, g, b, a) of the first color
        rhs: (r, g, b, a) of the second color
        weight: Percentage balance point (0-100); 100 returns ``lhs``, 0 returns ``rhs``

    Returns:
        Mixed (r, g, b, a)
    """
    r_lhs, g_lhs, b_lhs, a_lhs = lhs
    r_rhs, g_rhs, b_rhs, a_rhs = rhs

    ratio_weight = Ratio.from_percentage(weight)

    rgb_weight_lhs = Ratio.from_float(rgb_weight(ratio_weight, a_lhs, a_rhs))
    rgb_weight_rhs = _FULL - rgb_weight_lhs

    alpha_weight_lhs = ratio_weight
    alpha_weight_rhs = _FULL - alpha_weight_lhs

    return (
        (r_lhs * rgb_weight_lhs) + (r_rhs * rgb_weight_rhs),
        (g_lhs * rgb_weight_lhs) + (g_rhs * rgb_weight_rhs),
        (b_lhs * rgb_weight_lhs) + (b_rhs * rgb_weight_rhs),
        (a_lhs * alpha_weight_lhs) + (a_rhs * alpha_weight_rhs),
    )
