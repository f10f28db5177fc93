import numpy as np
from typing import Callable, Dict, Tuple

from ..types.color_types import ALPHA_SPACES, ColorSpace, validate_space
from ..types.format_type import BYTE_MAX, PERCENT_MAX, HUE_360
from .to_hsl import np_rgb_to_hsl
from .to_rgb import np_hsl_to_rgb


def _percentage_to_byte(p: np.ndarray) -> np.ndarray:
    return np.clip((p * BYTE_MAX * 2 + PERCENT_MAX) // (PERCENT_MAX * 2), 0, BYTE_MAX)


def _byte_to_percentage(n: np.ndarray) -> np.ndarray:
    return (n * PERCENT_MAX * 2 + BYTE_MAX) // (BYTE_MAX * 2)


def _hsl_in(color: np.ndarray) -> np.ndarray:
    # construction units (deg, %, %) -> byte units (deg, n, n)
    return np.stack(
        [color[..., 0] % HUE_360, _percentage_to_byte(color[..., 1]), _percentage_to_byte(color[..., 2])],
        axis=-1,
    )


def _hsl_out(color: np.ndarray) -> np.ndarray:
    return np.stack(
        [color[..., 0], _byte_to_percentage(color[..., 1]), _byte_to_percentage(color[..., 2])],
        axis=-1,
    )


CONVERT_NUMPY: Dict[Tuple[str, str], Callable[[np.ndarray], np.ndarray]] = {
    ("rgb", "rgb"): lambda c: np.clip(c, 0, BYTE_MAX),
    ("hsl", "hsl"): lambda c: _hsl_out(_hsl_in(c)),
    ("rgb", "hsl"): lambda c: _hsl_out(np_rgb_to_hsl(c)),
    ("hsl", "rgb"): lambda c: np_hsl_to_rgb(_hsl_in(c)),
}


def np_convert(color: np.ndarray, from_space: ColorSpace, to_space: ColorSpace) -> np.ndarray:
    """
    Vectorized conversion between the four color spaces.

    Arrays use the same units as the color constructors: RGB channels as
    bytes, HSL as (degrees, percent, percent), alpha as a byte in the last
    position. A missing alpha becomes 255; a present one is dropped when the
    target has none.

    Args:
        color: int array of shape (..., 3) or (..., 4)
        from_space: Source space name
        to_space: Target space name

    Returns:
        int array in the target space
    """
    fs = validate_space(from_space)
    ts = validate_space(to_space)
    color = np.asarray(color).astype(np.int64)

    has_alpha_in = fs in ALPHA_SPACES
    has_alpha_out = ts in ALPHA_SPACES
    expected = 4 if has_alpha_in else 3
    if color.shape[-1] != expected:
        raise ValueError(f"{fs} expects last dimension to be {expected}, got shape {color.shape}")

    if has_alpha_in:
        base = color[..., :3]
        alpha = np.clip(color[..., 3], 0, BYTE_MAX)
    else:
        base = color
        alpha = None

    out = CONVERT_NUMPY[(fs[:3], ts[:3])](base).astype(np.int64)

    if has_alpha_out:
        if alpha is None:
            alpha = np.full(out.shape[:-1], BYTE_MAX, dtype=np.int64)
        return np.concatenate([out, alpha[..., None]], axis=-1)
    return out
