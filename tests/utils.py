from csscolors import Angle, Ratio, RGB, RGBA, HSL, HSLA


def close(a: int, b: int, tolerance: int = 1) -> bool:
    return abs(a - b) <= tolerance


def ratio_close(a: Ratio, b: Ratio) -> bool:
    return close(a.as_byte(), b.as_byte())


def percentage_close(a: Ratio, b: Ratio) -> bool:
    return close(a.as_percentage(), b.as_percentage())


def angle_close(a: Angle, b: Angle) -> bool:
    return a.distance_to(b) <= 1


def approximately_eq(lhs, rhs) -> bool:
    """Channel-wise comparison allowing one unit of quantisation error; alpha must match exactly."""
    if type(lhs) is not type(rhs):
        return False
    if isinstance(lhs, (HSL, HSLA)):
        same = angle_close(lhs.h, rhs.h) and percentage_close(lhs.s, rhs.s) and percentage_close(lhs.l, rhs.l)
    elif isinstance(lhs, (RGB, RGBA)):
        same = ratio_close(lhs.r, rhs.r) and ratio_close(lhs.g, rhs.g) and ratio_close(lhs.b, rhs.b)
    else:
        raise TypeError(f"Not a color: {lhs!r}")
    if lhs.has_alpha:
        same = same and lhs.a == rhs.a
    return same


def assert_approximately_eq(lhs, rhs) -> None:
    assert approximately_eq(lhs, rhs), f"lhs: {lhs}, rhs: {rhs}"
