"""Basic csscolors usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from csscolors import HSL, RGB, RGBA, convert, np_convert


def demonstrate_colors() -> None:
    # Construct colors and convert between models.
    tomato = RGB(255, 99, 71)
    print("RGB -> HSL:", tomato.to_hsl().value)
    print("RGB -> HSLA tuple:", convert(tomato.value, "rgb", "hsla"))
    print("As CSS:", tomato.to_css(), "/", tomato.to_hsl().to_css())


def demonstrate_operations() -> None:
    base = HSL(10, 90, 50)
    print("lighten(20):", base.lighten(20))
    print("desaturate(40):", base.desaturate(40))
    print("spin(30):", base.spin(30))
    print("greyscale:", base.greyscale())

    translucent_blue = RGBA(0, 0, 255, 128)
    print("tint(50):", translucent_blue.tint(50))
    print("shade(50):", translucent_blue.shade(50))
    print("mix with red:", translucent_blue.mix(RGB(255, 0, 0), 25))
    print("fadeout(64):", translucent_blue.fadeout(64))


def demonstrate_arrays() -> None:
    # Whole palettes convert in one call.
    palette = np.array([[255, 99, 71], [23, 98, 119], [127, 255, 0]])
    print("Palette as HSLA:\n", np_convert(palette, "rgb", "hsla"))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_operations()
    demonstrate_arrays()
