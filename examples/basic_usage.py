"""Basic chromacontrast usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromacontrast import Color


def demonstrate_colors() -> None:
    # Construct colors from tuples and CSS strings.
    accent = Color((53, 66, 240))
    print("RGBA:", accent.rgba)
    print("CSS:", accent, "| hex:", accent.to_hex())

    faded = Color("rgba(53, 66, 240, 0.2)")
    print("Luminance (alpha ignored):", round(faded.luminance, 4))
    print("Inverse:", faded.inverse)


def demonstrate_compositing() -> None:
    # Paint a translucent color over an opaque backdrop.
    faded = Color((53, 66, 240, 0.2))
    paper = Color((255, 255, 255))
    print("Over white:", faded.overlay_on(paper).rgba)


def demonstrate_contrast() -> None:
    # Exact ratio for opaque text.
    result = Color((0, 0, 255)).contrast(Color((255, 255, 255)))
    print(f"Blue on white: {result.ratio:.2f}:1, AA: {result.passes('AA')}")

    # Bounded estimate for translucent text over an unknown backdrop.
    result = Color((155, 171, 162, 0.36)).contrast(Color((46, 0, 0)))
    print(
        f"Translucent text: {result.ratio:.2f} +/- {result.error:.2f} "
        f"(min {result.min:.2f}, max {result.max:.2f})"
    )
    print("Closest backdrop:", result.closest, "| farthest:", result.farthest)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_compositing()
    demonstrate_contrast()
