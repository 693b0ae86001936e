# No dependencies

# Channel limits
RGB_MAX = 255
ALPHA_MAX = 1.0
ALPHA_PRECISION = 3                # Decimal places kept on every alpha write

# sRGB transfer function (Source: IEC 61966-2-1:1999)
SRGB_TO_LINEAR_TH = 0.04045        # Before May 2021 WCAG quoted 0.03928; no practical difference
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_GAMMA = 2.4

# Relative luminance weights (Source: ITU-R BT.709)
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

# WCAG contrast (Source: https://www.w3.org/TR/WCAG22/#dfn-contrast-ratio)
WCAG_LUMINANCE_OFFSET = 0.05
WCAG_MIN_RATIO = 1.0

WCAG_THRESHOLDS = {
    # level: (normal text, large text)
    "AA": (4.5, 3.0),
    "AAA": (7.0, 4.5),
}

BLACK_RGB = (0, 0, 0)
WHITE_RGB = (255, 255, 255)
TRANSPARENT_RGBA = (0, 0, 0, 0.0)
