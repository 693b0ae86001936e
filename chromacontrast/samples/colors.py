# Reference values for tests and examples.

# Relative luminance, 10 decimals
# (source: https://contrastchecker.online/color-relative-luminance-calculator)
samples_luminance = {
    (32, 150, 223): 0.2744748197,
    (102, 14, 94): 0.0394700858,
    (239, 236, 134): 0.8006285816,
    (0, 0, 0): 0.0,
    (255, 255, 255): 1.0,
}

# Opaque contrast ratios, 2 decimals (source: https://webaim.org/resources/contrastchecker/)
samples_contrast = {
    ((0, 0, 255), (255, 255, 255)): 8.59,
    ((0, 0, 255), (254, 77, 77)): 2.61,
    ((155, 171, 162), (254, 77, 77)): 1.37,
    ((0, 0, 0), (255, 255, 255)): 21.0,
}

# foreground RGBA, background RGBA -> composite RGBA
samples_overlay = {
    ((53, 66, 240, 1), (255, 255, 255, 1)): (53, 66, 240, 1),
    ((53, 66, 240, 0.2), (255, 255, 255, 1)): (215, 217, 252, 1),
    ((53, 66, 240, 0.7), (255, 255, 255, 0.3)): (60, 69, 191, 0.79),
}
