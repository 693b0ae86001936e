from .colors import samples_contrast, samples_luminance, samples_overlay

__all__ = ["samples_contrast", "samples_luminance", "samples_overlay"]
