from .css import CSS_RGBA_PATTERN, TRANSPARENT, parse_css, to_css_string, to_hex

__all__ = ["CSS_RGBA_PATTERN", "TRANSPARENT", "parse_css", "to_css_string", "to_hex"]
