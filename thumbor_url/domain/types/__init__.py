from thumbor_url.domain.types.color import Color, NamedColor, Rgb
from thumbor_url.domain.types.geometry import Point, Rect
from thumbor_url.domain.types.metadata import Meta
from thumbor_url.domain.types.options import FitIn, HAlign, ResponseMode, Trim, VAlign

"""
Value types (geometry, colors, filters, options) and server response models.
"""
