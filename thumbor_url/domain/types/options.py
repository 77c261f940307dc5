"""
Top-level options of an image URL, each rendered as a single fixed token.
"""

import enum


class ResponseMode(str, enum.Enum):
    #: Return JSON describing the operations instead of the image.
    METADATA = "meta"
    #: Draw the detected focal points on the image.
    DEBUG = "debug"


class Trim(str, enum.Enum):
    """Which corner pixel gives the color to trim around the image."""

    TOP_LEFT = "trim:top-left"
    BOTTOM_RIGHT = "trim:bottom-right"


class FitIn(str, enum.Enum):
    DEFAULT = "fit-in"
    ADAPTIVE = "adaptive-fit-in"
    FULL = "full-fit-in"
    ADAPTIVE_FULL = "adaptive-full-fit-in"


class HAlign(str, enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(str, enum.Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"
