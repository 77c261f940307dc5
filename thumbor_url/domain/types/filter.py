"""
Thumbor filters.

Every filter is a frozen value whose textual form is ``name(arg1,arg2,...)``.
Filters are applied by the server sequentially, in the order they are listed.
Argument ranges (percentages, angles, ...) are not checked here; the server
is the authority on what it accepts.
"""

import enum
from typing import ClassVar, List, Optional, Tuple, Union

from pydantic.dataclasses import dataclass

from thumbor_url.domain.types.color import Color, format_color
from thumbor_url.domain.types.geometry import Rect

Number = Union[int, float]


def format_number(value: Union[Number, bool, str]) -> str:
    """Render a filter argument the way Thumbor parses it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


class ImageFormat(str, enum.Enum):
    WEBP = "webp"
    JPEG = "jpeg"
    GIF = "gif"
    PNG = "png"
    AVIF = "avif"
    HEIC = "heic"


@dataclass(frozen=True)
class Circle:
    radius: int

    def __str__(self) -> str:
        return str(self.radius)


@dataclass(frozen=True)
class Ellipse:
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}|{self.height}"


Radius = Union[Circle, Ellipse, int]


class Filter:
    """Base class of all filters."""

    #: Name of the filter in the URL.
    token: ClassVar[str] = ""

    def __new__(cls, *args, **kwargs):
        if not cls.token and cls.filter_name is Filter.filter_name:
            raise TypeError(f"{cls.__name__} is not a concrete filter")
        return super().__new__(cls)

    def filter_name(self) -> str:
        return self.token

    def args(self) -> List[str]:
        """Ordered, already formatted arguments."""
        return []

    def encode(self) -> str:
        return f"{self.filter_name()}({','.join(self.args())})"

    def __str__(self) -> str:
        return self.encode()


# --- Filters without arguments -----------------------------------------------


@dataclass(frozen=True)
class AutoJpg(Filter):
    """Convert PNG to JPEG when the image has no transparency."""

    token = "autojpg"


@dataclass(frozen=True)
class Cover(Filter):
    """Use the first frame of an animated GIF."""

    token = "cover"


@dataclass(frozen=True)
class Equalize(Filter):
    token = "equalize"


@dataclass(frozen=True)
class ExtractFocalPoints(Filter):
    token = "extract_focal"


@dataclass(frozen=True)
class Grayscale(Filter):
    token = "grayscale"


@dataclass(frozen=True)
class NoUpscale(Filter):
    token = "no_upscale"


@dataclass(frozen=True)
class RedEye(Filter):
    token = "red_eye"


@dataclass(frozen=True)
class Stretch(Filter):
    token = "stretch"


@dataclass(frozen=True)
class StripExif(Filter):
    token = "strip_exif"


@dataclass(frozen=True)
class StripIcc(Filter):
    token = "strip_icc"


@dataclass(frozen=True)
class Upscale(Filter):
    token = "upscale"


# --- Filters with a single argument ------------------------------------------


@dataclass(frozen=True)
class BackgroundColor(Filter):
    token = "background_color"

    color: Color

    def args(self) -> List[str]:
        return [format_color(self.color)]


@dataclass(frozen=True)
class Brightness(Filter):
    """Increase or decrease brightness, -100 to 100 percent."""

    token = "brightness"

    amount: int

    def args(self) -> List[str]:
        return [format_number(self.amount)]


@dataclass(frozen=True)
class Contrast(Filter):
    """Increase or decrease contrast, -100 to 100 percent."""

    token = "contrast"

    amount: int

    def args(self) -> List[str]:
        return [format_number(self.amount)]


@dataclass(frozen=True)
class Focal(Filter):
    """Add a manual focal point for smart cropping."""

    token = "focal"

    rect: Rect

    def args(self) -> List[str]:
        return [str(self.rect)]


@dataclass(frozen=True)
class Format(Filter):
    token = "format"

    image_format: ImageFormat

    def args(self) -> List[str]:
        return [self.image_format.value]


@dataclass(frozen=True)
class MaxBytes(Filter):
    token = "max_bytes"

    amount: int

    def args(self) -> List[str]:
        return [format_number(self.amount)]


@dataclass(frozen=True)
class Noise(Filter):
    """Add noise, 0 to 100 percent."""

    token = "noise"

    amount: int

    def args(self) -> List[str]:
        return [format_number(self.amount)]


@dataclass(frozen=True)
class Proportion(Filter):
    """Scale the result by a factor between 0 and 1."""

    token = "proportion"

    percentage: float

    def args(self) -> List[str]:
        return [format_number(self.percentage)]


@dataclass(frozen=True)
class Quality(Filter):
    token = "quality"

    amount: int

    def args(self) -> List[str]:
        return [format_number(self.amount)]


@dataclass(frozen=True)
class Rotate(Filter):
    """Rotate by a multiple of 90 degrees."""

    token = "rotate"

    angle: int

    def args(self) -> List[str]:
        return [format_number(self.angle)]


@dataclass(frozen=True)
class Saturation(Filter):
    token = "saturation"

    amount: float

    def args(self) -> List[str]:
        return [format_number(self.amount)]


# --- Filters with several or optional arguments ------------------------------


@dataclass(frozen=True)
class Blur(Filter):
    """Gaussian blur; ``sigma`` defaults to ``radius`` on the server."""

    token = "blur"

    radius: int
    sigma: Optional[int] = None

    def args(self) -> List[str]:
        args = [format_number(self.radius)]
        if self.sigma is not None:
            args.append(format_number(self.sigma))
        return args


@dataclass(frozen=True)
class Convolution(Filter):
    """
    Apply a convolution matrix.

    ``matrix_items`` are listed row by row and ``number_of_columns`` gives
    the row length.
    """

    token = "convolution"

    matrix_items: Tuple[int, ...]
    number_of_columns: int
    should_normalize: bool = True

    def args(self) -> List[str]:
        return [
            ";".join(format_number(item) for item in self.matrix_items),
            format_number(self.number_of_columns),
            format_number(self.should_normalize),
        ]


@dataclass(frozen=True)
class Fill(Filter):
    """Fill the missing area of a fit-in image with ``color``."""

    token = "fill"

    color: Color
    fill_transparent: bool = False

    def args(self) -> List[str]:
        args = [format_color(self.color)]
        if self.fill_transparent:
            args.append("1")
        return args


@dataclass(frozen=True)
class RgbAdjust(Filter):
    """Shift each channel by a percentage, -100 to 100."""

    token = "rgb"

    r_amount: int
    g_amount: int
    b_amount: int

    def args(self) -> List[str]:
        return [
            format_number(self.r_amount),
            format_number(self.g_amount),
            format_number(self.b_amount),
        ]


@dataclass(frozen=True)
class RoundCorner(Filter):
    token = "round_corner"

    radius: Radius
    color: Color
    transparent: bool = False

    def args(self) -> List[str]:
        args = [str(self.radius), format_color(self.color)]
        if self.transparent:
            args.append("1")
        return args


@dataclass(frozen=True)
class Sharpen(Filter):
    token = "sharpen"

    amount: float
    radius: float
    luminance_only: bool = False

    def args(self) -> List[str]:
        return [
            format_number(self.amount),
            format_number(self.radius),
            format_number(self.luminance_only),
        ]


@dataclass(frozen=True)
class Watermark(Filter):
    """
    Overlay another image.

    ``x`` and ``y`` accept pixel offsets or the server's keywords
    (``center``, ``repeat``, ``20p``). Ratios are percentages of the
    target image size; ``h_ratio`` can only follow ``w_ratio``.
    """

    token = "watermark"

    image_url: str
    x: Union[int, str]
    y: Union[int, str]
    alpha: int
    w_ratio: Optional[int] = None
    h_ratio: Optional[int] = None

    def __post_init__(self) -> None:
        if self.h_ratio is not None and self.w_ratio is None:
            raise ValueError("Watermark h_ratio requires w_ratio.")

    def args(self) -> List[str]:
        args = [
            self.image_url,
            format_number(self.x),
            format_number(self.y),
            format_number(self.alpha),
        ]
        if self.w_ratio is not None:
            args.append(format_number(self.w_ratio))
        if self.h_ratio is not None:
            args.append(format_number(self.h_ratio))
        return args


@dataclass(frozen=True)
class Custom(Filter):
    """Any filter by name, with its arguments written as-is."""

    name: str
    arguments: Tuple[Union[bool, str, int, float], ...] = ()

    def filter_name(self) -> str:
        return self.name

    def args(self) -> List[str]:
        return [format_number(arg) for arg in self.arguments]
