"""
Models for the JSON returned when an URL is built with ``ResponseMode.METADATA``.

The server simulates the operations instead of performing them and
describes them as::

    {
        "thumbor": {
            "source": {"url": "path/to/image.jpg", "width": 800, "height": 600},
            "operations": [
                {"type": "crop", "left": 10, "top": 10, "right": 300, "bottom": 200},
                {"type": "resize", "width": 300, "height": 200},
                {"type": "flip_horizontally"},
                {"type": "flip_vertically"}
            ],
            "target": {"width": 300, "height": 200}
        }
    }
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from thumbor_url.domain.types.base import BaseInfo
from thumbor_url.domain.types.geometry import Point, Rect


class Source(BaseInfo):
    url: str = Field(..., description="Image identifier the server loaded")
    width: Optional[int] = Field(default=None, description="Original width in pixels")
    height: Optional[int] = Field(default=None, description="Original height in pixels")
    frame_count: Optional[int] = Field(
        default=None, alias="frameCount", description="Number of frames (animated images)"
    )


class TargetSize(BaseInfo):
    width: int
    height: int

    def to_point(self) -> Point:
        return Point(self.width, self.height)


class ResizeOperation(BaseInfo):
    type: Literal["resize"] = "resize"
    width: int
    height: int

    def to_point(self) -> Point:
        return Point(self.width, self.height)


class CropOperation(BaseInfo):
    type: Literal["crop"] = "crop"
    left: int
    top: int
    right: int
    bottom: int

    def to_rect(self) -> Rect:
        return Rect(Point(self.left, self.top), Point(self.right, self.bottom))


class FlipHorizontallyOperation(BaseInfo):
    type: Literal["flip_horizontally"] = "flip_horizontally"


class FlipVerticallyOperation(BaseInfo):
    type: Literal["flip_vertically"] = "flip_vertically"


class AutoPngToJpgConversionOperation(BaseInfo):
    type: Literal["auto_png_to_jpg_conversion"] = "auto_png_to_jpg_conversion"


Operation = Annotated[
    Union[
        ResizeOperation,
        CropOperation,
        FlipHorizontallyOperation,
        FlipVerticallyOperation,
        AutoPngToJpgConversionOperation,
    ],
    Field(discriminator="type"),
]


class FocalPoint(BaseInfo):
    """Detected or manual focal point, given by its center and size."""

    x: float
    y: float
    width: int = 1
    height: int = 1
    z: Optional[float] = Field(default=None, description="Weight of the focal point")
    origin: Optional[str] = Field(default=None, description="Detector that found the point")

    def to_rect(self) -> Rect:
        """Rectangle of ``width`` horizontally and ``height`` vertically around the center."""
        return Rect.from_center(Point(int(self.x), int(self.y)), self.width, self.height)


class Data(BaseInfo):
    source: Source
    operations: List[Operation] = Field(default_factory=list)
    target: Optional[TargetSize] = None
    focal_points: Optional[List[FocalPoint]] = None


class Meta(BaseInfo):
    thumbor: Data

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "Meta":
        return cls.model_validate_json(data)
