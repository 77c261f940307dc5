from typing import Annotated, Union

from pydantic import Field
from pydantic.dataclasses import dataclass

Channel = Annotated[int, Field(ge=0, le=255)]


@dataclass(frozen=True)
class Rgb:
    """RGB color, rendered as ``#rrggbb``."""

    r: Channel
    g: Channel
    b: Channel

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class NamedColor:
    """Color given by name (``red``, ``auto``, ``transparent``, ...)."""

    name: str

    def __str__(self) -> str:
        return self.name


Color = Union[Rgb, NamedColor, str]


def format_color(color: Color) -> str:
    return str(color)
