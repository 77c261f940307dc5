from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

import httpx
from pydantic import BaseModel, ConfigDict, Field

from thumbor_url.api.server import Server
from thumbor_url.domain.types.filter import Filter
from thumbor_url.domain.types.geometry import Point, PointLike, Rect, RectLike
from thumbor_url.domain.types.options import FitIn, HAlign, ResponseMode, Trim, VAlign
from thumbor_url.io.url import assemble_path, assemble_url, parse_url
from thumbor_url.ops.canonical import build_path

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """
    Transformations requested for an image.

    Every option is optional; an unset option is left out of the URL and the
    server applies its default. Build instances with :class:`SettingsBuilder`.
    """

    server: Server = Field(..., description="Server the URL is built for")
    response: Optional[ResponseMode] = None
    trim: Optional[Trim] = Field(
        default=None, description="Remove the surrounding space of the same color"
    )
    crop: Optional[Rect] = Field(
        default=None, description="Manual crop, applied before any other operation"
    )
    fit_in: Optional[FitIn] = Field(
        default=None, description="Fit the image in the resize box instead of cropping it"
    )
    resize: Optional[Point] = Field(
        default=None, description="Target size; 0 keeps the proportion, negative flips"
    )
    h_align: Optional[HAlign] = None
    v_align: Optional[VAlign] = None
    smart: bool = Field(default=False, description="Crop around detected focal points")
    filters: Tuple[Filter, ...] = Field(
        default=(), description="Filters applied sequentially, in order"
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def canonical_path(self, image_uri: str) -> str:
        """
        Unsigned path, without leading slash.

        :param image_uri: Image identifier for the server's loader, used as given
            (escape it beforehand if needed).
        :type image_uri: str
        :rtype: :class:`str`
        """
        return build_path(self, image_uri)

    def to_path(self, image_uri: str) -> str:
        """
        Signed path without the origin.

        :Usage example:

         .. code-block:: python

            server = Server.unsafe("http://localhost:8888")
            server.settings_builder().build().to_path("path/to/my/image.jpg")
            # Output:
            # '/unsafe/path/to/my/image.jpg'
        """
        path = self.canonical_path(image_uri)
        return assemble_path(self.server.sign(path), path)

    def to_url(self, image_uri: str) -> str:
        """
        Full URL: server origin followed by the signed path.

        :Usage example:

         .. code-block:: python

            server = Server.unsafe("http://localhost:8888")
            server.settings_builder().build().to_url("path/to/my/image.jpg")
            # Output:
            # 'http://localhost:8888/unsafe/path/to/my/image.jpg'
        """
        path = self.canonical_path(image_uri)
        url = assemble_url(self.server.origin, self.server.sign(path), path)
        logger.debug("Built URL %s", url)
        return url

    def to_uri(self, image_uri: str) -> httpx.URL:
        """
        Full URL parsed as :class:`httpx.URL`.

        :raises MalformedUrl: if the origin does not make an absolute URL.
        """
        return parse_url(self.to_url(image_uri))


class SettingsBuilder:
    """
    Accumulates options for :class:`Settings`.

    Each setter replaces the previous value and returns the builder, so calls
    can be chained. Passing ``None`` unsets an option.
    """

    def __init__(self, server: Server):
        self._server = server
        self._options: Dict[str, Any] = {}

    def response(self, mode: Optional[ResponseMode]) -> "SettingsBuilder":
        self._options["response"] = mode
        return self

    def trim(self, trim: Optional[Trim] = Trim.TOP_LEFT) -> "SettingsBuilder":
        self._options["trim"] = trim
        return self

    def crop(self, rect: Optional[RectLike]) -> "SettingsBuilder":
        self._options["crop"] = None if rect is None else Rect.of(rect)
        return self

    def fit_in(self, mode: Optional[FitIn] = FitIn.DEFAULT) -> "SettingsBuilder":
        self._options["fit_in"] = mode
        return self

    def resize(self, size: Optional[PointLike]) -> "SettingsBuilder":
        self._options["resize"] = None if size is None else Point.of(size)
        return self

    def h_align(self, align: Optional[HAlign]) -> "SettingsBuilder":
        self._options["h_align"] = align
        return self

    def v_align(self, align: Optional[VAlign]) -> "SettingsBuilder":
        self._options["v_align"] = align
        return self

    def smart(self, enabled: Optional[bool] = True) -> "SettingsBuilder":
        self._options["smart"] = bool(enabled)
        return self

    def filters(self, filters: Optional[Iterable[Filter]]) -> "SettingsBuilder":
        """Set the whole filter pipeline, replacing any previous one."""
        self._options["filters"] = () if filters is None else tuple(filters)
        return self

    def build(self) -> Settings:
        return Settings(server=self._server, **self._options)
