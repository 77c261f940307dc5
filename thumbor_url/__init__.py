"""
Public package interface for thumbor_url.

Build signed image URLs for a Thumbor server:

    from thumbor_url import Server

    server = Server("http://localhost:8888", "my-security-key")
    settings = server.settings_builder().resize((300, 200)).smart().build()
    url = settings.to_url("path/to/my/image.jpg")
"""

from __future__ import annotations

from thumbor_url.api.server import Server
from thumbor_url.api.settings import Settings, SettingsBuilder
from thumbor_url.domain.types import filter as filters
from thumbor_url.domain.types.color import NamedColor, Rgb
from thumbor_url.domain.types.filter import Filter, ImageFormat
from thumbor_url.domain.types.geometry import Point, Rect
from thumbor_url.domain.types.metadata import Meta
from thumbor_url.domain.types.options import FitIn, HAlign, ResponseMode, Trim, VAlign
from thumbor_url.exceptions import InvalidKey, MalformedUrl, ThumborUrlError
from thumbor_url.io.credentials import ServerConfig

__all__ = [
    "Server",
    "ServerConfig",
    "Settings",
    "SettingsBuilder",
    "Filter",
    "filters",
    "ImageFormat",
    "NamedColor",
    "Rgb",
    "Point",
    "Rect",
    "Meta",
    "FitIn",
    "HAlign",
    "ResponseMode",
    "Trim",
    "VAlign",
    "InvalidKey",
    "MalformedUrl",
    "ThumborUrlError",
]
