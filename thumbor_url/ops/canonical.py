"""
Serialization of settings into the path understood by the server.

The order of the segments is fixed. The server parses them by position and
keyword, and the signature covers the exact bytes, so reordering would
invalidate every URL already handed out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

from thumbor_url.domain.types.filter import Filter

if TYPE_CHECKING:
    from thumbor_url.api.settings import Settings

SMART_TOKEN = "smart"
FILTERS_PREFIX = "filters:"


def format_filters(filters: Iterable[Filter]) -> str:
    """Render a filter pipeline; empty pipelines render as an empty string."""
    encoded = [f.encode() for f in filters]
    if not encoded:
        return ""
    return FILTERS_PREFIX + ":".join(encoded)


def path_segments(settings: "Settings", image_uri: str) -> List[str]:
    segments = []

    if settings.response is not None:
        segments.append(settings.response.value)
    if settings.trim is not None:
        segments.append(settings.trim.value)
    if settings.crop is not None:
        segments.append(str(settings.crop))
    if settings.fit_in is not None:
        segments.append(settings.fit_in.value)
    if settings.resize is not None:
        segments.append(str(settings.resize))
    if settings.h_align is not None:
        segments.append(settings.h_align.value)
    if settings.v_align is not None:
        segments.append(settings.v_align.value)
    if settings.smart:
        segments.append(SMART_TOKEN)

    filters = format_filters(settings.filters)
    if filters:
        segments.append(filters)

    segments.append(image_uri)
    return segments


def build_path(settings: "Settings", image_uri: str) -> str:
    """Canonical, unsigned path for ``image_uri`` (no leading slash)."""
    return "/".join(path_segments(settings, image_uri))
