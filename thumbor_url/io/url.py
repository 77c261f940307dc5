from urllib.parse import urlsplit

import httpx

from thumbor_url.exceptions import MalformedUrl


def assemble_path(signature: str, path: str) -> str:
    """Join the signature segment and the canonical path: ``/{signature}/{path}``."""
    return f"/{signature}/{path}"


def assemble_url(origin: str, signature: str, path: str) -> str:
    """
    Prefix the signed path with the server origin.
    The origin is used as given, trailing slashes included.
    """
    return origin + assemble_path(signature, path)


def parse_url(url: str) -> httpx.URL:
    """
    Parse an assembled URL.
    Raises MalformedUrl if it is invalid, relative, or cannot be used as a
    base (``mailto:``, ``data:`` and other schemes without a hierarchical path).
    """
    try:
        split = urlsplit(url)
    except ValueError as exc:
        raise MalformedUrl(url, str(exc)) from exc
    if not split.scheme:
        raise MalformedUrl(url, "relative URL without a scheme")
    if not split.netloc and not split.path.startswith("/"):
        raise MalformedUrl(url, "URL cannot be a base")

    try:
        return httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise MalformedUrl(url, str(exc)) from exc
