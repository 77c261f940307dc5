"""
Errors raised while configuring a server or producing URLs.
"""


class ThumborUrlError(Exception):
    """Base class for all errors raised by thumbor_url."""


class InvalidKey(ThumborUrlError, ValueError):
    """The security key cannot initialize the HMAC signer."""


class MalformedUrl(ThumborUrlError, ValueError):
    """The assembled URL is not an absolute URL usable as a base."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed URL {url!r}: {reason}")
