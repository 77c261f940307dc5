from __future__ import annotations

import base64
import hashlib
import hmac
import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from thumbor_url.exceptions import InvalidKey

logger = logging.getLogger(__name__)

UNSAFE_SIGNATURE = "unsafe"


class Signer(ABC):
    """Produces the signature segment placed in front of the image path."""

    #: Whether URLs are signed with a secret key.
    secured: bool = False

    @abstractmethod
    def sign(self, path: str) -> str:
        """Return the signature segment for ``path``."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{self.__class__.__name__}()"


class UnsafeSigner(Signer):
    """No signing: every URL carries the ``unsafe`` marker."""

    def sign(self, path: str) -> str:
        return UNSAFE_SIGNATURE


class HmacSigner(Signer):
    """
    HMAC-SHA1 signer.

    The MAC is keyed once at construction and copied for every path, so the
    signer can be shared between threads.
    """

    secured = True

    def __init__(self, key: Union[str, bytes]):
        if isinstance(key, str):
            try:
                key = key.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise InvalidKey("Security key must be encodable as UTF-8.") from exc
        if not isinstance(key, bytes):
            raise InvalidKey(f"Security key must be str or bytes, got {type(key).__name__}.")
        self._mac = hmac.new(key, digestmod=hashlib.sha1)

    def sign(self, path: str) -> str:
        mac = self._mac.copy()
        mac.update(path.encode("utf-8"))
        return base64.urlsafe_b64encode(mac.digest()).decode("ascii")


def create_signer(key: Optional[Union[str, bytes]]) -> Signer:
    """Return an HMAC signer for ``key``, or an unsafe signer when no key is given."""
    if key is None:
        logger.debug("No security key configured, URLs will be unsafe")
        return UnsafeSigner()
    return HmacSigner(key)
