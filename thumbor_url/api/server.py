from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from thumbor_url.io.credentials import ServerConfig
from thumbor_url.ops.signing import Signer, create_signer

if TYPE_CHECKING:
    from thumbor_url.api.settings import SettingsBuilder

logger = logging.getLogger(__name__)


class Server:
    """
    Image server an URL is built for: its origin and how URLs are signed.

    A server is immutable and is meant to be shared by every URL built
    against it.

    :param origin: Server origin, e.g. ``"http://localhost:8888"``. Used as given.
    :type origin: str
    :param security_key: Secret key shared with the server. ``None`` builds unsafe URLs.
    :type security_key: str, optional
    :raises InvalidKey: if the key cannot be used for signing.

    :Usage example:

     .. code-block:: python

        from thumbor_url import Server

        server = Server("http://localhost:8888", "my-security-key")
        settings = server.settings_builder().resize((300, 200)).smart().build()
        url = settings.to_url("path/to/my/image.jpg")
    """

    __slots__ = ("_origin", "_signer")

    def __init__(self, origin: str, security_key: Optional[Union[str, bytes]] = None):
        self._origin = origin
        self._signer = create_signer(security_key)
        logger.debug(
            "Configured server %s (%s)",
            origin,
            "signed" if self._signer.secured else "unsafe",
        )

    @classmethod
    def unsafe(cls, origin: str) -> "Server":
        return cls(origin)

    @classmethod
    def secured(cls, origin: str, security_key: Union[str, bytes]) -> "Server":
        return cls(origin, security_key)

    @classmethod
    def from_config(cls, config: ServerConfig) -> "Server":
        config.validate_config()
        return cls(config.THUMBOR_SERVER_ORIGIN, config.get_security_key())

    @classmethod
    def from_env(cls) -> "Server":
        """Create a server from environment variables (or ``thumbor.env``)."""
        return cls.from_config(ServerConfig())

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def signer(self) -> Signer:
        return self._signer

    @property
    def is_secured(self) -> bool:
        return self._signer.secured

    def sign(self, path: str) -> str:
        return self._signer.sign(path)

    def settings_builder(self) -> "SettingsBuilder":
        from thumbor_url.api.settings import SettingsBuilder

        return SettingsBuilder(self)

    def __setattr__(self, name, value):
        if hasattr(self, "_signer"):
            raise AttributeError(f"{self.__class__.__name__} is immutable")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"Server(origin={self._origin!r}, secured={self.is_secured})"
