"""Credential pipeline shared by the Europa-Park family of adapters.

    instance id (cached 8 days)
      -> remote config, decrypted (cached 6 hours)
        -> bearer token (never cached)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pytpapi._api.login import exchange_credentials
from pytpapi._api.remote_config import fetch_remote_credentials
from pytpapi._cache import ScopedCache
from pytpapi._constants import DEVICE_ID_TTL, REMOTE_CONFIG_TTL
from pytpapi._crypto.instance_id import generate_instance_id
from pytpapi._transport import Transport
from pytpapi.config import ParkConfig
from pytpapi.models.credentials import RemoteCredentials

_logger = logging.getLogger(__name__)


class CredentialPipeline:
    """Obtain bearer tokens for one vendor configuration.

    Parameters
    ----------
    config : ParkConfig
        Validated adapter configuration.
    transport : Transport
        Transport used for the remote config and token requests.
    cache : ScopedCache
        Cache holding the instance id and the decrypted credentials.
    id_factory : callable
        Instance id generator; returns ``""`` on failure.
    """

    def __init__(
        self,
        config: ParkConfig,
        transport: Transport,
        cache: ScopedCache,
        *,
        id_factory: Callable[[], str] = generate_instance_id,
    ) -> None:
        self._config = config
        self._transport = transport
        self._cache = cache
        self._id_factory = id_factory

    async def get_device_id(self) -> str:
        """Return the cached instance id, generating one on a miss.

        The empty failure sentinel is passed on but not cached, so the
        next call generates again.
        """

        async def _produce() -> str:
            fid = self._id_factory()
            if not fid:
                _logger.warning("No instance id available, remote config fetch will likely fail")
            return fid

        return await self._cache.wrap("device-id", _produce, DEVICE_ID_TTL, cache_if=bool)

    async def get_config(self) -> RemoteCredentials:
        """Return decrypted remote config credentials (cached 6 hours).

        Network and decryption errors propagate unchanged and are not
        cached.
        """

        async def _produce() -> RemoteCredentials:
            fid = await self.get_device_id()
            return await fetch_remote_credentials(self._config, self._transport, fid)

        return await self._cache.wrap("remote-config", _produce, REMOTE_CONFIG_TTL)

    async def get_token(self) -> str:
        """Exchange the credentials for a fresh ``"Bearer ..."`` value.

        Every call hits the token endpoint. Fetch one token per logical
        operation and pass it along instead of calling this per request.
        """
        credentials = await self.get_config()
        return await exchange_credentials(self._config, self._transport, credentials)
