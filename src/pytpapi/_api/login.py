"""Token endpoint.

Endpoint:
  - POST <api_base>/<token_path>

Trades the decrypted client credentials for a bearer token. The result is
never cached; callers fetch one token per logical operation and reuse it
for that operation's requests. Calling this in a tight loop gets the
client rate limited.
"""

from __future__ import annotations

import logging
from typing import Any

from pytpapi._redact import redact_for_log
from pytpapi._transport import Transport
from pytpapi.config import ParkConfig
from pytpapi.exceptions import UpstreamFetchError
from pytpapi.models.credentials import RemoteCredentials

_logger = logging.getLogger(__name__)


def api_url(config: ParkConfig, path: str) -> str:
    """Join *path* onto the configured API base."""
    return f"{config.api_base.rstrip('/')}/{path.lstrip('/')}"


def parse_token_response(response: Any, url: str) -> str:
    """Return ``"Bearer <access_token>"`` from a token response."""
    token = response.get("access_token") if isinstance(response, dict) else None
    if not isinstance(token, str) or not token:
        raise UpstreamFetchError(
            f"Token response from {url} has no access_token: {redact_for_log(response)}",
            url=url,
        )
    return f"Bearer {token}"


async def exchange_credentials(
    config: ParkConfig,
    transport: Transport,
    credentials: RemoteCredentials,
) -> str:
    """POST a client-credentials grant and return the bearer header value."""
    url = api_url(config, config.token_path)
    response = await transport.request_json("POST", url, json_body=credentials.as_grant())
    _logger.debug("Token response parsed=%s", redact_for_log(response))
    return parse_token_response(response, url)
