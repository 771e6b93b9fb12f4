"""Firebase remote config endpoint.

Endpoint:
  - POST https://firebaseremoteconfig.googleapis.com/v1/projects/<project>/namespaces/firebase:fetch

The response's ``entries`` carry the vendor API credentials encrypted with
Blowfish-CBC. Failures here are fatal for every authenticated call of the
adapter until they resolve, so nothing is swallowed.
"""

from __future__ import annotations

import logging
from typing import Any

from pytpapi._constants import REMOTE_CONFIG_API_KEY_HEADER, REMOTE_CONFIG_URL
from pytpapi._crypto.blowfish import bf_cbc_decrypt_b64
from pytpapi._redact import redact_for_log
from pytpapi._transport import Transport
from pytpapi.config import ParkConfig
from pytpapi.exceptions import DecryptionError
from pytpapi.models.credentials import RemoteCredentials

_logger = logging.getLogger(__name__)


def build_remote_config_request(config: ParkConfig, instance_id: str) -> tuple[str, dict[str, str], dict[str, Any]]:
    """Build ``(url, headers, body)`` for the remote config fetch."""
    url = REMOTE_CONFIG_URL.format(project_id=config.project_id)
    headers = {REMOTE_CONFIG_API_KEY_HEADER: config.api_key}
    app = config.app
    body: dict[str, Any] = {
        "appInstanceId": instance_id,
        "appInstanceIdToken": "",
        "appId": app.firebase_app_id,
        "packageName": app.package_name,
        "appVersion": app.app_version,
        "sdkVersion": app.sdk_version,
        "languageCode": app.language_code,
        "countryCode": app.country_code,
        "timeZone": app.time_zone,
        "platformVersion": app.platform_version,
    }
    return url, headers, body


def _decrypt_entry(entries: dict[str, Any], name: str, config: ParkConfig) -> str:
    value = entries.get(name)
    if not isinstance(value, str) or not value:
        raise DecryptionError(f"Remote config entry {name!r} is missing")
    return bf_cbc_decrypt_b64(value, config.enc_key, config.enc_iv)


def parse_remote_config_response(response: Any, config: ParkConfig) -> RemoteCredentials:
    """Decrypt the credential entries of a remote config response.

    Raises
    ------
    DecryptionError
        If an entry is missing or does not decrypt under the configured
        key/IV. No partial credentials are returned.
    """
    if not isinstance(response, dict):
        raise DecryptionError("Remote config response is not an object")
    entries = response.get("entries")
    if not isinstance(entries, dict):
        raise DecryptionError(f"Remote config response has no entries (state={response.get('state')})")

    return RemoteCredentials(
        client_id=_decrypt_entry(entries, config.username_entry, config),
        client_secret=_decrypt_entry(entries, config.password_entry, config),
    )


async def fetch_remote_credentials(
    config: ParkConfig,
    transport: Transport,
    instance_id: str,
) -> RemoteCredentials:
    """Fetch remote config for *instance_id* and decrypt the credentials."""
    url, headers, body = build_remote_config_request(config, instance_id)
    response = await transport.request_json("POST", url, headers=headers, json_body=body)
    _logger.debug("Remote config response parsed=%s", redact_for_log(response))
    return parse_remote_config_response(response, config)
