"""Pseudo-random app instance ids in the Firebase installation id format."""

from __future__ import annotations

import base64
import logging
import re
import secrets

_logger = logging.getLogger(__name__)

INSTANCE_ID_PATTERN = re.compile(r"^[cdef][\w-]{21}$")
INSTANCE_ID_LENGTH = 22

#: Returned instead of raising; the remote config fetch then fails upstream.
EMPTY_INSTANCE_ID = ""


def generate_instance_id() -> str:
    """Generate a 22-character instance id.

    17 random bytes, the high nibble of the first byte forced to ``0111``
    so the first base64 character is one of ``c``, ``d``, ``e``, ``f``,
    URL-safe base64 encoded and cut to 22 characters.

    Returns
    -------
    str
        The id, or :data:`EMPTY_INSTANCE_ID` if generation failed.
    """
    try:
        raw = bytearray(secrets.token_bytes(17))
        raw[0] = 0b01110000 | (raw[0] & 0b00001111)
        fid = base64.urlsafe_b64encode(bytes(raw)).decode("ascii")[:INSTANCE_ID_LENGTH]
    except Exception:
        _logger.warning("Instance id generation failed", exc_info=True)
        return EMPTY_INSTANCE_ID

    if not is_valid_instance_id(fid):
        _logger.warning("Generated instance id %r does not match the expected format", fid)
        return EMPTY_INSTANCE_ID
    return fid


def is_valid_instance_id(value: str) -> bool:
    return len(value) == INSTANCE_ID_LENGTH and INSTANCE_ID_PATTERN.match(value) is not None
