"""Cryptographic primitives for the remote config credential pipeline."""

from __future__ import annotations

from pytpapi._crypto.blowfish import bf_cbc_decrypt_b64, bf_cbc_encrypt_b64
from pytpapi._crypto.instance_id import (
    EMPTY_INSTANCE_ID,
    INSTANCE_ID_PATTERN,
    generate_instance_id,
    is_valid_instance_id,
)

__all__ = [
    "EMPTY_INSTANCE_ID",
    "INSTANCE_ID_PATTERN",
    "bf_cbc_decrypt_b64",
    "bf_cbc_encrypt_b64",
    "generate_instance_id",
    "is_valid_instance_id",
]
