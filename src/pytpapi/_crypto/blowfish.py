"""Blowfish-CBC codec for remote config credentials.

The vendor app stores its API credentials in Firebase remote config as
base64 Blowfish-CBC ciphertext with PKCS#5 padding. Key and IV are plain
strings, used as their UTF-8 bytes.
"""

from __future__ import annotations

import base64
import binascii

from cryptography.hazmat.decrepit.ciphers.algorithms import Blowfish
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from pytpapi.exceptions import DecryptionError

_BLOCK_BITS = 64


def _cipher(key: str, iv: str) -> Cipher[modes.CBC]:
    key_bytes = key.encode("utf-8")
    iv_bytes = iv.encode("utf-8")
    if not 4 <= len(key_bytes) <= 56:
        raise DecryptionError(f"Blowfish key must be 4-56 bytes (got {len(key_bytes)})")
    if len(iv_bytes) != _BLOCK_BITS // 8:
        raise DecryptionError(f"Blowfish IV must be 8 bytes (got {len(iv_bytes)})")
    return Cipher(Blowfish(key_bytes), modes.CBC(iv_bytes))


def bf_cbc_decrypt_b64(ciphertext_b64: str, key: str, iv: str) -> str:
    """Decrypt base64 Blowfish-CBC ciphertext into a UTF-8 string.

    Parameters
    ----------
    ciphertext_b64 : str
        Standard base64 ciphertext.
    key : str
        Blowfish key.
    iv : str
        8-byte IV.

    Returns
    -------
    str
        Decrypted plaintext.

    Raises
    ------
    DecryptionError
        If the input is not base64, the key/IV do not fit, the padding is
        invalid or the plaintext is not UTF-8.
    """
    cipher = _cipher(key, iv)
    try:
        ct = base64.b64decode(ciphertext_b64, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecryptionError("Ciphertext is not valid base64") from exc
    if not ct or len(ct) % (_BLOCK_BITS // 8) != 0:
        raise DecryptionError(f"Ciphertext length {len(ct)} is not a multiple of the block size")

    try:
        decryptor = cipher.decryptor()
        padded = decryptor.update(ct) + decryptor.finalize()
        unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode("utf-8")
    except Exception as exc:
        raise DecryptionError(f"Blowfish decryption failed: {exc}") from exc


def bf_cbc_encrypt_b64(plaintext: str, key: str, iv: str) -> str:
    """Blowfish-CBC encrypt *plaintext*, returning standard base64."""
    cipher = _cipher(key, iv)
    try:
        padder = padding.PKCS7(_BLOCK_BITS).padder()
        padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
        encryptor = cipher.encryptor()
        ct = encryptor.update(padded) + encryptor.finalize()
    except Exception as exc:
        raise DecryptionError(f"Blowfish encryption failed: {exc}") from exc
    return base64.b64encode(ct).decode("ascii")
