from __future__ import annotations

import base64

import pytest

from pytpapi._crypto import instance_id
from pytpapi._crypto.blowfish import bf_cbc_decrypt_b64, bf_cbc_encrypt_b64
from pytpapi._crypto.instance_id import generate_instance_id, is_valid_instance_id
from pytpapi.exceptions import DecryptionError


def test_generated_instance_ids_match_installation_format() -> None:
    for _ in range(50):
        fid = generate_instance_id()
        assert len(fid) == 22
        assert fid[0] in "cdef"
        assert is_valid_instance_id(fid)


def test_instance_id_generation_failure_returns_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(_n: int) -> bytes:
        raise OSError("no entropy")

    monkeypatch.setattr(instance_id.secrets, "token_bytes", broken)
    assert generate_instance_id() == ""


def test_is_valid_instance_id_rejects_bad_values() -> None:
    assert not is_valid_instance_id("")
    assert not is_valid_instance_id("a" * 22)
    assert not is_valid_instance_id("c" * 21)
    assert not is_valid_instance_id("c" + "!" * 21)


def test_blowfish_round_trip() -> None:
    ciphertext = bf_cbc_encrypt_b64("client-id-äöü", "remote-config-key", "12345678")
    assert bf_cbc_decrypt_b64(ciphertext, "remote-config-key", "12345678") == "client-id-äöü"


def test_blowfish_output_is_block_aligned() -> None:
    raw = base64.b64decode(bf_cbc_encrypt_b64("abcdefgh", "remote-config-key", "12345678"))
    # a full block of padding is added to block-aligned input
    assert len(raw) == 16


def test_blowfish_rejects_invalid_base64() -> None:
    with pytest.raises(DecryptionError, match="base64"):
        bf_cbc_decrypt_b64("not base64!!", "remote-config-key", "12345678")


def test_blowfish_rejects_truncated_ciphertext() -> None:
    with pytest.raises(DecryptionError, match="block size"):
        bf_cbc_decrypt_b64("QUJD", "remote-config-key", "12345678")


def test_blowfish_rejects_bad_iv_length() -> None:
    with pytest.raises(DecryptionError, match="IV"):
        bf_cbc_decrypt_b64("QUJDREVGR0g=", "remote-config-key", "1234")


def test_blowfish_rejects_short_key() -> None:
    with pytest.raises(DecryptionError, match="key"):
        bf_cbc_encrypt_b64("abc", "k", "12345678")


def test_blowfish_wrong_key_raises() -> None:
    ciphertext = bf_cbc_encrypt_b64("client-id-for-the-vendor-api", "remote-config-key", "12345678")

    with pytest.raises(DecryptionError):
        bf_cbc_decrypt_b64(ciphertext, "another-key-entirely", "12345678")


def test_blowfish_wrong_iv_raises() -> None:
    ciphertext = bf_cbc_encrypt_b64("client-id-for-the-vendor-api", "remote-config-key", "12345678")

    # "éééé" is 8 bytes; the first block no longer decodes as UTF-8
    with pytest.raises(DecryptionError):
        bf_cbc_decrypt_b64(ciphertext, "remote-config-key", "éééé")
