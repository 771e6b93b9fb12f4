"""Custom exception hierarchy for pytpapi."""

from __future__ import annotations


class TpapiError(Exception):
    """Base exception for all pytpapi errors."""


class ConfigurationError(TpapiError):
    """A required configuration option is missing or invalid."""

    def __init__(self, message: str, *, missing: tuple[str, ...] = ()) -> None:
        self.missing = missing
        super().__init__(message)


class UpstreamFetchError(TpapiError):
    """HTTP-level failure (network, timeout, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class DecryptionError(TpapiError):
    """Remote config ciphertext could not be decrypted.

    Raised for malformed base64, a key/IV mismatch, broken padding or a
    missing entry. No partial credentials are ever returned.
    """


class DataShapeError(TpapiError):
    """A single upstream record does not fit the data it references.

    Used for record-level problems such as a waiting-time entry whose code
    has no POI. Callers catch it per record and drop that record.
    """

    def __init__(self, message: str, *, code: str | None = None) -> None:
        self.code = code
        super().__init__(message)
