"""Remote config credential model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from pytpapi._constants import GRANT_TYPE


class RemoteCredentials(BaseModel):
    """Client credentials decrypted from remote config.

    Parameters
    ----------
    client_id : str
        Decrypted API username.
    client_secret : str
        Decrypted API password.
    grant_type : str
        Always ``"client_credentials"``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    client_id: str
    client_secret: str
    grant_type: Literal["client_credentials"] = GRANT_TYPE

    def as_grant(self) -> dict[str, str]:
        """Body of the token request."""
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": self.grant_type,
        }

    def __repr__(self) -> str:
        return f"RemoteCredentials(client_id={self.client_id!r}, client_secret='<redacted>')"
