"""
Domain entities for token issuance and the credential echo.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from typing import Any

DEFAULT_UID = "123456"

# Marks a field the caller never supplied, as opposed to one supplied as null.
MISSING: Any = object()


@dataclass(frozen=True)
class IdentityClaim:
    uid: str = DEFAULT_UID

    def to_claims(self) -> dict:
        return {"uid": self.uid}


@dataclass(frozen=True)
class ClientCredentials:
    client_id: Any = MISSING
    client_secret: Any = MISSING

    @classmethod
    def from_body(cls, body: Any) -> "ClientCredentials":
        """Lift clientId/clientSecret out of a decoded JSON body without validating them."""
        if not isinstance(body, dict):
            return cls()
        return cls(
            client_id=body.get("clientId", MISSING),
            client_secret=body.get("clientSecret", MISSING),
        )


@dataclass(frozen=True)
class SecureEcho:
    credentials: ClientCredentials
    uid: Any = MISSING

    def to_dict(self) -> dict:
        """Serialise for the HTTP response; absent fields are omitted, explicit nulls kept."""
        fields = {
            "clientId": self.credentials.client_id,
            "clientSecret": self.credentials.client_secret,
            "uid": self.uid,
        }
        return {key: value for key, value in fields.items() if value is not MISSING}
