"""
Infrastructure adapter: python-jose RS256 signing with a JSON Web Key → ITokenSigner.

The private JWK arrives as the raw JSON string from configuration and is parsed
on every call, so a malformed key surfaces as a request-scoped ValueError instead
of failing application startup.
"""

import json
from typing import Optional

from jose import JOSEError, jwt

from src.domain.ports.token_signer_port import ITokenSigner

ALGORITHM = "RS256"


def parse_jwk(raw_jwk: Optional[str], name: str) -> dict:
    """Decode a JSON-encoded JWK and check it is an RSA key object."""
    if not raw_jwk:
        raise ValueError(f"{name} is not configured")
    try:
        jwk = json.loads(raw_jwk)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{name} is not valid JSON") from exc
    if not isinstance(jwk, dict) or jwk.get("kty") != "RSA":
        raise ValueError(f"{name} is not an RSA JSON Web Key")
    return jwk


class JwkTokenSigner(ITokenSigner):
    """Signs claims with an RSA private JWK using RS256."""

    def __init__(self, private_jwk: Optional[str]) -> None:
        self._private_jwk = private_jwk

    def sign(self, claims: dict) -> str:
        """Return the compact JWS for *claims*.

        The JWK's ``kid``, when present, is copied into the token header.

        Raises:
            ValueError: if the key is missing, malformed, has no private part,
                        or signing fails.
        """
        jwk = parse_jwk(self._private_jwk, "JWK_PRIVATE_KEY")
        if "d" not in jwk:
            raise ValueError("JWK_PRIVATE_KEY has no private exponent")
        headers = {"kid": jwk["kid"]} if jwk.get("kid") else None
        try:
            return jwt.encode(claims, jwk, algorithm=ALGORITHM, headers=headers)
        except JOSEError as exc:
            raise ValueError(f"Token signing failed: {exc}") from exc
