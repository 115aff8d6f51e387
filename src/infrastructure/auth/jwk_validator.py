"""
Infrastructure adapter: python-jose RS256 verification with a JSON Web Key → ITokenValidator.

Only the signature and the registered time claims (exp, nbf, iat) are checked;
no issuer or audience is expected.
"""

from typing import Optional

from jose import JOSEError, jwt

from src.domain.ports.token_validator_port import ITokenValidator
from src.infrastructure.auth.jwk_signer import ALGORITHM, parse_jwk

# Signature plus exp/nbf/iat only; aud, iss, sub and jti are passed through unchecked.
DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_at_hash": False,
}

class JwkTokenValidator(ITokenValidator):
    """Verifies tokens against an RSA public JWK."""

    def __init__(self, public_jwk: Optional[str]) -> None:
        self._public_jwk = public_jwk

    def validate(self, token: str) -> dict:
        """Decode and verify *token*.

        Raises:
            ValueError: on any validation failure (missing or malformed key, bad
                        signature, malformed token, expired token).
        """
        jwk = parse_jwk(self._public_jwk, "JWK_PUBLIC_KEY")
        try:
            return jwt.decode(token, jwk, algorithms=[ALGORITHM], options=DECODE_OPTIONS)
        except JOSEError as exc:
            raise ValueError(f"Token validation failed: {exc}") from exc
