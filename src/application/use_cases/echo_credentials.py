"""
Use-case: verify a bearer token and echo the caller's client credentials.
Depends only on Domain ports and entities, no infrastructure imports.
"""

import json
import logging
import math

from src.domain.entities.identity import MISSING, ClientCredentials, SecureEcho
from src.domain.errors import AuthError
from src.domain.ports.token_validator_port import ITokenValidator

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Out of range JSON number: {text}")
    return value


def parse_json_body(body: bytes):
    """Decode *body* as strict JSON; NaN, Infinity and overflowing numbers are rejected."""
    if not body:
        return {}
    return json.loads(body, parse_constant=_reject_constant, parse_float=_finite_float)


class EchoCredentialsUseCase:
    def __init__(self, validator: ITokenValidator) -> None:
        self._validator = validator

    def execute(self, token: str, body: bytes) -> SecureEcho:
        """Verify *token*, then decode *body* and echo clientId/clientSecret with the uid claim.

        The body is only decoded once the token has verified. An empty body counts
        as an empty object.

        Raises:
            AuthError: if verification fails or the body is not valid JSON. Both
                       collapse into the same "Invalid or expired token" message.
        """
        try:
            claims = self._validator.validate(token)
            payload = parse_json_body(body)
        except Exception as exc:
            logger.exception("Secured request rejected")
            raise AuthError() from exc

        return SecureEcho(
            credentials=ClientCredentials.from_body(payload),
            uid=claims.get("uid", MISSING),
        )
