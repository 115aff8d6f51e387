"""
Port (interface) for JWT token validators.
Infrastructure adapters (e.g. JwkTokenValidator) must implement this interface.
"""

from abc import ABC, abstractmethod


class ITokenValidator(ABC):
    @abstractmethod
    def validate(self, token: str) -> dict:
        """Verify a JWT's signature and return its decoded claims.

        Raises:
            ValueError: if the token is malformed, expired, signed by another key,
                        or the verification key itself is unusable.
        """
        ...
