"""
Port (interface) for JWT signers.
Infrastructure adapters (e.g. JwkTokenSigner) must implement this interface.
"""

from abc import ABC, abstractmethod


class ITokenSigner(ABC):
    @abstractmethod
    def sign(self, claims: dict) -> str:
        """Sign *claims* and return the compact JWT.

        Raises:
            ValueError: if the signing key is missing or unusable, or signing fails.
        """
        ...
