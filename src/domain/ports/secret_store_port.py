"""
Port (interface) for secret stores.
Infrastructure adapters (e.g. SecretsManagerAdapter) only implement get_secret();
load_into_env() is shared behaviour built on top of it.
"""

import json
import os
from abc import ABC, abstractmethod


class ISecretStore(ABC):
    @abstractmethod
    def get_secret(self, secret_id: str) -> dict:
        """Fetch and deserialize a JSON secret. Returns its key-value pairs."""
        ...

    def load_into_env(self, secret_id: str, overwrite: bool = False) -> list[str]:
        """Copy every entry of *secret_id* into os.environ and return the names set.

        Non-string values (e.g. a JWK stored as a nested object) are written as JSON.
        Variables already present in the environment win unless *overwrite* is set.
        """
        loaded = []
        for key, value in self.get_secret(secret_id).items():
            if not overwrite and key in os.environ:
                continue
            os.environ[key] = value if isinstance(value, str) else json.dumps(value)
            loaded.append(key)
        return loaded
