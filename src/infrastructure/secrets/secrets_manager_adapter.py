"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

Used at startup when JWK_SECRET_ARN is set: the secret's JSON holds
JWK_PRIVATE_KEY / JWK_PUBLIC_KEY, either as JSON strings or as nested objects.
"""

import json
import os

import boto3

from src.domain.ports.secret_store_port import ISecretStore


class SecretsManagerAdapter(ISecretStore):
    """Fetches and deserializes JSON secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None, client=None) -> None:
        self._client = client or boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_id: str) -> dict:
        """Fetch a secret by ARN or name and decode its JSON object.

        Raises:
            ValueError: if the secret string is not a JSON object.
        """
        response = self._client.get_secret_value(SecretId=secret_id)
        secret = json.loads(response["SecretString"])
        if not isinstance(secret, dict):
            raise ValueError(f"Secret {secret_id!r} is not a JSON object")
        return secret
