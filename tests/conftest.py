import json

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from fastapi.testclient import TestClient
from jose import jwk

from src.infrastructure.config.settings import Settings

SETTINGS_ENV = ("JWK_PRIVATE_KEY", "JWK_PUBLIC_KEY", "TOKEN_UID", "JWK_SECRET_ARN", "LOG_LEVEL", "HOST", "PORT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment from leaking into Settings()."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


def generate_jwk_pair(kid: str | None = None) -> tuple[dict, dict]:
    """Return (private_jwk, public_jwk) dicts for a fresh 2048-bit RSA key."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    key = jwk.construct(pem, "RS256")
    private_jwk = key.to_dict()
    public_jwk = key.public_key().to_dict()
    if kid:
        private_jwk["kid"] = kid
        public_jwk["kid"] = kid
    return private_jwk, public_jwk


@pytest.fixture(scope="session")
def jwk_pair():
    return generate_jwk_pair(kid="test-key")


@pytest.fixture(scope="session")
def other_jwk_pair():
    return generate_jwk_pair()


@pytest.fixture
def settings(jwk_pair):
    private_jwk, public_jwk = jwk_pair
    return Settings(
        jwk_private_key=json.dumps(private_jwk),
        jwk_public_key=json.dumps(public_jwk),
    )


@pytest.fixture
def make_client():
    """Factory building a TestClient around create_app() for the given Settings."""
    from src.infrastructure.entrypoints.fastapi_app import create_app

    def _mk(settings: Settings) -> TestClient:
        return TestClient(create_app(settings))

    return _mk


@pytest.fixture
def client(make_client, settings):
    return make_client(settings)


@pytest.fixture
def issued_token(client):
    resp = client.post("/token")
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]
