import pytest
from pydantic import SecretStr, ValidationError

from src.infrastructure.config.settings import Settings, reveal


def test_defaults_when_environment_is_empty():
    settings = Settings()
    assert settings.jwk_private_key is None
    assert settings.jwk_public_key is None
    assert settings.token_uid == "123456"
    assert settings.log_level == "INFO"
    assert (settings.host, settings.port) == ("0.0.0.0", 8000)


def test_values_are_read_from_environment(monkeypatch):
    monkeypatch.setenv("JWK_PRIVATE_KEY", '{"kty": "RSA"}')
    monkeypatch.setenv("JWK_PUBLIC_KEY", '{"kty": "RSA", "n": "x"}')
    monkeypatch.setenv("TOKEN_UID", "svc-1")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings()
    assert reveal(settings.jwk_private_key) == '{"kty": "RSA"}'
    assert reveal(settings.jwk_public_key) == '{"kty": "RSA", "n": "x"}'
    assert settings.token_uid == "svc-1"
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000


def test_empty_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("JWK_PRIVATE_KEY", "")
    monkeypatch.setenv("TOKEN_UID", "")
    settings = Settings()
    assert settings.jwk_private_key is None
    assert settings.token_uid == "123456"


def test_invalid_port_is_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(ValidationError):
        Settings()


def test_invalid_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings()


def test_repr_hides_key_material():
    settings = Settings(jwk_private_key='{"d": "very-secret"}', jwk_secret_arn="arn:jwks")
    assert isinstance(settings.jwk_private_key, SecretStr)
    assert "very-secret" not in repr(settings)
    assert "very-secret" not in str(settings.model_dump())
    assert reveal(settings.jwk_private_key) == '{"d": "very-secret"}'
    assert reveal(None) is None
