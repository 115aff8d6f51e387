"""
FastAPI entry point.

This module is the Composition Root: it reads Settings once, wires the python-jose
adapters into the use cases and exposes them over HTTP.  Tests build isolated
apps through create_app(); the module-level ``app`` is what uvicorn serves.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

load_dotenv()

from src.application.use_cases.echo_credentials import EchoCredentialsUseCase  # noqa: E402
from src.application.use_cases.issue_token import IssueTokenUseCase  # noqa: E402
from src.domain.errors import MISSING_AUTH_HEADER, AuthError, SigningError  # noqa: E402
from src.infrastructure.auth.jwk_signer import JwkTokenSigner  # noqa: E402
from src.infrastructure.auth.jwk_validator import JwkTokenValidator  # noqa: E402
from src.infrastructure.config.settings import Settings, reveal  # noqa: E402

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class TokenResponse(BaseModel):
    token: str


class ErrorResponse(BaseModel):
    error: str


def get_bearer_token(request: Request) -> str:
    """FastAPI dependency: return the raw token from a ``Bearer`` Authorization header.

    The prefix match is case-sensitive and the remainder is returned untrimmed.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        logger.warning("Rejected request to %s: missing or invalid Authorization header", request.url.path)
        raise AuthError(MISSING_AUTH_HEADER)
    return auth_header[len(BEARER_PREFIX):]


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="JWK Token Service")

    issue_token = IssueTokenUseCase(JwkTokenSigner(reveal(settings.jwk_private_key)), uid=settings.token_uid)
    echo_credentials = EchoCredentialsUseCase(JwkTokenValidator(reveal(settings.jwk_public_key)))

    @app.exception_handler(SigningError)
    async def signing_error_handler(request: Request, exc: SigningError):
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        return JSONResponse(status_code=401, content={"error": exc.message})

    # RSA work runs off the event loop: /token is a sync route, /secure uses the threadpool.
    @app.post("/token", response_model=TokenResponse, responses={400: {"model": ErrorResponse}})
    def create_token():
        """Issue an RS256 token carrying the configured uid claim. The request body is ignored."""
        return TokenResponse(token=issue_token.execute())

    @app.post("/secure", responses={401: {"model": ErrorResponse}})
    async def secure(request: Request, token: str = Depends(get_bearer_token)):
        """Verify the bearer token and echo clientId/clientSecret with the token's uid."""
        body = await request.body()
        echo = await run_in_threadpool(echo_credentials.execute, token, body)
        return echo.to_dict()

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello Hono!"

    return app


# ---------------------------------------------------------------------------
# Bootstrap: optional secrets, logging, then the app wired from Settings
# ---------------------------------------------------------------------------
_secret_arn = os.environ.get("JWK_SECRET_ARN")
if _secret_arn:
    from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter
    SecretsManagerAdapter().load_into_env(_secret_arn)

_settings = Settings()
logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
app = create_app(_settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=_settings.host, port=_settings.port)
