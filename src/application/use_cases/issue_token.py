"""
Use-case: issue a signed JWT asserting a subject identity.
Depends only on Domain ports and entities, no infrastructure imports.
"""

import logging
from typing import Optional

from src.domain.entities.identity import DEFAULT_UID, IdentityClaim
from src.domain.errors import SigningError
from src.domain.ports.token_signer_port import ITokenSigner

logger = logging.getLogger(__name__)


class IssueTokenUseCase:
    def __init__(self, signer: ITokenSigner, uid: str = DEFAULT_UID) -> None:
        """
        Args:
            signer: ITokenSigner implementation holding the private key.
            uid:    Identity embedded in every token unless overridden per call.
        """
        self._signer = signer
        self._uid = uid

    def execute(self, uid: Optional[str] = None) -> str:
        """Return a token whose payload is ``{"uid": uid}``.

        Raises:
            SigningError: on any key parsing or signing failure. The cause is
                          logged and chained but never part of the message.
        """
        claim = IdentityClaim(uid=self._uid if uid is None else uid)
        try:
            return self._signer.sign(claim.to_claims())
        except Exception as exc:
            logger.exception("Token signing failed")
            raise SigningError() from exc
