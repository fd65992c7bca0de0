"""Bearer token issuance and verification (JWT, HS256)."""

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from pydantic import ValidationError

from ..core.config import Settings
from ..core.exceptions import InvalidTokenError
from ..schemas.auth import TokenClaims

logger = logging.getLogger(__name__)


class TokenService:
    """Mints and checks signed tokens carrying the user's id and email."""

    def __init__(self, settings: Settings):
        self.secret = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.expire_minutes = settings.access_token_expire_minutes

    def issue(self, user_id: int, email: str) -> str:
        """
        Sign a token for the user.

        Claims are readable by anyone holding the token; never put secrets
        in them. An ``exp`` claim is only added when expiry is configured.
        """
        claims = {"id": user_id, "email": email}
        if self.expire_minutes:
            claims["exp"] = datetime.now(timezone.utc) + timedelta(
                minutes=self.expire_minutes
            )
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Check the signature and decode the claims.

        Raises:
            InvalidTokenError: empty, malformed, tampered or expired token
        """
        if not token:
            raise InvalidTokenError("Token is empty")
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"Token rejected: {e}")
            raise InvalidTokenError(str(e)) from e
        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as e:
            logger.warning("Token rejected: missing or invalid claims")
            raise InvalidTokenError("Token claims are invalid") from e
