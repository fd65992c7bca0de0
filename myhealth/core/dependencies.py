"""
Shared dependencies for FastAPI dependency injection.
"""

import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from myhealth.core.config import get_settings, Settings
from myhealth.core.database import get_db
from myhealth.core.exceptions import InvalidTokenError
from myhealth.schemas.auth import TokenClaims
from myhealth.services.credential_store import CredentialStore
from myhealth.services.token_service import TokenService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings_dependency() -> Settings:
    """Dependency to get application settings."""
    return get_settings()


def get_token_service(
    settings: Settings = Depends(get_settings_dependency),
) -> TokenService:
    """Dependency to get the token issuer/verifier."""
    return TokenService(settings)


def get_credential_store(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_dependency),
) -> CredentialStore:
    """Dependency to get the credential store bound to the request session."""
    return CredentialStore(db, bcrypt_rounds=settings.bcrypt_rounds)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> TokenClaims:
    """
    Resolve the caller from the ``Authorization: Bearer`` header.

    Missing token -> 401, anything that fails verification -> 403.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return tokens.verify(credentials.credentials)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token"
        )
