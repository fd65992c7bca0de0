"""Registration and login endpoints. The only routes without a bearer token."""

import logging
from fastapi import APIRouter, Depends, HTTPException, status

from myhealth.core.dependencies import get_credential_store, get_token_service
from myhealth.core.exceptions import DuplicateEmailError, InvalidCredentialsError
from myhealth.schemas.auth import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
    UserSummary,
)
from myhealth.services.credential_store import CredentialStore
from myhealth.services.token_service import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a New User",
)
def register(
    request: RegisterRequest,
    store: CredentialStore = Depends(get_credential_store),
):
    """Register a new account. The password is stored as a bcrypt hash."""
    try:
        user_id = store.register(
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
    except DuplicateEmailError:
        raise HTTPException(
            status_code=400,
            detail="An account with this email already exists. Please sign in instead.",
        )
    return RegisterResponse(id=user_id)


@router.post("/login", response_model=LoginResponse, summary="User Login")
def login(
    request: LoginRequest,
    store: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Exchange email and password for a bearer token.

    Unknown email and wrong password produce the same response.
    """
    try:
        user = store.authenticate(request.email, request.password)
    except InvalidCredentialsError:
        logger.info("Login failed")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = tokens.issue(user.id, user.email)
    return LoginResponse(
        token=token,
        user=UserSummary(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
        ),
    )
