"""User profile endpoints for the dashboard."""

from fastapi import APIRouter, Depends, HTTPException

from myhealth.core.dependencies import get_credential_store, get_current_user
from myhealth.core.exceptions import UserNotFoundError
from myhealth.schemas.auth import TokenClaims
from myhealth.schemas.common import SuccessResponse
from myhealth.schemas.profile import ProfileResponse, ProfileUpdate
from myhealth.services.credential_store import CredentialStore

router = APIRouter(prefix="/user", tags=["profile"])


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    current_user: TokenClaims = Depends(get_current_user),
    store: CredentialStore = Depends(get_credential_store),
):
    """Profile fields of the caller (never the password hash)."""
    try:
        return store.get_profile(current_user.id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/profile", response_model=SuccessResponse)
def update_profile(
    request: ProfileUpdate,
    current_user: TokenClaims = Depends(get_current_user),
    store: CredentialStore = Depends(get_credential_store),
):
    """Overwrite the profile fields present in the body."""
    try:
        store.update_profile(current_user.id, request.model_dump(exclude_unset=True))
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SuccessResponse()
