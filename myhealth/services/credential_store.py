"""Credential store: accounts, password verification and the profile."""

import logging
from typing import Optional, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from ..models import User
from ..core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from ..core.security import hash_password, verify_password

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("first_name", "last_name", "mobile", "blood_group", "personal_notes")


class CredentialStore:
    """Service for user accounts."""

    def __init__(self, db: Session, bcrypt_rounds: int = 10):
        """Initialize with database session."""
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds

    def register(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> int:
        """
        Create a new account.

        Args:
            email: Login email, unique across users
            password: Plaintext password, hashed before it reaches the row
            first_name: Optional first name
            last_name: Optional last name

        Returns:
            New user id

        Raises:
            DuplicateEmailError: an account with this email already exists
        """
        user = User(
            email=email,
            password_hash=hash_password(password, rounds=self.bcrypt_rounds),
            first_name=first_name,
            last_name=last_name,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Registration rejected, duplicate email: {email}")
            raise DuplicateEmailError(email) from e
        self.db.refresh(user)
        logger.info(f"Registered user {user.id}")
        return user.id

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return self.db.query(User).filter(User.id == user_id).first()

    def verify(self, email: str, password: str) -> Optional[User]:
        """Return the user when the password matches, otherwise None."""
        user = self.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user

    def authenticate(self, email: str, password: str) -> User:
        """
        Like verify, but raises instead of returning None.

        Raises:
            InvalidCredentialsError: unknown email or wrong password
        """
        user = self.verify(email, password)
        if user is None:
            raise InvalidCredentialsError()
        return user

    def get_profile(self, user_id: int) -> User:
        """
        Get the stored profile row.

        Raises:
            UserNotFoundError: no user with this id
        """
        user = self.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def update_profile(self, user_id: int, fields: Dict[str, Any]) -> User:
        """
        Overwrite the given profile fields in a single commit.

        Keys outside the editable profile fields are ignored, so email and
        password cannot be changed through here.
        """
        user = self.get_profile(user_id)
        for key, value in fields.items():
            if key in PROFILE_FIELDS:
                setattr(user, key, value)
        self.db.commit()
        self.db.refresh(user)
        return user
