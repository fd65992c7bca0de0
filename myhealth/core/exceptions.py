"""
Domain exceptions raised by the stores and the token service.

Routes translate these into HTTP status codes; nothing below the HTTP layer
knows about status codes.
"""


class HealthChatError(Exception):
    """Base class for all application errors."""


class DuplicateEmailError(HealthChatError):
    """An account with this email already exists."""

    def __init__(self, email: str):
        super().__init__(f"An account with email {email!r} already exists")
        self.email = email


class InvalidCredentialsError(HealthChatError):
    """Email/password pair did not match a stored account."""


class InvalidTokenError(HealthChatError):
    """Bearer token is malformed, has a bad signature, or has expired."""


class UserNotFoundError(HealthChatError):
    """No user row for the identifier carried by a valid token."""

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UnknownSessionError(HealthChatError):
    """A history entry referenced a chat session that does not exist."""

    def __init__(self, session_id: int):
        super().__init__(f"Chat session {session_id} not found")
        self.session_id = session_id


class AssistantError(HealthChatError):
    """The language model could not be reached or returned an error."""
