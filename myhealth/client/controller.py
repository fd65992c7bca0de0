"""
Chat controller: the client process that talks to both the model and the API.

Conversation lifecycle:
    NoSession --first message or report--> ActiveSession --start_new_chat--> NoSession

The model is called directly from here; every message shown locally is then
queued in the history outbox and flushed to the backend in order.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from myhealth.client.api import ApiError, HealthChatAPI
from myhealth.client.outbox import FlushResult, HistoryOutbox
from myhealth.client.state import AuthContext, ClientState, Message
from myhealth.core.config import Settings
from myhealth.core.exceptions import AssistantError
from myhealth.schemas.profile import ProfileUpdate
from myhealth.utils.file_utils import guess_mime_type

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I'm sorry, I couldn't process that."

# failures of best-effort calls; logged, never raised
BEST_EFFORT_ERRORS = (ApiError, httpx.HTTPError)


class ChatController:
    """Owns the client state and orchestrates model and API calls."""

    def __init__(
        self,
        api: HealthChatAPI,
        assistant,
        outbox: Optional[HistoryOutbox] = None,
        state: Optional[ClientState] = None,
    ):
        """
        Args:
            api: Backend client
            assistant: Anything with ``chat``, ``analyze_report`` and
                ``generate_session_title`` (normally ``AssistantService``)
            outbox: History write queue; built on ``api`` when omitted
            state: Initial state; empty (signed out) when omitted
        """
        self.api = api
        self.assistant = assistant
        self.outbox = outbox or HistoryOutbox(api)
        self.state = state or ClientState()
        if self.state.auth is not None:
            self.api.token = self.state.auth.token

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatController":
        """Build a controller against a running backend and Vertex AI."""
        from myhealth.services.assistant_service import AssistantService

        api = HealthChatAPI(httpx.Client(base_url=settings.api_base_url))
        outbox = HistoryOutbox(api, max_attempts=settings.history_retry_attempts)
        return cls(api, AssistantService(settings), outbox=outbox)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def register(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> int:
        """Create an account. ``ApiError`` (e.g. 400 duplicate) propagates."""
        return self.api.register(email, password, first_name, last_name)

    def login(self, email: str, password: str) -> AuthContext:
        """Sign in, then load the session list."""
        data = self.api.login(email, password)
        self._set_auth(AuthContext(token=data["token"], user=data["user"]))
        self.load_sessions()
        return self.state.auth

    def restore(self, auth: AuthContext) -> None:
        """Resume with a previously saved auth context."""
        self._set_auth(auth)
        self.load_sessions()

    def logout(self) -> None:
        dropped = self.outbox.clear()
        if dropped:
            logger.warning(f"Signed out with {dropped} unsaved history entries")
        self.api.token = None
        self.state = ClientState()

    def _set_auth(self, auth: AuthContext) -> None:
        self.api.token = auth.token
        self.state.auth = auth

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def load_sessions(self) -> List[Dict[str, Any]]:
        if not self.state.is_authenticated:
            return []
        try:
            self.state.sessions = self.api.list_sessions()
        except BEST_EFFORT_ERRORS as e:
            logger.error(f"Failed to fetch sessions: {e}")
        return self.state.sessions

    def open_session(self, session_id: int) -> bool:
        """Replace the conversation with a stored session's history."""
        if not self.state.is_authenticated:
            return False
        try:
            history = self.api.list_history(session_id)
        except BEST_EFFORT_ERRORS as e:
            logger.error(f"Failed to fetch session messages: {e}")
            return False
        messages = [
            Message(role=h["role"], content=h["content"], timestamp=h["created_at"])
            for h in history
        ]
        self.state.conversation.load(session_id, messages)
        return True

    def start_new_chat(self) -> None:
        self.state.conversation.reset()

    def _ensure_session(self, title: str) -> Optional[int]:
        conversation = self.state.conversation
        if conversation.session_id is not None or not self.state.is_authenticated:
            return conversation.session_id
        try:
            session_id = self.api.create_session(title)
        except BEST_EFFORT_ERRORS as e:
            # messages are still saved, without a session
            logger.error(f"Failed to create session: {e}")
            return None
        conversation.activate(session_id)
        self.state.sessions.insert(0, {"id": session_id, "title": title})
        return session_id

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def _record(self, role: str, content: str) -> Message:
        conversation = self.state.conversation
        message = conversation.append(role, content)
        if self.state.is_authenticated:
            self.outbox.enqueue(conversation.session_id, role, content)
        return message

    def flush(self) -> FlushResult:
        return self.outbox.flush()

    def send_message(self, text: str) -> Optional[Message]:
        """
        Send a user message and return the assistant's reply.

        Returns None for blank input or when the model call fails; the user
        message is kept and persisted either way.
        """
        if not text or not text.strip():
            return None

        if self.state.conversation.session_id is None and self.state.is_authenticated:
            self._ensure_session(self.assistant.generate_session_title(text))

        self._record("user", text)
        turns = [m.as_turn() for m in self.state.conversation.messages]
        profile = self.state.auth.user if self.state.auth else None
        try:
            reply = self.assistant.chat(turns, profile)
        except AssistantError as e:
            logger.error(f"Assistant reply failed: {e}")
            self.flush()
            return None

        message = self._record("assistant", reply or FALLBACK_REPLY)
        self.flush()
        return message

    def upload_report(
        self, filename: str, data: bytes, mime_type: Optional[str] = None
    ) -> Optional[Message]:
        """
        Have the model analyse a report and keep the result.

        The exchange goes into the chat history and the analysis is stored
        as a report record.
        """
        mime_type = mime_type or guess_mime_type(filename)
        self._ensure_session(f"Report: {filename}")

        try:
            analysis = self.assistant.analyze_report(data, mime_type)
        except AssistantError as e:
            logger.error(f"Report analysis failed: {e}")
            return None

        self._record("user", f"Uploaded report: {filename}")
        message = self._record("assistant", analysis)

        if self.state.is_authenticated:
            try:
                self.api.upload_report(filename, data, mime_type, analysis)
            except BEST_EFFORT_ERRORS as e:
                logger.error(f"Failed to save report {filename}: {e}")
        self.flush()
        return message

    # ------------------------------------------------------------------
    # Profile & reports
    # ------------------------------------------------------------------

    def get_profile(self) -> Dict[str, Any]:
        return self.api.get_profile()

    def update_profile(self, update: ProfileUpdate) -> bool:
        """Save profile changes and merge them into the cached user."""
        payload = update.model_dump(by_alias=True, exclude_unset=True)
        try:
            self.api.update_profile(payload)
        except BEST_EFFORT_ERRORS as e:
            logger.error(f"Failed to update profile: {e}")
            return False
        if self.state.auth is not None:
            self.state.auth.user.update(payload)
        return True

    def load_reports(self) -> List[Dict[str, Any]]:
        if not self.state.is_authenticated:
            return []
        try:
            return self.api.list_reports()
        except BEST_EFFORT_ERRORS as e:
            logger.error(f"Failed to fetch reports: {e}")
            return []
