"""
Gemini assistant on Google Vertex AI.

This is the client-side collaborator that turns a conversation or an
uploaded report into text. The backend never calls it; the chat controller
does, then persists the result through the HTTP API.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from google.api_core.exceptions import DeadlineExceeded, ServiceUnavailable
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from ..core.config import Settings
from ..core.exceptions import AssistantError

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """You are MyHealthAI, a dedicated virtual health assistant.
Your goal is to provide preliminary health insights, analyze medical reports, and offer wellness advice.

Persona:
- Empathetic, professional, and clear.
- Use simple language to explain complex medical terms.
- Always include a disclaimer that you are an AI and not a replacement for professional medical advice.

Safety Guidelines:
- DO NOT provide definitive diagnoses.
- DO NOT prescribe specific prescription medications.
- If symptoms sound severe (e.g., chest pain, difficulty breathing, severe bleeding, sudden confusion), IMMEDIATELY advise the user to seek emergency medical help (call 911 or go to the nearest ER).
- Detect critical symptoms and highlight them.

Capabilities:
1. Symptom Analysis: Ask clarifying questions about duration, severity, and associated symptoms.
2. Report Analysis: Explain lab values (e.g., CBC, Lipid Profile) and what they generally mean.
3. Wellness Advice: Suggest lifestyle changes, hydration, yoga, and stress management.
4. Non-prescriptive suggestions: Suggest safe over-the-counter measures like rest, hydration, or warm compresses when appropriate.

Always format your responses using Markdown for better readability. Use bolding for emphasis and lists for scannability."""

REPORT_ANALYSIS_PROMPT = (
    "Please analyze this medical report. Explain the key findings, highlight any "
    "values outside the normal range, and provide a simplified summary of what "
    "this means. Remind the user to consult their doctor."
)

DEFAULT_SESSION_TITLE = "New Chat"

TRANSIENT_ERRORS = (ConnectionError, TimeoutError, ServiceUnavailable, DeadlineExceeded)


def build_chat_contents(
    turns: List[Dict[str, str]], profile: Optional[Dict[str, Any]] = None
) -> List[Dict[str, Any]]:
    """
    Convert chat turns into Gemini ``contents``.

    The user profile is sent first as a user turn; assistant turns use the
    ``model`` role.
    """
    contents = [
        {
            "role": "user",
            "parts": [{"text": f"User Profile: {json.dumps(profile or {})}"}],
        }
    ]
    for turn in turns:
        role = "model" if turn["role"] == "assistant" else "user"
        contents.append({"role": role, "parts": [{"text": turn["content"]}]})
    return contents


def build_title_prompt(first_message: str) -> str:
    return (
        "Generate a very short (1-3 words) title for a medical chat session "
        f'starting with this message: "{first_message}". '
        "Return only the title text, no punctuation."
    )


class AssistantService:
    """Service for talking to Gemini on Vertex AI."""

    def __init__(self, settings: Settings):
        """
        Initialize the assistant (lazy: Vertex AI is set up on first use).

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.model_name = settings.gemini_model_name
        self.model = None
        self.title_model = None
        self._initialized = False

    def _ensure_initialized(self):
        """Ensure Vertex AI and the generative models are ready."""
        if self._initialized:
            return

        try:
            import vertexai
            from vertexai.generative_models import GenerativeModel

            credentials = None
            if self.settings.google_application_credentials:
                from google.oauth2 import service_account

                credentials = service_account.Credentials.from_service_account_file(
                    self.settings.google_application_credentials
                )

            vertexai.init(
                project=self.settings.google_cloud_project,
                location=self.settings.vertex_ai_location,
                credentials=credentials,
            )
            self.model = GenerativeModel(
                self.model_name, system_instruction=[SYSTEM_INSTRUCTION]
            )
            self.title_model = GenerativeModel(self.model_name)
            self._initialized = True
            logger.info(f"Assistant initialized with model {self.model_name}")
        except Exception as e:
            logger.error(f"Could not initialize assistant: {e}", exc_info=True)
            raise AssistantError(f"Assistant unavailable: {e}") from e

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        reraise=True,
    )
    def _generate(self, model, contents) -> str:
        response = model.generate_content(contents)
        try:
            return response.text or ""
        except ValueError as e:
            # blocked or empty candidate
            logger.warning(f"Gemini returned no text: {e}")
            return ""

    def _call(self, model_attr: str, contents) -> str:
        self._ensure_initialized()
        try:
            return self._generate(getattr(self, model_attr), contents)
        except Exception as e:
            logger.error(f"Gemini call failed: {e}")
            raise AssistantError(str(e)) from e

    def chat(
        self, turns: List[Dict[str, str]], profile: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Generate the assistant's next reply.

        Args:
            turns: Full conversation so far, each ``{"role", "content"}``
            profile: Cached user profile, sent as context

        Returns:
            Reply text (may be empty)
        """
        return self._call("model", build_chat_contents(turns, profile))

    def analyze_report(self, data: bytes, mime_type: str) -> str:
        """Analyse an uploaded report (PDF or image bytes)."""
        self._ensure_initialized()
        try:
            from vertexai.generative_models import Part

            contents = [
                Part.from_data(data=data, mime_type=mime_type),
                Part.from_text(REPORT_ANALYSIS_PROMPT),
            ]
        except Exception as e:
            logger.error(f"Could not prepare report for analysis: {e}")
            raise AssistantError(f"Could not read report: {e}") from e
        return self._call("model", contents)

    def generate_session_title(self, first_message: str) -> str:
        """Short title for a new session; never fails."""
        try:
            title = self._call("title_model", build_title_prompt(first_message))
        except AssistantError:
            return DEFAULT_SESSION_TITLE
        return title.strip() or DEFAULT_SESSION_TITLE
