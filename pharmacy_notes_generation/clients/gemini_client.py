"""
Gemini Client - Google Gemini API Implementation

Thin adapter over the google-generativeai SDK. One client wraps one
GenerativeModel bound to one API key and one system instruction, and
exposes the three call shapes used by the generation layer:

    generate_json(prompt, schema)  → text-in / JSON-out with response schema
    generate(contents)             → free-form (multimodal) text generation
    start_chat()                   → stateful chat session (no network call)

SDK exceptions are translated to ServiceError; the original exception is
kept on `original_error`.

Author: Shubham Singh
Date: December 2025
"""

from typing import Any, Callable, Dict, Sequence, Union

from loguru import logger

from pharmacy_notes_generation.clients.chat_session import GeminiChatSession
from pharmacy_notes_generation.clients.responses import extract_service_message, extract_text
from pharmacy_notes_generation.core.constants import (
    DEFAULT_GEMINI_MODEL,
    GENERIC_SERVICE_MESSAGE,
    JSON_MIME_TYPE,
    PROVIDER_NAME,
)
from pharmacy_notes_generation.core.exceptions import ConfigurationError, ServiceError


# (api_key, model_name, system_instruction) -> GenerativeModel-like object
ModelFactory = Callable[[str, str, str], Any]


# =============================================================================
# STAGE 1: MODEL FACTORY
# =============================================================================


def create_gemini_model(api_key: str, model_name: str, system_instruction: str) -> Any:
    """
    Configure the SDK and build a GenerativeModel.

    Lazy import to avoid requiring google-generativeai at module load.
    """
    try:
        import google.generativeai as genai
    except ImportError:
        raise ConfigurationError(
            "google-generativeai package not installed. "
            "Install with: pip install google-generativeai",
            context={"provider": PROVIDER_NAME},
        )

    genai.configure(api_key=api_key)
    return genai.GenerativeModel(model_name=model_name, system_instruction=system_instruction)


# =============================================================================
# STAGE 2: GEMINI CLIENT
# =============================================================================


class GeminiClient:
    """
    Google Gemini API client bound to one system instruction.

    What it does:
        Builds the model through `model_factory` and performs exactly one
        SDK call per public method. Callers create a fresh client per
        request; nothing is cached between requests.

    Example:
        >>> client = GeminiClient(api_key="...", system_instruction="You are ...")
        >>> text = client.generate_json(prompt, STUDY_NOTES_RESPONSE_SCHEMA)
    """

    def __init__(
        self,
        api_key: str,
        system_instruction: str,
        model_name: str = DEFAULT_GEMINI_MODEL,
        model_factory: ModelFactory = create_gemini_model,
    ):
        self._model_name = model_name
        self._system_instruction = system_instruction

        try:
            self._model = model_factory(api_key, model_name, system_instruction)
        except ConfigurationError:
            raise
        except Exception as e:
            raise self._translate_error(e, "Failed to initialize Gemini client")

        logger.debug(f"GeminiClient initialized | Model: {model_name}")

    # =========================================================================
    # STAGE 3: API CALLS
    # =========================================================================

    def generate_json(self, prompt: str, response_schema: Dict[str, Any]) -> str:
        """
        Generate JSON constrained by `response_schema`.

        Returns:
            Reply text, "" if the service returned none

        Raises:
            ServiceError: If the API call fails
        """
        generation_config = {
            "response_mime_type": JSON_MIME_TYPE,
            "response_schema": response_schema,
        }
        try:
            response = self._model.generate_content(
                [prompt], generation_config=generation_config
            )
        except Exception as e:
            raise self._translate_error(e)

        return extract_text(response)

    def generate(self, contents: Union[str, Sequence[Any]]) -> str:
        """
        Generate free-form text from text or multimodal `contents`.

        Raises:
            ServiceError: If the API call fails
        """
        try:
            response = self._model.generate_content(contents)
        except Exception as e:
            raise self._translate_error(e)

        return extract_text(response)

    def start_chat(self) -> GeminiChatSession:
        """Open a chat session. Session creation is local; no request is sent."""
        return GeminiChatSession(self._model.start_chat())

    # =========================================================================
    # STAGE 4: PROPERTIES / HELPERS
    # =========================================================================

    @property
    def model_name(self) -> str:
        """Return the model name."""
        return self._model_name

    @staticmethod
    def _translate_error(error: Exception, prefix: str = "") -> ServiceError:
        service_message = extract_service_message(error)
        message = service_message or GENERIC_SERVICE_MESSAGE
        if prefix:
            message = f"{prefix}: {message}"
        service_error = ServiceError(
            message,
            provider=PROVIDER_NAME,
            original_error=error,
            service_message=service_message,
        )
        service_error.__cause__ = error
        return service_error
