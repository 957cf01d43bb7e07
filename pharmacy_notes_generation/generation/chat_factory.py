"""
Chat Factory - PharmAssistant Chat Sessions

Opens a ChatSession with the fixed mentoring persona. Creation is local;
the first request is sent on the first `send()`.
"""

from loguru import logger

from pharmacy_notes_generation.clients.chat_session import ChatSession
from pharmacy_notes_generation.clients.gemini_client import (
    GeminiClient,
    ModelFactory,
    create_gemini_model,
)
from pharmacy_notes_generation.core.config import CredentialProvider
from pharmacy_notes_generation.core.constants import DEFAULT_GEMINI_MODEL
from pharmacy_notes_generation.generation.prompt_builder import CHAT_SYSTEM_INSTRUCTION


class PharmacyChatSessionFactory:
    """
    Creates PharmAssistant chat sessions.

    Example:
        >>> session = PharmacyChatSessionFactory(CredentialProvider()).create()
        >>> session.send("Explain first-order kinetics")
    """

    def __init__(
        self,
        credential_provider: CredentialProvider,
        model_name: str = DEFAULT_GEMINI_MODEL,
        model_factory: ModelFactory = create_gemini_model,
    ):
        self._credentials = credential_provider
        self._model_name = model_name
        self._model_factory = model_factory

    def create(self) -> ChatSession:
        client = GeminiClient(
            api_key=self._credentials.get_api_key(),
            system_instruction=CHAT_SYSTEM_INSTRUCTION,
            model_name=self._model_name,
            model_factory=self._model_factory,
        )
        logger.info(f"Opened PharmAssistant chat session | Model: {client.model_name}")
        return client.start_chat()
