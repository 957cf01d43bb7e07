"""
Chat Session - Conversational Interface

`ChatSession` is the only surface callers see for a chat. It exposes what
the underlying SDK session actually offers: send a message, read the
history, rewind the last exchange, and clear the history.
"""

from typing import Any, List, Protocol, runtime_checkable

from loguru import logger

from pharmacy_notes_generation.core.constants import CHAT_FAILED_MESSAGE, PROVIDER_NAME
from pharmacy_notes_generation.core.exceptions import ServiceError
from pharmacy_notes_generation.core.models import ChatTurn
from pharmacy_notes_generation.clients.responses import extract_text


@runtime_checkable
class ChatSession(Protocol):
    """Stateful conversation with the model."""

    def send(self, message: str) -> str:
        """
        Send a user message and return the model's reply.

        Raises:
            ServiceError: If the request fails
        """
        ...

    @property
    def history(self) -> List[ChatTurn]:
        """Turns exchanged so far, oldest first."""
        ...

    def rewind(self) -> None:
        """Drop the last user/model exchange."""
        ...

    def reset(self) -> None:
        """Drop the whole history."""
        ...


class GeminiChatSession:
    """
    ChatSession backed by a google-generativeai ChatSession.

    History, turn-taking and any cancellation stay inside the SDK object;
    this adapter only converts types and errors.
    """

    def __init__(self, chat: Any):
        self._chat = chat

    def send(self, message: str) -> str:
        try:
            response = self._chat.send_message(message)
        except Exception as e:
            logger.error(f"Chat message failed: {e}")
            raise ServiceError(
                CHAT_FAILED_MESSAGE,
                provider=PROVIDER_NAME,
                original_error=e,
            ) from e

        return extract_text(response)

    @property
    def history(self) -> List[ChatTurn]:
        return [
            ChatTurn(role=content.role, text="".join(part.text for part in content.parts))
            for content in self._chat.history
        ]

    def rewind(self) -> None:
        self._chat.rewind()

    def reset(self) -> None:
        self._chat.history = []
