"""
Clients Layer - Gemini API Client Abstraction

Submodules:
    gemini_client.py → GeminiClient and the default model factory
    chat_session.py  → ChatSession protocol and the Gemini-backed adapter
    responses.py     → Response / error helpers

The model factory is the seam tests use to substitute a fake model.
"""

from pharmacy_notes_generation.clients.gemini_client import (
    GeminiClient,
    ModelFactory,
    create_gemini_model,
)
from pharmacy_notes_generation.clients.chat_session import (
    ChatSession,
    GeminiChatSession,
)

__all__ = [
    "GeminiClient",
    "ModelFactory",
    "create_gemini_model",
    "ChatSession",
    "GeminiChatSession",
]
