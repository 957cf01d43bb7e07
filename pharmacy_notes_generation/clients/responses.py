"""Helpers for reading SDK responses and errors."""

from typing import Any, Optional


def extract_text(response: Any) -> str:
    """
    Text of a generate_content / send_message response.

    The SDK raises ValueError from `.text` when the reply has no parts
    (e.g. blocked or empty candidates); that is treated as empty text.
    """
    try:
        return response.text or ""
    except ValueError:
        return ""


def extract_service_message(error: BaseException) -> Optional[str]:
    """Message reported by the service for `error`, or None if it carries none."""
    message = getattr(error, "message", None) or str(error)
    message = message.strip() if isinstance(message, str) else ""
    return message or None
