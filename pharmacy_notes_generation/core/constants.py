"""
Constants for Pharmacy Study Notes Generation

Centralized literals shared by the generation layer: model defaults,
environment variable names, placeholder values and the user-facing
fallback messages surfaced by each operation.

Author: Shubham Singh
Date: December 2025
"""

# =============================================================================
# STAGE 1: PROVIDER SETTINGS
# =============================================================================

PROVIDER_NAME = "gemini"
DEFAULT_GEMINI_MODEL = "gemini-3-pro-preview"

# Checked in order; the first non-empty value wins.
API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")
MODEL_ENV_VAR = "GEMINI_MODEL"

JSON_MIME_TYPE = "application/json"

# =============================================================================
# STAGE 2: PROMPT PLACEHOLDERS
# =============================================================================

DEFAULT_UNIVERSITY = "Any PCI-affiliated University"

# =============================================================================
# STAGE 3: USER-FACING MESSAGES
# =============================================================================

MISSING_API_KEY_WARNING = "API Key is missing. Ensure the API_KEY environment variable is configured."
EMPTY_NOTES_MESSAGE = "The AI returned an empty response. Please try again."
NOTES_PARSE_MESSAGE = "The AI response could not be parsed into study notes."
NOTES_FALLBACK_MESSAGE = "Could not generate academic notes."
IMAGE_ANALYSIS_FAILED_MESSAGE = "Failed to process image lab analysis."
IMAGE_ANALYSIS_UNAVAILABLE = "Analysis unavailable for this image."
CHAT_FAILED_MESSAGE = "PharmAssistant could not respond. Please try again."
GENERIC_SERVICE_MESSAGE = "Gemini API request failed"
