"""
Configuration for Pharmacy Study Notes Generation

Configuration is:
    1. Loaded from environment variables (with .env support)
    2. Validated at startup (model name only; a missing key is tolerated)
    3. Passed explicitly into each component at construction

Usage:
    from pharmacy_notes_generation.core.config import ServiceConfiguration

    config = ServiceConfiguration.from_environment()

    # Or programmatically (tests, notebooks)
    config = ServiceConfiguration(api_key="your-key")

Author: Shubham Singh
Date: December 2025
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from dotenv import load_dotenv
from loguru import logger

from pharmacy_notes_generation.core.constants import (
    API_KEY_ENV_VARS,
    DEFAULT_GEMINI_MODEL,
    MISSING_API_KEY_WARNING,
    MODEL_ENV_VAR,
)
from pharmacy_notes_generation.core.exceptions import ConfigurationError


# =============================================================================
# STAGE 1: DEFAULT VALUES
# =============================================================================


class ConfigDefaults:
    """Default configuration values."""

    DEFAULT_GEMINI_MODEL = DEFAULT_GEMINI_MODEL


# =============================================================================
# STAGE 2: CREDENTIAL PROVIDER
# =============================================================================


class CredentialProvider:
    """
    Resolves the Gemini API key for each request.

    What it does:
        Returns an explicitly configured key, or reads the first non-empty
        variable from API_KEY_ENV_VARS. If nothing is found it logs one
        warning and returns an empty string. It never raises.

    When to use:
        - Injected into StudyNotesGenerator, PharmacyImageAnalyzer and
          PharmacyChatSessionFactory; each calls get_api_key() per request
        - In tests, pass `environ={}` or `api_key="test-key"`

    Example:
        >>> CredentialProvider(environ={"API_KEY": "abc"}).get_api_key()
        'abc'
        >>> CredentialProvider(environ={}).get_api_key()  # logs a warning
        ''
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        env_vars: Sequence[str] = API_KEY_ENV_VARS,
    ):
        """
        Args:
            api_key: Explicit key; takes precedence over the environment
            environ: Environment mapping to read (default: os.environ, read live)
            env_vars: Variable names to check, in order
        """
        self._api_key = api_key
        self._environ = environ if environ is not None else os.environ
        self._env_vars = tuple(env_vars)

    def get_api_key(self) -> str:
        """Resolve the API key, warning (not failing) when it is absent."""
        if self._api_key:
            return self._api_key

        for name in self._env_vars:
            value = self._environ.get(name)
            if value:
                return value

        logger.warning(MISSING_API_KEY_WARNING)
        return ""


# =============================================================================
# STAGE 3: CONFIGURATION DATACLASS
# =============================================================================


@dataclass
class ServiceConfiguration:
    """
    Configuration for the pharmacy study service.

    Attributes:
        api_key: Gemini API key. None means "resolve from the environment
            on every request"
        gemini_model: Model used for notes, image analysis and chat

    Example:
        >>> config = ServiceConfiguration.from_environment()
        >>> config.gemini_model
        'gemini-3-pro-preview'
    """

    api_key: Optional[str] = None
    """Gemini API key. Optional; a missing key only produces a warning."""

    gemini_model: str = ConfigDefaults.DEFAULT_GEMINI_MODEL
    """Gemini model name shared by all three operations."""

    def validate(self) -> None:
        """
        Validate configuration parameters.

        Raises:
            ConfigurationError: If the model name is empty
        """
        if not self.gemini_model or not self.gemini_model.strip():
            raise ConfigurationError(
                "Gemini model name must not be empty",
                context={"setting": MODEL_ENV_VAR},
            )

    def credential_provider(self) -> CredentialProvider:
        """Build the CredentialProvider for this configuration."""
        return CredentialProvider(api_key=self.api_key)

    @classmethod
    def from_environment(
        cls,
        env_file: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        validate_on_load: bool = True,
    ) -> "ServiceConfiguration":
        """
        Load configuration from environment variables.

        STAGE 1: Load .env file (if specified or found in the working directory)
        STAGE 2: Read environment variables
        STAGE 3: Validate (optional)

        Args:
            env_file: Path to .env file (optional)
            environ: Mapping to read instead of os.environ (skips .env loading)
            validate_on_load: Whether to validate after loading

        Raises:
            ConfigurationError: If settings are invalid
        """
        # STAGE 1: Load .env file
        if environ is None:
            if env_file:
                load_dotenv(env_file)
            else:
                default_env = Path.cwd() / ".env"
                if default_env.exists():
                    load_dotenv(default_env)
            environ = os.environ

        # STAGE 2: Read environment variables
        api_key = next((environ[name] for name in API_KEY_ENV_VARS if environ.get(name)), None)

        config = cls(
            api_key=api_key,
            gemini_model=environ.get(MODEL_ENV_VAR, ConfigDefaults.DEFAULT_GEMINI_MODEL),
        )

        # STAGE 3: Validate
        if validate_on_load:
            config.validate()

        return config

    def to_dict(self) -> dict:
        """Convert configuration to dictionary (for logging/debugging)."""
        return {
            "gemini_model": self.gemini_model,
            "api_key": "***" if self.api_key else None,
        }
