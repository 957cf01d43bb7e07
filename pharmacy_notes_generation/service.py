"""
Pharmacy Study Service - Main Entry Point

This is the PUBLIC API used by the UI layer. It wires the configuration
and credential provider into the three operations:

    generate_study_notes(preferences)       → StudyNotes
    analyze_pharmacy_image(base64, mime)    → markdown text
    create_pharmacy_chat_session()          → ChatSession

Every failure leaves as a PharmacyNotesError subclass; catch that and show
`error.message` to the student.

Usage:
    from pharmacy_notes_generation import PharmacyStudyService, UserPreferences

    service = PharmacyStudyService.from_environment()
    notes = service.generate_study_notes(
        UserPreferences(
            subject="Pharmaceutics I",
            semester="Semester 1",
            topic="Powders",
            length="Detailed (10 Marks)",
            include_mnemonics=True,
        )
    )

Author: Shubham Singh
Date: December 2025
"""

from typing import Optional

from loguru import logger

from pharmacy_notes_generation.clients.chat_session import ChatSession
from pharmacy_notes_generation.clients.gemini_client import ModelFactory, create_gemini_model
from pharmacy_notes_generation.core.config import CredentialProvider, ServiceConfiguration
from pharmacy_notes_generation.core.models import ImagePayload, StudyNotes, UserPreferences
from pharmacy_notes_generation.generation.chat_factory import PharmacyChatSessionFactory
from pharmacy_notes_generation.generation.image_analyzer import PharmacyImageAnalyzer
from pharmacy_notes_generation.generation.notes_generator import StudyNotesGenerator


# =============================================================================
# STAGE 1: SERVICE CLASS
# =============================================================================


class PharmacyStudyService:
    """
    Facade over notes generation, image analysis and chat.

    What it does:
        Builds each component once from configuration. Components still
        resolve the credential and create their Gemini client per request.

    Example:
        >>> service = PharmacyStudyService.from_environment()
        >>> session = service.create_pharmacy_chat_session()
        >>> session.send("What is a prodrug?")
    """

    def __init__(
        self,
        config: Optional[ServiceConfiguration] = None,
        credential_provider: Optional[CredentialProvider] = None,
        model_factory: ModelFactory = create_gemini_model,
    ):
        """
        Args:
            config: Service configuration (defaults: env-resolved key, default model)
            credential_provider: Override for the key lookup (for testing)
            model_factory: Override for Gemini model creation (for testing)
        """
        # =====================================================================
        # STAGE 1.1: STORE CONFIGURATION
        # =====================================================================
        self._config = config or ServiceConfiguration()
        self._config.validate()
        credentials = credential_provider or self._config.credential_provider()

        # =====================================================================
        # STAGE 1.2: INITIALIZE COMPONENTS
        # =====================================================================
        model_name = self._config.gemini_model
        self._notes_generator = StudyNotesGenerator(
            credentials, model_name=model_name, model_factory=model_factory
        )
        self._image_analyzer = PharmacyImageAnalyzer(
            credentials, model_name=model_name, model_factory=model_factory
        )
        self._chat_factory = PharmacyChatSessionFactory(
            credentials, model_name=model_name, model_factory=model_factory
        )

        logger.info(f"PharmacyStudyService initialized | Config: {self._config.to_dict()}")

    # =========================================================================
    # STAGE 2: PUBLIC OPERATIONS
    # =========================================================================

    def generate_study_notes(self, preferences: UserPreferences) -> StudyNotes:
        """Generate structured study notes. See StudyNotesGenerator.generate."""
        return self._notes_generator.generate(preferences)

    def analyze_pharmacy_image(self, base64_image: str, mime_type: str) -> str:
        """Analyze a base64-encoded image. See PharmacyImageAnalyzer.analyze."""
        return self._image_analyzer.analyze(ImagePayload(data=base64_image, mime_type=mime_type))

    def create_pharmacy_chat_session(self) -> ChatSession:
        """Open a PharmAssistant chat session. No request is sent until `send()`."""
        return self._chat_factory.create()

    # =========================================================================
    # STAGE 3: FACTORY METHODS / PROPERTIES
    # =========================================================================

    @classmethod
    def from_environment(cls, env_file: Optional[str] = None) -> "PharmacyStudyService":
        """
        Create the service from environment configuration (.env supported).

        Raises:
            ConfigurationError: If settings are invalid
        """
        config = ServiceConfiguration.from_environment(env_file=env_file, validate_on_load=True)
        return cls(config)

    @property
    def config(self) -> ServiceConfiguration:
        """Access to service configuration."""
        return self._config


# =============================================================================
# STAGE 4: SMOKE TEST
# =============================================================================

if __name__ == "__main__":
    import sys

    logger.remove()
    logger.add(sys.stderr, level="INFO")

    print("\n--- Pharmacy Study Notes Smoke Test ---\n")

    try:
        service = PharmacyStudyService.from_environment()
        print(f"1. Configuration loaded: {service.config.to_dict()}")

        notes = service.generate_study_notes(
            UserPreferences(
                subject="Pharmaceutics I",
                semester="Semester 1",
                topic="Powders and Granules",
                length="Standard (5 Marks)",
                include_mnemonics=True,
            )
        )
        print(f"2. Notes generated: {len(notes.exam_points)} exam points")
        print("\n[OK] SMOKE TEST PASSED")

    except Exception as e:
        print(f"\n[FAIL] SMOKE TEST FAILED: {e}")
        import traceback

        traceback.print_exc()
        sys.exit(1)
