"""
Image Analyzer - Pharmacy Lab Image Analysis

Sends one multimodal request (inline image + fixed instruction text) and
returns the model's markdown reply unparsed.
"""

import base64
from typing import Optional

from loguru import logger

from pharmacy_notes_generation.clients.gemini_client import (
    GeminiClient,
    ModelFactory,
    create_gemini_model,
)
from pharmacy_notes_generation.core.config import CredentialProvider
from pharmacy_notes_generation.core.constants import (
    DEFAULT_GEMINI_MODEL,
    IMAGE_ANALYSIS_FAILED_MESSAGE,
    IMAGE_ANALYSIS_UNAVAILABLE,
    PROVIDER_NAME,
)
from pharmacy_notes_generation.core.exceptions import ServiceError
from pharmacy_notes_generation.core.models import ImagePayload
from pharmacy_notes_generation.generation.prompt_builder import (
    IMAGE_ANALYSIS_SYSTEM_INSTRUCTION,
    PromptBuilder,
)


class PharmacyImageAnalyzer:
    """
    Analyzes a photo of a specimen, apparatus, label or handwritten note.

    What it does:
        Returns a five-section markdown analysis (Identification, Academic
        Context, Exam Focus, Practical & Safety, Correction Note).

    Failure modes:
        - Empty reply → returns IMAGE_ANALYSIS_UNAVAILABLE instead of failing
        - Any other failure → ServiceError with a fixed generic message; the
          original exception is kept on `original_error` and `__cause__`

    Example:
        >>> analyzer = PharmacyImageAnalyzer(CredentialProvider())
        >>> markdown = analyzer.analyze(ImagePayload(data=b64, mime_type="image/jpeg"))
    """

    def __init__(
        self,
        credential_provider: CredentialProvider,
        model_name: str = DEFAULT_GEMINI_MODEL,
        model_factory: ModelFactory = create_gemini_model,
        prompt_builder: Optional[PromptBuilder] = None,
    ):
        self._credentials = credential_provider
        self._model_name = model_name
        self._model_factory = model_factory
        self._prompt_builder = prompt_builder or PromptBuilder()

    def analyze(self, image: ImagePayload) -> str:
        """
        Analyze `image` and return the markdown reply.

        Raises:
            ServiceError: If the request could not be completed
        """
        logger.info(f"Analyzing pharmacy image | MIME type: {image.mime_type}")

        try:
            client = GeminiClient(
                api_key=self._credentials.get_api_key(),
                system_instruction=IMAGE_ANALYSIS_SYSTEM_INSTRUCTION,
                model_name=self._model_name,
                model_factory=self._model_factory,
            )
            contents = [
                {"mime_type": image.mime_type, "data": base64.b64decode(image.data)},
                self._prompt_builder.build_image_analysis_prompt(),
            ]
            text = client.generate(contents)
        except Exception as e:
            cause = e.original_error if isinstance(e, ServiceError) and e.original_error else e
            logger.error(f"Image Analysis Error: {cause!r}")
            raise ServiceError(
                IMAGE_ANALYSIS_FAILED_MESSAGE,
                provider=PROVIDER_NAME,
                original_error=cause,
            ) from cause

        if not text:
            logger.warning("Image analysis returned an empty response")
            return IMAGE_ANALYSIS_UNAVAILABLE

        return text
