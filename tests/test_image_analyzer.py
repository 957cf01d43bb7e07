import base64

import pytest

from pharmacy_notes_generation.core.constants import (
    IMAGE_ANALYSIS_FAILED_MESSAGE,
    IMAGE_ANALYSIS_UNAVAILABLE,
)
from pharmacy_notes_generation.core.exceptions import ServiceError
from pharmacy_notes_generation.core.models import ImagePayload
from pharmacy_notes_generation.generation.image_analyzer import PharmacyImageAnalyzer
from pharmacy_notes_generation.generation.prompt_builder import (
    IMAGE_ANALYSIS_PROMPT,
    IMAGE_ANALYSIS_SYSTEM_INSTRUCTION,
)
from tests.fakes import FakeModel, FakeModelFactory, FakeResponse

IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake-image"
IMAGE = ImagePayload(data=base64.b64encode(IMAGE_BYTES).decode("ascii"), mime_type="image/png")


def _analyzer(credentials, model):
    factory = FakeModelFactory(model)
    return PharmacyImageAnalyzer(credentials, model_factory=factory), factory


def test_analyze_sends_image_and_instructions(credentials):
    model = FakeModel(response=FakeResponse("# Identification\nMortar and pestle"))
    analyzer, factory = _analyzer(credentials, model)

    result = analyzer.analyze(IMAGE)

    assert result == "# Identification\nMortar and pestle"
    assert factory.created[0]["system_instruction"] == IMAGE_ANALYSIS_SYSTEM_INSTRUCTION
    image_part, text_part = model.calls[0]["contents"]
    assert image_part == {"mime_type": "image/png", "data": IMAGE_BYTES}
    assert text_part == IMAGE_ANALYSIS_PROMPT
    assert model.calls[0]["generation_config"] is None


@pytest.mark.parametrize("response", [FakeResponse(""), FakeResponse(raise_on_text=True)])
def test_empty_reply_returns_fallback_text(credentials, response):
    analyzer, _ = _analyzer(credentials, FakeModel(response=response))
    assert analyzer.analyze(IMAGE) == IMAGE_ANALYSIS_UNAVAILABLE


def test_failure_uses_generic_message_and_keeps_cause(credentials, log_records):
    error = RuntimeError("upstream detail: 503 backend overloaded")
    analyzer, _ = _analyzer(credentials, FakeModel(error=error))

    with pytest.raises(ServiceError) as exc_info:
        analyzer.analyze(IMAGE)

    exc = exc_info.value
    assert exc.message == IMAGE_ANALYSIS_FAILED_MESSAGE
    assert "503" not in str(exc)
    assert exc.original_error is error
    assert exc.__cause__ is error
    assert any("503 backend overloaded" in r["message"] for r in log_records)


def test_undecodable_image_is_a_service_error(credentials):
    analyzer, _ = _analyzer(credentials, FakeModel(response=FakeResponse("ok")))

    with pytest.raises(ServiceError) as exc_info:
        analyzer.analyze(ImagePayload(data="not base64!", mime_type="image/png"))

    assert exc_info.value.message == IMAGE_ANALYSIS_FAILED_MESSAGE
