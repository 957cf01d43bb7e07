import os

import pytest

from pharmacy_notes_generation.core.config import CredentialProvider, ServiceConfiguration
from pharmacy_notes_generation.core.constants import DEFAULT_GEMINI_MODEL, MISSING_API_KEY_WARNING
from pharmacy_notes_generation.core.exceptions import ConfigurationError


def _warnings(records):
    return [r for r in records if r["level"].name == "WARNING"]


# --- CredentialProvider ---


def test_explicit_key_wins_over_environment(log_records):
    provider = CredentialProvider(api_key="explicit", environ={"API_KEY": "from-env"})
    assert provider.get_api_key() == "explicit"
    assert _warnings(log_records) == []


def test_key_read_from_environment_in_order():
    provider = CredentialProvider(environ={"GOOGLE_API_KEY": "google", "GEMINI_API_KEY": "gemini"})
    assert provider.get_api_key() == "gemini"


def test_empty_variable_is_skipped():
    provider = CredentialProvider(environ={"API_KEY": "", "GOOGLE_API_KEY": "google"})
    assert provider.get_api_key() == "google"


def test_missing_key_returns_empty_string_with_one_warning(log_records):
    provider = CredentialProvider(environ={})

    assert provider.get_api_key() == ""

    warnings = _warnings(log_records)
    assert len(warnings) == 1
    assert warnings[0]["message"] == MISSING_API_KEY_WARNING


def test_environment_is_read_on_every_call():
    environ = {}
    provider = CredentialProvider(environ=environ)
    assert provider.get_api_key() == ""

    environ["API_KEY"] = "late"
    assert provider.get_api_key() == "late"


# --- ServiceConfiguration ---


def test_from_environment_reads_key_and_model():
    config = ServiceConfiguration.from_environment(
        environ={"GEMINI_API_KEY": "k", "GEMINI_MODEL": "gemini-2.5-flash"}
    )
    assert config.api_key == "k"
    assert config.gemini_model == "gemini-2.5-flash"


def test_from_environment_tolerates_missing_key():
    config = ServiceConfiguration.from_environment(environ={})
    assert config.api_key is None
    assert config.gemini_model == DEFAULT_GEMINI_MODEL


def test_from_environment_loads_env_file(tmp_path, monkeypatch):
    for name in ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY", "GEMINI_MODEL"):
        monkeypatch.delenv(name, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("API_KEY=dotenv-key\n")

    try:
        config = ServiceConfiguration.from_environment(env_file=str(env_file))
    finally:
        os.environ.pop("API_KEY", None)

    assert config.api_key == "dotenv-key"


def test_empty_model_name_is_rejected():
    with pytest.raises(ConfigurationError):
        ServiceConfiguration(gemini_model="  ").validate()


def test_to_dict_masks_api_key():
    assert ServiceConfiguration(api_key="secret").to_dict()["api_key"] == "***"
    assert ServiceConfiguration().to_dict()["api_key"] is None
