import pydantic
import pytest

from app.config import EnrichmentSettings


@pytest.mark.unit
def test_defaults(monkeypatch):
    monkeypatch.delenv("CAMPAIGN_ENRICH_PRODUCER_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("CAMPAIGN_ENRICH_LOG_LEVEL", raising=False)

    settings = EnrichmentSettings()

    assert settings.producer_timeout_seconds == 10.0
    assert settings.log_level == "INFO"


@pytest.mark.unit
def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CAMPAIGN_ENRICH_PRODUCER_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("CAMPAIGN_ENRICH_LOG_LEVEL", "debug")

    settings = EnrichmentSettings()

    assert settings.producer_timeout_seconds == 2.5
    assert settings.log_level == "DEBUG"


@pytest.mark.unit
@pytest.mark.parametrize("kwargs", [{"producer_timeout_seconds": 0}, {"log_level": "LOUD"}])
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(pydantic.ValidationError):
        EnrichmentSettings(**kwargs)
