"""Tests for environment-driven settings."""

import importlib

import pytest

from conjugator import settings


@pytest.fixture
def reload_settings(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(settings)

    yield _reload
    monkeypatch.undo()
    importlib.reload(settings)


class TestUnknownKanjiRu:
    """CONJUGATOR_UNKNOWN_KANJI_RU."""

    def test_default(self, reload_settings, monkeypatch):
        monkeypatch.delenv("CONJUGATOR_UNKNOWN_KANJI_RU", raising=False)
        assert reload_settings().UNKNOWN_KANJI_RU == "godan"

    def test_case_insensitive(self, reload_settings):
        module = reload_settings(CONJUGATOR_UNKNOWN_KANJI_RU="Ichidan")
        assert module.UNKNOWN_KANJI_RU == "ichidan"

    def test_rejects_unknown_value(self, reload_settings):
        with pytest.raises(ValueError, match="godan.*ichidan"):
            reload_settings(CONJUGATOR_UNKNOWN_KANJI_RU="ichdan")
