"""
Tests for recruit_match.utils.config — settings defaults and env overrides.
"""

import pytest
from pydantic import ValidationError

from recruit_match.core.matching import MatchingEngine
from recruit_match.utils.config import AppSettings, get_settings, reload_settings
from recruit_match.utils.constants import DEFAULT_MIN_SCORE

from tests.conftest import AS_OF


@pytest.fixture
def restore_settings(monkeypatch):
    yield
    monkeypatch.undo()
    reload_settings()


class TestSettings:
    def test_testing_environment(self):
        assert get_settings().environment == "testing"

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_matching_defaults(self, monkeypatch):
        for var in ("MATCH_DEFAULT_MIN_SCORE", "MATCH_PARALLEL_THRESHOLD", "MATCH_MAX_WORKERS"):
            monkeypatch.delenv(var, raising=False)
        matching = AppSettings().matching
        assert matching.default_min_score == DEFAULT_MIN_SCORE == 70
        assert matching.parallel_threshold == 200
        assert matching.max_workers == 4

    def test_env_override(self, monkeypatch, restore_settings):
        monkeypatch.setenv("MATCH_DEFAULT_MIN_SCORE", "50")
        monkeypatch.setenv("DB_PORT", "27018")
        settings = reload_settings()
        assert settings.matching.default_min_score == 50
        assert settings.database.port == 27018

    def test_min_score_bounds(self, monkeypatch):
        monkeypatch.setenv("MATCH_DEFAULT_MIN_SCORE", "150")
        with pytest.raises(ValidationError):
            AppSettings()


class TestEngineUsesSettings:
    def test_default_min_score_from_settings(self, monkeypatch, restore_settings, data_source):
        monkeypatch.setenv("MATCH_DEFAULT_MIN_SCORE", "60")
        reload_settings()
        engine = MatchingEngine(data_source=data_source)
        scores = [r.score for r in engine.compute_matches("job-1", as_of=AS_OF)]
        assert scores == [100, 75, 68]
