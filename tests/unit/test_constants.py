"""
Tests for recruit_match.utils.constants — enums, ordinal maps, scoring bands.
"""

import pytest

from recruit_match.utils.constants import (
    DEFAULT_MATCH_WEIGHTS,
    DISTANCE_BANDS,
    EDUCATION_ORDINALS,
    HISTOGRAM_BUCKETS,
    SENIORITY_ORDINALS,
    EducationLevel,
    MatchFactor,
    MatchScoreLevel,
    SeniorityLevel,
)


# ── MatchScoreLevel.from_score() ────────────────────────────────────────────


class TestMatchScoreLevelFromScore:
    def test_excellent_at_threshold(self):
        assert MatchScoreLevel.from_score(90) == MatchScoreLevel.EXCELLENT

    def test_excellent_at_max(self):
        assert MatchScoreLevel.from_score(100) == MatchScoreLevel.EXCELLENT

    def test_good_at_threshold(self):
        assert MatchScoreLevel.from_score(80) == MatchScoreLevel.GOOD

    def test_good_just_below_excellent(self):
        assert MatchScoreLevel.from_score(89) == MatchScoreLevel.GOOD

    def test_fair_at_threshold(self):
        assert MatchScoreLevel.from_score(70) == MatchScoreLevel.FAIR

    def test_poor_below_fair(self):
        assert MatchScoreLevel.from_score(69) == MatchScoreLevel.POOR

    def test_poor_at_zero(self):
        assert MatchScoreLevel.from_score(0) == MatchScoreLevel.POOR


# ── Ordinal maps ─────────────────────────────────────────────────────────────


class TestOrdinals:
    def test_every_seniority_level_has_an_ordinal(self):
        assert set(SENIORITY_ORDINALS) == set(SeniorityLevel)

    def test_seniority_order(self):
        ordered = sorted(SeniorityLevel, key=SENIORITY_ORDINALS.get)
        assert [s.value for s in ordered] == ["intern", "junior", "mid", "senior", "specialist"]

    def test_every_education_level_has_an_ordinal(self):
        assert set(EDUCATION_ORDINALS) == set(EducationLevel)

    def test_education_ordinals_are_1_to_7(self):
        assert sorted(EDUCATION_ORDINALS.values()) == list(range(1, 8))

    @pytest.mark.parametrize(
        "lower,higher",
        [
            (EducationLevel.HIGH_SCHOOL, EducationLevel.TECHNICAL),
            (EducationLevel.BACHELOR, EducationLevel.POSTGRADUATE),
            (EducationLevel.MASTER, EducationLevel.DOCTORATE),
        ],
    )
    def test_education_order(self, lower, higher):
        assert EDUCATION_ORDINALS[lower] < EDUCATION_ORDINALS[higher]


# ── Scoring tables ───────────────────────────────────────────────────────────


class TestScoringTables:
    def test_default_weights_cover_every_factor(self):
        assert set(DEFAULT_MATCH_WEIGHTS) == {f.value for f in MatchFactor}

    def test_default_weights_sum_to_one(self):
        assert sum(DEFAULT_MATCH_WEIGHTS.values()) == pytest.approx(1.0)

    def test_distance_bands_increasing(self):
        distances = [d for d, _ in DISTANCE_BANDS]
        scores = [s for _, s in DISTANCE_BANDS]
        assert distances == sorted(distances)
        assert scores == sorted(scores, reverse=True)

    def test_histogram_buckets_cover_0_to_100(self):
        covered = set()
        for _, lower, upper in HISTOGRAM_BUCKETS:
            covered.update(range(lower, upper + 1))
        assert covered == set(range(0, 101))
