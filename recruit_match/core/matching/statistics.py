"""Aggregate statistics over a job's scored candidate pool."""

from recruit_match.data.models import MatchStatistics
from recruit_match.data.models.match import empty_histogram
from recruit_match.utils.constants import HISTOGRAM_BUCKETS

from .parsing import round_score


def bucket_label(score: int) -> str:
    """Label of the histogram bucket a score falls in."""
    for label, lower, _ in HISTOGRAM_BUCKETS:
        if score >= lower:
            return label
    return HISTOGRAM_BUCKETS[-1][0]


def summarize_scores(scores: list[int]) -> MatchStatistics:
    """
    Build count bands, max, mean and histogram from composite scores.

    An empty pool yields all zeros.
    """
    if not scores:
        return MatchStatistics()

    histogram = empty_histogram()
    for score in scores:
        histogram[bucket_label(score)] += 1

    return MatchStatistics(
        total=len(scores),
        at_least_70=sum(1 for s in scores if s >= 70),
        at_least_80=sum(1 for s in scores if s >= 80),
        at_least_90=sum(1 for s in scores if s >= 90),
        max_score=max(scores),
        mean_score=round_score(sum(scores) / len(scores)),
        histogram=histogram,
    )
