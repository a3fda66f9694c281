"""
Tests for score synthesis and grade mapping.

Run:
    python -m pytest tests/test_scoring.py
"""

import random

import pytest

from gpt_insight.analysis.metrics import extract_text_metrics
from gpt_insight.analysis.scoring import (
    HashBaseScore,
    LengthBucketBaseScore,
    RandomRangeBaseScore,
    aggregate_score,
    fnv1a_32,
    get_grade,
    get_severity_tier,
    get_strategy,
    length_bucket,
    round_half_up,
    synthesize_scores,
)
from gpt_insight.config.settings import ITEM_KEYS


def _scores(text, strategy=None):
    return synthesize_scores(text, extract_text_metrics(text), strategy)


def test_ten_integer_scores_in_range(korean_sample):
    breakdown = _scores(korean_sample)
    assert len(breakdown.scores) == 10
    for score in breakdown.scores:
        assert isinstance(score, int)
        assert 0 <= score <= 100


def test_hash_strategy_is_deterministic(korean_sample):
    first = _scores(korean_sample, HashBaseScore())
    second = _scores(korean_sample, HashBaseScore())
    assert first.scores == second.scores
    assert first.strategy == "hash"


def test_hash_ignores_surrounding_whitespace(korean_sample):
    assert _scores(korean_sample).bases == _scores("  " + korean_sample + "\n").bases


def test_fnv1a_known_values():
    assert fnv1a_32("") == 0x811C9DC5
    assert fnv1a_32("a") == 0xE40C292C


def test_unadjusted_items_share_one_base(korean_sample):
    breakdown = _scores(korean_sample)
    base = breakdown.bases[0]
    assert set(breakdown.bases) == {base}
    for key, score in zip(ITEM_KEYS, breakdown.scores):
        if key not in ("repetition", "clarity", "expertise"):
            assert score == base


def test_repetition_penalty(repetitive_text):
    metrics = extract_text_metrics(repetitive_text)
    assert metrics.max_duplication_rate >= 0.10
    breakdown = synthesize_scores(repetitive_text, metrics)
    base = breakdown.bases[ITEM_KEYS.index("repetition")]
    assert breakdown.scores[ITEM_KEYS.index("repetition")] == max(0, base - 20)


def test_no_repetition_penalty_below_threshold(korean_500):
    metrics = extract_text_metrics(korean_500)
    assert metrics.max_duplication_rate < 0.10
    breakdown = synthesize_scores(korean_500, metrics)
    index = ITEM_KEYS.index("repetition")
    assert breakdown.adjustments[index] == 0
    assert breakdown.scores[index] == breakdown.bases[index]


def test_clarity_penalty_without_explanatory_keyword(keywordless_text):
    breakdown = _scores(keywordless_text)
    index = ITEM_KEYS.index("clarity")
    assert breakdown.adjustments[index] == -10
    assert breakdown.scores[index] == max(0, breakdown.bases[index] - 10)


def test_expertise_bonus_with_domain_keyword(korean_sample):
    breakdown = _scores(korean_sample)
    index = ITEM_KEYS.index("expertise")
    assert breakdown.adjustments[index] == 5
    assert breakdown.scores[index] == min(100, breakdown.bases[index] + 5)


def test_no_expertise_bonus_without_domain_keyword(keywordless_text):
    breakdown = _scores(keywordless_text)
    assert breakdown.adjustments[ITEM_KEYS.index("expertise")] == 0


class _FixedBase:
    name = "fixed"

    def __init__(self, value):
        self.value = value

    def __call__(self, text, item_index):
        return self.value


def test_scores_are_clamped(korean_sample, keywordless_text):
    high = _scores(korean_sample, _FixedBase(98))
    assert high.scores[ITEM_KEYS.index("expertise")] == 100

    low = _scores(keywordless_text, _FixedBase(4))
    assert low.scores[ITEM_KEYS.index("clarity")] == 0
    assert low.strategy == "fixed"


def test_length_bucket():
    assert length_bucket(101) == 75
    assert length_bucket(100) == 65
    assert length_bucket(51) == 65
    assert length_bucket(50) == 50


def test_length_strategy_range(korean_sample):
    strategy = LengthBucketBaseScore(rng=random.Random(7))
    breakdown = _scores(korean_sample, strategy)
    assert all(75 <= b <= 78 for b in breakdown.bases)
    assert breakdown.strategy == "length"


def test_random_strategy_is_reproducible_with_seed(korean_sample):
    first = _scores(korean_sample, RandomRangeBaseScore(rng=random.Random(42)))
    second = _scores(korean_sample, RandomRangeBaseScore(rng=random.Random(42)))
    assert first.bases == second.bases
    assert all(60 <= b <= 100 for b in first.bases)


def test_get_strategy():
    assert isinstance(get_strategy(), HashBaseScore)
    assert isinstance(get_strategy("length", rng=random.Random(1)), LengthBucketBaseScore)
    assert isinstance(get_strategy("random"), RandomRangeBaseScore)
    with pytest.raises(ValueError):
        get_strategy("nope")


@pytest.mark.parametrize(
    "score, grade",
    [(100, "A"), (90, "A"), (89, "B"), (80, "B"), (79, "C"), (70, "C"), (69, "D"), (60, "D"), (59, "E"), (0, "E")],
)
def test_grade_boundaries(score, grade):
    assert get_grade(score) == grade


def test_severity_tiers_follow_grade_bands():
    assert [get_severity_tier(s) for s in (95, 85, 75, 65, 10)] == [0, 1, 2, 3, 4]


def test_round_half_up():
    assert round_half_up(89.5) == 90
    assert round_half_up(88.5) == 89
    assert round_half_up(89.4) == 89


def test_aggregate_rounds_before_grading():
    assert aggregate_score([90] * 6 + [89] * 4) == 90
    assert get_grade(aggregate_score([90] * 6 + [89] * 4)) == "A"
    assert aggregate_score([90] * 4 + [89] * 6) == 89
    assert get_grade(aggregate_score([90] * 4 + [89] * 6)) == "B"


def test_aggregate_of_empty_vector():
    assert aggregate_score([]) == 0


def test_hash_strategy_golden_scores(korean_sample):
    """Fixed text, fixed scores: the hash base for this sample is 54."""
    breakdown = _scores(korean_sample)
    assert breakdown.bases == [54] * 10
    assert breakdown.scores == [54, 54, 54, 54, 59, 54, 54, 54, 54, 54]
    assert aggregate_score(breakdown.scores) == 55
    assert get_grade(aggregate_score(breakdown.scores)) == "E"
