"""
Score synthesis and grading for GPT Insight.

Every item starts from one shared base score and receives at most one small
adjustment, so the ten scores are never measured independently:

  * repetition  → -20 when the most frequent token is >= 10% of all tokens
  * clarity     → -10 when no explanatory keyword is present
  * expertise   → +5  when a domain keyword is present

The base comes from a pluggable strategy.  ``HashBaseScore`` is the only
deterministic one and therefore the only one usable for golden-output tests.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config.settings import (
    CLARITY_PENALTY,
    DIAGNOSE_ITEMS,
    EXPERTISE_BONUS,
    FALLBACK_GRADE,
    GRADE_COLORS,
    GRADE_THRESHOLDS,
    HASH_SCORE_MODULUS,
    LENGTH_BUCKET_FLOOR,
    LENGTH_BUCKETS,
    LENGTH_JITTER_RANGE,
    RANDOM_SCORE_RANGE,
    REPETITION_PENALTY,
    REPETITION_THRESHOLD,
    SCORE_MAX,
    SCORE_MIN,
    SCORING_STRATEGY,
)
from .metrics import TextMetrics

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a hash of the UTF-8 bytes of *text*."""
    h = _FNV_OFFSET
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * _FNV_PRIME) & 0xFFFFFFFF
    return h


def length_bucket(length: int) -> int:
    for lower, score in LENGTH_BUCKETS:
        if length > lower:
            return score
    return LENGTH_BUCKET_FLOOR


# ---------------------------------------------------------------------------
# Base-score strategies
# ---------------------------------------------------------------------------

class HashBaseScore:
    """Deterministic base: the text hash folded into [0, 100]."""

    name = "hash"

    def __call__(self, text: str, item_index: int) -> int:
        return fnv1a_32(text.strip()) % HASH_SCORE_MODULUS


class LengthBucketBaseScore:
    """Length bucket (75/65/50) plus a per-item jitter in [0, 3]."""

    name = "length"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def __call__(self, text: str, item_index: int) -> int:
        low, high = LENGTH_JITTER_RANGE
        return length_bucket(len(text.strip())) + self.rng.randint(low, high)


class RandomRangeBaseScore:
    """Uniform draw in [60, 100], independent of the text."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def __call__(self, text: str, item_index: int) -> int:
        low, high = RANDOM_SCORE_RANGE
        return self.rng.randint(low, high)


STRATEGIES = {
    HashBaseScore.name: HashBaseScore,
    LengthBucketBaseScore.name: LengthBucketBaseScore,
    RandomRangeBaseScore.name: RandomRangeBaseScore,
}


def get_strategy(name: Optional[str] = None, rng: Optional[random.Random] = None):
    """Resolve a strategy by name (defaults to ``SCORING_STRATEGY``)."""
    name = name or SCORING_STRATEGY
    if name not in STRATEGIES:
        raise ValueError(
            f"Unknown scoring strategy '{name}'. Choose from: {', '.join(STRATEGIES)}"
        )
    if name == HashBaseScore.name:
        return HashBaseScore()
    return STRATEGIES[name](rng=rng)


# ---------------------------------------------------------------------------
# Synthesis
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScoreBreakdown:
    bases: List[int]
    adjustments: List[int]
    scores: List[int]
    strategy: str


def clamp_score(score: int) -> int:
    return max(SCORE_MIN, min(SCORE_MAX, score))


def item_adjustment(item_key: str, metrics: TextMetrics) -> int:
    if item_key == "repetition" and metrics.max_duplication_rate >= REPETITION_THRESHOLD:
        return -REPETITION_PENALTY
    if item_key == "clarity" and not metrics.has_explanatory_keyword:
        return -CLARITY_PENALTY
    if item_key == "expertise" and metrics.has_domain_keyword:
        return EXPERTISE_BONUS
    return 0


def synthesize_scores(text: str, metrics: TextMetrics, strategy=None) -> ScoreBreakdown:
    """Produce the ten-item score vector for an already validated text.

    Args:
        text:     the submitted text (the hash strategy reads it whole)
        metrics:  metrics extracted from the same text
        strategy: base-score callable; defaults to the configured strategy

    Returns:
        ScoreBreakdown with per-item bases, adjustments and clamped scores.
    """
    strategy = strategy or get_strategy()
    bases, adjustments, scores = [], [], []
    for index, item in enumerate(DIAGNOSE_ITEMS):
        base = strategy(text, index)
        adjustment = item_adjustment(item["key"], metrics)
        bases.append(base)
        adjustments.append(adjustment)
        scores.append(clamp_score(base + adjustment))
    return ScoreBreakdown(
        bases=bases,
        adjustments=adjustments,
        scores=scores,
        strategy=getattr(strategy, "name", type(strategy).__name__),
    )


# ---------------------------------------------------------------------------
# Grades
# ---------------------------------------------------------------------------

def round_half_up(value: float) -> int:
    """Round like JavaScript's ``Math.round`` (x.5 goes up)."""
    return int(math.floor(value + 0.5))


def aggregate_score(scores: Sequence[int]) -> int:
    if not scores:
        return 0
    return round_half_up(sum(scores) / len(scores))


def get_severity_tier(score: float) -> int:
    """0 for the best band (>=90) through 4 for the worst (<60)."""
    for tier, (threshold, _) in enumerate(GRADE_THRESHOLDS):
        if score >= threshold:
            return tier
    return len(GRADE_THRESHOLDS)


def get_grade(score: float) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return FALLBACK_GRADE


def get_grade_color(grade: str) -> str:
    return GRADE_COLORS.get(grade, GRADE_COLORS[FALLBACK_GRADE])


def get_score_color(score: float) -> str:
    return get_grade_color(get_grade(score))
