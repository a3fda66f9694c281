"""
Text metrics module for GPT Insight.
Computes the primitive statistics every diagnosis is built on, and the
validation gate that decides whether a text is long enough to score.

The statistics are deliberately crude: sentences are whatever lies between
``.``, ``!`` and ``?``, words are whitespace-separated tokens.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional

from ..config.settings import (
    DOMAIN_KEYWORDS,
    EXPLANATORY_KEYWORDS,
    MIN_SENTENCE_COUNT,
    MIN_TEXT_LENGTH,
    MIN_UNIQUE_WORDS,
)

_SENTENCE_SPLIT = re.compile(r"[.!?]")
_EXPLANATORY_RE = re.compile(EXPLANATORY_KEYWORDS)
_DOMAIN_RE = re.compile(DOMAIN_KEYWORDS)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class InsufficientInputError(ValueError):
    """Raised by the validation gate when a text is too thin to diagnose.

    The message always lists all three thresholds, whichever ones were
    actually missed; ``violations`` names the missed ones.
    """

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__(insufficient_input_message())


def insufficient_input_message() -> str:
    return (
        "❌ 분석 불가: 입력 내용이 부족합니다.\n\n"
        f"⦁ 최소 {MIN_TEXT_LENGTH}자 이상\n"
        f"⦁ 최소 {MIN_SENTENCE_COUNT}문장 이상\n"
        f"⦁ 고유 단어 {MIN_UNIQUE_WORDS}개 이상 입력해주세요."
    )


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextMetrics:
    char_length: int
    word_count: int
    sentence_count: int
    unique_word_count: int
    max_duplication_rate: float
    most_repeated_word: Optional[str]
    has_explanatory_keyword: bool
    has_domain_keyword: bool

    @property
    def duplication_percent(self) -> float:
        return round(self.max_duplication_rate * 100, 1)


def tokenize(text: str) -> List[str]:
    """Whitespace tokens of the stripped text."""
    return (text or "").split()


def count_sentences(text: str) -> int:
    """Count non-empty fragments between sentence punctuation.

    A fragment made of whitespace only still counts.
    """
    return sum(1 for fragment in _SENTENCE_SPLIT.split(text or "") if fragment)


def extract_text_metrics(text: str) -> TextMetrics:
    """Compute the :class:`TextMetrics` of a raw input text."""
    text = text or ""
    tokens = tokenize(text)
    total = len(tokens)

    if total:
        word_freq = Counter(tokens)
        most_repeated, top_count = word_freq.most_common(1)[0]
        dup_rate = top_count / total
    else:
        most_repeated, dup_rate = None, 1.0

    return TextMetrics(
        char_length=len(text),
        word_count=total,
        sentence_count=count_sentences(text),
        unique_word_count=len({t.lower() for t in tokens}),
        max_duplication_rate=dup_rate,
        most_repeated_word=most_repeated,
        has_explanatory_keyword=bool(_EXPLANATORY_RE.search(text)),
        has_domain_keyword=bool(_DOMAIN_RE.search(text)),
    )


# ---------------------------------------------------------------------------
# Validation gate
# ---------------------------------------------------------------------------

def find_violations(metrics: TextMetrics) -> List[str]:
    violations = []
    if metrics.char_length < MIN_TEXT_LENGTH:
        violations.append("length")
    if metrics.sentence_count < MIN_SENTENCE_COUNT:
        violations.append("sentences")
    if metrics.unique_word_count < MIN_UNIQUE_WORDS:
        violations.append("unique_words")
    return violations


def validate_metrics(metrics: TextMetrics) -> TextMetrics:
    violations = find_violations(metrics)
    if violations:
        raise InsufficientInputError(violations)
    return metrics


def validate_text(text: str) -> TextMetrics:
    """Extract metrics and run the validation gate in one step.

    Raises:
        InsufficientInputError: text shorter than 100 characters, fewer than
            3 sentences or fewer than 20 unique words.
    """
    return validate_metrics(extract_text_metrics(text))
