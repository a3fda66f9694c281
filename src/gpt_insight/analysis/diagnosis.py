"""
Diagnosis pipeline for GPT Insight.

  raw text → metrics (validation gate) → score synthesis
           → grade / feedback / reasons / narratives → DiagnosticResult
           → (optional) trend against the previous result of the same name

A result is built once per submission and never mutated afterwards; a later
submission under the same name replaces it in the history store.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
import math
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

import structlog

from ..config.settings import (
    DATE_FORMAT,
    DIAGNOSE_ITEMS,
    ITEM_LABELS,
    SCORE_MAX,
    SCORE_MIN,
    TIMESTAMP_FORMAT,
)
from .feedback import (
    build_reasons,
    generate_insightful_summary,
    generate_structure_analysis,
    generate_summary_comment,
    select_item_feedback,
)
from .metrics import InsufficientInputError, validate_text
from .scoring import aggregate_score, get_grade, synthesize_scores
from .trend import compare_trend

logger = structlog.get_logger()


def _today() -> str:
    return date.today().strftime(DATE_FORMAT)


@dataclass(frozen=True)
class DiagnosticInput:
    name: str
    content: str
    company: str = ""
    department: str = ""
    author: str = ""
    date: str = field(default_factory=_today)


@dataclass(frozen=True)
class DiagnosticResult:
    name: str
    date: str
    content: str
    scores: Tuple[int, ...]
    total: int
    grade: str
    feedback: Tuple[str, ...]
    reasons: Tuple[str, ...] = ()
    summary: str = ""
    insight: str = ""
    analysis: Mapping[str, str] = field(default_factory=dict)
    company: str = ""
    department: str = ""
    author: str = ""
    strategy: str = ""
    created_at: str = ""

    def __post_init__(self):
        # containers are frozen too, not just the attributes
        object.__setattr__(self, "scores", tuple(self.scores))
        object.__setattr__(self, "feedback", tuple(self.feedback))
        object.__setattr__(self, "reasons", tuple(self.reasons))
        object.__setattr__(self, "analysis", MappingProxyType(dict(self.analysis)))

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        for key in ("scores", "feedback", "reasons"):
            data[key] = list(data[key])
        data["analysis"] = dict(self.analysis)
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Optional["DiagnosticResult"]:
        """Rebuild a stored result; returns ``None`` when it cannot be trusted.

        Missing text fields default to empty.  A record without a name or
        without a valid ten-item score vector is rejected.
        """
        if not isinstance(data, dict):
            return None
        name = data.get("name")
        scores = data.get("scores")
        if not isinstance(name, str) or not name:
            return None
        if not _valid_scores(scores):
            return None

        scores = [int(s) for s in scores]
        total = data.get("total")
        if not _valid_score(total):
            total = aggregate_score(scores)
        total = int(total)

        return cls(
            name=name,
            date=_text(data, "date"),
            content=_text(data, "content") or _text(data, "question"),
            scores=scores,
            total=total,
            grade=get_grade(total),
            feedback=_text_list(data, "feedback"),
            reasons=_text_list(data, "reasons"),
            summary=_text(data, "summary"),
            insight=_text(data, "insight") or _text(data, "insightfulSummary"),
            analysis=_text_dict(data, "analysis"),
            company=_text(data, "company"),
            department=_text(data, "department"),
            author=_text(data, "author"),
            strategy=_text(data, "strategy"),
            created_at=_text(data, "created_at"),
        )


def _valid_scores(scores: Any) -> bool:
    if not isinstance(scores, list) or len(scores) != len(DIAGNOSE_ITEMS):
        return False
    return all(_valid_score(s) for s in scores)


def _valid_score(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return SCORE_MIN <= value <= SCORE_MAX and math.isfinite(value)


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _text_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def _text_dict(data: Dict[str, Any], key: str) -> Dict[str, str]:
    value = data.get(key)
    if not isinstance(value, dict):
        return {}
    return {k: v for k, v in value.items() if isinstance(v, str)}


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def run_diagnosis(diagnostic_input: DiagnosticInput, strategy=None) -> DiagnosticResult:
    """Score one submission.

    Raises:
        InsufficientInputError: the content fails the validation gate; no
            result is produced.
    """
    text = diagnostic_input.content or ""
    try:
        metrics = validate_text(text)
    except InsufficientInputError as exc:
        logger.info("diagnosis_rejected", name=diagnostic_input.name, violations=exc.violations)
        raise

    breakdown = synthesize_scores(text, metrics, strategy)
    scores = breakdown.scores
    total = aggregate_score(scores)

    result = DiagnosticResult(
        name=diagnostic_input.name,
        date=diagnostic_input.date,
        content=text,
        scores=list(scores),
        total=total,
        grade=get_grade(total),
        feedback=select_item_feedback(scores),
        reasons=build_reasons(breakdown, metrics),
        summary=generate_summary_comment(scores),
        insight=generate_insightful_summary(scores),
        analysis=generate_structure_analysis(scores),
        company=diagnostic_input.company,
        department=diagnostic_input.department,
        author=diagnostic_input.author,
        strategy=breakdown.strategy,
        created_at=datetime.now().strftime(TIMESTAMP_FORMAT),
    )
    logger.info(
        "diagnosis_completed",
        name=result.name,
        total=result.total,
        grade=result.grade,
        strategy=result.strategy,
    )
    return result


@dataclass(frozen=True)
class Submission:
    result: DiagnosticResult
    previous: Optional[DiagnosticResult]
    trend: List[str]


def submit_diagnosis(diagnostic_input: DiagnosticInput, store, strategy=None, selector=None) -> Submission:
    """Diagnose, compare with the stored result of the same name, then store.

    The store is only touched after a result exists, so a rejected
    submission leaves the history unchanged.
    """
    result = run_diagnosis(diagnostic_input, strategy)
    previous = store.get(result.name)
    trend = compare_trend(result.scores, previous.scores, ITEM_LABELS, selector) if previous else []
    store.put(result)
    return Submission(result=result, previous=previous, trend=trend)
