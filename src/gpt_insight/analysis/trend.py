"""
Trend narration between two diagnoses of the same person.

Deltas of less than 10 points are treated as noise.  Classification into
risen / fallen never depends on the template selector; the selector only
decides which of several equivalent phrasings is used.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..config.settings import TREND_AGGREGATE_MIN, TREND_MAX_INDIVIDUAL, TREND_THRESHOLD

RISEN = "risen"
FALLEN = "fallen"

# {names} → comma-joined labels, {count} → number of items
AGGREGATE_TEMPLATES = {
    RISEN: "{names} 등 {count}개 항목이 이전 진단보다 크게 상승했습니다.",
    FALLEN: "{names} 등 {count}개 항목이 이전 진단보다 크게 하락했습니다.",
}

# {name} → label, {previous}/{current} → scores, {delta} → absolute change
INDIVIDUAL_TEMPLATES = {
    RISEN: [
        "{name} 점수가 {previous}점에서 {current}점으로 {delta}점 올랐습니다.",
        "{name} 항목은 {delta}점 상승하며 눈에 띄게 개선되었습니다.",
        "{name}: 이전 {previous}점 → 현재 {current}점, 뚜렷한 향상입니다.",
        "{name} 영역에서 {delta}점의 성장이 확인됩니다.",
        "{name} 점수가 {current}점까지 올라 이전보다 안정적입니다.",
    ],
    FALLEN: [
        "{name} 점수가 {previous}점에서 {current}점으로 {delta}점 떨어졌습니다.",
        "{name} 항목은 {delta}점 하락해 점검이 필요합니다.",
        "{name}: 이전 {previous}점 → 현재 {current}점, 주의가 필요한 변화입니다.",
        "{name} 영역에서 {delta}점의 감소가 관찰됩니다.",
        "{name} 점수가 {current}점으로 내려가 보완이 요구됩니다.",
    ],
}

# {names} → comma-joined labels
COMBINED_TEMPLATES = {
    RISEN: [
        "{names} 항목이 이전보다 좋아졌습니다.",
        "지난 진단 대비 {names} 항목에서 향상이 있었습니다.",
        "{names} 점수가 의미 있게 올랐습니다.",
        "{names} 항목의 개선이 눈에 띕니다.",
        "이번 진단에서는 {names} 항목이 상승했습니다.",
    ],
    FALLEN: [
        "{names} 항목이 이전보다 낮아졌습니다.",
        "지난 진단 대비 {names} 항목에서 하락이 있었습니다.",
        "{names} 점수가 의미 있게 내려갔습니다.",
        "{names} 항목은 다시 점검해 보세요.",
        "이번 진단에서는 {names} 항목이 하락했습니다.",
    ],
}

# {risen} / {fallen} → joined labels
MIXED_TEMPLATES = [
    "{risen} 항목은 상승했지만, {fallen} 항목은 하락했습니다.",
    "지난 진단 대비 {risen}은(는) 좋아졌고 {fallen}은(는) 낮아졌습니다.",
    "{risen} 항목의 개선과 함께 {fallen} 항목의 하락이 관찰됩니다.",
    "상승: {risen} / 하락: {fallen}. 약해진 항목을 중심으로 점검해 보세요.",
    "{risen} 점수는 올랐으나 {fallen} 점수는 내려갔습니다.",
]

STABLE_TEMPLATES = [
    "이전 진단과 비교해 모든 항목이 안정적으로 유지되고 있습니다.",
    "큰 변화 없이 이전 수준을 유지하고 있습니다.",
    "지난 진단 대비 10점 이상 달라진 항목이 없습니다.",
    "항목별 점수가 이전과 비슷한 범위에 머물러 있습니다.",
    "전반적인 점수 흐름이 안정적입니다.",
]


# ---------------------------------------------------------------------------
# Template selection
# ---------------------------------------------------------------------------

class RandomTemplateSelector:
    """Pick a phrasing at random; seedable for reproducible output."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random(seed)

    def choose(self, pool: Sequence[str]) -> str:
        return self.rng.choice(list(pool))


class RoundRobinTemplateSelector:
    """Cycle through every pool in order; fully deterministic."""

    def __init__(self):
        self._positions: Dict[Tuple[str, ...], int] = {}

    def choose(self, pool: Sequence[str]) -> str:
        key = tuple(pool)
        position = self._positions.get(key, 0)
        self._positions[key] = position + 1
        return key[position % len(key)]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TrendItem:
    label: str
    previous: int
    current: int

    @property
    def delta(self) -> int:
        return self.current - self.previous


def classify_trend(
    current: Sequence[int],
    previous: Sequence[int],
    labels: Sequence[str],
) -> Tuple[List[TrendItem], List[TrendItem]]:
    """Split items into (risen, fallen), largest change first."""
    if not (len(current) == len(previous) == len(labels)):
        raise ValueError(
            f"score vectors must align: current={len(current)}, "
            f"previous={len(previous)}, labels={len(labels)}"
        )

    risen, fallen = [], []
    for label, cur, prev in zip(labels, current, previous):
        item = TrendItem(label=label, previous=prev, current=cur)
        if item.delta >= TREND_THRESHOLD:
            risen.append(item)
        elif item.delta <= -TREND_THRESHOLD:
            fallen.append(item)

    # sorted() is stable, so equal deltas keep item order
    risen = sorted(risen, key=lambda t: -t.delta)
    fallen = sorted(fallen, key=lambda t: t.delta)
    return risen, fallen


# ---------------------------------------------------------------------------
# Narration
# ---------------------------------------------------------------------------

def _join(items: Sequence[TrendItem]) -> str:
    return ", ".join(item.label for item in items)


def _individual(direction: str, item: TrendItem, selector) -> str:
    template = selector.choose(INDIVIDUAL_TEMPLATES[direction])
    return template.format(
        name=item.label,
        previous=item.previous,
        current=item.current,
        delta=abs(item.delta),
    )


def _aggregate_block(direction: str, items: Sequence[TrendItem], selector) -> List[str]:
    lines = [AGGREGATE_TEMPLATES[direction].format(names=_join(items), count=len(items))]
    for item in items[:TREND_MAX_INDIVIDUAL]:
        lines.append(_individual(direction, item, selector))
    return lines


def compare_trend(
    current: Sequence[int],
    previous: Sequence[int],
    labels: Sequence[str],
    selector=None,
) -> List[str]:
    """Narrate the change from *previous* to *current*.

    Returns:
        Ordered list of sentences: aggregate/individual lines for a direction
        with three or more items, one combined sentence for a direction with
        one or two, or a single stable sentence when nothing moved by 10+.
    """
    selector = selector or RandomTemplateSelector()
    risen, fallen = classify_trend(current, previous, labels)

    if not risen and not fallen:
        return [selector.choose(STABLE_TEMPLATES)]

    lines: List[str] = []
    small_risen = 0 < len(risen) < TREND_AGGREGATE_MIN
    small_fallen = 0 < len(fallen) < TREND_AGGREGATE_MIN

    if small_risen and small_fallen:
        template = selector.choose(MIXED_TEMPLATES)
        return [template.format(risen=_join(risen), fallen=_join(fallen))]

    for direction, items, small in ((RISEN, risen, small_risen), (FALLEN, fallen, small_fallen)):
        if not items:
            continue
        if small:
            lines.append(selector.choose(COMBINED_TEMPLATES[direction]).format(names=_join(items)))
        else:
            lines.extend(_aggregate_block(direction, items, selector))
    return lines
