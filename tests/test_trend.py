"""
Tests for trend classification and narration.

Run:
    python -m pytest tests/test_trend.py
"""

import pytest

from gpt_insight.analysis.trend import (
    COMBINED_TEMPLATES,
    FALLEN,
    MIXED_TEMPLATES,
    RISEN,
    STABLE_TEMPLATES,
    RandomTemplateSelector,
    RoundRobinTemplateSelector,
    classify_trend,
    compare_trend,
)

LABELS3 = ["반복률", "환각 가능성", "명확성"]


def test_three_risen_items_give_aggregate_and_two_lines():
    lines = compare_trend([80, 80, 80], [60, 60, 60], LABELS3, RandomTemplateSelector(seed=1))
    assert len(lines) == 3
    assert "3개 항목" in lines[0]
    assert "상승" in lines[0]


def test_aggregate_caps_individual_lines():
    labels = [f"item{i}" for i in range(5)]
    lines = compare_trend([50] * 5, [90] * 5, labels, RoundRobinTemplateSelector())
    assert len(lines) == 3
    assert "5개 항목" in lines[0]
    assert "하락" in lines[0]


def test_identical_vectors_are_stable():
    lines = compare_trend([70, 70, 70], [70, 70, 70], LABELS3, RandomTemplateSelector(seed=3))
    assert len(lines) == 1
    assert lines[0] in STABLE_TEMPLATES


def test_deltas_below_threshold_are_ignored():
    risen, fallen = classify_trend([79, 61, 70], [70, 70, 70], LABELS3)
    assert risen == [] and fallen == []
    lines = compare_trend([79, 61, 70], [70, 70, 70], LABELS3)
    assert len(lines) == 1
    assert lines[0] in STABLE_TEMPLATES


def test_threshold_is_inclusive():
    risen, fallen = classify_trend([80, 60, 70], [70, 70, 70], LABELS3)
    assert [t.label for t in risen] == ["반복률"]
    assert [t.label for t in fallen] == ["환각 가능성"]


def test_mixed_small_changes_give_one_sentence():
    lines = compare_trend([90, 50, 70], [70, 70, 70], LABELS3, RoundRobinTemplateSelector())
    assert lines == [MIXED_TEMPLATES[0].format(risen="반복률", fallen="환각 가능성")]


def test_small_single_direction_gives_combined_sentence():
    lines = compare_trend([90, 85, 70], [70, 70, 70], LABELS3, RoundRobinTemplateSelector())
    assert lines == [COMBINED_TEMPLATES[RISEN][0].format(names="반복률, 환각 가능성")]


def test_large_rise_with_small_fall():
    labels = ["a", "b", "c", "d"]
    lines = compare_trend([90, 90, 90, 40], [70, 70, 70, 70], labels, RoundRobinTemplateSelector())
    # aggregate + 2 individual for the risen side, one combined for the fallen side
    assert len(lines) == 4
    assert lines[-1] == COMBINED_TEMPLATES[FALLEN][0].format(names="d")


def test_items_sorted_by_magnitude():
    risen, _ = classify_trend([85, 95, 90], [70, 70, 70], LABELS3)
    assert [t.delta for t in risen] == [25, 20, 15]


def test_classification_independent_of_seed():
    current, previous = [90, 50, 90, 70], [70, 70, 70, 70]
    labels = ["a", "b", "c", "d"]
    for seed in range(5):
        lines = compare_trend(current, previous, labels, RandomTemplateSelector(seed=seed))
        assert len(lines) == 1
        assert "a, c" in lines[0]
        assert "b" in lines[0]


def test_seeded_selector_is_reproducible():
    first = compare_trend([80] * 3, [60] * 3, LABELS3, RandomTemplateSelector(seed=11))
    second = compare_trend([80] * 3, [60] * 3, LABELS3, RandomTemplateSelector(seed=11))
    assert first == second


def test_round_robin_cycles_through_pool():
    selector = RoundRobinTemplateSelector()
    picks = [selector.choose(STABLE_TEMPLATES) for _ in range(len(STABLE_TEMPLATES) + 1)]
    assert picks[:-1] == STABLE_TEMPLATES
    assert picks[-1] == STABLE_TEMPLATES[0]


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        compare_trend([80, 80], [70, 70, 70], LABELS3)
    with pytest.raises(ValueError):
        classify_trend([80, 80, 80], [70, 70, 70], ["only one"])
