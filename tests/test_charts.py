"""
Tests for the plotly figure builders used by the dashboard.

Run:
    python -m pytest tests/test_charts.py
"""

from gpt_insight.config.settings import ITEM_LABELS
from gui.charts import score_line_chart, total_gauge


def test_single_series_without_previous():
    fig = score_line_chart([80] * 10)
    assert len(fig.data) == 1
    assert fig.data[0].name == "현재 점수"
    assert list(fig.data[0].x) == ITEM_LABELS


def test_two_series_with_previous():
    fig = score_line_chart([80] * 10, previous=[70] * 10)
    assert [trace.name for trace in fig.data] == ["이전 점수", "현재 점수"]
    assert list(fig.data[0].y) == [70] * 10


def test_total_gauge():
    fig = total_gauge(87, "B")
    assert fig.data[0].value == 87
    assert fig.data[0].title.text == "등급 B"
