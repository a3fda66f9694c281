"""
Plotly figure builders for the report pages.
"""

import plotly.graph_objects as go

from gpt_insight.analysis.scoring import get_grade_color
from gpt_insight.config.settings import GRADE_COLORS, ITEM_LABELS


def score_line_chart(current, previous=None, labels=None, title=None):
    """One line series per score vector, items on the category axis."""
    labels = labels or ITEM_LABELS
    fig = go.Figure()
    if previous is not None:
        fig.add_trace(go.Scatter(
            x=labels,
            y=list(previous),
            mode='lines+markers',
            name='이전 점수',
            line=dict(color='#CCCCCC', shape='spline'),
        ))
    fig.add_trace(go.Scatter(
        x=labels,
        y=list(current),
        mode='lines+markers',
        name='현재 점수',
        line=dict(color=GRADE_COLORS["A"], shape='spline'),
        marker=dict(color=GRADE_COLORS["B"]),
    ))
    if title is None:
        title = "📊 항목별 점수 변화" if previous is not None else "📊 항목별 점수 추이"
    fig.update_layout(
        title=dict(text=title, x=0.5),
        yaxis=dict(range=[0, 105], title='점수'),
        legend=dict(orientation='h', y=1.1),
        margin=dict(l=40, r=20, t=60, b=40),
        height=420,
    )
    return fig


def total_gauge(total, grade):
    """Gauge for the aggregate score, coloured by grade."""
    fig = go.Figure(go.Indicator(
        mode='gauge+number',
        value=total,
        number=dict(suffix='점'),
        title=dict(text=f"등급 {grade}"),
        gauge=dict(
            axis=dict(range=[0, 100]),
            bar=dict(color=get_grade_color(grade)),
            steps=[
                dict(range=[0, 60], color='#FDECEC'),
                dict(range=[60, 80], color='#FFF6DA'),
                dict(range=[80, 100], color='#E5F4F9'),
            ],
        ),
    ))
    fig.update_layout(margin=dict(l=30, r=30, t=60, b=20), height=260)
    return fig
