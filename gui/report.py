"""
Report rendering shared by the Diagnose and History pages.
"""

import pandas as pd
import streamlit as st

from gpt_insight.analysis.feedback import ACTION_GUIDE
from gpt_insight.analysis.scoring import get_grade_color, get_score_color
from gpt_insight.analysis.style import classify_communication_style, extract_user_speech
from gpt_insight.config.settings import FEEDBACK_CHANNEL_URL, PATENT_NOTICE, REPORT_TITLE
from gpt_insight.report.export import (
    build_markdown_report,
    build_share_text,
    result_to_json,
    score_table_rows,
)
from gui.charts import score_line_chart, total_gauge


def _style_score_column(column):
    return [f"color: {get_score_color(v)}; font-weight: 800" for v in column]


def render_report(result, previous=None, trend=None, key_prefix="report"):
    st.markdown(f"## {REPORT_TITLE}")

    # Header box
    header = pd.DataFrame({
        "항목": ["이름", "진단일자", "회사/부서", "작성자"],
        "내용": [result.name, result.date, f"{result.company} / {result.department}", result.author],
    })
    st.table(header.set_index("항목"))

    # 1. Score summary
    st.markdown("### 1. 점수 요약 및 총평")
    g1, g2 = st.columns([1, 2])
    with g1:
        st.plotly_chart(total_gauge(result.total, result.grade), use_container_width=True)
    with g2:
        st.markdown(
            f"#### 총점 {result.total}점 &nbsp; 등급: "
            f"<span style='color:{get_grade_color(result.grade)}'>{result.grade}</span>",
            unsafe_allow_html=True,
        )
        st.info(result.summary)

    rows = pd.DataFrame(score_table_rows(result))
    rows["항목"] = rows["icon"] + " " + rows["항목"]
    table = rows[["항목", "점수", "설명", "근거"]].set_index("항목")
    st.dataframe(table.style.apply(_style_score_column, subset=["점수"]), use_container_width=True)

    st.markdown("#### 항목별 상세 피드백")
    st.markdown("\n".join(f"- {msg}" for msg in result.feedback))

    # 2. Trend chart
    st.markdown("### 2. 변화 그래프 및 핵심 요약")
    st.plotly_chart(
        score_line_chart(result.scores, previous.scores if previous else None),
        use_container_width=True,
    )
    if trend:
        st.markdown("\n".join(f"- {sentence}" for sentence in trend))
    st.markdown("**핵심 요약**")
    st.markdown(result.insight)

    # 3. Structure / quality / expertise
    if result.analysis:
        st.markdown("### 3. 구조·품질·전문성 분석")
        st.markdown(
            f"**구조적 분석:** {result.analysis.get('structure', '')}\n\n"
            f"**전문성 평가:** {result.analysis.get('expertise', '')}\n\n"
            f"**대화 품질:** {result.analysis.get('quality', '')}"
        )
        st.caption("※ 점수 대신, 실제 대화 흐름과 언어 품질, 전문성의 특징을 바탕으로 실질적 개선 포인트를 참고하세요.")

    # 4. Action guide
    st.markdown("### 4. 맞춤 제안 및 실행 가이드")
    st.markdown("\n".join(f"- **{label}:** {tip}" for label, tip in ACTION_GUIDE))

    # Communication style (user lines only)
    style = classify_communication_style(extract_user_speech(result.content))
    st.markdown("### 🗣️ 커뮤니케이션 스타일")
    if style.is_known:
        st.markdown(f"#### {style.icon} {style.type_code} · {style.label}")
        st.write(style.description)
        st.success(f"💡 {style.tip}")
    else:
        st.caption(f"{style.icon} {style.description} ('사용자:' 또는 'User:'로 시작하는 줄이 있으면 분석됩니다.)")

    # Share / export
    st.markdown("---")
    st.markdown("#### 📤 결과 공유")
    st.code(build_share_text(result), language=None)
    d1, d2, d3 = st.columns(3)
    with d1:
        st.download_button(
            label="Download Report (.md)",
            data=build_markdown_report(result, previous, trend, style),
            file_name=f"gpt_insight_{result.name}_{result.date}.md",
            mime="text/markdown",
            key=f"{key_prefix}_md",
        )
    with d2:
        st.download_button(
            label="Download Result (.json)",
            data=result_to_json(result),
            file_name=f"gpt_insight_{result.name}_{result.date}.json",
            mime="application/json",
            key=f"{key_prefix}_json",
        )
    with d3:
        st.link_button("피드백 남기기", FEEDBACK_CHANNEL_URL)

    st.caption(PATENT_NOTICE)
