import streamlit as st

from gpt_insight.config.settings import APPLICATION_NAME, PATENT_NOTICE
from gui.session import get_history_store


def show():
    # Hero Section
    st.title(f"🧠 {APPLICATION_NAME} 진단 시스템")
    st.subheader("AI 신뢰성 진단 플랫폼")

    st.markdown("""
    **GPT Insight**는 조직의 AI 활용 오류·반복·환각 등 리스크를 **정량 진단**하고,
    실시간 개선 가이드와 리포트를 제공하는 **AI 신뢰성 진단 플랫폼**입니다.
    누구나 쉽고 객관적으로 GPT/AI의 활용 수준을 수치와 보고서로 확인하세요.

    *GPT Insight automatically diagnoses hallucination, repetition, and reflection errors in
    organizational AI usage, providing improvement guides and instant reports.*
    """)

    # Feature Grid
    col1, col2 = st.columns(2)

    with col1:
        st.info("### 🔍 Diagnose")
        st.markdown("GPT와 나눈 대화나 질문을 붙여 넣으면 10개 항목 점수, 등급, 항목별 피드백을 받아볼 수 있습니다.")

    with col2:
        st.success("### 📈 History")
        st.markdown("같은 이름으로 다시 진단하면 이전 결과와 비교한 변화 추이를 함께 보여줍니다.")

    st.markdown("---")

    # Quick Stats
    st.markdown("### ⚡ System Status")
    st.metric("Saved Reports", len(get_history_store()))

    st.caption(
        "[데이터 안내] 본 플랫폼에서 입력된 데이터는 진단 품질 개선, 맞춤형 서비스 제공, "
        "통계·기술 개발 목적으로 활용될 수 있으며, 이 컴퓨터의 로컬 파일에만 저장됩니다."
    )
    st.caption(PATENT_NOTICE)
