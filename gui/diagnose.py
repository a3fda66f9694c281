import time
from datetime import date

import streamlit as st

from gpt_insight.analysis.diagnosis import DiagnosticInput, submit_diagnosis
from gpt_insight.analysis.metrics import InsufficientInputError
from gpt_insight.config.settings import DATE_FORMAT, LOADING_STAGE_DELAY, LOADING_STAGES
from gui.report import render_report
from gui.session import get_history_store


def _simulate_loading():
    """Cosmetic staged progress; the result already exists when this runs."""
    progress = st.progress(0)
    status = st.empty()
    for i, stage in enumerate(LOADING_STAGES, 1):
        status.caption(stage)
        progress.progress(i / len(LOADING_STAGES))
        time.sleep(LOADING_STAGE_DELAY)
    status.empty()
    progress.empty()


IDENTITY_KEYS = ("name_input", "company_input", "department_input", "author_input")


def _reset():
    """Start a new diagnosis for the same person: only the content is cleared."""
    st.session_state.pop('submission', None)
    for key, value in st.session_state.get('identity', {}).items():
        st.session_state[key] = value
    st.session_state['content_input'] = ""


def show():
    st.title("🔍 GPT Insight 진단")
    st.markdown("GPT와 나눈 대화 내용을 전체 복사하여 붙여 넣고 진단을 시작하세요.")

    submission = st.session_state.get('submission')
    if submission is not None:
        render_report(submission.result, submission.previous, submission.trend, key_prefix="diagnose")
        st.button("다시 진단", on_click=_reset)
        return

    # Input Section
    name = st.text_input("이름", placeholder="이름", key="name_input")
    col1, col2 = st.columns(2)
    with col1:
        company = st.text_input("회사명", key="company_input")
    with col2:
        department = st.text_input("부서", key="department_input")
    col3, col4 = st.columns(2)
    with col3:
        author = st.text_input("작성자", key="author_input")
    with col4:
        diagnosis_date = st.date_input("진단일자", value=date.today())

    content = st.text_area(
        "진단할 질문/내용 입력",
        height=220,
        placeholder="사용자: ...\nGPT: ...",
        key="content_input",
    )
    st.caption(f"{len(content)}자 입력됨")

    if st.button("🚀 진단 시작", type="primary"):
        if not name.strip():
            st.error("이름을 입력해주세요.")
            return

        diagnostic_input = DiagnosticInput(
            name=name.strip(),
            content=content,
            company=company.strip(),
            department=department.strip(),
            author=author.strip(),
            date=diagnosis_date.strftime(DATE_FORMAT),
        )
        try:
            result = submit_diagnosis(diagnostic_input, get_history_store())
        except InsufficientInputError as e:
            st.error(str(e))
            return
        except OSError as e:
            st.error(f"진단 결과를 저장하지 못했습니다: {e}")
            return

        _simulate_loading()
        st.session_state['identity'] = {key: st.session_state[key] for key in IDENTITY_KEYS}
        st.session_state['submission'] = result
        st.rerun()
