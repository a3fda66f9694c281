import streamlit as st

from gui.report import render_report
from gui.session import get_history_store


def show():
    st.title("📁 이전 진단 결과")
    st.markdown("이름별로 가장 최근 진단 결과가 저장됩니다.")

    store = get_history_store()
    results = store.results()
    if not results:
        st.info("저장된 진단 결과가 없습니다. 'Diagnose' 메뉴에서 먼저 진단을 진행하세요.")
        return

    options = {f"{r.name} ({r.date})": r.name for r in results}
    selected = st.selectbox("[ 이전 진단 결과 선택 ]", list(options.keys()))

    if st.button("불러오기"):
        st.session_state['loaded_name'] = options[selected]

    loaded_name = st.session_state.get('loaded_name')
    loaded = store.get(loaded_name) if loaded_name else None
    if loaded is not None:
        st.markdown("---")
        render_report(loaded, key_prefix="history")
