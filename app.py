import streamlit as st
import structlog
import sys
import os

# Add project root and src/ to path so the gui pages and gpt_insight import
# without an editable install
ROOT = os.path.dirname(os.path.abspath(__file__))
for path in (ROOT, os.path.join(ROOT, "src")):
    if path not in sys.path:
        sys.path.insert(0, path)

from gpt_insight.config.settings import APPLICATION_NAME, AUTHOR, VERSION

structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.PrintLoggerFactory(),
)

# Page Configuration
st.set_page_config(
    page_title=APPLICATION_NAME,
    page_icon="🧠",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Sidebar Navigation
st.sidebar.title(f"🧠 {APPLICATION_NAME}")

pages = ["Home", "Diagnose", "History"]

selection = st.sidebar.radio("Navigation", pages)

st.sidebar.markdown("---")
st.sidebar.info(
    f"**Version {VERSION}**\n"
    "AI 활용 신뢰성 진단 리포트\n\n"
    f"{AUTHOR}"
)


# Routing
if selection == "Home":
    from gui import home
    home.show()
elif selection == "Diagnose":
    from gui import diagnose
    diagnose.show()
elif selection == "History":
    from gui import history
    history.show()
