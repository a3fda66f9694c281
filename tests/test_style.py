"""
Tests for the communication-style classifier.

Run:
    python -m pytest tests/test_style.py
"""

from gpt_insight.analysis.style import (
    STYLE_PROFILES,
    UNKNOWN_TYPE,
    classify_communication_style,
    extract_user_speech,
)


def test_sixteen_profiles():
    assert len(STYLE_PROFILES) == 16
    for code in STYLE_PROFILES:
        assert len(code) == 4


def test_empty_input_is_unknown():
    for text in ("", "   \n\t"):
        style = classify_communication_style(text)
        assert style.type_code == UNKNOWN_TYPE
        assert not style.is_known
        assert style.label == "분석중형"


def test_no_keywords_resolves_to_defaults():
    style = classify_communication_style("오늘 점심 메뉴를 추천해 주세요.")
    assert style.type_code == "ISFJ"
    assert style.is_known


def test_all_keyword_classes():
    text = "서로 공감하며 느낌을 나누고, 근거를 정리해서 실행 계획을 세워 주세요."
    style = classify_communication_style(text)
    assert style.type_code == "ENTP"
    assert style.label == STYLE_PROFILES["ENTP"]["label"]


def test_single_axis_flip():
    assert classify_communication_style("논리적으로 설명해 주세요.").type_code == "ISTJ"
    assert classify_communication_style("제 마음이 복잡해요.").type_code == "INFJ"


def test_extract_user_speech():
    conversation = (
        "사용자: 정책의 근거가 뭔가요?\n"
        "GPT: 여러 자료가 있습니다.\n"
        "User: please summarize\n\n"
        "You:thanks\n"
        "Assistant: You: not a user line"
    )
    assert extract_user_speech(conversation) == "정책의 근거가 뭔가요? please summarize thanks"


def test_extract_user_speech_without_labels():
    assert extract_user_speech("그냥 붙여 넣은 글입니다.") == ""
    assert extract_user_speech("") == ""
