"""
Tests for the Diagnose page's session handling.

Run:
    python -m pytest tests/test_diagnose_page.py
"""

from gui import diagnose


def test_reset_keeps_identity_and_clears_content(monkeypatch):
    identity = {
        "name_input": "홍길동",
        "company_input": "ACME",
        "department_input": "기획팀",
        "author_input": "관리자",
    }
    state = {
        "submission": object(),
        "identity": dict(identity),
        "content_input": "이전 질문 내용",
    }
    monkeypatch.setattr(diagnose.st, "session_state", state)

    diagnose._reset()

    assert "submission" not in state
    assert state["content_input"] == ""
    for key, value in identity.items():
        assert state[key] == value


def test_reset_without_previous_submission(monkeypatch):
    state = {"content_input": "내용"}
    monkeypatch.setattr(diagnose.st, "session_state", state)

    diagnose._reset()

    assert state == {"content_input": ""}
    assert set(diagnose.IDENTITY_KEYS) == {"name_input", "company_input", "department_input", "author_input"}
