"""
Shared sample texts and fixtures for the GPT Insight tests.
"""

import os
import sys

import pytest

# Add project root and src/ to path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
for path in (project_root, os.path.join(project_root, "src")):
    if path not in sys.path:
        sys.path.insert(0, path)


# Contains "왜" (explanatory) and "정책" (domain); no token repeats more than twice.
KOREAN_SAMPLE = (
    "정부의 새로운 교육 정책이 왜 필요한지 궁금합니다. "
    "최근 발표된 자료에 따르면 학생들의 학습 격차가 계속 커지고 있습니다. "
    "교사와 학부모 모두 변화의 방향을 알고 싶어 합니다. "
    "지역마다 상황이 달라서 하나의 해법으로는 부족할 수 있습니다. "
    "현장의 목소리를 더 듣고 단계적으로 추진하면 좋겠습니다."
)

# Long Korean text; sliced to exactly 500 characters by the fixture below.
KOREAN_LONG = (
    "정부의 새로운 교육 정책이 왜 필요한지 궁금합니다. "
    "최근 발표된 자료에 따르면 학생들의 학습 격차가 계속 커지고 있습니다. "
    "교사와 학부모 모두 변화의 방향을 알고 싶어 합니다. "
    "지역마다 상황이 달라서 하나의 해법으로는 부족할 수 있습니다. "
    "현장의 목소리를 더 듣고 단계적으로 추진하면 좋겠습니다. "
    "도시와 농촌 학교의 여건 차이도 함께 살펴보아야 합니다. "
    "예산이 한정되어 있으니 우선순위를 분명히 정하는 편이 낫습니다. "
    "초등학생과 중학생에게 필요한 지원은 서로 다를 것입니다. "
    "방과 후 프로그램을 늘리자는 의견도 꾸준히 나오고 있습니다. "
    "온라인 수업 경험에서 얻은 교훈을 잊지 말아야 합니다. "
    "가정의 디지털 기기 보급률 역시 중요한 변수로 보입니다. "
    "상담 교사를 충원하면 정서적 어려움을 겪는 아이들에게 도움이 됩니다. "
    "지역 도서관과 협력하는 모델도 시도해 볼 만합니다. "
    "무엇보다 아이들이 배우는 즐거움을 다시 느끼게 하는 일이 먼저입니다. "
    "평가 제도를 함께 손보지 않으면 효과가 제한될 수도 있겠습니다. "
    "교원 연수 시간을 현실적으로 확보하는 방안도 필요합니다. "
    "학부모 참여를 넓히는 창구가 마련되면 신뢰가 쌓일 것입니다. "
    "시범 운영 결과를 투명하게 공개하는 절차가 뒤따라야 합니다. "
    "장기적인 관점에서 꾸준히 점검하는 체계를 갖추길 바랍니다."
)


@pytest.fixture
def korean_sample():
    return KOREAN_SAMPLE


@pytest.fixture
def korean_500():
    text = KOREAN_LONG[:500]
    assert len(text) == 500
    return text


@pytest.fixture
def repetitive_text():
    """English text where 'echo' makes up 5 of 35 tokens (about 14%)."""
    words = [f"word{i}" for i in range(30)]
    sentences = [
        " ".join(["echo", "echo"] + words[0:10]) + ".",
        " ".join(["echo", "echo"] + words[10:20]) + ".",
        " ".join(["echo"] + words[20:30]) + ".",
    ]
    return " ".join(sentences)


@pytest.fixture
def keywordless_text():
    """Valid English text with no explanatory and no domain keyword."""
    return (
        "The morning train left the station slightly late today. "
        "Passengers read newspapers while rain tapped softly against windows. "
        "A small child counted passing cows near the river bend. "
        "Eventually everyone arrived downtown feeling calm and rested."
    )


@pytest.fixture
def boundary_text():
    """Exactly 100 characters, three sentences and more than 20 unique words."""
    words = [f"w{i:02d}" for i in range(21)]
    base = (
        " ".join(words[0:7]) + ". "
        + " ".join(words[7:14]) + ". "
        + " ".join(words[14:21]) + "."
    )
    text = base + " " + "x" * (99 - len(base))
    assert len(text) == 100
    return text


@pytest.fixture
def history_path(tmp_path):
    return str(tmp_path / "history" / "gpt_insight_reports.json")
