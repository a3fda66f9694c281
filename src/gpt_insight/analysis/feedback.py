"""
Feedback selection for GPT Insight reports.

Maps each item score onto one of five severity tiers (the grade bands) and
picks the pre-written sentence for that item and tier.  Also builds the
per-item reason strings and the narrative blocks of the report:

  * summary     → strengths (top 2) and weaknesses (bottom 2)
  * insight     → overview / weakness / improvement paragraphs
  * analysis    → structure, expertise and conversation-quality assessment
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from ..config.settings import (
    CLARITY_PENALTY,
    DIAGNOSE_ITEMS,
    EXPERTISE_BONUS,
    ITEM_LABELS,
    REPETITION_PENALTY,
    REPETITION_THRESHOLD,
    SCORE_MAX,
    SCORE_MIN,
)
from .metrics import TextMetrics
from .scoring import ScoreBreakdown, get_severity_tier

BULLET = "● "

# One list per item (DIAGNOSE_ITEMS order), one sentence per tier:
# >=90, >=80, >=70, >=60, below 60.
FEEDBACK_LIBRARY: List[List[str]] = [
    # 반복률
    [
        "반복 없이 일관된 질문/답변 유지, 대화 품질 우수.",
        "반복적 패턴 거의 없음, 응답 신뢰도 높음.",
        "드물게 중복 질문 있으나 전반적으로 안정적.",
        "같은 표현·질문이 눈에 띄게 반복됨, 주의 필요.",
        "반복 패턴이 심해 대화 효율 저하, 즉각 개선 필요.",
    ],
    # 환각 가능성
    [
        "팩트 기반의 답변 위주로 신뢰도 높음.",
        "환각성 응답이 적고 근거가 명확함.",
        "일부 비논리 응답 있으나 전반적으로 양호.",
        "근거 없는 답변이 섞여 있어 사실 확인 필요.",
        "환각 응답 위험 높음, 출처 검증 없이 활용 금지.",
    ],
    # 명확성
    [
        "답변이 구체적이며 명확하게 전달됨.",
        "핵심 메시지 전달이 명확함.",
        "일부 설명은 구체성 보강 필요.",
        "모호한 표현이 많아 의도 파악이 어려움.",
        "질문·답변의 목적이 불분명, 구체적 재질문 필요.",
    ],
    # 반영성
    [
        "질문 요구 대부분 잘 반영됨.",
        "요구 내용이 상세하게 포함됨.",
        "일부 세부 내용 미반영 가능.",
        "요구사항 일부가 누락되어 재확인 필요.",
        "질문 의도가 거의 반영되지 않음, 요구사항 재정리 필요.",
    ],
    # 전문성
    [
        "도메인 전문 용어·사례 활용이 뛰어남.",
        "실무적 전문성 및 사례 포함 양호.",
        "추가적 근거·사례 보강 시 완성도↑",
        "전문 용어·근거가 부족해 신뢰도 보완 필요.",
        "전문성 부족, 공식 자료·통계 기반 보강 시급.",
    ],
    # 논리성
    [
        "논리적 흐름, 근거 연결 탁월.",
        "논리 구조 명확, 설득력 있음.",
        "일관성 있는 설명 유지.",
        "논리 전개에 비약이 있어 단계별 정리 필요.",
        "논리 구조가 무너져 있음, 근거-결론 재구성 필요.",
    ],
    # 다양성
    [
        "다양한 관점·사례 폭넓게 제시.",
        "복수의 시각 균형 있게 반영.",
        "유사 유형 반복 적고 시각 다양.",
        "관점이 한쪽에 치우쳐 있어 사례 보강 필요.",
        "단일 시각에 갇혀 있음, 대안·반론 요청 필요.",
    ],
    # 정중함
    [
        "언어매너, 존중 태도 모두 우수.",
        "항상 정중한 표현 사용.",
        "일부 간결·직설 표현 있음.",
        "직설적·비공식 표현이 잦아 주의 필요.",
        "언어매너 위험 수준, 표현 전반 재점검 필요.",
    ],
    # 오타율
    [
        "오타·비문 거의 없음, 완성도 높음.",
        "가독성 좋고 맞춤법 오류 적음.",
        "일부 문장 교정 필요.",
        "오타·비문이 잦아 교정 필요.",
        "오타·비문 과다, 전면 교정 후 활용 권장.",
    ],
    # 적합성
    [
        "주제·업무에 매우 적합.",
        "현장 요구와 일치, 바로 적용 가능.",
        "목적에 따른 미세 조정 권장.",
        "업무 목적과 일부 어긋나 조정 필요.",
        "주제·업무와 부합하지 않음, 목적 재설정 필요.",
    ],
]

# Execution tips shown in the "맞춤 제안 및 실행 가이드" section.
ACTION_GUIDE: List[Tuple[str, str]] = [
    ("반복률", "전반적으로 안정적입니다. 비슷한 질문이 반복되면 “이전에 한 답변을 다시 보여줘” 등 명확 요청 권장."),
    ("환각 가능성", "출처 없는 답변은 한 번 더 확인, “출처를 알려줘” 요청 추천."),
    ("명확성", "답변이 모호하면, “조금 더 자세히 설명해줘” 식으로 질문 반복 추천."),
    ("반영성", "질문 요구 누락된 부분은 “내 질문 중에 빠진 내용은 없는지” 직접 점검."),
    ("전문성/논리성/다양성/정중함/오타율/적합성",
     "업무에서 “이유를 설명해줘”, “사례를 들어줘”와 같은 요청 적극 활용."),
]


# ---------------------------------------------------------------------------
# Per-item feedback and reasons
# ---------------------------------------------------------------------------

def select_item_feedback(scores: Sequence[int]) -> List[str]:
    """Pick the tier sentence for every item score."""
    feedback = []
    for index, score in enumerate(scores):
        assert SCORE_MIN <= score <= SCORE_MAX, f"score out of range: {score}"
        tier = get_severity_tier(score)
        feedback.append(BULLET + FEEDBACK_LIBRARY[index][tier])
    return feedback


def _reason_for(item_key: str, base: int, adjustment: int, metrics: TextMetrics) -> str:
    if item_key == "repetition":
        word = metrics.most_repeated_word or "-"
        threshold = int(REPETITION_THRESHOLD * 100)
        if adjustment:
            return (
                f"최다 반복 단어 '{word}'의 비율이 {metrics.duplication_percent}%로 "
                f"기준({threshold}%) 이상이어서 {REPETITION_PENALTY}점 감점되었습니다."
            )
        return (
            f"최다 반복 단어 '{word}'의 비율이 {metrics.duplication_percent}%로 "
            f"기준({threshold}%) 미만입니다."
        )
    if item_key == "clarity":
        if adjustment:
            return (
                f"'왜/어떻게/무엇/방식/근거' 같은 설명형 표현이 없어 "
                f"{CLARITY_PENALTY}점 감점되었습니다."
            )
        return "설명형 표현(왜/어떻게/무엇/방식/근거)이 포함되어 감점이 없습니다."
    if item_key == "expertise":
        if adjustment:
            return (
                f"정책·기술·보고서·규제·법령·통계 등 전문 분야 키워드가 포함되어 "
                f"{EXPERTISE_BONUS}점 가산되었습니다."
            )
        return "전문 분야 키워드가 없어 가산점이 없습니다."
    return f"공통 기준 점수 {base}점이 그대로 적용되었습니다 (입력 {metrics.char_length}자)."


def build_reasons(breakdown: ScoreBreakdown, metrics: TextMetrics) -> List[str]:
    """Explain every score from the same breakdown and metrics that produced it."""
    return [
        _reason_for(item["key"], base, adjustment, metrics)
        for item, base, adjustment in zip(DIAGNOSE_ITEMS, breakdown.bases, breakdown.adjustments)
    ]


# ---------------------------------------------------------------------------
# Narratives
# ---------------------------------------------------------------------------

def _ranked(scores: Sequence[int], descending: bool) -> List[Tuple[int, str]]:
    pairs = list(zip(scores, ITEM_LABELS))
    return sorted(pairs, key=lambda p: -p[0] if descending else p[0])


def _format_pairs(pairs: Sequence[Tuple[int, str]]) -> str:
    return ", ".join(f"{label}({score}점)" for score, label in pairs)


def generate_summary_comment(scores: Sequence[int]) -> str:
    top = _ranked(scores, descending=True)[:2]
    low = _ranked(scores, descending=False)[:2]
    return (
        f"이번 진단에서 강점은 {_format_pairs(top)}로 나타났으며, "
        f"취약점은 {_format_pairs(low)}입니다. "
        "실제 적용 시 강점은 적극 활용하고, 약점은 반복 점검·보완하면 "
        "전반적 완성도가 향상될 것입니다."
    )


def generate_insightful_summary(scores: Sequence[int]) -> str:
    top = _ranked(scores, descending=True)[:2]
    low = _ranked(scores, descending=False)[:3]
    overview = (
        f"이번 진단 결과, {_format_pairs(top)} 항목에서 매우 우수한 평가를 받았습니다. "
        "실제 업무 맥락이 잘 반영되어 실무 활용성 및 통찰력에서 강점이 드러납니다."
    )
    weakness = (
        f"{_format_pairs(low)} 항목은 상대적으로 낮은 점수를 보였습니다. "
        "일부 답변에서 근거 부족, 비공식적 표현, 논리적 전개 약점이 함께 관찰되어 "
        "신뢰도와 대화 품질 저하의 요인이 될 수 있습니다."
    )
    improve = (
        "신뢰도를 높이려면 반드시 출처 기반 정보와 공식 자료를 활용하고, "
        "정중한 언어 사용을 꾸준히 점검하세요. "
        "정기적 리뷰와 반복 진단을 통해 약점 항목을 데이터로 관리하면 "
        "AI 협업 효율성이 한층 강화될 것입니다."
    )
    return "\n\n".join([overview, weakness, improve])


def generate_structure_analysis(scores: Sequence[int]) -> Dict[str, str]:
    """Describe structure, expertise and conversation quality from item scores."""
    by_key = {item["key"]: score for item, score in zip(DIAGNOSE_ITEMS, scores)}

    if by_key["logic"] >= 90 and by_key["reflection"] >= 85:
        structure = ("답변이 일관되고 흐름이 자연스러우며, 질문의 의도를 잘 반영해 "
                     "전체적인 구조가 안정적으로 평가됩니다.")
    elif by_key["logic"] >= 80:
        structure = ("논리적 흐름은 전반적으로 자연스럽지만, 일부 구간에서 근거 연결이 "
                     "약하거나 질문의 일부 요구가 빠지는 경우가 관찰됩니다.")
    else:
        structure = ("논리 구조와 답변 흐름에서 미흡한 부분이 있어, 설명의 일관성이나 "
                     "요구 반영 측면에서 보완이 필요합니다.")

    if by_key["expertise"] >= 90 and by_key["hallucination"] >= 90:
        expertise = ("분야 전문성 및 팩트 기반 응답이 우수하며, 최신 트렌드와 실무 경험이 "
                     "잘 녹아 있습니다.")
    elif by_key["expertise"] >= 80:
        expertise = ("전문 지식과 사례 활용이 전반적으로 적절하나, 때때로 근거가 불명확하거나 "
                     "구체적 설명이 부족할 수 있습니다.")
    else:
        expertise = "전문성 표현이 다소 부족하거나, 신뢰도 높은 정보 및 사례 제시가 아쉬운 편입니다."

    if by_key["typo"] >= 90 and by_key["politeness"] >= 90:
        quality = "언어 표현이 정확하고, 오타나 비문이 거의 없으며, 정중한 태도를 꾸준히 유지합니다."
    elif by_key["typo"] >= 80 and by_key["politeness"] >= 80:
        quality = "전반적으로 언어 품질은 무난하지만, 간혹 오타나 직설적인 표현이 드러날 수 있습니다."
    else:
        quality = ("문장 오류, 반복적 패턴, 비공식적 언어 등에서 개선의 여지가 있으며, "
                   "좀 더 다양한 표현과 친절한 태도가 필요합니다.")

    return {"structure": structure, "expertise": expertise, "quality": quality}
