"""
Configuration settings for GPT Insight.
Contains all constants: diagnosis items, scoring thresholds, keyword classes
and storage locations.
"""

import os

# Application Information
APPLICATION_NAME = "GPT Insight"
VERSION = "1.3.0"
AUTHOR = "GPT Insight Team"

REPORT_TITLE = "GPT Insight Executive Report"
PATENT_NOTICE = (
    "© 2025 GPT Insight | Protected by Korean Patent Application No. "
    "10-2025-0067545, 10-2025-0068036, PCT/KR2025/007500"
)
FEEDBACK_CHANNEL_URL = "https://instagram.com/gpt.insight_kr"

# History Storage
STORAGE_KEY = "gpt_insight_reports"
HISTORY_DIR_NAME = "insight reports"
HISTORY_FILE_NAME = f"{STORAGE_KEY}.json"
HISTORY_BASE_DIR = os.path.join(os.path.expanduser("~"), ".gpt_insight")
DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# ---------------------------------------------------------------------------
# Validation gate
# ---------------------------------------------------------------------------

MIN_TEXT_LENGTH = 100
MIN_SENTENCE_COUNT = 3
MIN_UNIQUE_WORDS = 20

# ---------------------------------------------------------------------------
# Diagnosis items
# ---------------------------------------------------------------------------

# Order is significant: index i of every score vector belongs to item i.
DIAGNOSE_ITEMS = [
    {"key": "repetition", "label": "반복률", "icon": "🔁",
     "description": "질문/답변의 반복 여부"},
    {"key": "hallucination", "label": "환각 가능성", "icon": "🦄",
     "description": "비논리/환각 응답 비율"},
    {"key": "clarity", "label": "명확성", "icon": "🔎",
     "description": "답변의 구체성/명확성"},
    {"key": "reflection", "label": "반영성", "icon": "📥",
     "description": "질문 요구사항 반영 정도"},
    {"key": "expertise", "label": "전문성", "icon": "🎓",
     "description": "분야 전문성"},
    {"key": "logic", "label": "논리성", "icon": "🔗",
     "description": "논리 구조"},
    {"key": "diversity", "label": "다양성", "icon": "🌈",
     "description": "다양한 관점/사례 제시"},
    {"key": "politeness", "label": "정중함", "icon": "🤝",
     "description": "언어매너/존중"},
    {"key": "typo", "label": "오타율", "icon": "✏️",
     "description": "오타, 비문 등"},
    {"key": "relevance", "label": "적합성", "icon": "✅",
     "description": "업무/주제 부합성"},
]

ITEM_KEYS = [item["key"] for item in DIAGNOSE_ITEMS]
ITEM_LABELS = [item["label"] for item in DIAGNOSE_ITEMS]

# ---------------------------------------------------------------------------
# Keyword classes (case-sensitive, presence only)
# ---------------------------------------------------------------------------

EXPLANATORY_KEYWORDS = r"(왜|어떻게|무엇|방식|근거|why|how|what|reason|basis)"
DOMAIN_KEYWORDS = r"(정책|기술|보고서|규제|법령|통계|policy|technology|report|regulation|statistics)"

# ---------------------------------------------------------------------------
# Score synthesis
# ---------------------------------------------------------------------------

# "hash" (deterministic), "length" (bucket + jitter) or "random"
SCORING_STRATEGY = "hash"

# (exclusive lower bound on stripped length, base score); first match wins
LENGTH_BUCKETS = [(100, 75), (50, 65)]
LENGTH_BUCKET_FLOOR = 50
LENGTH_JITTER_RANGE = (0, 3)
RANDOM_SCORE_RANGE = (60, 100)
HASH_SCORE_MODULUS = 101

REPETITION_THRESHOLD = 0.10
REPETITION_PENALTY = 20
CLARITY_PENALTY = 10
EXPERTISE_BONUS = 5

SCORE_MIN = 0
SCORE_MAX = 100

# ---------------------------------------------------------------------------
# Grades and severity tiers
# ---------------------------------------------------------------------------

GRADE_THRESHOLDS = [(90, "A"), (80, "B"), (70, "C"), (60, "D")]
FALLBACK_GRADE = "E"

GRADE_COLORS = {
    "A": "#00C2C2",
    "B": "#21C586",
    "C": "#FFD500",
    "D": "#FF914D",
    "E": "#FF3B3B",
}

# ---------------------------------------------------------------------------
# Trend comparison
# ---------------------------------------------------------------------------

TREND_THRESHOLD = 10
TREND_AGGREGATE_MIN = 3
TREND_MAX_INDIVIDUAL = 2

# ---------------------------------------------------------------------------
# Communication style
# ---------------------------------------------------------------------------

SPEAKER_PREFIXES = ["사용자", "User", "You"]
STYLE_AXIS_WEIGHT = 10

# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

# Cosmetic staged loading shown before the report; scoring never waits on it.
LOADING_STAGES = [
    "입력 내용 확인 중...",
    "반복·환각 패턴 분석 중...",
    "항목별 점수 산출 중...",
    "리포트 생성 중...",
]
LOADING_STAGE_DELAY = 0.4
