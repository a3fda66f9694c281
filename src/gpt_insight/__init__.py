"""
GPT Insight: heuristic diagnosis of GPT usage text.
Scores ten fixed items, grades the result and narrates changes over time.
"""

from .analysis.diagnosis import (
    DiagnosticInput,
    DiagnosticResult,
    Submission,
    run_diagnosis,
    submit_diagnosis,
)
from .analysis.metrics import InsufficientInputError, TextMetrics, extract_text_metrics, validate_text
from .analysis.scoring import aggregate_score, get_grade, get_strategy, synthesize_scores
from .analysis.style import classify_communication_style, extract_user_speech
from .analysis.trend import RandomTemplateSelector, RoundRobinTemplateSelector, compare_trend
from .config.settings import VERSION as __version__
from .storage.history import HistoryStore
