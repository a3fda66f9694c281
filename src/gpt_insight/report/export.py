"""
Export helpers for diagnosis reports: share text, Markdown and JSON.
Pure consumers of DiagnosticResult; nothing here feeds back into scoring.
"""

from __future__ import annotations

import json
from typing import Dict, List, Optional, Sequence

from ..analysis.feedback import ACTION_GUIDE, BULLET
from ..analysis.style import CommunicationStyle
from ..config.settings import DIAGNOSE_ITEMS, PATENT_NOTICE, REPORT_TITLE


def build_share_text(result) -> str:
    """Summary block meant for the clipboard / a DM."""
    item_scores = ", ".join(
        f"{item['label']}:{score}" for item, score in zip(DIAGNOSE_ITEMS, result.scores)
    )
    main_feedback = "; ".join(f.replace(BULLET, "") for f in result.feedback)
    insight = result.insight.replace("\n\n", " ")
    return "\n".join([
        "[GPT Insight 진단 결과]",
        f"- 이름: {result.name}",
        f"- 회사/부서: {result.company} / {result.department}",
        f"- 일자: {result.date}",
        f"- 총점: {result.total}점 / 등급: {result.grade}",
        f"- 총평: {result.summary}",
        f"- 핵심 요약: {insight}",
        f"- 항목별 점수: {item_scores}",
        f"- 주요 피드백: {main_feedback}",
    ])


def score_table_rows(result) -> List[Dict[str, object]]:
    rows = []
    for index, item in enumerate(DIAGNOSE_ITEMS):
        rows.append({
            "icon": item["icon"],
            "항목": item["label"],
            "점수": result.scores[index],
            "설명": item["description"],
            "피드백": result.feedback[index].replace(BULLET, "") if index < len(result.feedback) else "",
            "근거": result.reasons[index] if index < len(result.reasons) else "",
        })
    return rows


def result_to_json(result) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)


def build_markdown_report(
    result,
    previous=None,
    trend: Optional[Sequence[str]] = None,
    style: Optional[CommunicationStyle] = None,
) -> str:
    """Render the full report as Markdown for download."""
    lines = [
        f"# {REPORT_TITLE}",
        "",
        "| 항목 | 내용 |",
        "|---|---|",
        f"| 이름 | {result.name} |",
        f"| 진단일자 | {result.date} |",
        f"| 회사/부서 | {result.company} / {result.department} |",
        f"| 작성자 | {result.author} |",
        "",
        "## 1. 점수 요약 및 총평",
        "",
        f"**총점 {result.total}점 / 등급 {result.grade}**",
        "",
        "| 항목 | 점수 | 설명 | 근거 |",
        "|---|---|---|---|",
    ]
    for row in score_table_rows(result):
        lines.append(f"| {row['icon']} {row['항목']} | {row['점수']} | {row['설명']} | {row['근거']} |")

    lines += ["", "### 항목별 상세 피드백", ""]
    lines += [f"- {f.replace(BULLET, '')}" for f in result.feedback]
    lines += ["", f"> {result.summary}", ""]

    lines += ["## 2. 변화 추이 및 핵심 요약", ""]
    if previous is not None:
        lines.append("| 항목 | 이전 | 현재 |")
        lines.append("|---|---|---|")
        for item, prev, cur in zip(DIAGNOSE_ITEMS, previous.scores, result.scores):
            lines.append(f"| {item['label']} | {prev} | {cur} |")
        lines.append("")
    lines += [f"- {sentence}" for sentence in (trend or [])]
    lines += ["", "**핵심 요약**", "", result.insight, ""]

    if result.analysis:
        lines += [
            "## 3. 구조·품질·전문성 분석",
            "",
            f"- **구조적 분석:** {result.analysis.get('structure', '')}",
            f"- **전문성 평가:** {result.analysis.get('expertise', '')}",
            f"- **대화 품질:** {result.analysis.get('quality', '')}",
            "",
        ]

    lines += ["## 4. 맞춤 제안 및 실행 가이드", ""]
    lines += [f"- **{label}:** {tip}" for label, tip in ACTION_GUIDE]

    if style is not None and style.is_known:
        lines += [
            "",
            "## 5. 커뮤니케이션 스타일",
            "",
            f"{style.icon} **{style.type_code} · {style.label}**",
            "",
            style.description,
            "",
            f"Tip: {style.tip}",
        ]

    lines += ["", "---", PATENT_NOTICE, ""]
    return "\n".join(lines)
