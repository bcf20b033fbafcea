from __future__ import annotations
from typing import Sequence
from uxread.core.config import GRADE_LEVEL_TARGET
from uxread.models.report import AnalysisReport, BatchSummary
from uxread.services import rules as R
from uxread.services.scoring import grade_level
from uxread.services.suggestions import generate_suggestions


def analyze_text(text: str) -> AnalysisReport:
    """
    Build the readability report for one piece of extracted text.
    Pure and total: empty input gives grade 0 and no detections.
    """
    grade = grade_level(text)
    passive = R.detect_passive_voice(text)
    long_sentences = R.detect_long_sentences(text)
    jargon = R.detect_jargon(text)
    suggestions = generate_suggestions(grade, passive, long_sentences, jargon)

    # a high grade level counts as one issue
    grade_issue = 1 if grade > GRADE_LEVEL_TARGET else 0
    total = len(passive) + len(long_sentences) + len(jargon) + grade_issue

    return AnalysisReport(
        grade_level=grade,
        passive_voice=passive,
        long_sentences=long_sentences,
        jargon=jargon,
        suggestions=suggestions,
        total_issues=total,
    )


def summarize(reports: Sequence[AnalysisReport], failed: int = 0) -> BatchSummary:
    average = sum(r.grade_level for r in reports) / len(reports) if reports else 0.0
    return BatchSummary(
        total_images=len(reports),
        average_grade_level=average,
        total_issues=sum(r.total_issues for r in reports),
        failed_images=failed,
    )
