from __future__ import annotations
from typing import List
from uxread.core.config import GRADE_LEVEL_TARGET, LONG_SENTENCE_THRESHOLD
from uxread.models.report import Suggestion
from uxread.services.rules import JARGON

FALLBACK_REPLACEMENT = "simpler term"


def format_grade(grade: float) -> str:
    """Render a grade the way it appears in JSON reports: 12 not 12.0."""
    if float(grade).is_integer():
        return str(int(grade))
    return repr(float(grade))


def generate_suggestions(
    grade_level: float,
    passive_voice: List[str],
    long_sentences: List[str],
    jargon: List[str],
) -> List[Suggestion]:
    suggestions: List[Suggestion] = []

    if grade_level > GRADE_LEVEL_TARGET:
        suggestions.append(Suggestion(
            type="grade-level",
            issue=f"Grade level {format_grade(grade_level)} is above {GRADE_LEVEL_TARGET}th grade",
            suggestion="Use shorter sentences, simpler words, and active voice to reduce complexity",
        ))

    if passive_voice:
        suggestions.append(Suggestion(
            type="passive-voice",
            issue=f"{len(passive_voice)} passive voice instance(s) found",
            suggestion='Convert to active voice (e.g., "The user clicks" instead of "The button is clicked")',
        ))

    if long_sentences:
        suggestions.append(Suggestion(
            type="long-sentences",
            issue=f"{len(long_sentences)} sentence(s) over {LONG_SENTENCE_THRESHOLD} words",
            suggestion="Break long sentences into shorter ones. Use bullet points or numbered lists for multiple actions",
        ))

    if jargon:
        replacements = ", ".join(
            f'"{term}" → "{JARGON.get(term, FALLBACK_REPLACEMENT)}"' for term in jargon
        )
        suggestions.append(Suggestion(
            type="jargon",
            issue=f"{len(jargon)} jargon word(s) found: {', '.join(jargon)}",
            suggestion=f"Replace with simpler alternatives: {replacements}",
        ))

    return suggestions
