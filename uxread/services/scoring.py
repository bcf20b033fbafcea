from __future__ import annotations
import math
from uxread.services.text import segment_sentences, segment_words, count_syllables


def _round_half_up(value: float, places: int = 1) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def grade_level(text: str) -> float:
    """Flesch-Kincaid grade level, one decimal place, never negative."""
    sentences = segment_sentences(text)
    words = segment_words(text)
    if not sentences or not words:
        return 0.0

    syllables = sum(count_syllables(w) for w in words)
    avg_sentence_length = len(words) / len(sentences)
    avg_syllables_per_word = syllables / len(words)

    grade = 0.39 * avg_sentence_length + 11.8 * avg_syllables_per_word - 15.59
    return max(0.0, _round_half_up(grade))
