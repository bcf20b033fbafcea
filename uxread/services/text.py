from __future__ import annotations
from typing import List
import re

_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_WHITESPACE = re.compile(r"\s+")
_NON_ALPHA = re.compile(r"[^a-z]")

VOWELS = "aeiouy"


def segment_sentences(text: str) -> List[str]:
    # "Dr." and friends end a sentence too; no abbreviation handling
    pieces = (p.strip() for p in _SENTENCE_BOUNDARY.split(text))
    return [p for p in pieces if p]


def segment_words(text: str) -> List[str]:
    return [w for w in _WHITESPACE.split(text) if w]


def count_syllables(word: str) -> int:
    """
    Estimate syllables from vowel groups, with a silent-e adjustment.
    Returns 0 for words without any ASCII letters.
    """
    clean = _NON_ALPHA.sub("", word.lower())
    if not clean:
        return 0

    count = 0
    prev_was_vowel = False
    for ch in clean:
        is_vowel = ch in VOWELS
        if is_vowel and not prev_was_vowel:
            count += 1
        prev_was_vowel = is_vowel

    # undercounts words like "recipe"; kept so grades match older reports
    if clean.endswith("e"):
        count -= 1
    return max(1, count)
