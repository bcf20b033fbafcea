from __future__ import annotations
from types import MappingProxyType
from typing import List
import re
from uxread.core.config import LONG_SENTENCE_THRESHOLD
from uxread.services.text import segment_sentences, segment_words

# term -> plain-language replacement; iteration order is the reporting order
JARGON = MappingProxyType({
    "leverage": "use",
    "robust": "strong",
    "utilize": "use",
    "synergy": "teamwork",
    "paradigm": "approach",
    "optimize": "improve",
    "streamline": "simplify",
    "facilitate": "help",
    "implement": "add",
    "integrate": "combine",
    "scalable": "flexible",
    "actionable": "useful",
    "deliverable": "result",
    "ideate": "brainstorm",
    "iterate": "repeat",
    "holistic": "complete",
    "end-to-end": "complete",
    "best-in-class": "top-quality",
    "cutting-edge": "advanced",
    "state-of-the-art": "latest",
    "turnkey": "ready-to-use",
    "mission-critical": "essential",
    "value-add": "benefit",
    "game-changer": "breakthrough",
})

_AUX = r"\b(?:is|are|was|were|being|been|be)\s+"
# Scanned separately: "was been tested" yields two hits, one per pattern.
PASSIVE_PATTERNS = (
    re.compile(_AUX + r"\w*ed\b", re.IGNORECASE | re.ASCII),
    re.compile(_AUX + r"\w*en\b", re.IGNORECASE | re.ASCII),
)


def detect_passive_voice(text: str) -> List[str]:
    # heuristic only: "is seen" and "was dedicated" both match, "was sent" does not
    hits = [(m.start(), m.group(0)) for p in PASSIVE_PATTERNS for m in p.finditer(text)]
    hits.sort(key=lambda h: h[0])
    return [span for _, span in hits]


def detect_long_sentences(text: str) -> List[str]:
    return [
        s for s in segment_sentences(text)
        if len(segment_words(s)) > LONG_SENTENCE_THRESHOLD
    ]


def detect_jargon(text: str) -> List[str]:
    words = segment_words(text.lower())
    # substring match, so "optimized" counts as "optimize"
    return [term for term in JARGON if any(term in w for w in words)]
