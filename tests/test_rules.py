# tests/test_rules.py
from uxread.services.rules import (
    JARGON, detect_passive_voice, detect_long_sentences, detect_jargon,
)
from uxread.services.suggestions import FALLBACK_REPLACEMENT


def test_passive_ed():
    assert detect_passive_voice("The form is submitted.") == ["is submitted"]


def test_passive_en():
    assert detect_passive_voice("The cake was eaten.") == ["was eaten"]


def test_passive_negative():
    assert detect_passive_voice("The form was sent.") == []
    assert detect_passive_voice("") == []


def test_passive_case_insensitive_and_duplicates_kept():
    text = "Files WERE uploaded. Files were uploaded. It has been written."
    assert detect_passive_voice(text) == ["WERE uploaded", "were uploaded", "been written"]


def test_passive_ordered_by_position():
    text = "It was taken, then it was signed."
    assert detect_passive_voice(text) == ["was taken", "was signed"]


def test_passive_patterns_scanned_independently():
    # "was been" matches the -en pattern, "been tested" the -ed pattern
    assert detect_passive_voice("It was been tested.") == ["was been", "been tested"]


def _sentence(n):
    return " ".join(["word"] * n) + "."


def test_long_sentence_boundary():
    assert detect_long_sentences(_sentence(20)) == []
    flagged = detect_long_sentences("Short one. " + _sentence(21))
    assert flagged == [" ".join(["word"] * 21)]


def test_long_sentences_in_order():
    text = _sentence(25).replace("word", "a", 1) + " Ok. " + _sentence(22)
    flagged = detect_long_sentences(text)
    assert len(flagged) == 2
    assert flagged[0].startswith("a word")


def test_jargon_case_insensitive():
    assert "leverage" in detect_jargon("We LEVERAGE this")


def test_jargon_substring_match():
    assert "optimize" in detect_jargon("optimized")


def test_jargon_vocabulary_order_no_duplicates():
    text = "Facilitate, then leverage. We leverage robust tools."
    assert detect_jargon(text) == ["leverage", "robust", "facilitate"]


def test_jargon_hyphenated_terms():
    assert detect_jargon("A state-of-the-art, end-to-end tool") == ["end-to-end", "state-of-the-art"]


def test_jargon_table_complete():
    assert len(JARGON) == 24
    for term, plain in JARGON.items():
        assert plain and plain != FALLBACK_REPLACEMENT, term
        assert term == term.lower()
