# tests/test_suggestions.py
from uxread.services.suggestions import generate_suggestions, format_grade


def test_nothing_to_suggest():
    assert generate_suggestions(9.0, [], [], []) == []


def test_fixed_order_and_counts():
    out = generate_suggestions(12.0, ["is used", "was taken"], ["x"], ["leverage", "utilize"])
    assert [s.type for s in out] == ["grade-level", "passive-voice", "long-sentences", "jargon"]
    assert out[0].issue == "Grade level 12 is above 9th grade"
    assert out[1].issue == "2 passive voice instance(s) found"
    assert out[2].issue == "1 sentence(s) over 20 words"
    assert out[3].issue == "2 jargon word(s) found: leverage, utilize"
    assert out[3].suggestion == (
        'Replace with simpler alternatives: "leverage" → "use", "utilize" → "use"'
    )


def test_grade_just_above_threshold():
    out = generate_suggestions(9.1, [], [], [])
    assert len(out) == 1
    assert out[0].issue == "Grade level 9.1 is above 9th grade"


def test_unknown_term_falls_back():
    out = generate_suggestions(0, [], [], ["frobnicate"])
    assert out[0].suggestion.endswith('"frobnicate" → "simpler term"')


def test_format_grade():
    assert format_grade(12.0) == "12"
    assert format_grade(15.6) == "15.6"
