import pytest

from domain.nlp.common.text_utils import (
    capitalize_first,
    clean_text,
    contains_alphas,
    is_alpha,
    is_numeric_token,
    is_punctuation,
)

SAMPLES = [
    "Dr. Müller kam.",
    "«Hallo», sagte er – und ging.",
    "Haus\u00adtür\u00a0 \t offen!!",
    "  a\x07b  ",
    "z.B. 3,14 € (ca.)",
    "",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_clean_text_is_idempotent(text):
    once = clean_text(text)
    assert clean_text(once) == once


def test_clean_text_replaces_punctuation_and_whitespace():
    assert clean_text("«Hallo», sagte er") == "Hallo sagte er"
    assert clean_text("a\u00a0\u00a0b\tc\nd") == "a b c d"


def test_clean_text_drops_soft_hyphen_and_control_chars():
    assert clean_text("Haus\u00adtür") == "Haustür"
    assert clean_text("a\x07b") == "ab"


def test_clean_text_keeps_terminators_and_word_punctuation():
    assert clean_text("Geht's? Nein; gut! Ost-West z.B.") == "Geht's? Nein; gut! Ost-West z.B."


def test_is_alpha_classification():
    assert is_alpha("a")
    assert is_alpha("ß")
    assert is_alpha("Ü")
    assert is_alpha("ł")
    assert is_alpha("ж")
    assert not is_alpha("×")
    assert not is_alpha("÷")
    assert not is_alpha("«")
    assert not is_alpha("5")
    # IPA extensions
    assert not is_alpha("ə")


def test_is_punctuation_ranges():
    assert is_punctuation(",")
    assert is_punctuation("—")
    assert is_punctuation("€")
    assert not is_punctuation("ä")


def test_numeric_tokens_and_alphas():
    assert is_numeric_token("3.14")
    assert is_numeric_token("1")
    assert not is_numeric_token("3a")
    assert contains_alphas("3a")
    assert not contains_alphas("3.14")


def test_capitalize_first_preserves_rest():
    assert capitalize_first("tür") == "Tür"
    assert capitalize_first("hAUS") == "HAUS"
    assert capitalize_first("") == ""
