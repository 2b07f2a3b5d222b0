import pytest

from common.constants import RARE
from common.schemas import GlossRequest
from domain.gloss.reference_data import (
    ReferenceData,
    UnsupportedLanguageError,
    build_dictionary,
    build_lang_profile,
)
from domain.gloss.run_gloss_annotation import annotate_text, format_frequency
from domain.nlp.lexicon.schema import DictionaryRecord, VariantPatternRecord


def _request(text, freq_threshold=0, show_all=False, source_lang="de", target_lang="en"):
    return GlossRequest(
        source_lang=source_lang,
        target_lang=target_lang,
        freqThreshold=freq_threshold,
        show_all=show_all,
        text=text,
    )


def test_format_frequency():
    assert format_frequency(5) == "5"
    assert format_frequency(9_999) == "9999"
    assert format_frequency(30_000) == ">30000"
    assert format_frequency(100_000) == ">100000"
    assert format_frequency(RARE) == ">100000"
    assert format_frequency(RARE, unresolved=True) == ""


def test_annotate_text_end_to_end(reference_data):
    # Execute
    results = annotate_text(
        _request("Ich stehe um sieben Uhr auf. Die Haustür!"), reference_data
    )

    # Assertions
    assert [(r.key, r.source, r.target, r.freq) for r in results] == [
        ("Haus", "Haus {n}", "house; home", "6"),
        ("Tür", "Tür {f}", "door", "9"),
        ("aufstehen", "(stehe...auf) aufstehen {vi}", "to get up; to stand up", ">100000"),
    ]
    assert results[2].word_type == "verb"


def test_known_words_are_suppressed(reference_data):
    results = annotate_text(_request("Haus und Tür", freq_threshold=6), reference_data)

    assert [r.key for r in results] == ["Tür"]


def test_show_all_keeps_known_and_unresolved_words(reference_data):
    results = annotate_text(
        _request("Haus Müller", freq_threshold=10, show_all=True), reference_data
    )

    assert [(r.key, r.target, r.freq) for r in results] == [
        ("Haus", "house; home", "6"),
        ("Müller", "???", ""),
    ]


def test_repeated_word_is_annotated_once(reference_data):
    results = annotate_text(_request("Tür. Tür. TÜR"), reference_data)

    assert [r.key for r in results] == ["Tür"]


def test_unknown_language_fails_whole_request(reference_data):
    with pytest.raises(UnsupportedLanguageError):
        annotate_text(_request("Hus", source_lang="sv"), reference_data)

    with pytest.raises(UnsupportedLanguageError):
        annotate_text(_request("Haus", target_lang="fr"), reference_data)


def test_inflected_repeat_is_annotated_once():
    # Setup
    data = ReferenceData()
    data.add_language(
        build_lang_profile(
            "de", frequency=[], variant_patterns=[VariantPatternRecord("s$", "")]
        )
    )
    data.add_dictionary(
        build_dictionary(
            [
                DictionaryRecord("Wagen {m}", "car", "noun"),
                DictionaryRecord("Agens {n}", "agent", "noun"),
            ],
            "de",
            "en",
        )
    )

    # Execute
    results = annotate_text(_request("Der Wagen des Wagens."), data)

    # Assertions
    assert [r.key for r in results] == ["Wagen"]
