import pytest

from domain.gloss.reference_data import (
    ReferenceData,
    UnsupportedLanguageError,
    build_dictionary,
)
from domain.nlp.lexicon.schema import DictionaryRecord


def test_registry_lookups(reference_data, de_profile, de_en_dictionary):
    assert reference_data.get_language("de") is de_profile
    assert reference_data.get_dictionary("de", "en") is de_en_dictionary


def test_unknown_language_and_pair():
    data = ReferenceData()

    with pytest.raises(UnsupportedLanguageError, match="xx"):
        data.get_language("xx")
    with pytest.raises(UnsupportedLanguageError, match="de-fr"):
        data.get_dictionary("de", "fr")


def test_unsupported_language_is_a_value_error():
    assert issubclass(UnsupportedLanguageError, ValueError)


def test_describe(reference_data):
    description = reference_data.describe()

    assert description["languages"] == ["de"]
    # "in Ordnung" is rejected, "Haus" has two entries under one key
    assert description["dictionaries"] == {"de-en": 8}


def test_build_dictionary_logs_counts(caplog):
    with caplog.at_level("INFO"):
        dictionary = build_dictionary(
            [DictionaryRecord("Haus", "house"), DictionaryRecord("in Ordnung", "ok")],
            "de",
            "en",
        )

    assert len(dictionary) == 1
    assert "1 rejected" in caplog.text
