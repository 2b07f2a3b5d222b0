import pytest

from domain.gloss.reference_data import (
    ReferenceData,
    build_dictionary,
    build_lang_profile,
)
from domain.gloss.schemas.schema import ResolutionSession
from domain.nlp.lexicon.schema import (
    DictionaryRecord,
    ExplicitVariantRecord,
    FrequencyRecord,
    VariantPatternRecord,
)

# rank = position in the list
FREQUENT_WORDS = [
    "der",
    "die",
    "und",
    "ich",
    "auf",
    "Haus",
    "kam",
    "stehen",
    "Tür",
    "Uhr",
]

DICTIONARY_RECORDS = [
    DictionaryRecord("Dr.", "doctor", "abbr"),
    DictionaryRecord("Haus {n}", "house", "noun"),
    DictionaryRecord("Haus {n}", "home", "noun"),
    DictionaryRecord("Tür {f}", "door", "noun"),
    DictionaryRecord("aufstehen {vi}", "to get up", "verb"),
    DictionaryRecord("aufstehen {vi}", "to stand up", "verb"),
    DictionaryRecord("kommen {vi}", "to come", "verb"),
    # only reachable through the last-resort rule "t$" on "kommst"
    DictionaryRecord("kommsen", "bait", ""),
    DictionaryRecord("sagen {vt}", "to say", "verb"),
    DictionaryRecord("rennen {vi}", "to run", "verb"),
    DictionaryRecord("in Ordnung", "all right", ""),
]

VARIANT_PATTERNS = [
    VariantPatternRecord("st$", "en"),
    VariantPatternRecord("e$", "en"),
    VariantPatternRecord("t$", "en", last_resort=True),
]


@pytest.fixture
def de_profile():
    return build_lang_profile(
        "de",
        frequency=[FrequencyRecord(word) for word in FREQUENT_WORDS],
        variant_patterns=VARIANT_PATTERNS,
        separable_prefixes=["auf", "an", "ab"],
        explicit_variants=[ExplicitVariantRecord("rennen", "rannte")],
    )


@pytest.fixture
def de_en_dictionary():
    return build_dictionary(DICTIONARY_RECORDS, "de", "en")


@pytest.fixture
def reference_data(de_profile, de_en_dictionary):
    data = ReferenceData()
    data.add_language(de_profile)
    data.add_dictionary(de_en_dictionary)
    return data


@pytest.fixture
def session():
    # nothing counts as known
    return ResolutionSession(freq_threshold=0)
