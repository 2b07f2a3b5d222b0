import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable

from domain.nlp.adapter_factory import AdapterFactory
from domain.nlp.lang.lang_profile import LangProfile
from domain.nlp.lexicon.dictionary_store import DictionaryStore
from domain.nlp.lexicon.schema import (
    DictionaryRecord,
    ExplicitVariantRecord,
    FrequencyRecord,
    VariantPatternRecord,
)

logger = logging.getLogger(__name__)


def _t():
    return time.perf_counter()


class UnsupportedLanguageError(ValueError):
    """Requested language or dictionary pair is not loaded."""


@dataclass
class ReferenceData:
    """Everything loaded at startup. Shared read-only between requests."""

    languages: Dict[str, LangProfile] = field(default_factory=dict)
    dictionaries: Dict[str, DictionaryStore] = field(default_factory=dict)

    def add_language(self, profile: LangProfile) -> None:
        self.languages[profile.code] = profile

    def add_dictionary(self, dictionary: DictionaryStore) -> None:
        self.dictionaries[dictionary.pair] = dictionary

    def get_language(self, code: str) -> LangProfile:
        profile = self.languages.get(code)
        if profile is None:
            raise UnsupportedLanguageError(f"Unsupported source language: {code}")
        return profile

    def get_dictionary(self, source_lang: str, target_lang: str) -> DictionaryStore:
        pair = f"{source_lang}-{target_lang}"
        dictionary = self.dictionaries.get(pair)
        if dictionary is None:
            raise UnsupportedLanguageError(f"No dictionary for {pair}")
        return dictionary

    def describe(self) -> dict:
        return {
            "languages": sorted(self.languages),
            "dictionaries": {
                pair: len(dictionary) for pair, dictionary in sorted(self.dictionaries.items())
            },
        }


def build_dictionary(
    records: Iterable[DictionaryRecord], source_lang: str, target_lang: str
) -> DictionaryStore:
    t0 = _t()
    dictionary = DictionaryStore(source_lang, target_lang)
    added, rejected = dictionary.add_records(records)
    logger.info(
        "Loaded %s dictionary: %d entries, %d keys, %d rejected (%.3fs)",
        dictionary.pair,
        added,
        len(dictionary),
        rejected,
        _t() - t0,
    )
    return dictionary


def build_lang_profile(
    code: str,
    frequency: Iterable[FrequencyRecord],
    variant_patterns: Iterable[VariantPatternRecord] = (),
    separable_prefixes: Iterable[str] = (),
    explicit_variants: Iterable[ExplicitVariantRecord] = (),
) -> LangProfile:
    t0 = _t()
    profile = AdapterFactory.create_lang_profile(code)

    ranked = profile.add_frequency_records(frequency)
    logger.info("Ranked %d frequent %s words (%.3fs)", ranked, code, _t() - t0)

    t1 = _t()
    patterns = profile.add_variant_records(variant_patterns)
    explicit = profile.add_explicit_variant_records(explicit_variants)
    prefixes = profile.add_separable_prefixes(separable_prefixes)
    logger.info(
        "Read %d variant patterns, %d explicit variants, %d separable prefixes for %s (%.3fs)",
        patterns,
        explicit,
        prefixes,
        code,
        _t() - t1,
    )
    return profile

