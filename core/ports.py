from typing import List, Protocol

from domain.nlp.lexicon.schema import (
    DictionaryRecord,
    ExplicitVariantRecord,
    FrequencyRecord,
    VariantPatternRecord,
)


class ReferenceIO(Protocol):
    def read_dictionary(
        self, source_lang: str, target_lang: str
    ) -> List[DictionaryRecord]: ...

    def read_frequency_list(self, language: str) -> List[FrequencyRecord]: ...

    def read_variant_patterns(self, language: str) -> List[VariantPatternRecord]: ...

    def read_separable_prefixes(self, language: str) -> List[str]: ...

    def read_explicit_variants(self, language: str) -> List[ExplicitVariantRecord]: ...
