from dataclasses import dataclass
from typing import NamedTuple, Optional

import regex as re

# ---------- Records consumed from reference data readers ----------


class DictionaryRecord(NamedTuple):
    source: str  # headword, may carry [..] (..) {..} <..> annotations
    target: str  # one gloss
    word_type: str = ""


class FrequencyRecord(NamedTuple):
    word: str
    count: Optional[int] = None  # occurrences; None when the list only ranks


class VariantPatternRecord(NamedTuple):
    variant: str  # regex matched against the inflected word
    canonical: str  # replacement producing the base form
    last_resort: bool = False


class ExplicitVariantRecord(NamedTuple):
    canonical: str
    variant: str


# ---------- Loaded, immutable reference data ----------


@dataclass(frozen=True)
class DictionaryEntry:
    key: str
    source: str
    target: str
    word_type: str = ""


@dataclass(frozen=True)
class VariantPattern:
    pattern: re.Pattern
    replacement: str
    last_resort: bool = False

    def rewrite(self, word: str) -> Optional[str]:
        """Rewrite the first match in ``word``; None when the pattern does not fire."""
        if not self.pattern.search(word):
            return None
        rewritten = self.pattern.sub(self.replacement, word, count=1)
        return rewritten if rewritten != word else None
