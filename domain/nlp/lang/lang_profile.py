import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

import regex as re

from common.constants import (
    EXACT_RANK_LIMIT,
    MAX_RANK,
    RARE,
    THOUSANDS_RANK_LIMIT,
)
from domain.nlp.lexicon.schema import (
    ExplicitVariantRecord,
    FrequencyRecord,
    VariantPattern,
    VariantPatternRecord,
)

logger = logging.getLogger(__name__)

_DOLLAR_GROUP_RE = re.compile(r"\$(\d+)")


def coarsen_rank(rank: int) -> int:
    """
    Exact ranks beyond the first 10,000 words carry no information, so they
    are rounded up: to thousands until 30,000, to ten-thousands until
    100,000, capped at 100,000.
    """
    if rank <= EXACT_RANK_LIMIT:
        return rank
    if rank <= THOUSANDS_RANK_LIMIT:
        return -(-rank // 1_000) * 1_000
    if rank <= MAX_RANK:
        return -(-rank // 10_000) * 10_000
    return MAX_RANK


def compile_variant_pattern(record: VariantPatternRecord) -> VariantPattern:
    # "$1" style group references are accepted next to Python's "\1"
    replacement = _DOLLAR_GROUP_RE.sub(r"\\g<\1>", record.canonical)
    return VariantPattern(
        pattern=re.compile(record.variant),
        replacement=replacement,
        last_resort=record.last_resort,
    )


class LangProfile:
    """
    Frequency ranking and morphology rules of one source language.
    Built once at startup, read-only afterwards.
    """

    code: str

    def __init__(self, code: str):
        self.code = code
        self.frequency_rank: Dict[str, int] = {}
        self.frequency_list_size = 0
        # declaration order matters
        self.variant_patterns: List[VariantPattern] = []
        # irregular forms, stored variant -> canonicals for reverse lookup
        self.explicit_variants: Dict[str, List[str]] = {}
        self.separable_prefixes: Set[str] = set()

    # --------------------- 1) Frequency -------------------

    def add_frequency_records(self, records: Iterable[FrequencyRecord]) -> int:
        """
        Rank words in the order given. Words with equal counts share a rank.
        Returns the number of ranked words.
        """
        position = len(self.frequency_rank)
        previous: Optional[Tuple[int, int]] = None  # (count, raw rank)
        added = 0
        for record in records:
            word = record.word.strip()
            if not word or word in self.frequency_rank:
                continue
            position += 1
            if record.count is not None and previous and previous[0] == record.count:
                raw_rank = previous[1]
            else:
                raw_rank = position
            previous = (record.count, raw_rank) if record.count is not None else None

            rank = coarsen_rank(raw_rank)
            self.frequency_rank[word] = rank
            # ranks only grow, the list size is the largest rank handed out
            self.frequency_list_size = max(self.frequency_list_size, rank)
            added += 1
        return added

    def get_frequency_rank(self, word: str) -> int:
        rank = self.frequency_rank.get(word)
        if rank is None:
            rank = self.frequency_rank.get(word.lower())
        return RARE if rank is None else rank

    def is_in_frequency_list(self, word: str) -> bool:
        return self.get_frequency_rank(word) <= self.frequency_list_size

    # --------------------- 2) Morphology -------------------

    def add_variant_records(self, records: Iterable[VariantPatternRecord]) -> int:
        added = 0
        for record in records:
            try:
                self.variant_patterns.append(compile_variant_pattern(record))
            except re.error as e:
                logger.warning(
                    "Skipping variant pattern %r for %s: %s", record.variant, self.code, e
                )
                continue
            added += 1
        return added

    def add_explicit_variant_records(
        self, records: Iterable[ExplicitVariantRecord]
    ) -> int:
        added = 0
        for record in records:
            canonicals = self.explicit_variants.setdefault(record.variant, [])
            if record.canonical not in canonicals:
                canonicals.append(record.canonical)
                added += 1
        return added

    def get_canonicals(self, word: str, last_resort: bool = False) -> List[str]:
        """
        Candidate base forms of ``word`` from the rules of one tier.
        Explicit variants come first (primary tier only), then every pattern
        of the tier in declaration order. Duplicates are dropped.
        """
        canonicals: List[str] = []
        if not last_resort:
            canonicals.extend(self.explicit_variants.get(word, []))

        for variant in self.variant_patterns:
            if variant.last_resort != last_resort:
                continue
            canonical = variant.rewrite(word)
            if canonical is not None and canonical not in canonicals:
                canonicals.append(canonical)

        return canonicals

    # --------------------- 3) Separable verbs -------------------

    def add_separable_prefixes(self, prefixes: Iterable[str]) -> int:
        before = len(self.separable_prefixes)
        self.separable_prefixes.update(p.strip() for p in prefixes if p.strip())
        return len(self.separable_prefixes) - before

    def is_separable_prefix(self, word: str) -> bool:
        return word in self.separable_prefixes

    def is_infinitive(self, key: str) -> bool:
        """Whether a dictionary key can be the infinitive of a recombined verb."""
        return True

    # --------------------- 4) Compounds -------------------

    def compound_search_term(self, suffix: str, token: str) -> str:
        """Form under which the tail of a compound ``token`` is looked up."""
        return suffix
