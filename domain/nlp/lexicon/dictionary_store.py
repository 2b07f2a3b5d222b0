import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

import regex as re

from domain.gloss.schemas.schema import AnnotationCandidate
from domain.nlp.lexicon.schema import DictionaryEntry, DictionaryRecord

logger = logging.getLogger(__name__)

_ANNOTATION_RES = (
    re.compile(r"\[[^\]]*\]"),
    re.compile(r"\([^)]*\)"),
    re.compile(r"\{[^}]*\}"),
    re.compile(r"<[^>]*>"),
)
# "sb.", "etw.", "jdm." standing alone next to other words
_ABBREVIATION_MARKER_RE = re.compile(r"(?<!\S)[^\s0-9]+\.(?!\S)")
_SPACES_RE = re.compile(r"\s+")


def make_lookup_key(source: str) -> str:
    """
    Derive the lookup key of a headword.
    Bracketed annotations are removed, then standalone abbreviation markers
    when the remainder still has several words, then whitespace is collapsed.
    "Tür {f} [arch.]" -> "Tür", "jdm. etw. geben" -> "geben".
    """
    key = source
    for annotation_re in _ANNOTATION_RES:
        key = annotation_re.sub("", key)

    key = _SPACES_RE.sub(" ", key).strip()
    if " " in key:
        key = _ABBREVIATION_MARKER_RE.sub("", key)

    return _SPACES_RE.sub(" ", key).strip()


class DictionaryStore:
    """
    Gloss entries indexed by lookup key.
    Insertion order is preserved and duplicates are kept; the store only grows.
    """

    def __init__(self, source_lang: str, target_lang: str):
        self.source_lang = source_lang
        self.target_lang = target_lang
        self._entries: Dict[str, List[DictionaryEntry]] = defaultdict(list)

    @property
    def pair(self) -> str:
        return f"{self.source_lang}-{self.target_lang}"

    def add_entry(self, source: str, target: str, word_type: str = "") -> bool:
        key = make_lookup_key(source)
        # Multi-word headwords are not indexed
        if not key or " " in key:
            return False

        self._entries[key].append(
            DictionaryEntry(key=key, source=source, target=target, word_type=word_type)
        )
        return True

    def add_records(self, records: Iterable[DictionaryRecord]) -> Tuple[int, int]:
        """Add records in order. Returns (added, rejected)."""
        added = rejected = 0
        for record in records:
            if self.add_entry(record.source, record.target, record.word_type):
                added += 1
            else:
                rejected += 1
        return added, rejected

    def lookup(self, key: str) -> List[AnnotationCandidate]:
        """One candidate per (word_type, source) found under ``key``; [] for unknown keys."""
        entries = self._entries.get(key)
        if not entries:
            return []

        consolidated: Dict[Tuple[str, str], List[str]] = {}
        for entry in entries:
            consolidated.setdefault((entry.word_type, entry.source), []).append(
                entry.target
            )

        return [
            AnnotationCandidate(
                key=key, source=source, word_type=word_type, targets=targets
            )
            for (word_type, source), targets in consolidated.items()
        ]

    def contains(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
