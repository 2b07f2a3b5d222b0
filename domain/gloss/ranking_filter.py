from typing import Iterable, List, Set, Tuple

import regex as re

from common.constants import (
    GENERAL_MARKERS,
    GLOSS_SEPARATOR,
    HIGH_QUALITY_DEF_COUNT,
    QUALITY_HIGH,
    QUALITY_NORMAL,
    QUALITY_SPECIFIC,
    QUALITY_VULGAR,
    UNRESOLVED_GLOSS,
    VULGAR_MARKERS,
)
from domain.gloss.schemas.schema import AnnotationCandidate

###########################################################
# Aim of this module is to turn the raw candidates of a request
# into the final, ordered list of glosses.
#
# 1. score_candidate: derive quality flags and the quality tier.
# 2. sort_candidates: common words first, same keys together,
#    better glosses first within a key.
# 3. filter_candidates: drop low-quality repeats of an explained word.
# 4. deduplicate: drop glosses already shown for the same headword.
#
# Quality tiers (higher is better):
#   QUALITY_HIGH      5+ distinct targets, or a "general" annotation
#   QUALITY_NORMAL    no context annotation on headword or meanings
#   QUALITY_SPECIFIC  headword annotated, all meanings annotated, or both
#   QUALITY_VULGAR    vulgar anywhere; wins over every other rule
###########################################################

_ANNOTATION_RE = re.compile(r"\[([^\]]*)\]")
# "[ugs., vulg.]" holds two labels
_LABEL_SEPARATOR_RE = re.compile(r"[,;]")


def _annotations(text: str) -> List[str]:
    return [note.strip().lower() for note in _ANNOTATION_RE.findall(text)]


def _has_marker(notes: Iterable[str], markers: Tuple[str, ...]) -> bool:
    # whole labels only, no substring matches
    return any(
        label.strip() in markers
        for note in notes
        for label in _LABEL_SEPARATOR_RE.split(note)
    )


def _specific(notes: List[str]) -> bool:
    return any(not _has_marker([note], GENERAL_MARKERS) for note in notes)


def order_targets(targets: List[str]) -> List[str]:
    """Drop repeated targets, plain meanings before annotated ones."""
    unique = list(dict.fromkeys(targets))
    return sorted(unique, key=lambda target: "[" in target)


def join_targets(candidate: AnnotationCandidate) -> str:
    if candidate.unresolved:
        return UNRESOLVED_GLOSS
    return GLOSS_SEPARATOR.join(candidate.targets)


def score_candidate(candidate: AnnotationCandidate) -> AnnotationCandidate:
    """Populate quality fields in place."""
    candidate.targets = order_targets(candidate.targets)

    source_notes = _annotations(candidate.source)
    target_notes = [_annotations(target) for target in candidate.targets]
    all_notes = source_notes + [note for notes in target_notes for note in notes]

    candidate.specific_term = _specific(source_notes)
    candidate.specific_meaning = bool(target_notes) and all(
        _specific(notes) for notes in target_notes
    )
    candidate.vulgar = _has_marker(all_notes, VULGAR_MARKERS)
    candidate.def_count = len(candidate.targets)

    if candidate.vulgar:
        candidate.quality = QUALITY_VULGAR
    elif candidate.def_count >= HIGH_QUALITY_DEF_COUNT or _has_marker(
        all_notes, GENERAL_MARKERS
    ):
        candidate.quality = QUALITY_HIGH
    elif candidate.specific_term or candidate.specific_meaning:
        candidate.quality = QUALITY_SPECIFIC
    else:
        candidate.quality = QUALITY_NORMAL
    return candidate


def sort_candidates(candidates: List[AnnotationCandidate]) -> List[AnnotationCandidate]:
    # sorted() is stable, ties keep the resolver's order
    return sorted(
        candidates,
        key=lambda c: (c.frequency, c.key, -c.quality, -c.def_count),
    )


def filter_candidates(
    ranked: List[AnnotationCandidate],
) -> List[AnnotationCandidate]:
    """
    Keep the first candidate of every key. Later candidates of the same key
    survive only when they match the best quality of their group or are
    high quality themselves.
    """
    kept: List[AnnotationCandidate] = []
    best_quality = QUALITY_VULGAR
    for candidate in ranked:
        if kept and candidate.key == kept[-1].key:
            if candidate.quality == best_quality or candidate.quality >= QUALITY_HIGH:
                kept.append(candidate)
                best_quality = max(best_quality, candidate.quality)
            continue
        kept.append(candidate)
        best_quality = candidate.quality
    return kept


def deduplicate(candidates: List[AnnotationCandidate]) -> List[AnnotationCandidate]:
    seen: Set[Tuple[str, str, str]] = set()
    out: List[AnnotationCandidate] = []
    for candidate in candidates:
        identity = (candidate.word_type, candidate.source, join_targets(candidate))
        if identity in seen:
            continue
        seen.add(identity)
        out.append(candidate)
    return out


def rank_and_filter(
    candidates: List[AnnotationCandidate], show_all: bool
) -> List[AnnotationCandidate]:
    """
    Score, sort, filter and deduplicate the resolver output of one request.
    Known words and quality filtering are skipped in "show all" mode.
    """
    if not show_all:
        candidates = [c for c in candidates if not c.suppressed]

    ranked = sort_candidates([score_candidate(c) for c in candidates])

    if not show_all:
        ranked = filter_candidates(ranked)

    return deduplicate(ranked)
