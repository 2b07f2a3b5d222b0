import logging
import time
from typing import List

from common.constants import DISPLAY_RANK_LIMIT, MAX_RANK, RARE
from common.schemas import GlossRequest, GlossResult
from domain.gloss.ranking_filter import join_targets, rank_and_filter
from domain.gloss.reference_data import ReferenceData
from domain.gloss.resolver import Resolver
from domain.gloss.schemas.schema import AnnotationCandidate, ResolutionSession
from domain.nlp.adapter_factory import AdapterFactory

logger = logging.getLogger(__name__)


def _t():
    return time.perf_counter()


def format_frequency(rank: int, unresolved: bool = False) -> str:
    """
    "123" for common words, ">30000" for coarsened ranks, ">100000" for words
    missing from the frequency list, "" for unresolved placeholders.
    """
    if rank < DISPLAY_RANK_LIMIT:
        return str(rank)
    if rank >= RARE:
        return "" if unresolved else f">{MAX_RANK}"
    return f">{rank}"


def to_gloss_result(candidate: AnnotationCandidate) -> GlossResult:
    return GlossResult(
        key=candidate.key,
        source=candidate.source,
        word_type=candidate.word_type,
        target=join_targets(candidate),
        freq=format_frequency(candidate.frequency, candidate.unresolved),
    )


def annotate_text(
    request: GlossRequest, reference_data: ReferenceData
) -> List[GlossResult]:
    t0 = _t()

    # 0) reference data, raises UnsupportedLanguageError
    lang_profile = reference_data.get_language(request.source_lang)
    dictionary = reference_data.get_dictionary(request.source_lang, request.target_lang)
    session = ResolutionSession(
        freq_threshold=request.freq_threshold, show_all=request.show_all
    )

    # 1) sentences
    tokenizer = AdapterFactory.create_tokenizer(lang_profile, dictionary)
    sentences = tokenizer.tokenize(request.text)

    # 2) candidates
    t1 = _t()
    resolver = Resolver(dictionary, lang_profile)
    candidates: List[AnnotationCandidate] = []
    sentence_count = 0
    for tokens in sentences:
        candidates.extend(resolver.resolve_sentence(tokens, session))
        sentence_count += 1
    logger.info(
        "Resolved %d sentences to %d candidates (%.3fs)",
        sentence_count,
        len(candidates),
        _t() - t1,
    )

    # 3) rank
    t2 = _t()
    ranked = rank_and_filter(candidates, request.show_all)
    logger.info("Ranked to %d glosses (%.3fs)", len(ranked), _t() - t2)

    results = [to_gloss_result(candidate) for candidate in ranked]
    logger.info("Annotated %s text. Total: %.3fs", request.source_lang, _t() - t0)
    return results
