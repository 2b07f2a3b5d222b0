import logging
from typing import Optional

from common.config import Settings
from common.schemas import GlossRequest, GlossResponse
from core.ports import ReferenceIO
from domain.gloss.reference_data import (
    ReferenceData,
    build_dictionary,
    build_lang_profile,
)
from domain.gloss.run_gloss_annotation import annotate_text
from infra.files.reference_files import FileReferenceIO


def load_reference_data(
    settings: Settings, reference_io: Optional[ReferenceIO] = None
) -> ReferenceData:
    """
    Load every configured language and dictionary. Missing required files
    raise FileNotFoundError; the service must not start without them.
    """
    reference_io = reference_io or FileReferenceIO(settings.data_dir)
    reference_data = ReferenceData()

    for code in settings.languages:
        logging.info(f"Loading language: {code}")
        profile = build_lang_profile(
            code,
            frequency=reference_io.read_frequency_list(code),
            variant_patterns=reference_io.read_variant_patterns(code),
            separable_prefixes=reference_io.read_separable_prefixes(code),
            explicit_variants=reference_io.read_explicit_variants(code),
        )
        reference_data.add_language(profile)

    for source_lang, target_lang in settings.dictionary_pairs():
        logging.info(f"Loading dictionary: {source_lang}-{target_lang}")
        dictionary = build_dictionary(
            reference_io.read_dictionary(source_lang, target_lang),
            source_lang,
            target_lang,
        )
        reference_data.add_dictionary(dictionary)

    return reference_data


def run_gloss_pipeline(
    request: GlossRequest, reference_data: ReferenceData
) -> GlossResponse:
    logging.info(
        f"Gloss request {request.source_lang}-{request.target_lang}: "
        f"{len(request.text)} chars, threshold {request.freq_threshold}, "
        f"show_all={request.show_all}"
    )
    return GlossResponse(results=annotate_text(request, reference_data))
