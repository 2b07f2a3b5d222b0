import logging
from pathlib import Path
from typing import Iterator, List

from common.constants import (
    COMMENT_PREFIX,
    DICT_DIR,
    EXPLICIT_VARIANTS_FILE,
    FREQUENCY_FILE,
    LANG_DIR,
    SEPARABLE_PREFIXES_FILE,
    VARIANT_PATTERNS_FILE,
)
from domain.nlp.lexicon.schema import (
    DictionaryRecord,
    ExplicitVariantRecord,
    FrequencyRecord,
    VariantPatternRecord,
)
from infra.files.dictionary_parsers import parse_dictionary_line
from infra.files.language_parsers import (
    parse_explicit_variant_line,
    parse_frequency_line,
    parse_variant_pattern_line,
)

logger = logging.getLogger(__name__)


class FileReferenceIO:
    """
    Reads reference data from a directory laid out as

        <data_dir>/dict/<src>-<tgt>.txt
        <data_dir>/lang/<code>/frequency.txt
        <data_dir>/lang/<code>/variant-patterns.txt     (optional)
        <data_dir>/lang/<code>/separable-prefixes.txt   (optional)
        <data_dir>/lang/<code>/explicit-variants.txt    (optional)

    Dictionaries and frequency lists are required, a missing file raises
    FileNotFoundError. Missing optional files only log a warning.
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)

    def dictionary_path(self, source_lang: str, target_lang: str) -> Path:
        return self.data_dir / DICT_DIR / f"{source_lang}-{target_lang}.txt"

    def language_path(self, language: str, filename: str) -> Path:
        return self.data_dir / LANG_DIR / language / filename

    def _lines(self, path: Path, required: bool) -> Iterator[str]:
        """Non-empty lines that are not comments, stripped."""
        if not path.exists():
            if required:
                raise FileNotFoundError(f"Reference file not found: {path}")
            logger.warning("Optional reference file not found: %s", path)
            return

        logger.info("Reading %s", path)
        with path.open("r", encoding="utf-8") as handle:
            for line in handle:
                line = line.strip()
                if line and not line.startswith(COMMENT_PREFIX):
                    yield line

    def read_dictionary(
        self, source_lang: str, target_lang: str
    ) -> List[DictionaryRecord]:
        records: List[DictionaryRecord] = []
        path = self.dictionary_path(source_lang, target_lang)
        for line in self._lines(path, required=True):
            records.extend(parse_dictionary_line(line))
        return records

    def read_frequency_list(self, language: str) -> List[FrequencyRecord]:
        path = self.language_path(language, FREQUENCY_FILE)
        records = [parse_frequency_line(line) for line in self._lines(path, required=True)]
        return [record for record in records if record is not None]

    def read_variant_patterns(self, language: str) -> List[VariantPatternRecord]:
        path = self.language_path(language, VARIANT_PATTERNS_FILE)
        records = []
        for line in self._lines(path, required=False):
            record = parse_variant_pattern_line(line)
            if record is None:
                logger.warning("Skipping malformed variant pattern line: %r", line)
                continue
            records.append(record)
        return records

    def read_separable_prefixes(self, language: str) -> List[str]:
        path = self.language_path(language, SEPARABLE_PREFIXES_FILE)
        return [line.lower() for line in self._lines(path, required=False)]

    def read_explicit_variants(self, language: str) -> List[ExplicitVariantRecord]:
        path = self.language_path(language, EXPLICIT_VARIANTS_FILE)
        records: List[ExplicitVariantRecord] = []
        for line in self._lines(path, required=False):
            records.extend(parse_explicit_variant_line(line))
        return records
