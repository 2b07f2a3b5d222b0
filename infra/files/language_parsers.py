from typing import List, Optional

import regex as re

from domain.nlp.lexicon.schema import (
    ExplicitVariantRecord,
    FrequencyRecord,
    VariantPatternRecord,
)

# "Haus 1234", trailing count optional
_FREQUENCY_LINE_RE = re.compile(r"^(.*?)\s*(\d*)$")


def parse_frequency_line(line: str) -> Optional[FrequencyRecord]:
    match = _FREQUENCY_LINE_RE.match(line.strip())
    word = match.group(1) if match else ""
    if not word:
        return None
    count = int(match.group(2)) if match.group(2) else None
    return FrequencyRecord(word, count)


def parse_variant_pattern_line(line: str) -> Optional[VariantPatternRecord]:
    """"regex,replacement[,true]"; a third field "true" marks a last-resort rule."""
    fields = line.split(",")
    if len(fields) < 2 or not fields[0]:
        return None
    last_resort = len(fields) >= 3 and fields[2].strip().lower() == "true"
    return VariantPatternRecord(fields[0], fields[1], last_resort)


def parse_explicit_variant_line(line: str) -> List[ExplicitVariantRecord]:
    """"canonical,variant[,variant...]" -> one record per variant."""
    fields = [field.strip() for field in line.split(",")]
    canonical, variants = fields[0], fields[1:]
    if not canonical:
        return []
    return [ExplicitVariantRecord(canonical, v) for v in variants if v]
