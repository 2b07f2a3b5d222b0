from typing import List

import regex as re

from domain.nlp.lexicon.schema import DictionaryRecord

###########################################################
# Two line formats are understood:
#
# dict.cc export, tab separated:
#   Haustür\tfront door\tnoun
#
# Ding, "::" separated, "|" separates singular and plural,
# ";" separates synonyms:
#   Haustür {f} | Haustüren {pl} :: front door | front doors
###########################################################

DING_SEPARATOR = "::"

_WORD_TYPE_RE = re.compile(r"\{([^}]+)\}")
_NOUN_GENDERS = {"f", "m", "n", "pl"}


def is_ding_line(line: str) -> bool:
    return DING_SEPARATOR in line


def ding_word_type(source: str) -> str:
    """Normalised word type from the first {..} annotation of a Ding headword."""
    match = _WORD_TYPE_RE.search(source)
    if not match:
        return ""
    raw = match.group(1)
    if raw.startswith("v"):
        return "verb"
    if "adv" in raw:
        return "adv"
    if "adj" in raw:
        return "adj"
    if "pron" in raw:
        return "pron"
    if raw.split(",")[0].strip() in _NOUN_GENDERS:
        return "noun"
    return raw


def propagate_annotations(sources: List[str]) -> List[str]:
    """
    Synonyms share the {..} annotation written after the last of them:
    "ankommen; eintreffen {vi}" -> "ankommen {vi}", "eintreffen {vi}".
    """
    out = list(sources)
    annotation = ""
    for i in range(len(out) - 1, -1, -1):
        match = _WORD_TYPE_RE.search(out[i])
        if match:
            annotation = " " + match.group(0)
        elif annotation:
            out[i] += annotation
    return out


def parse_ding_line(line: str) -> List[DictionaryRecord]:
    halves = line.split(DING_SEPARATOR)
    if len(halves) != 2:
        return []

    word_type = ding_word_type(halves[0])
    sources = halves[0].split("|")
    targets = halves[1].split("|")

    records: List[DictionaryRecord] = []

    singulars = sources[0].split(";")
    if word_type != "noun":
        singulars = propagate_annotations(singulars)
    target = targets[0].strip()
    records.extend(
        DictionaryRecord(source.strip(), target, word_type)
        for source in singulars
        if source.strip()
    )

    # plural forms of nouns get their own entries
    if word_type == "noun" and len(sources) > 1 and len(targets) > 1:
        target = targets[1].strip()
        records.extend(
            DictionaryRecord(source.strip(), target, word_type)
            for source in sources[1].split(";")
            if source.strip()
        )

    return [record for record in records if record.target]


def parse_dictcc_line(line: str) -> List[DictionaryRecord]:
    fields = line.split("\t")
    if len(fields) < 2:
        return []
    word_type = fields[2].strip() if len(fields) >= 3 else ""
    source, target = fields[0].strip(), fields[1].strip()
    if not source or not target:
        return []
    return [DictionaryRecord(source, target, word_type)]


def parse_dictionary_line(line: str) -> List[DictionaryRecord]:
    if is_ding_line(line):
        return parse_ding_line(line)
    return parse_dictcc_line(line)
