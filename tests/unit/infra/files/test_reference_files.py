import logging

import pytest

from domain.nlp.lexicon.schema import (
    DictionaryRecord,
    ExplicitVariantRecord,
    FrequencyRecord,
    VariantPatternRecord,
)
from infra.files.language_parsers import parse_frequency_line
from infra.files.reference_files import FileReferenceIO


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "dict").mkdir()
    (tmp_path / "lang" / "de").mkdir(parents=True)
    (tmp_path / "dict" / "de-en.txt").write_text(
        "# de-en dictionary\n"
        "\n"
        "Haus {n}\thouse\tnoun\n"
        "Tür {f} | Türen {pl} :: door | doors\n",
        encoding="utf-8",
    )
    (tmp_path / "lang" / "de" / "frequency.txt").write_text(
        "der 500\ndie 400\n# comment\nHaus 12\n", encoding="utf-8"
    )
    return tmp_path


def test_read_dictionary_mixes_formats(data_dir):
    records = FileReferenceIO(data_dir).read_dictionary("de", "en")

    assert records == [
        DictionaryRecord("Haus {n}", "house", "noun"),
        DictionaryRecord("Tür {f}", "door", "noun"),
        DictionaryRecord("Türen {pl}", "doors", "noun"),
    ]


def test_read_frequency_list(data_dir):
    assert FileReferenceIO(data_dir).read_frequency_list("de") == [
        FrequencyRecord("der", 500),
        FrequencyRecord("die", 400),
        FrequencyRecord("Haus", 12),
    ]


def test_parse_frequency_line_without_count():
    assert parse_frequency_line("Haus") == FrequencyRecord("Haus", None)
    assert parse_frequency_line("123") is None


def test_missing_required_files_raise(tmp_path):
    reference_io = FileReferenceIO(tmp_path)

    with pytest.raises(FileNotFoundError):
        reference_io.read_dictionary("de", "en")
    with pytest.raises(FileNotFoundError):
        reference_io.read_frequency_list("de")


def test_missing_optional_files_warn(data_dir, caplog):
    reference_io = FileReferenceIO(data_dir)

    with caplog.at_level(logging.WARNING):
        assert reference_io.read_variant_patterns("de") == []
        assert reference_io.read_separable_prefixes("de") == []
        assert reference_io.read_explicit_variants("de") == []

    assert caplog.text.count("Optional reference file not found") == 3


def test_read_language_rules(data_dir):
    lang_dir = data_dir / "lang" / "de"
    (lang_dir / "variant-patterns.txt").write_text(
        "st$,en\nt$,en,true\nbroken\n", encoding="utf-8"
    )
    (lang_dir / "separable-prefixes.txt").write_text("auf\nAn\n", encoding="utf-8")
    (lang_dir / "explicit-variants.txt").write_text(
        "rennen,rannte,gerannt\n", encoding="utf-8"
    )
    reference_io = FileReferenceIO(data_dir)

    assert reference_io.read_variant_patterns("de") == [
        VariantPatternRecord("st$", "en", False),
        VariantPatternRecord("t$", "en", True),
    ]
    assert reference_io.read_separable_prefixes("de") == ["auf", "an"]
    assert reference_io.read_explicit_variants("de") == [
        ExplicitVariantRecord("rennen", "rannte"),
        ExplicitVariantRecord("rennen", "gerannt"),
    ]
