from typing import Dict, List

import langcodes
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

# ---------- Gloss request / response ----------


class GlossRequest(BaseModel):
    # One annotation request. Validated once at the boundary, before the engine runs.
    model_config = ConfigDict(populate_by_name=True)

    source_lang: StrictStr  # e.g. "de"
    target_lang: StrictStr  # e.g. "en"
    freq_threshold: int = Field(alias="freqThreshold", ge=0)
    show_all: StrictBool
    text: StrictStr

    @field_validator("freq_threshold", mode="before")
    @classmethod
    def _threshold_not_bool(cls, value):
        # JSON true would otherwise pass as 1
        if isinstance(value, bool):
            raise ValueError("freqThreshold must be an integer, not a boolean")
        return value

    @field_validator("source_lang", "target_lang")
    @classmethod
    def _two_letter_code(cls, value: str) -> str:
        code = value.strip().lower()
        if len(code) != 2 or not code.isalpha() or not langcodes.tag_is_valid(code):
            raise ValueError(f"Expected a two-letter language code, got {value!r}")
        return code


class GlossResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    key: str
    source: str
    word_type: str = Field(alias="wordType")
    target: str  # joined gloss string
    freq: str  # display string, see format_frequency


class GlossResponse(BaseModel):
    results: List[GlossResult]


class LanguagesResponse(BaseModel):
    languages: List[str]
    dictionaries: Dict[str, int]  # "de-en" -> number of indexed keys
