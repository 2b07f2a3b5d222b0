import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

load_dotenv()


def _split_env(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseModel):
    data_dir: str = "dat"
    languages: List[str] = Field(default_factory=lambda: ["de"])
    dictionaries: List[str] = Field(default_factory=lambda: ["de-en"])
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _check_dictionary_pairs(self) -> "Settings":
        for pair in self.dictionaries:
            source, sep, target = pair.partition("-")
            if not sep or not source or not target:
                raise ValueError(f"Dictionary pair must look like 'de-en': {pair!r}")
            if source not in self.languages:
                raise ValueError(
                    f"Dictionary {pair!r} needs source language {source!r} to be loaded"
                )
        return self

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            data_dir=os.getenv("GLOSS_DATA_DIR", "dat"),
            languages=_split_env("GLOSS_LANGUAGES", "de"),
            dictionaries=_split_env("GLOSS_DICTIONARIES", "de-en"),
            host=os.getenv("GLOSS_HOST", "127.0.0.1"),
            port=int(os.getenv("GLOSS_PORT", "3000")),
            log_level=os.getenv("GLOSS_LOG_LEVEL", "INFO"),
        )

    def dictionary_pairs(self) -> List[tuple[str, str]]:
        return [tuple(pair.split("-", 1)) for pair in self.dictionaries]
