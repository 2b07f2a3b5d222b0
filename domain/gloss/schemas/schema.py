from dataclasses import dataclass, field
from typing import List, Optional, Set

from pydantic import BaseModel, Field

from common.constants import RARE


class AnnotationCandidate(BaseModel):
    key: str  # lookup key that matched
    source: str  # headword as written in the dictionary
    word_type: str = ""
    targets: List[str] = Field(default_factory=list)
    frequency: int = RARE

    # - Set by the resolver
    suppressed: bool = False  # known word, below the frequency threshold
    unresolved: bool = False  # placeholder for a word without translation

    # - Populated at ranking step
    specific_term: Optional[bool] = None
    specific_meaning: Optional[bool] = None
    vulgar: Optional[bool] = None
    def_count: Optional[int] = None
    quality: Optional[int] = None


@dataclass
class ResolutionSession:
    """Mutable state of one annotation request. Never shared between requests."""

    freq_threshold: int
    show_all: bool = False
    searched: Set[str] = field(default_factory=set)
    # searched keys that had dictionary entries
    explained: Set[str] = field(default_factory=set)

    def is_known(self, frequency: int) -> bool:
        return frequency <= self.freq_threshold
