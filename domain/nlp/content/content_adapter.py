from abc import ABC, abstractmethod
from typing import Iterable, List

# Sentence unit from content adapter: ordered word tokens
Sentence = List[str]


class ContentAdapter(ABC):
    @abstractmethod
    def clean_text(self, text: str) -> str:
        """
        Normalize raw input before segmentation.
        """
        raise NotImplementedError

    @abstractmethod
    def tokenize(self, text: str) -> Iterable[Sentence]:
        """
        Transform raw text to sentences of word tokens
        """
        raise NotImplementedError
