from typing import Callable, Iterator, List

from domain.nlp.common.text_utils import (
    SENTENCE_TERMINATORS,
    UNCONDITIONAL_TERMINATORS,
    clean_text,
    contains_alphas,
    is_number,
    is_numeric_token,
)
from domain.nlp.content.content_adapter import ContentAdapter


class SentenceStream:
    """Lazy sentences of one text. Every iteration restarts the segmentation."""

    def __init__(self, tokenizer: "TextTokenizer", text: str):
        self._tokenizer = tokenizer
        self._text = text

    def __iter__(self) -> Iterator[List[str]]:
        return self._tokenizer.iter_sentences(self._text)


class TextTokenizer(ContentAdapter):
    """
    Splits text into sentences of word tokens.

    A period ends a sentence unless it follows a number or closes a known
    abbreviation. ``is_known`` tells whether a word (with its trailing period)
    is in the frequency list or the dictionary, so "Dr." stays one token while
    "kam." ends the sentence.
    """

    def __init__(self, is_known: Callable[[str], bool]):
        self.is_known = is_known

    def clean_text(self, text: str) -> str:
        return clean_text(text)

    def tokenize(self, text: str) -> SentenceStream:
        return SentenceStream(self, self.clean_text(text))

    def ends_sentence(self, word: str) -> bool:
        """Decide whether the period after ``word`` terminates the sentence."""
        if is_numeric_token(word):
            return not any(is_number(ch) for ch in word)
        return not self.is_known(word + ".")

    def iter_sentences(self, text: str) -> Iterator[List[str]]:
        sentence: List[str] = []
        current: List[str] = []

        def flush() -> None:
            word = "".join(current)
            current.clear()
            if contains_alphas(word):
                sentence.append(word)

        for i, ch in enumerate(text):
            if ch == " ":
                flush()
            elif ch in UNCONDITIONAL_TERMINATORS:
                flush()
                if sentence:
                    yield sentence
                    sentence = []
            elif ch == ".":
                following = text[i + 1] if i + 1 < len(text) else " "
                if following != " " and following not in SENTENCE_TERMINATORS:
                    # word-internal, e.g. "z.B" or "3.14"
                    current.append(ch)
                elif self.ends_sentence("".join(current)):
                    flush()
                    if sentence:
                        yield sentence
                        sentence = []
                else:
                    current.append(ch)
            else:
                current.append(ch)

        flush()
        if sentence:
            yield sentence
