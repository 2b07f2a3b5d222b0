from typing import Callable

from domain.nlp.content.content_adapter import ContentAdapter
from domain.nlp.content.text_tokenizer import TextTokenizer
from domain.nlp.lang.de.de_lang_profile import DELangProfile
from domain.nlp.lang.lang_profile import LangProfile
from domain.nlp.lexicon.dictionary_store import DictionaryStore


class AdapterFactory:
    @staticmethod
    def create_content_adapter(
        file_type: str, is_known: Callable[[str], bool]
    ) -> ContentAdapter:
        if file_type == "text":
            return TextTokenizer(is_known)
        else:
            raise ValueError(f"Unsupported file type: {file_type}")

    @staticmethod
    def create_lang_profile(language: str) -> LangProfile:
        if language == "de":
            return DELangProfile(language)
        # languages without special morphology share the generic rules
        return LangProfile(language)

    @staticmethod
    def create_tokenizer(
        lang_profile: LangProfile, dictionary: DictionaryStore
    ) -> ContentAdapter:
        """Tokenizer that treats "<known word>." as an abbreviation."""

        def is_known(word: str) -> bool:
            return lang_profile.is_in_frequency_list(word) or dictionary.contains(word)

        return AdapterFactory.create_content_adapter("text", is_known)
