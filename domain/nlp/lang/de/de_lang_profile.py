import regex as re

from domain.nlp.common.text_utils import capitalize_first
from domain.nlp.lang.lang_profile import LangProfile

# "aufstehen", "abwechseln", "einwandern"
_INFINITIVE_RE = re.compile(r"(?:e|l|r)n$")

_NUMBER_WORDS = (
    "ein|eins|zwei|drei|vier|fünf|sechs|sech|sieben|sieb|acht|neun|zehn|elf|zwölf"
    "|zwanzig|dreißig|vierzig|fünfzig|sechzig|siebzig|achtzig|neunzig"
    "|hundert|tausend|million|millionen|milliarde|milliarden|und"
)
# spelled-out numbers are written in lower case, e.g. "dreihundertzwanzig"
_SPELLED_NUMBER_RE = re.compile(rf"^(?:{_NUMBER_WORDS})+$", re.IGNORECASE)


class DELangProfile(LangProfile):
    def is_infinitive(self, key: str) -> bool:
        return bool(_INFINITIVE_RE.search(key))

    def compound_search_term(self, suffix: str, token: str) -> str:
        # noun compounds end in a noun, which is capitalised in the dictionary
        if _SPELLED_NUMBER_RE.match(token):
            return suffix
        return capitalize_first(suffix)
