"""
Character classification and the first cleaning pass over raw text.

Classification is done over explicit Unicode ranges. The Latin-1 supplement
mixes symbols (00A0-00BF, 00D7, 00F7) with letters that carry diacritics, so
a generic "not ASCII letter" test either leaks symbols into tokens or throws
away the letters needed for dictionary lookup.
"""

import unicodedata

import regex as re

# ordinary and non-breaking spaces
WHITESPACE = frozenset(" \t\r\n\u00a0\u202f\u2007\u2060")
SOFT_HYPHEN = "\u00ad"
SENTENCE_TERMINATORS = frozenset(".!?;")
UNCONDITIONAL_TERMINATORS = frozenset("!?;")
WORD_PUNCTUATION = frozenset("'-.")

_PUNCTUATION_RANGES = (
    # basic latin
    ("!", "/"),
    (":", "@"),
    ("[", "`"),
    ("{", "~"),
    # latin-1 supplement symbols
    ("\u00a0", "\u00bf"),
    ("\u00d7", "\u00d7"),
    ("\u00f7", "\u00f7"),
    # general punctuation
    ("\u2000", "\u206f"),
    # currency symbols
    ("\u20a0", "\u20cf"),
    # supplemental punctuation
    ("\u2e00", "\u2e7f"),
    # CJK symbols and punctuation
    ("\u3000", "\u303f"),
)

_MULTI_SPACE_RE = re.compile(r" {2,}")


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE


def is_control_char(ch: str) -> bool:
    if ch <= "\u001f" or "\u007f" <= ch <= "\u009f":
        return not is_whitespace(ch)
    return False


def is_number(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_punctuation(ch: str) -> bool:
    return any(low <= ch <= high for low, high in _PUNCTUATION_RANGES)


def is_alpha(ch: str) -> bool:
    # most likely cases first
    if "a" <= ch <= "z" or "A" <= ch <= "Z":
        return True
    if ch <= "\u00bf":
        # rest of basic latin + first half of latin-1 supplement
        return False
    if ch <= "\u024f":
        # latin-1 letters, latin extended A and B, minus two math symbols
        return ch not in ("\u00d7", "\u00f7")
    if ch <= "\u02af":
        # IPA symbols never occur in dictionary headwords
        return False
    if is_whitespace(ch) or is_punctuation(ch):
        return False
    return unicodedata.category(ch)[0] in ("L", "M")


def contains_alphas(word: str) -> bool:
    return any(is_alpha(ch) for ch in word)


def is_numeric_token(word: str) -> bool:
    """Only digits and punctuation, such as 3.14 or 1."""
    return all(is_number(ch) or is_punctuation(ch) for ch in word)


def capitalize_first(word: str) -> str:
    """First letter upper case, rest preserved."""
    return word[:1].upper() + word[1:]


def clean_text(text: str) -> str:
    """
    Normalize raw text for segmentation.
    Whitespace collapses to one space, control characters and soft hyphens
    are dropped, punctuation other than sentence terminators and
    word-internal punctuation becomes a space. Idempotent.
    """
    out = []
    for ch in text:
        if ch == SOFT_HYPHEN:
            continue
        if is_whitespace(ch):
            out.append(" ")
        elif is_control_char(ch):
            continue
        elif is_punctuation(ch):
            keep = ch in SENTENCE_TERMINATORS or ch in WORD_PUNCTUATION
            out.append(ch if keep else " ")
        else:
            out.append(ch)

    return _MULTI_SPACE_RE.sub(" ", "".join(out)).strip()
