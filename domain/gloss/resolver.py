import logging
from typing import Dict, List, Optional, Sequence, Tuple

from common.constants import (
    MAX_COMPOUND_LENGTH,
    MIN_SEPARABLE_SUFFIX,
    NOISE_KEY_LENGTH,
    SEPARABLE_SOURCE_FORMAT,
    VERY_RARE_RANK,
)
from domain.gloss.schemas.schema import AnnotationCandidate, ResolutionSession
from domain.nlp.common.text_utils import capitalize_first
from domain.nlp.lang.lang_profile import LangProfile
from domain.nlp.lexicon.dictionary_store import DictionaryStore

logger = logging.getLogger(__name__)

# Compound pieces, tail first. Each piece holds the candidates of one component.
Pieces = List[List[AnnotationCandidate]]

###########################################################
# Multi-stage search for the meaning of each token.
#
# 1. Direct lookup of the token plus its canonical forms
#    (primary variant rules, last-resort rules only if nothing was found).
# 2. Case variants: lower case, then first letter capitalised.
# 3. Hyphen trimming for fragments like "Haus-" or "-tür".
# 4. Separable verbs: "stehe ... auf" is recombined to "aufstehen".
# 5. Compound decomposition: "Haustür" -> "Tür" + "Haus".
# 6. Placeholder for unresolved words when the caller wants every word.
#
# A token whose best meaning is already known (rank within the request's
# frequency threshold) stops the search and is returned marked suppressed.
###########################################################


class Resolver:
    def __init__(self, dictionary: DictionaryStore, lang_profile: LangProfile):
        self.dictionary = dictionary
        self.lang_profile = lang_profile

    def resolve_sentence(
        self, tokens: Sequence[str], session: ResolutionSession
    ) -> List[AnnotationCandidate]:
        results: List[AnnotationCandidate] = []
        for index, token in enumerate(tokens):
            results.extend(self.resolve_token(token, tokens[:index], session))
        return results

    def resolve_token(
        self,
        token: str,
        preceding: Sequence[str],
        session: ResolutionSession,
    ) -> List[AnnotationCandidate]:
        """
        All candidates for ``token``. ``preceding`` are the tokens before it
        in the same sentence. Never raises; no meaning means an empty list.
        """
        results: List[AnnotationCandidate] = []

        # a particle can belong to a different verb each time it occurs
        if preceding and self.lang_profile.is_separable_prefix(token.lower()):
            results.extend(self._recombine_separable(token, preceding, session))

        if token in session.searched:
            return results

        found, explained_before = self._search(token, session)
        # "Wagens" after "Wagen": already explained, not a compound
        if not found and explained_before:
            return results

        if not found and len(token) <= MAX_COMPOUND_LENGTH:
            found = self._decompose(token, session)
        results.extend(found)

        if not results and session.show_all:
            results.append(self._unresolved(token))
        return results

    # --------------------- 1) Lookup -------------------

    def lookup_word_and_canonicals(
        self, word: str, session: ResolutionSession, track: bool = True
    ) -> List[AnnotationCandidate]:
        found, _ = self._lookup_word_and_canonicals(word, session, track)
        return found

    def _lookup_word_and_canonicals(
        self, word: str, session: ResolutionSession, track: bool
    ) -> Tuple[List[AnnotationCandidate], bool]:
        """
        Candidates of ``word`` and its canonical forms, plus whether one of
        those keys already produced candidates earlier in the request.
        """
        found, explained_before = self._lookup(word, session, track)
        for last_resort in (False, True):
            if last_resort and (found or explained_before):
                break
            for canonical in self.lang_profile.get_canonicals(word, last_resort):
                extras, seen = self._lookup(canonical, session, track)
                explained_before = explained_before or seen
                if extras:
                    logger.debug(
                        "Adding results for %s to results for %s", canonical, word
                    )
                    found.extend(extras)
        return found, explained_before

    def _lookup(
        self, key: str, session: ResolutionSession, track: bool
    ) -> Tuple[List[AnnotationCandidate], bool]:
        """
        Dictionary lookup with frequency attached. With ``track`` the key is
        recorded in the session and not looked up a second time; the flag
        tells whether that earlier lookup found something.
        """
        if track:
            if key in session.searched:
                return [], key in session.explained
            session.searched.add(key)

        candidates = self.dictionary.lookup(key)
        if candidates:
            if track:
                session.explained.add(key)
            frequency = self.lang_profile.get_frequency_rank(key)
            for candidate in candidates:
                candidate.frequency = frequency
        return candidates, False

    @staticmethod
    def _mark_known(
        found: List[AnnotationCandidate], session: ResolutionSession
    ) -> bool:
        if found and session.is_known(min(c.frequency for c in found)):
            for candidate in found:
                candidate.suppressed = True
            return True
        return False

    # --------------------- 2-3) Case variants and hyphens -------------------

    def _search(
        self, token: str, session: ResolutionSession
    ) -> Tuple[List[AnnotationCandidate], bool]:
        found, explained_before = self._lookup_with_case_variants(token, session)
        if found:
            return found, explained_before

        trimmed = token
        if trimmed.startswith("-"):
            trimmed = trimmed[1:]
        if trimmed.endswith("-"):
            trimmed = trimmed[:-1]
        if trimmed and trimmed != token:
            found, seen = self._lookup_with_case_variants(trimmed, session)
            return found, explained_before or seen
        return [], explained_before

    def _lookup_with_case_variants(
        self, word: str, session: ResolutionSession
    ) -> Tuple[List[AnnotationCandidate], bool]:
        found, explained_before = self._lookup_word_and_canonicals(word, session, True)
        if self._mark_known(found, session):
            return found, explained_before

        # may be upper case because it starts a sentence
        lower = word.lower()
        if lower != word:
            extras, seen = self._lookup_word_and_canonicals(lower, session, True)
            found.extend(extras)
            explained_before = explained_before or seen

        if not found:
            # "HAUS" is tried as "Haus" as well
            for capitalized in dict.fromkeys(
                [capitalize_first(word), capitalize_first(lower)]
            ):
                if capitalized in (word, lower):
                    continue
                extras, seen = self._lookup_word_and_canonicals(
                    capitalized, session, True
                )
                found.extend(extras)
                explained_before = explained_before or seen
                if found:
                    break

        self._mark_known(found, session)
        return found, explained_before

    # --------------------- 4) Separable verbs -------------------

    def _recombine_separable(
        self, prefix: str, preceding: Sequence[str], session: ResolutionSession
    ) -> List[AnnotationCandidate]:
        particle = prefix.lower()
        for previous in reversed(preceding):
            suffix = previous.lower()
            if len(suffix) < MIN_SEPARABLE_SUFFIX:
                continue

            found = [
                c
                for c in self.lookup_word_and_canonicals(
                    particle + suffix, session, track=False
                )
                if self.lang_profile.is_infinitive(c.key)
            ]
            if not found:
                continue

            logger.debug("Recombined %s ... %s to %s", previous, prefix, found[0].key)
            for candidate in found:
                candidate.source = SEPARABLE_SOURCE_FORMAT.format(
                    suffix=previous, prefix=prefix, source=candidate.source
                )
            self._mark_known(found, session)
            return found
        return []

    # --------------------- 5) Compounds -------------------

    def _decompose(
        self, token: str, session: ResolutionSession
    ) -> List[AnnotationCandidate]:
        memo: Dict[str, Optional[Pieces]] = {}
        pieces = self._explain(token, token, session, memo)
        if not pieces:
            return []

        logger.debug("Split %s into %s", token, [piece[0].key for piece in pieces])
        return [candidate for piece in pieces for candidate in piece]

    def _explain(
        self,
        word: str,
        token: str,
        session: ResolutionSession,
        memo: Dict[str, Optional[Pieces]],
    ) -> Optional[Pieces]:
        """
        Explain ``word`` as head + tail. The longest resolvable suffix is the
        tail, the rest is explained again. Every call works on a shorter
        string, so the depth is bounded by the token length.
        """
        if word in memo:
            return memo[word]
        memo[word] = None

        for start in range(1, len(word)):
            term = self.lang_profile.compound_search_term(word[start:], token)
            tail = self._lookup_part(term, session)
            if not tail:
                continue
            pieces = [tail] + self._explain_head(word[:start], token, session, memo)
            memo[word] = pieces
            return pieces
        return None

    def _explain_head(
        self,
        head: str,
        token: str,
        session: ResolutionSession,
        memo: Dict[str, Optional[Pieces]],
    ) -> Pieces:
        found = self._lookup_part(head, session)
        if found:
            return [found]

        pieces = self._explain(head, token, session, memo)
        if pieces:
            return pieces

        # linking letters, "Arbeits" -> "Arbeit"
        for end in range(len(head) - 1, 0, -1):
            found = self._lookup_part(head[:end], session)
            if found:
                return [found]
        return []

    def _lookup_part(
        self, term: str, session: ResolutionSession
    ) -> List[AnnotationCandidate]:
        # no case fallback inside compounds
        found = self.lookup_word_and_canonicals(term, session, track=False)
        return [c for c in found if not self._is_noise(c)]

    @staticmethod
    def _is_noise(candidate: AnnotationCandidate) -> bool:
        return (
            len(candidate.key) <= NOISE_KEY_LENGTH
            and candidate.frequency > VERY_RARE_RANK
        )

    # --------------------- 6) Unresolved -------------------

    def _unresolved(self, token: str) -> AnnotationCandidate:
        return AnnotationCandidate(
            key=token,
            source=token,
            targets=[],
            frequency=self.lang_profile.get_frequency_rank(token),
            unresolved=True,
        )
