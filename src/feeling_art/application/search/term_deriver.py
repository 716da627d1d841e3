"""
TermDeriver - Deterministic mood text → search terms.

Architecture Decision:
    TermDeriver is stateless and rule-driven. It does NOT call any
    external APIs and has no failure mode; the same text always yields
    the same terms for a given rule table.

Algorithm:
    1. Lowercase the text, classify intensity
    2. Collect terms of every matching EmotionRule (strong or core)
    3. Collect vocabulary words found verbatim in the text
    4. If no rule matched, try the gentle defaults (first match wins)
    5. Prepend the "painting" bias term
    6. Deduplicate case-insensitively and keep the first MAX_TERMS

Example:
    >>> deriver = TermDeriver()
    >>> deriver.derive("I feel calm and peaceful")
    ['painting', 'landscape', 'sea', 'horizon', 'twilight']
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .intensity import IntensityClassifier
from .vocabulary import (
    BIAS_TERM,
    EMOTION_RULES,
    GENTLE_DEFAULTS,
    VOCABULARY,
    EmotionRule,
    VocabularySet,
)

logger = logging.getLogger(__name__)

# More terms than this dilutes provider results
MAX_TERMS = 5
FALLBACK_WORD_COUNT = 3


def dedupe_terms(terms: Iterable[str]) -> list[str]:
    """Remove case-insensitive duplicates, keeping first occurrences."""
    seen: set[str] = set()
    unique: list[str] = []
    for term in terms:
        key = term.lower()
        if key and key not in seen:
            seen.add(key)
            unique.append(term)
    return unique


class TermDeriver:
    """
    Turn free-text mood descriptions into a short list of search terms.

    Usage:
        deriver = TermDeriver()
        terms = deriver.derive("I am SO devastated!!")
        query = deriver.build_query("I am SO devastated!!")

    The rule table and vocabulary can be swapped for tests; both default
    to the module-level tables in :mod:`.vocabulary`.
    """

    def __init__(
        self,
        rules: tuple[EmotionRule, ...] = EMOTION_RULES,
        vocabulary: VocabularySet = VOCABULARY,
        classifier: IntensityClassifier | None = None,
    ):
        self._rules = rules
        self._vocabulary = vocabulary
        self._classifier = classifier or IntensityClassifier()

    def derive(self, text: str) -> list[str]:
        """
        Derive between 1 and MAX_TERMS search terms from *text*.

        Args:
            text: Free-text mood description

        Returns:
            Ordered, case-insensitively unique terms, starting with the bias term
        """
        t = (text or "").lower()
        strong = self._classifier.classify(t)

        emotion_terms: list[str] = []
        for rule in self._rules:
            if rule.matches(t):
                emotion_terms.extend(rule.terms_for(strong))

        extra = [word for word in self._vocabulary.words() if word in t]

        if not emotion_terms:
            emotion_terms.extend(self._gentle_default(t))

        terms = dedupe_terms([BIAS_TERM, *emotion_terms, *extra])[:MAX_TERMS]
        logger.debug(f"Derived terms (strong={strong}): {terms}")
        return terms

    @staticmethod
    def _gentle_default(text: str) -> tuple[str, ...]:
        for triggers, defaults in GENTLE_DEFAULTS:
            if any(trigger in text for trigger in triggers):
                return defaults
        return ()

    def initial_terms(self, text: str) -> list[str]:
        """Derived terms, or the first words of the text if none were derived."""
        terms = self.derive(text)
        if terms:
            return terms
        return (text or "").strip().lower().split()[:FALLBACK_WORD_COUNT]

    def build_query(self, text: str) -> str:
        """Space-joined query string for the initial search."""
        return " ".join(self.initial_terms(text))
