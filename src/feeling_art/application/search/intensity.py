"""
IntensityClassifier - decide whether mood text is emphatic.

Three independent signals are checked on the lowercased text:
1. Exclamation: one or more "!"
2. Intensifier: "very", "really", "so", ... directly followed by a word
3. Crisis word: "overwhelmed", "devastated", "panic", ...

The text is "strong" when at least two signals hold.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

INTENSIFIERS = ("very", "really", "so", "extremely", "super", "incredibly")
CRISIS_WORDS = ("overwhelmed", "ecstatic", "devastated", "furious", "terrified", "panic")

STRONG_SIGNAL_THRESHOLD = 2


@dataclass(frozen=True)
class IntensitySignals:
    """Individual signals found in a text."""

    exclamation: bool
    intensifier: bool
    crisis_word: bool

    @property
    def count(self) -> int:
        return sum((self.exclamation, self.intensifier, self.crisis_word))

    @property
    def strong(self) -> bool:
        return self.count >= STRONG_SIGNAL_THRESHOLD


class IntensityClassifier:
    """
    Score free text for emotional emphasis.

    Usage:
        classifier = IntensityClassifier()
        classifier.classify("I am SO devastated!!")  # True
        classifier.classify("a bit tired")  # False
    """

    INTENSIFIER_PATTERN = re.compile(r"\b(?:" + "|".join(INTENSIFIERS) + r")\s+\w")

    def signals(self, text: str) -> IntensitySignals:
        t = (text or "").lower()
        return IntensitySignals(
            exclamation="!" in t,
            intensifier=bool(self.INTENSIFIER_PATTERN.search(t)),
            crisis_word=any(word in t for word in CRISIS_WORDS),
        )

    def classify(self, text: str) -> bool:
        """Return True when at least two emphasis signals are present."""
        return self.signals(text).strong
