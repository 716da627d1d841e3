"""
Mood Vocabulary - static rule tables for term derivation.

EMOTION_RULES is scanned top to bottom; every rule whose key occurs in the
text contributes its terms, in table order. Keys are plain substrings, so
"sad" also matches "saddened" and "mad" also matches "made".

VOCABULARY holds words that are searched for verbatim in the text and
passed through as search terms when present.
"""

from __future__ import annotations

from dataclasses import dataclass

# Prepended to every derived term list to steer providers toward painted works
BIAS_TERM = "painting"


@dataclass(frozen=True)
class EmotionRule:
    """
    One emotion family.

    Attributes:
        keys: Substrings that trigger the rule (lowercase)
        core: Terms emitted on a normal match
        strong: Terms emitted instead of ``core`` for intense text;
                an empty tuple means ``core`` is used regardless
    """

    keys: frozenset[str]
    core: tuple[str, ...]
    strong: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        """Check whether any key occurs in already-lowercased *text*."""
        return any(key in text for key in self.keys)

    def terms_for(self, strong: bool) -> tuple[str, ...]:
        if strong and self.strong:
            return self.strong
        return self.core


EMOTION_RULES: tuple[EmotionRule, ...] = (
    EmotionRule(
        keys=frozenset({"happy", "joy", "joyful", "grateful", "optimistic", "cheerful", "content", "ecstatic"}),
        core=("sunlight", "festival", "garden", "yellow", "impressionism"),
        strong=("celebration", "dance", "carnival", "bright", "festival"),
    ),
    EmotionRule(
        keys=frozenset({"sad", "down", "melancholy", "depressed", "sorrow", "blue"}),
        core=("melancholy", "nocturne", "rain", "twilight", "blue"),
        strong=("mourning", "winter", "night", "shadow", "solitude"),
    ),
    EmotionRule(
        keys=frozenset({"grief", "grieving", "devastated", "heartbroken", "bereaved", "loss"}),
        core=("mourning", "lament", "shadow", "cemetery"),
        strong=("lamentation", "pieta", "darkness", "requiem"),
    ),
    EmotionRule(
        keys=frozenset({"calm", "peaceful", "serene", "relaxed", "tranquil"}),
        core=("landscape", "sea", "horizon", "twilight", "pastoral"),
        strong=("still water", "dusk", "harbor", "moonlight"),
    ),
    EmotionRule(
        keys=frozenset(
            {"anxious", "stressed", "uneasy", "nervous", "tense", "fearful", "worried", "terrified", "panic", "overwhelmed"}
        ),
        core=("shadow", "night", "storm", "abstract", "gloom"),
        strong=("tempest", "thunderstorm", "drama", "red", "expressionism"),
    ),
    EmotionRule(
        keys=frozenset({"angry", "mad", "furious", "rage", "irritated"}),
        core=("storm", "battle", "red", "drama"),
        strong=("war", "fire", "tempest", "expressionism"),
    ),
    EmotionRule(
        keys=frozenset({"lonely", "alone", "isolated", "abandoned"}),
        core=("solitude", "lone figure", "empty room", "night"),
        strong=("isolation", "desolate", "winter", "wilderness"),
    ),
    EmotionRule(
        keys=frozenset({"nostalgic", "nostalgia", "memories", "remember", "wistful"}),
        core=("memory", "interior", "portrait", "autumn", "old town"),
    ),
    EmotionRule(
        keys=frozenset({"hopeful", "hope", "inspired", "motivated", "excited"}),
        core=("sunrise", "dawn", "spring", "light", "blossom"),
        strong=("radiance", "glory", "sunburst", "ascension"),
    ),
    EmotionRule(
        keys=frozenset({"love", "romantic", "affection", "tender", "adore"}),
        core=("lovers", "embrace", "roses", "romance", "portrait"),
        strong=("passion", "kiss", "venus", "red"),
    ),
    EmotionRule(
        keys=frozenset({"curious", "wonder", "amazed", "awe", "mysterious"}),
        core=("mystery", "cosmos", "sublime", "mountains"),
        strong=("sublime", "apocalypse", "vision", "infinity"),
    ),
)


@dataclass(frozen=True)
class VocabularySet:
    """Color, scene and time/weather words detected verbatim in the text."""

    colors: tuple[str, ...]
    scenes: tuple[str, ...]
    time_weather: tuple[str, ...]

    def words(self) -> tuple[str, ...]:
        """All words in detection order: colors, scenes, then time/weather."""
        return self.colors + self.scenes + self.time_weather


VOCABULARY = VocabularySet(
    colors=(
        "red", "blue", "yellow", "green", "gold", "purple", "orange",
        "pink", "black", "white", "silver", "gray", "crimson", "violet",
    ),
    scenes=(
        "sea", "ocean", "forest", "mountain", "garden", "city", "river",
        "field", "beach", "flowers", "harbor", "desert", "village", "lake",
        "meadow", "still life", "interior",
    ),
    time_weather=(
        "night", "morning", "sunset", "sunrise", "dawn", "dusk", "winter",
        "summer", "autumn", "spring", "rain", "snow", "storm", "fog",
        "moonlight", "cloud",
    ),
)

# Gentle defaults used only when no emotion rule matched, checked in order
GENTLE_DEFAULTS: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("calm", "peaceful", "serene"), ("landscape", "twilight", "sea")),
    (("sad", "blue", "down"), ("nocturne", "rain", "shadow")),
    (("happy", "joy", "cheerful"), ("sunlight", "garden", "yellow")),
)
