"""
Tests for TermDeriver - mood text → search terms.

Covers:
1. Rule matching (core vs strong terms)
2. Vocabulary pass-through
3. Bias term, deduplication and truncation
4. Word fallback when nothing was derived
"""

import pytest

from feeling_art.application.search.term_deriver import MAX_TERMS, TermDeriver, dedupe_terms
from feeling_art.application.search.vocabulary import (
    BIAS_TERM,
    EMOTION_RULES,
    GENTLE_DEFAULTS,
    VOCABULARY,
    EmotionRule,
    VocabularySet,
)


@pytest.fixture
def deriver():
    return TermDeriver()


EMPTY_VOCABULARY = VocabularySet(colors=(), scenes=(), time_weather=())


# =============================================================================
# dedupe_terms
# =============================================================================


class TestDedupeTerms:
    def test_keeps_first_occurrence(self):
        assert dedupe_terms(["sea", "Sky", "SEA", "sky", "rain"]) == ["sea", "Sky", "rain"]

    def test_drops_empty_strings(self):
        assert dedupe_terms(["", "sea", ""]) == ["sea"]


# =============================================================================
# EmotionRule
# =============================================================================


class TestEmotionRule:
    def test_substring_match(self):
        rule = EmotionRule(keys=frozenset({"sad"}), core=("rain",))
        assert rule.matches("i feel saddened") is True
        assert rule.matches("i feel fine") is False

    def test_strong_falls_back_to_core(self):
        rule = EmotionRule(keys=frozenset({"nostalgic"}), core=("memory", "autumn"))
        assert rule.terms_for(strong=True) == ("memory", "autumn")

    def test_strong_terms(self):
        rule = EmotionRule(keys=frozenset({"x"}), core=("a",), strong=("b",))
        assert rule.terms_for(strong=False) == ("a",)
        assert rule.terms_for(strong=True) == ("b",)

    def test_rule_table_terms_are_non_empty(self):
        for rule in EMOTION_RULES:
            assert rule.keys
            assert rule.core


# =============================================================================
# derive
# =============================================================================


class TestDerive:
    def test_calm(self, deriver):
        assert deriver.derive("I feel calm and peaceful") == ["painting", "landscape", "sea", "horizon", "twilight"]

    def test_strong_grief(self, deriver):
        assert deriver.derive("I am SO devastated!!") == ["painting", "lamentation", "pieta", "darkness", "requiem"]

    def test_grief_without_emphasis_uses_core(self, deriver):
        assert deriver.derive("grieving quietly") == ["painting", "mourning", "lament", "shadow", "cemetery"]

    def test_bias_term_first(self, deriver):
        for text in ("happy", "lonely", "angry", "xyzzy"):
            assert deriver.derive(text)[0] == BIAS_TERM

    def test_at_most_max_terms(self, deriver):
        terms = deriver.derive("happy sad calm angry lonely, red sea at night")
        assert len(terms) == MAX_TERMS

    def test_terms_unique_case_insensitively(self, deriver):
        terms = deriver.derive("angry and anxious!! so furious")
        lowered = [t.lower() for t in terms]
        assert len(lowered) == len(set(lowered))

    def test_vocabulary_pass_through(self, deriver):
        terms = deriver.derive("thinking of the forest in the fog")
        assert terms == ["painting", "forest", "fog"]

    def test_vocabulary_after_emotion_terms(self):
        rules = (EmotionRule(keys=frozenset({"calm"}), core=("landscape",)),)
        deriver = TermDeriver(rules=rules, vocabulary=VOCABULARY)
        assert deriver.derive("calm by the river") == ["painting", "landscape", "river"]

    def test_unknown_text_only_bias(self, deriver):
        assert deriver.derive("xyzzy plugh") == ["painting"]

    def test_empty_text(self, deriver):
        assert deriver.derive("") == ["painting"]

    def test_multiple_rules_concatenate_in_table_order(self):
        rules = (
            EmotionRule(keys=frozenset({"b"}), core=("first",)),
            EmotionRule(keys=frozenset({"a"}), core=("second",)),
        )
        deriver = TermDeriver(rules=rules, vocabulary=EMPTY_VOCABULARY)
        assert deriver.derive("a b") == ["painting", "first", "second"]

    def test_deterministic(self, deriver):
        text = "Lonely but hopeful, watching the sunset"
        assert deriver.derive(text) == deriver.derive(text)

    def test_gentle_default_when_no_rule_matched(self):
        deriver = TermDeriver(rules=(), vocabulary=EMPTY_VOCABULARY)
        triggers, defaults = GENTLE_DEFAULTS[0]
        assert deriver.derive(f"rather {triggers[0]}") == ["painting", *defaults]

    def test_no_gentle_default_when_rule_matched(self):
        rules = (EmotionRule(keys=frozenset({"calm"}), core=("harbor",)),)
        deriver = TermDeriver(rules=rules, vocabulary=EMPTY_VOCABULARY)
        assert deriver.derive("calm") == ["painting", "harbor"]


# =============================================================================
# initial_terms / build_query
# =============================================================================


class TestInitialTerms:
    def test_uses_derived_terms(self, deriver):
        assert deriver.initial_terms("I feel calm and peaceful") == deriver.derive("I feel calm and peaceful")

    def test_build_query_joins_terms(self, deriver):
        assert deriver.build_query("I feel calm and peaceful") == "painting landscape sea horizon twilight"

    def test_word_fallback_when_nothing_derived(self, monkeypatch, deriver):
        monkeypatch.setattr(deriver, "derive", lambda text: [])
        assert deriver.initial_terms("  Quiet Morning Walk Home ") == ["quiet", "morning", "walk"]
