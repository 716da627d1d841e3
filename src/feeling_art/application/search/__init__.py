"""
Mood Search

Key Components:
- IntensityClassifier: Detects emphatic text (strong flag)
- TermDeriver: Rule-table mapping from mood text to search terms
- ResultAggregator: Cross-provider merge + dedup by id
- SearchOrchestrator: PRIMARY → FALLBACK → WIDEN → DONE

Architecture:
    Mood text
        │
        ▼
    ┌──────────────────┐
    │   TermDeriver    │  ← IntensityClassifier + EMOTION_RULES + VOCABULARY
    └────────┬─────────┘
             │
    ┌────────┴────────┐
    ▼                 ▼
   Met               AIC     ← Concurrent queries
    │                 │
    └────────┬────────┘
             ▼
    ┌──────────────────┐
    │ ResultAggregator │  ← Dedup by id, Met first
    └────────┬─────────┘
             ▼
    ┌──────────────────┐
    │SearchOrchestrator│  ← Fallback / widen decisions
    └────────┬─────────┘
             ▼
    ArtworkItem[]
"""

from .intensity import IntensityClassifier, IntensitySignals
from .orchestrator import ResultBoard, SearchOrchestrator
from .result_aggregator import AggregationStats, ResultAggregator
from .term_deriver import TermDeriver, dedupe_terms
from .vocabulary import BIAS_TERM, EMOTION_RULES, VOCABULARY, EmotionRule, VocabularySet

__all__ = [
    "BIAS_TERM",
    "EMOTION_RULES",
    "VOCABULARY",
    "AggregationStats",
    "EmotionRule",
    "IntensityClassifier",
    "IntensitySignals",
    "ResultAggregator",
    "ResultBoard",
    "SearchOrchestrator",
    "TermDeriver",
    "VocabularySet",
    "dedupe_terms",
]
