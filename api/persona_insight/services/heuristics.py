"""
Lexicon-weighted heuristic trait scoring.

Every trait starts at a neutral 5 and is nudged by additive, explainable terms
built from TextFeatures (keyword hits, punctuation habits, sentiment, pronoun
mix, emotion counts, structural complexity). Results are clamped to [1, 10].
"""

from __future__ import annotations

from typing import Iterable, Mapping

from ..traits import NEUTRAL_SCORE, Trait, TraitScores, clamp_score
from .features import TextFeatures


# =============================================================================
# TRAIT LEXICONS - positive words push a trait up, negative words push it down
# =============================================================================

TRAIT_KEYWORDS: dict[Trait, dict[str, tuple[str, ...]]] = {
    Trait.OPENNESS: {
        "positive": (
            "imagine", "creative", "artistic", "curious", "explore", "novel", "innovative",
            "abstract", "philosophical", "theoretical", "unconventional", "diverse",
            "experience", "adventure", "discover", "learn", "intellectual", "complex",
            "variety", "change", "different", "unique", "original", "inventive",
        ),
        "negative": (
            "traditional", "conventional", "routine", "familiar", "practical", "simple",
            "basic", "standard", "usual", "normal", "regular", "ordinary",
        ),
    },
    Trait.CONSCIENTIOUSNESS: {
        "positive": (
            "organized", "plan", "schedule", "goal", "achieve", "complete", "finish",
            "responsible", "reliable", "diligent", "thorough", "careful", "precise",
            "methodical", "systematic", "efficient", "productive", "disciplined",
            "punctual", "deadline", "structure", "order", "detail", "accuracy",
        ),
        "negative": (
            "spontaneous", "impulsive", "casual", "relaxed", "flexible", "informal",
            "unstructured", "disorganized", "chaotic", "messy", "careless", "sloppy",
        ),
    },
    Trait.EXTRAVERSION: {
        "positive": (
            "social", "outgoing", "energetic", "enthusiastic", "talkative", "friendly",
            "people", "group", "team", "party", "gathering", "meet", "connect",
            "interact", "communicate", "share", "express", "active", "dynamic",
            "vibrant", "lively", "excited", "passionate", "engaging",
        ),
        "negative": (
            "quiet", "reserved", "private", "solitary", "alone", "independent",
            "introspective", "reflective", "calm", "peaceful", "serene", "contemplative",
        ),
    },
    Trait.AGREEABLENESS: {
        "positive": (
            "kind", "helpful", "supportive", "caring", "empathetic", "understanding",
            "compassionate", "considerate", "thoughtful", "generous", "cooperative",
            "collaborative", "harmonious", "peaceful", "gentle", "warm", "friendly",
            "trusting", "forgiving", "patient", "tolerant", "accepting",
        ),
        "negative": (
            "direct", "assertive", "competitive", "challenging", "critical", "skeptical",
            "suspicious", "doubtful", "questioning", "analytical", "logical", "rational",
        ),
    },
    # For neuroticism the "positive" list describes stability, so it lowers the score.
    Trait.NEUROTICISM: {
        "positive": (
            "calm", "stable", "relaxed", "confident", "secure", "balanced", "composed",
            "steady", "resilient", "strong", "tough", "robust", "unfazed", "unperturbed",
        ),
        "negative": (
            "anxious", "worried", "stressed", "nervous", "tense", "fearful", "afraid",
            "insecure", "vulnerable", "sensitive", "emotional", "moody", "volatile",
            "unstable", "fragile", "overwhelmed", "distressed", "upset",
        ),
    },
}

TEMPORAL_TERMS = (
    "schedule", "plan", "organize", "time", "task", "goal", "achieve", "complete", "deadline", "timeline",
)
ACTION_VERBS = frozenset({"complete", "finish", "achieve", "accomplish", "organize", "plan"})
DISTRESS_TERMS = (
    "worry", "stress", "afraid", "anxious", "nervous", "fear", "sad", "angry", "upset",
    "overwhelm", "panic", "dread", "horror", "terror", "distress", "agony", "misery",
    "tense", "frustrated", "irritable", "moody", "sensitive", "vulnerable", "insecure",
)

KEYWORD_HIT_WEIGHT = 0.7
KEYWORD_BALANCE_WEIGHT = 0.6
TERM_HIT_WEIGHT = 0.8
IDEAL_SENTENCE_LENGTH = 15


def _hits(frequencies: Mapping[str, int], words: Iterable[str], per_hit: float = KEYWORD_HIT_WEIGHT) -> float:
    return sum(frequencies.get(w, 0) * per_hit for w in words)


def keyword_balance(features: TextFeatures, trait: Trait) -> float:
    """Positive minus negative lexicon hits for one trait."""
    lex = TRAIT_KEYWORDS[trait]
    freqs = features.word_frequencies
    return _hits(freqs, lex["positive"]) - _hits(freqs, lex["negative"])


def score_openness(features: TextFeatures) -> float:
    score = NEUTRAL_SCORE
    score += min(len(features.word_frequencies) / 8, 3)
    score += features.question_frequency * 5
    score += (features.complexity_score - 5) * 1.2
    score += keyword_balance(features, Trait.OPENNESS) * KEYWORD_BALANCE_WEIGHT
    score += min(len(set(features.adjective_use)) / 1.5, 2)
    score += min(len(features.topics) / 2, 1.5)
    return clamp_score(score)


def score_conscientiousness(features: TextFeatures) -> float:
    score = NEUTRAL_SCORE
    deviation = abs(features.average_sentence_length - IDEAL_SENTENCE_LENGTH)
    score += (10 - deviation) * 0.4
    score += keyword_balance(features, Trait.CONSCIENTIOUSNESS) * KEYWORD_BALANCE_WEIGHT
    score += _hits(features.word_frequencies, TEMPORAL_TERMS, TERM_HIT_WEIGHT) * 0.7
    score += sum(1 for v in features.verb_use if v in ACTION_VERBS) * 0.5
    return clamp_score(score)


def score_extraversion(features: TextFeatures) -> float:
    score = NEUTRAL_SCORE
    score += keyword_balance(features, Trait.EXTRAVERSION) * KEYWORD_BALANCE_WEIGHT
    score += features.exclamation_frequency * 6
    score += features.sentiment.comparative * 2.5
    pronouns = features.pronouns
    if pronouns.total > 0:
        social_ratio = (pronouns.first_person + pronouns.second_person) / pronouns.total
        score += (social_ratio - 0.5) * 4
    intensity = sum(features.sentiment.emotional_scores.values())
    score += min(intensity / 4, 2)
    return clamp_score(score)


def score_agreeableness(features: TextFeatures) -> float:
    score = NEUTRAL_SCORE
    score += keyword_balance(features, Trait.AGREEABLENESS) * KEYWORD_BALANCE_WEIGHT
    score += features.sentiment.comparative * 3
    negative_count = len(features.sentiment.negative) or 1
    score += (len(features.sentiment.positive) / negative_count - 1) * 1.2
    score += features.question_frequency * 3
    emotions = features.sentiment.emotional_scores
    warm = emotions.get("joy", 0) + emotions.get("surprise", 0)
    hostile = emotions.get("anger", 0) + emotions.get("fear", 0) + emotions.get("disgust", 0)
    score += ((warm - hostile) / 4) * 0.8
    return clamp_score(score)


def score_neuroticism(features: TextFeatures) -> float:
    score = NEUTRAL_SCORE
    score -= keyword_balance(features, Trait.NEUROTICISM) * KEYWORD_BALANCE_WEIGHT
    score -= features.sentiment.comparative * 3
    score += _hits(features.word_frequencies, DISTRESS_TERMS, TERM_HIT_WEIGHT) * 0.7
    emotions = features.sentiment.emotional_scores
    negative = (
        emotions.get("anger", 0) + emotions.get("fear", 0) + emotions.get("sadness", 0) + emotions.get("disgust", 0)
    )
    score += min(negative / 3, 2)
    score += features.exclamation_frequency * 3
    return clamp_score(score)


_SCORERS = {
    Trait.OPENNESS: score_openness,
    Trait.CONSCIENTIOUSNESS: score_conscientiousness,
    Trait.EXTRAVERSION: score_extraversion,
    Trait.AGREEABLENESS: score_agreeableness,
    Trait.NEUROTICISM: score_neuroticism,
}


def heuristic_traits(features: TextFeatures) -> TraitScores:
    return TraitScores({trait: round(fn(features), 1) for trait, fn in _SCORERS.items()})
