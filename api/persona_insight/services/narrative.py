"""
Narrative summary generator.

Builds the personality summary paragraph from the five trait scores using
template pools: an opening clause, descriptors for the dominant traits, at
most one behavioral insight from trait-pair rules, and a communication-style
clause. Phrasing is randomized through an injectable random.Random; which
traits and rules are mentioned depends only on the scores.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable

from ..traits import NEUTRAL_SCORE, TRAIT_ORDER, Trait, TraitScores


DOMINANCE_THRESHOLD = 1.5
HIGH_MARK = 6.5
LOW_MARK = 3.5

_default_rng = random.Random()


# =============================================================================
# TEMPLATE LIBRARY
# =============================================================================

OPENINGS = [
    "Based on the analysis of their communication style, this person",
    "The text analysis reveals that this individual",
    "Looking at their writing patterns, this person",
    "From analyzing their communication, this individual",
    "The personality assessment indicates that this person",
]

CONJUNCTIONS = ["and", "while also", "as well as", "along with", "in addition to"]

BALANCED_DESCRIPTIONS = [
    "shows a balanced personality profile with no extreme traits",
    "demonstrates a well-rounded personality with moderate expression of traits",
    "presents a balanced approach to different aspects of personality",
    "shows adaptability across different personality dimensions",
    "exhibits a harmonious blend of personality characteristics",
]

# Ordered strongest band first: intensity > 0.8, > 0.6, > 0.4, otherwise.
TRAIT_DESCRIPTORS: dict[Trait, dict[str, tuple[str, str, str, str]]] = {
    Trait.OPENNESS: {
        "high": (
            "demonstrates exceptional creativity and intellectual curiosity",
            "shows strong appreciation for new ideas and experiences",
            "displays moderate openness to new perspectives",
            "shows some interest in exploring new concepts",
        ),
        "low": (
            "strongly prefers familiar and conventional approaches",
            "tends to favor practical and established methods",
            "shows some preference for traditional approaches",
            "leans towards familiar ways of thinking",
        ),
    },
    Trait.CONSCIENTIOUSNESS: {
        "high": (
            "exhibits exceptional organization and attention to detail",
            "shows strong planning and methodical tendencies",
            "demonstrates reliable and structured behavior",
            "tends to be organized and systematic",
        ),
        "low": (
            "prefers a highly flexible and spontaneous approach",
            "tends to be more casual and adaptable",
            "shows some preference for informal methods",
            "leans towards a relaxed approach",
        ),
    },
    Trait.EXTRAVERSION: {
        "high": (
            "is highly energetic and socially engaging",
            "shows strong enthusiasm for social interaction",
            "demonstrates moderate social confidence",
            "tends to be outgoing and sociable",
        ),
        "low": (
            "prefers quiet reflection and independent work",
            "tends to be more reserved in social settings",
            "shows some preference for solitary activities",
            "leans towards introspective behavior",
        ),
    },
    Trait.AGREEABLENESS: {
        "high": (
            "demonstrates exceptional empathy and cooperation",
            "shows strong consideration for others' perspectives",
            "tends to be supportive and understanding",
            "shows a cooperative nature",
        ),
        "low": (
            "prefers direct and analytical communication",
            "tends to be more objective and straightforward",
            "shows some preference for factual discussion",
            "leans towards direct communication",
        ),
    },
    Trait.NEUROTICISM: {
        "high": (
            "shows high emotional sensitivity and reactivity",
            "tends to experience emotions more intensely",
            "demonstrates some emotional expressiveness",
            "shows emotional awareness",
        ),
        "low": (
            "exhibits exceptional emotional stability",
            "shows strong resilience to stress",
            "tends to maintain emotional balance",
            "demonstrates emotional composure",
        ),
    },
}

COMMUNICATION_INTROS = [
    "In terms of communication preferences, they",
    "When it comes to communication style, they",
    "Their communication approach suggests they",
    "In their interactions, they",
    "Their preferred communication style indicates they",
]

# Checked in this order, which is also the order eligible clauses are listed in.
COMMUNICATION_STYLES: list[tuple[Trait, str, str]] = [
    (Trait.EXTRAVERSION, "prefer interactive and engaging discussions",
     "appreciate time to process information and respond thoughtfully"),
    (Trait.OPENNESS, "enjoy exploring abstract concepts and possibilities",
     "respond well to concrete examples and practical applications"),
    (Trait.CONSCIENTIOUSNESS, "value clear structure and specific details",
     "prefer flexible approaches and high-level overviews"),
    (Trait.AGREEABLENESS, "appreciate a supportive and collaborative tone",
     "prefer direct and objective communication"),
    (Trait.NEUROTICISM, "may need reassurance and clear expectations",
     "handle pressure well and maintain composure in challenging situations"),
]

GENERIC_COMMUNICATION_STYLE = "adapt well to various communication styles"


def _high(v: float) -> bool:
    return v >= HIGH_MARK


def _low(v: float) -> bool:
    return v <= LOW_MARK


# Each pair lists its cases in priority order; the first matching case fires.
InsightCase = tuple[Callable[[float], bool], Callable[[float], bool], str]

BEHAVIORAL_INSIGHTS: list[tuple[Trait, Trait, list[InsightCase]]] = [
    (Trait.OPENNESS, Trait.EXTRAVERSION, [
        (_high, _high, "They likely thrive in dynamic environments where they can explore new ideas while engaging with others"),
        (_high, _low, "They may prefer to explore new concepts independently before sharing their insights"),
        (_low, _high, "They excel at social interaction while preferring familiar topics and approaches"),
    ]),
    (Trait.CONSCIENTIOUSNESS, Trait.NEUROTICISM, [
        (_high, _high, "Their attention to detail and planning may be driven by a desire to maintain control and reduce uncertainty"),
        (_high, _low, "They approach tasks with calm confidence and systematic precision"),
        (_low, _high, "They may experience stress when faced with unstructured situations"),
    ]),
    (Trait.AGREEABLENESS, Trait.EXTRAVERSION, [
        (_high, _high, "They excel at building and maintaining harmonious relationships in group settings"),
        (_high, _low, "They express their caring nature through thoughtful actions rather than overt social interaction"),
        (_low, _high, "They engage actively in social settings while maintaining analytical distance"),
    ]),
    (Trait.OPENNESS, Trait.CONSCIENTIOUSNESS, [
        (_high, _low, "They may prefer creative freedom over structured approaches to tasks"),
        (_low, _high, "They excel in environments with clear procedures and established methods"),
        (_high, _high, "They combine creativity with systematic implementation of ideas"),
    ]),
    (Trait.NEUROTICISM, Trait.AGREEABLENESS, [
        (_high, _high, "Their emotional sensitivity often translates into deep empathy for others"),
        (_low, _high, "They maintain emotional stability while being highly considerate of others"),
        (_high, _low, "They may experience intense emotions while maintaining analytical objectivity"),
    ]),
]


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

@dataclass(frozen=True)
class NarrativeParts:
    dominant_traits: tuple[Trait, ...]
    descriptors: tuple[str, ...]
    insights: tuple[str, ...]
    communication_styles: tuple[str, ...]


def dominant_traits(scores: TraitScores) -> list[Trait]:
    """Traits at least 1.5 away from neutral, strongest first."""
    picked = [t for t in TRAIT_ORDER if abs(scores[t] - NEUTRAL_SCORE) >= DOMINANCE_THRESHOLD]
    return sorted(picked, key=lambda t: abs(scores[t] - NEUTRAL_SCORE), reverse=True)


def trait_descriptor(trait: Trait, score: float) -> str:
    intensity = abs(score - NEUTRAL_SCORE) / 5
    direction = "high" if score > NEUTRAL_SCORE else "low"
    if intensity > 0.8:
        band = 0
    elif intensity > 0.6:
        band = 1
    elif intensity > 0.4:
        band = 2
    else:
        band = 3
    return TRAIT_DESCRIPTORS[trait][direction][band]


def behavioral_insights(scores: TraitScores) -> list[str]:
    out: list[str] = []
    for first, second, cases in BEHAVIORAL_INSIGHTS:
        for first_ok, second_ok, text in cases:
            if first_ok(scores[first]) and second_ok(scores[second]):
                out.append(text)
                break
    return out


def communication_styles(scores: TraitScores) -> list[str]:
    out: list[str] = []
    for trait, high_text, low_text in COMMUNICATION_STYLES:
        if _high(scores[trait]):
            out.append(high_text)
        elif _low(scores[trait]):
            out.append(low_text)
    return out


def join_descriptors(descriptors: list[str], rng: random.Random) -> str:
    if not descriptors:
        return ""
    if len(descriptors) == 1:
        return descriptors[0]
    conjunction = rng.choice(CONJUNCTIONS)
    if len(descriptors) == 2:
        return f"{descriptors[0]} {conjunction} {descriptors[1]}"
    return f"{', '.join(descriptors[:-1])}, {conjunction} {descriptors[-1]}"


def narrative_parts(scores: TraitScores) -> NarrativeParts:
    dominant = dominant_traits(scores)
    return NarrativeParts(
        dominant_traits=tuple(dominant),
        descriptors=tuple(trait_descriptor(t, scores[t]) for t in dominant),
        insights=tuple(behavioral_insights(scores)),
        communication_styles=tuple(communication_styles(scores)),
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def generate_summary(scores: TraitScores, rng: random.Random | None = None) -> str:
    rng = rng or _default_rng
    parts = narrative_parts(scores)

    summary = rng.choice(OPENINGS) + " "
    if parts.descriptors:
        summary += join_descriptors(list(parts.descriptors), rng)
    else:
        summary += rng.choice(BALANCED_DESCRIPTIONS)
    summary += ". "

    if parts.insights:
        summary += rng.choice(parts.insights) + ". "

    summary += rng.choice(COMMUNICATION_INTROS) + " "
    if parts.communication_styles:
        summary += rng.choice(parts.communication_styles)
    else:
        summary += GENERIC_COMMUNICATION_STYLE
    return summary + "."
