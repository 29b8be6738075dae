from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping


MIN_SCORE = 1.0
MAX_SCORE = 10.0
NEUTRAL_SCORE = 5.0


class Trait(str, Enum):
    OPENNESS = "openness"
    CONSCIENTIOUSNESS = "conscientiousness"
    EXTRAVERSION = "extraversion"
    AGREEABLENESS = "agreeableness"
    NEUROTICISM = "neuroticism"

    @property
    def label(self) -> str:
        return self.value.title()


TRAIT_ORDER: tuple[Trait, ...] = tuple(Trait)


def clamp_score(value: Any) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        return NEUTRAL_SCORE
    if math.isnan(v):
        return NEUTRAL_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, v))


@dataclass(frozen=True)
class TraitScores:
    """Five Big-Five scores, each clamped into [1, 10] on construction."""

    values: Mapping[Trait, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        clean = {t: clamp_score(self.values.get(t, NEUTRAL_SCORE)) for t in TRAIT_ORDER}
        object.__setattr__(self, "values", clean)

    @classmethod
    def from_mapping(cls, raw: Mapping[Any, Any]) -> "TraitScores":
        values: dict[Trait, float] = {}
        for key, value in (raw or {}).items():
            try:
                values[Trait(key)] = value
            except ValueError:
                continue
        return cls(values)

    def __getitem__(self, trait: Trait) -> float:
        return self.values[trait]

    def __iter__(self) -> Iterator[tuple[Trait, float]]:
        return iter((t, self.values[t]) for t in TRAIT_ORDER)

    def as_dict(self) -> dict[str, float]:
        return {t.value: self.values[t] for t in TRAIT_ORDER}


# =============================================================================
# TIER DESCRIPTIONS - very low ... very high, five per trait
# =============================================================================

TRAIT_DESCRIPTIONS: dict[Trait, tuple[str, ...]] = {
    Trait.OPENNESS: (
        "Shows very conventional thinking and preferences for the familiar.",
        "Tends to be practical with narrow interests and traditional approaches.",
        "Balances tradition and novelty, with moderate curiosity about new experiences.",
        "Displays curiosity and appreciation for diverse ideas and experiences.",
        "Highly creative and intellectually curious with love for novelty and exploration.",
    ),
    Trait.CONSCIENTIOUSNESS: (
        "Very spontaneous with a casual approach to goals and obligations.",
        "Somewhat disorganized and may procrastinate on important tasks.",
        "Moderately organized with a balanced approach to work and leisure.",
        "Reliable and organized with clear goals and structured approach to tasks.",
        "Extremely methodical, disciplined and goal-oriented with attention to details.",
    ),
    Trait.EXTRAVERSION: (
        "Strongly prefers solitude and finds social interaction draining.",
        "Tends to be reserved and values time alone over social gatherings.",
        "Balances social time and solitude with moderate engagement in groups.",
        "Socially confident and energetic, enjoying interaction and group activities.",
        "Highly outgoing and enthusiastic with a preference for being around others.",
    ),
    Trait.AGREEABLENESS: (
        "Very direct and challenging, prioritizing honesty over harmony.",
        "Somewhat skeptical of others' motives with a competitive approach.",
        "Balanced between cooperation and self-interest in relationships.",
        "Generally warm, trusting and cooperative in interpersonal relations.",
        "Extremely empathetic and cooperative, prioritizing others' needs.",
    ),
    Trait.NEUROTICISM: (
        "Exceptionally calm and emotionally stable even under stress.",
        "Generally relaxed with resilience to most everyday stressors.",
        "Moderate emotional reactions with typical ups and downs.",
        "Tends to experience stress and worry more readily than average.",
        "Highly sensitive to stress with frequent experience of negative emotions.",
    ),
}


def description_tier(score: float) -> int:
    # 10 floors to 5, which is past the last tier.
    return max(0, min(int(math.floor(clamp_score(score) / 2)), 4))


def describe_trait(trait: Trait, score: float) -> str:
    return TRAIT_DESCRIPTIONS[trait][description_tier(score)]
