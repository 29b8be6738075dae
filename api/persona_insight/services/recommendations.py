from __future__ import annotations

from ..traits import TRAIT_ORDER, Trait, TraitScores


HIGH_THRESHOLD = 7.0
LOW_THRESHOLD = 4.0

RECOMMENDATIONS: dict[Trait, dict[str, str]] = {
    Trait.OPENNESS: {
        "high": "Engage this person with new ideas and creative projects that challenge conventional thinking.",
        "low": "Present information in familiar formats and connect new ideas to established concepts.",
    },
    Trait.CONSCIENTIOUSNESS: {
        "high": "Provide clear timelines and structured plans when collaborating with this person.",
        "low": "Set gentle reminders and break complex tasks into smaller actionable steps.",
    },
    Trait.EXTRAVERSION: {
        "high": "Create opportunities for social interaction and collaborative discussion.",
        "low": "Respect their need for personal space and provide time to process information privately.",
    },
    Trait.AGREEABLENESS: {
        "high": "Acknowledge their supportive nature and approach disagreements with sensitivity.",
        "low": "Be direct and factual in communication, focusing on logical arguments rather than emotional appeals.",
    },
    Trait.NEUROTICISM: {
        "high": "Provide reassurance and clear expectations to reduce uncertainty and anxiety.",
        "low": "Leverage their emotional stability for situations requiring calm under pressure.",
    },
}

CLOSING_RECOMMENDATION = (
    "Adapt communication style to match their personality preferences for more effective interaction."
)


def generate_recommendations(scores: TraitScores) -> list[str]:
    out: list[str] = []
    for trait in TRAIT_ORDER:
        value = scores[trait]
        if value >= HIGH_THRESHOLD:
            out.append(RECOMMENDATIONS[trait]["high"])
        elif value <= LOW_THRESHOLD:
            out.append(RECOMMENDATIONS[trait]["low"])
    out.append(CLOSING_RECOMMENDATION)
    return out
