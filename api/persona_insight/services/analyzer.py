from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any

from .. import config
from ..traits import TRAIT_ORDER, TraitScores, describe_trait
from .corpus_matcher import SimilarProfile, similar_profiles
from .evidence import extract_relevant_quotes
from .narrative import generate_summary
from .recommendations import generate_recommendations
from .scoring import TraitScorer, get_scorer


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraitDescriptor:
    name: str
    value: float
    description: str

    def as_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "description": self.description}


@dataclass(frozen=True)
class PersonalityResult:
    summary: str
    traits: tuple[TraitDescriptor, ...]
    evidence_quotes: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    similar_profiles: tuple[SimilarProfile, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "traits": [t.as_dict() for t in self.traits],
            "evidenceQuotes": list(self.evidence_quotes),
            "recommendations": list(self.recommendations),
            "similarProfiles": [p.as_dict() for p in self.similar_profiles],
        }


def format_traits(scores: TraitScores) -> tuple[TraitDescriptor, ...]:
    return tuple(
        TraitDescriptor(name=trait.label, value=scores[trait], description=describe_trait(trait, scores[trait]))
        for trait in TRAIT_ORDER
    )


def analyze(
    text: str | None,
    *,
    strategy: str | TraitScorer | None = None,
    rng: random.Random | None = None,
    latency: float | None = None,
) -> PersonalityResult:
    """Score a block of text and assemble the full personality result.

    ``strategy`` is a scorer name ("corpus", "lexicon") or a scorer instance;
    ``latency`` overrides the simulated processing delay in seconds.
    """
    started = time.monotonic()
    text = text or ""
    scorer = strategy if hasattr(strategy, "score") else get_scorer(strategy or config.SCORING_STRATEGY)

    scores = scorer.score(text)
    result = PersonalityResult(
        summary=generate_summary(scores, rng),
        traits=format_traits(scores),
        evidence_quotes=tuple(extract_relevant_quotes(text, config.EVIDENCE_QUOTE_COUNT)),
        recommendations=tuple(generate_recommendations(scores)),
        similar_profiles=tuple(similar_profiles(text, config.SIMILAR_PROFILE_COUNT)),
    )

    delay = config.SIMULATED_LATENCY_SECONDS if latency is None else latency
    if delay > 0:
        time.sleep(delay)

    logger.info(
        "analysis complete strategy=%s chars=%s elapsed_ms=%s",
        scorer.name,
        len(text),
        int((time.monotonic() - started) * 1000),
    )
    return result
