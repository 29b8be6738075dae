from __future__ import annotations

import logging
import math
import re
from collections import Counter
from dataclasses import dataclass
from typing import Mapping, Sequence

from ..config import CORPUS_TOP_K, SIMILAR_PROFILE_COUNT
from ..corpus import REFERENCE_CORPUS, CorpusEntry
from ..traits import TRAIT_ORDER, Trait, TraitScores


logger = logging.getLogger(__name__)

_SPLIT_RE = re.compile(r"\W+")


@dataclass(frozen=True)
class SimilarProfile:
    category: str
    description: str

    def as_dict(self) -> dict[str, str]:
        return {"category": self.category, "description": self.description}


@dataclass(frozen=True)
class CorpusMatch:
    entry: CorpusEntry
    similarity: float


def vectorize(text: str) -> Counter[str]:
    return Counter(w for w in _SPLIT_RE.split((text or "").lower()) if w)


def _sum_of_squares(vec: Mapping[str, int]) -> int:
    return sum(v * v for v in vec.values())


def cosine_similarity(vec_a: Mapping[str, int], vec_b: Mapping[str, int]) -> float:
    sq_a = _sum_of_squares(vec_a)
    sq_b = _sum_of_squares(vec_b)
    if sq_a == 0 or sq_b == 0:
        return 0.0
    # Words outside the overlap contribute zero to the dot product.
    small, large = (vec_a, vec_b) if len(vec_a) <= len(vec_b) else (vec_b, vec_a)
    dot = sum(v * large.get(k, 0) for k, v in small.items())
    # Integer sums keep identical vectors at exactly 1.0.
    return max(0.0, min(1.0, dot / math.sqrt(sq_a * sq_b)))


def similarity(text_a: str, text_b: str) -> float:
    return cosine_similarity(vectorize(text_a), vectorize(text_b))


_CORPUS_VECTORS: tuple[Counter[str], ...] = tuple(vectorize(e.text) for e in REFERENCE_CORPUS)


def score_corpus(text: str) -> list[CorpusMatch]:
    vec = vectorize(text)
    return [
        CorpusMatch(entry=entry, similarity=cosine_similarity(vec, entry_vec))
        for entry, entry_vec in zip(REFERENCE_CORPUS, _CORPUS_VECTORS)
    ]


def top_k(text: str, k: int) -> list[CorpusMatch]:
    # sorted() is stable: equal similarities keep corpus declaration order.
    ranked = sorted(score_corpus(text), key=lambda m: m.similarity, reverse=True)
    return ranked[: max(0, k)]


def aggregation_weights(similarities: Sequence[float]) -> list[float]:
    if not similarities:
        return []
    total = sum(similarities)
    if total <= 0:
        return [1.0 / len(similarities)] * len(similarities)
    return [s / total for s in similarities]


def weighted_traits(text: str, k: int = CORPUS_TOP_K) -> TraitScores:
    matches = top_k(text, k)
    weights = aggregation_weights([m.similarity for m in matches])
    if sum(m.similarity for m in matches) <= 0:
        logger.debug("no corpus vocabulary overlap, using unweighted mean of %s entries", len(matches))

    blended: dict[Trait, float] = {}
    for trait in TRAIT_ORDER:
        value = sum(w * m.entry.traits[trait] for w, m in zip(weights, matches))
        blended[trait] = round(value, 1)
    return TraitScores(blended)


def similar_profiles(text: str, k: int = SIMILAR_PROFILE_COUNT) -> list[SimilarProfile]:
    return [SimilarProfile(category=m.entry.category, description=m.entry.description) for m in top_k(text, k)]
