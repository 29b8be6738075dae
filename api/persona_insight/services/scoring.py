from __future__ import annotations

from typing import Protocol

from ..config import CORPUS_TOP_K
from ..traits import TraitScores
from .corpus_matcher import weighted_traits
from .features import extract_features
from .heuristics import heuristic_traits


class TraitScorer(Protocol):
    name: str

    def score(self, text: str) -> TraitScores: ...


class CorpusScorer:
    name = "corpus"

    def __init__(self, k: int = CORPUS_TOP_K) -> None:
        self.k = k

    def score(self, text: str) -> TraitScores:
        return weighted_traits(text, self.k)


class LexiconScorer:
    name = "lexicon"

    def score(self, text: str) -> TraitScores:
        return heuristic_traits(extract_features(text))


SCORERS: dict[str, type] = {
    CorpusScorer.name: CorpusScorer,
    LexiconScorer.name: LexiconScorer,
}


def get_scorer(name: str) -> TraitScorer:
    key = (name or "").strip().lower()
    if key not in SCORERS:
        raise ValueError(f"unknown scoring strategy: {name!r} (expected one of {', '.join(sorted(SCORERS))})")
    return SCORERS[key]()
