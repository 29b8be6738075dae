from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer


EMOTION_CATEGORIES: dict[str, tuple[str, ...]] = {
    "joy": ("happy", "joy", "delight", "pleasure", "excited", "thrilled"),
    "sadness": ("sad", "unhappy", "depressed", "miserable", "gloomy", "down"),
    "anger": ("angry", "furious", "enraged", "irritated", "annoyed", "frustrated"),
    "fear": ("afraid", "scared", "frightened", "terrified", "anxious", "worried"),
    "surprise": ("surprised", "amazed", "astonished", "shocked", "stunned"),
    "disgust": ("disgusted", "repulsed", "revolted", "appalled", "horrified"),
}

# Whole word plus simple suffix variants ("worried" -> "worriedly").
_EMOTION_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    category: tuple(re.compile(rf"\b{re.escape(word)}\w*\b", re.IGNORECASE) for word in words)
    for category, words in EMOTION_CATEGORIES.items()
}

_TOKEN_RE = re.compile(r"[a-z0-9']+")


@dataclass(frozen=True)
class SentimentSummary:
    score: float = 0.0
    comparative: float = 0.0
    positive: tuple[str, ...] = ()
    negative: tuple[str, ...] = ()
    emotional_scores: Mapping[str, int] = field(default_factory=lambda: {k: 0 for k in EMOTION_CATEGORIES})


@lru_cache(maxsize=1)
def _lexicon() -> dict[str, float]:
    # VADER ships its word list inside the package; valences run roughly -4..4.
    return dict(SentimentIntensityAnalyzer().lexicon)


def tokenize(text: str) -> list[str]:
    return [t.strip("'") for t in _TOKEN_RE.findall((text or "").lower()) if t.strip("'")]


def emotion_counts(text: str) -> dict[str, int]:
    text = text or ""
    return {
        category: sum(len(p.findall(text)) for p in patterns)
        for category, patterns in _EMOTION_PATTERNS.items()
    }


def comparative(text: str) -> float:
    return analyze_sentiment(text, with_emotions=False).comparative


def analyze_sentiment(text: str, *, with_emotions: bool = True) -> SentimentSummary:
    tokens = tokenize(text)
    lexicon = _lexicon()
    score = 0.0
    positive: list[str] = []
    negative: list[str] = []
    for token in tokens:
        valence = lexicon.get(token)
        if not valence:
            continue
        score += valence
        if valence > 0:
            positive.append(token)
        else:
            negative.append(token)

    return SentimentSummary(
        score=round(score, 6),
        comparative=round(score / len(tokens), 6) if tokens else 0.0,
        positive=tuple(positive),
        negative=tuple(negative),
        emotional_scores=emotion_counts(text) if with_emotions else {k: 0 for k in EMOTION_CATEGORIES},
    )
