"""
Feature extraction for personality scoring.

Turns one block of raw text into a TextFeatures bundle: lexicon sentiment with
emotion categories, content-word frequencies, noun topics, sentence structure,
pronoun usage, adjective/verb samples and a bounded complexity score.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Mapping

import spacy

from ..config import SPACY_MODEL
from .sentiment import SentimentSummary, analyze_sentiment


logger = logging.getLogger(__name__)


STOPWORDS = frozenset(
    {
        "this", "that", "with", "from", "have", "will", "would", "could", "should",
        "the", "and", "but", "for", "not", "are", "was", "were", "been", "being",
        "has", "had", "does", "did", "doing", "might", "must", "shall", "can",
        "may", "need", "ought", "dare",
    }
)

FIRST_PERSON = frozenset({"i", "me", "my", "mine", "myself", "we", "us", "our", "ours", "ourselves"})
SECOND_PERSON = frozenset({"you", "your", "yours", "yourself", "yourselves"})
THIRD_PERSON = frozenset(
    {
        "he", "him", "his", "himself", "she", "her", "hers", "herself",
        "they", "them", "their", "theirs", "themselves", "it", "its", "itself",
    }
)

TOP_WORDS = 15
TOP_TOPICS = 5
SYNTAX_SAMPLE = 15

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]*|[.!?]+")
_PUNCT_RE = re.compile(r"[^\w\s]")
_WORD_RE = re.compile(r"\b\w+\b")


@dataclass(frozen=True)
class PronounCounts:
    first_person: int = 0
    second_person: int = 0
    third_person: int = 0

    @property
    def total(self) -> int:
        return self.first_person + self.second_person + self.third_person


@dataclass(frozen=True)
class TextFeatures:
    sentiment: SentimentSummary = field(default_factory=SentimentSummary)
    topics: tuple[str, ...] = ()
    question_frequency: float = 0.0
    exclamation_frequency: float = 0.0
    word_frequencies: Mapping[str, int] = field(default_factory=dict)
    pronouns: PronounCounts = field(default_factory=PronounCounts)
    adjective_use: tuple[str, ...] = ()
    verb_use: tuple[str, ...] = ()
    text_length: int = 0
    average_sentence_length: float = 0.0
    complexity_score: float = 1.0

    def as_dict(self) -> dict[str, Any]:
        return {
            "sentiment": {
                "score": self.sentiment.score,
                "comparative": self.sentiment.comparative,
                "positive": list(self.sentiment.positive),
                "negative": list(self.sentiment.negative),
                "emotionalScores": dict(self.sentiment.emotional_scores),
            },
            "topics": list(self.topics),
            "questionFrequency": self.question_frequency,
            "exclamationFrequency": self.exclamation_frequency,
            "wordFrequencies": dict(self.word_frequencies),
            "pronouns": {
                "firstPerson": self.pronouns.first_person,
                "secondPerson": self.pronouns.second_person,
                "thirdPerson": self.pronouns.third_person,
            },
            "adjectiveUse": list(self.adjective_use),
            "verbUse": list(self.verb_use),
            "textLength": self.text_length,
            "averageSentenceLength": self.average_sentence_length,
            "complexityScore": self.complexity_score,
        }


@lru_cache(maxsize=1)
def _nlp():
    logger.info("Loading spaCy pipeline %s", SPACY_MODEL)
    return spacy.load(SPACY_MODEL, exclude=["parser", "ner", "lemmatizer"])


def split_sentences(text: str) -> list[str]:
    out: list[str] = []
    for match in _SENTENCE_RE.finditer(text or ""):
        sentence = match.group(0).strip()
        if sentence and re.search(r"\w", sentence):
            out.append(sentence)
    return out


def content_words(text: str) -> list[str]:
    stripped = _PUNCT_RE.sub("", (text or "").lower())
    return [w for w in stripped.split() if len(w) > 3 and w not in STOPWORDS]


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def complexity_score(words: list[str], sentence_count: int) -> float:
    total = len(words)
    avg_sentence_len = _ratio(total, sentence_count)
    avg_word_len = _ratio(sum(len(w) for w in words), total)
    unique_ratio = _ratio(len(set(words)), total)
    long_ratio = _ratio(sum(1 for w in words if len(w) > 6), total)
    raw = (
        (avg_sentence_len / 20) * 3
        + (avg_word_len / 8) * 2
        + unique_ratio * 3
        + long_ratio * 2
    ) * 1.5
    return round(min(10.0, max(1.0, raw)), 6)


def _pronoun_counts(text: str) -> PronounCounts:
    first = second = third = 0
    for token in _WORD_RE.findall((text or "").lower()):
        if token in FIRST_PERSON:
            first += 1
        elif token in SECOND_PERSON:
            second += 1
        elif token in THIRD_PERSON:
            third += 1
    return PronounCounts(first_person=first, second_person=second, third_person=third)


def _syntax(text: str) -> tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]]:
    if not (text or "").strip():
        return (), (), ()
    nlp = _nlp()
    # spaCy refuses texts longer than max_length (1,000,000 chars by default).
    if len(text) >= nlp.max_length:
        nlp.max_length = len(text) + 1
    doc = nlp(text)
    nouns: Counter[str] = Counter()
    adjectives: list[str] = []
    verbs: list[str] = []
    for token in doc:
        word = token.text.lower()
        if token.pos_ in {"NOUN", "PROPN"} and len(word) > 3:
            nouns[word] += 1
        elif token.pos_ == "ADJ" and len(adjectives) < SYNTAX_SAMPLE:
            adjectives.append(word)
        elif token.pos_ == "VERB" and len(verbs) < SYNTAX_SAMPLE:
            verbs.append(word)
    # most_common is a stable sort, so ties stay in first-seen order.
    topics = tuple(word for word, _ in nouns.most_common(TOP_TOPICS))
    return topics, tuple(adjectives), tuple(verbs)


def extract_features(text: str) -> TextFeatures:
    text = text or ""
    sentences = split_sentences(text)
    sentence_count = len(sentences)
    questions = sum(1 for s in sentences if "?" in s)
    exclamations = sum(1 for s in sentences if "!" in s)

    words = content_words(text)
    top_words = dict(Counter(words).most_common(TOP_WORDS))
    topics, adjectives, verbs = _syntax(text)

    features = TextFeatures(
        sentiment=analyze_sentiment(text),
        topics=topics,
        question_frequency=round(_ratio(questions, sentence_count), 6),
        exclamation_frequency=round(_ratio(exclamations, sentence_count), 6),
        word_frequencies=top_words,
        pronouns=_pronoun_counts(text),
        adjective_use=adjectives,
        verb_use=verbs,
        text_length=len(words),
        average_sentence_length=round(_ratio(len(words), sentence_count), 6),
        complexity_score=complexity_score(words, sentence_count),
    )
    logger.debug(
        "features: sentences=%s words=%s topics=%s complexity=%s",
        sentence_count,
        len(words),
        len(topics),
        features.complexity_score,
    )
    return features
