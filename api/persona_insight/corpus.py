"""
Reference corpus of labeled writing samples.

Ten exemplar texts, one high and one low pole per Big-Five trait, each with
a known trait vector on the 1-10 scale. The table is built once at import and
never mutated; declaration order is significant because similarity ties keep it.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .traits import Trait


@dataclass(frozen=True)
class CorpusEntry:
    text: str
    traits: Mapping[Trait, float]
    category: str
    description: str


def _entry(text: str, o: float, c: float, e: float, a: float, n: float, category: str, description: str) -> CorpusEntry:
    vector = {
        Trait.OPENNESS: o,
        Trait.CONSCIENTIOUSNESS: c,
        Trait.EXTRAVERSION: e,
        Trait.AGREEABLENESS: a,
        Trait.NEUROTICISM: n,
    }
    return CorpusEntry(text=text, traits=MappingProxyType(vector), category=category, description=description)


REFERENCE_CORPUS: tuple[CorpusEntry, ...] = (
    _entry(
        "I love exploring new ideas and concepts. Every day brings exciting opportunities to learn something "
        "different. I'm always curious about how things work and why they are the way they are. Abstract thinking "
        "and philosophical discussions really energize me. I enjoy challenging conventional wisdom and thinking "
        "outside the box.",
        9, 6, 7, 6, 4,
        "high_openness",
        "Creative and intellectually curious individual who values novelty and exploration",
    ),
    _entry(
        "I believe in following a structured approach to everything I do. Planning ahead and being organized helps "
        "me stay on track. I make detailed to-do lists and stick to my schedule. Deadlines are important to me, and "
        "I always deliver on my commitments. I pay attention to details and take pride in doing things thoroughly.",
        5, 9, 4, 6, 3,
        "high_conscientiousness",
        "Methodical and organized individual who values structure and responsibility",
    ),
    _entry(
        "I really enjoy being around people and socializing. Group activities and team projects are my favorite. "
        "I love meeting new people and making connections. I'm energized by social interactions and feel most alive "
        "when I'm with others. I'm comfortable speaking up in groups and sharing my thoughts.",
        7, 5, 9, 7, 4,
        "high_extraversion",
        "Outgoing and sociable individual who thrives in social settings",
    ),
    _entry(
        "I always try to be understanding and considerate of others' feelings. I believe in treating everyone with "
        "kindness and respect. I enjoy helping people and making them feel comfortable. I'm good at seeing things "
        "from different perspectives and finding common ground. Harmony in relationships is important to me.",
        6, 6, 6, 9, 5,
        "high_agreeableness",
        "Empathetic and cooperative individual who values harmony and understanding",
    ),
    _entry(
        "I often worry about things and can be quite sensitive to stress. I tend to overthink situations and "
        "sometimes feel overwhelmed. My emotions can be intense, and I'm very aware of my feelings. I'm careful "
        "about making decisions because I want to avoid potential problems. I appreciate reassurance and support "
        "from others.",
        6, 7, 4, 6, 8,
        "high_neuroticism",
        "Emotionally sensitive individual who experiences feelings deeply",
    ),
    _entry(
        "I prefer familiar routines and traditional approaches. I like things to be practical and straightforward. "
        "I'm not really into abstract theories or unconventional ideas. I value stability and prefer to stick with "
        "what I know works. I'm more comfortable with concrete facts than speculative concepts.",
        3, 7, 5, 6, 4,
        "low_openness",
        "Practical and conventional individual who prefers familiarity and tradition",
    ),
    _entry(
        "I like to keep things flexible and spontaneous. I don't need strict schedules or detailed plans. I'm "
        "comfortable going with the flow and adapting to changes. I prefer a relaxed approach to tasks and "
        "deadlines. I'm not too concerned about perfect organization or meticulous details.",
        7, 3, 6, 6, 4,
        "low_conscientiousness",
        "Spontaneous and flexible individual who prefers a relaxed approach",
    ),
    _entry(
        "I enjoy my own company and prefer quiet environments. I need time alone to recharge and process my "
        "thoughts. I'm comfortable with silence and don't feel the need to always be social. I prefer deep "
        "one-on-one conversations over large group settings. I'm selective about my social interactions.",
        6, 6, 3, 6, 4,
        "low_extraversion",
        "Introspective and reserved individual who values solitude and meaningful connections",
    ),
    _entry(
        "I believe in being direct and honest in my communication. I value logical thinking and objective "
        "analysis. I'm comfortable with healthy debate and constructive criticism. I focus on facts and solutions "
        "rather than emotions. I prefer straightforward interactions over excessive politeness.",
        6, 7, 5, 3, 4,
        "low_agreeableness",
        "Direct and analytical individual who values honesty and logical thinking",
    ),
    _entry(
        "I generally stay calm under pressure and don't get easily stressed. I'm emotionally stable and don't "
        "experience intense mood swings. I take things in stride and maintain my composure in challenging "
        "situations. I'm confident in my ability to handle difficulties. I don't worry excessively about things.",
        6, 6, 5, 6, 2,
        "low_neuroticism",
        "Emotionally stable individual who maintains composure under pressure",
    ),
)


def get_entry(category: str) -> CorpusEntry | None:
    for entry in REFERENCE_CORPUS:
        if entry.category == category:
            return entry
    return None
