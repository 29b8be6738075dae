import random

import pytest

from persona_insight import config
from persona_insight.services import analyzer
from persona_insight.services.narrative import narrative_parts
from persona_insight.services.sentiment import comparative
from persona_insight.traits import Trait, TraitScores


SAMPLE = (
    "I love meeting new people and going to parties! Planning my week keeps me organized. "
    "Sometimes I worry about deadlines, but I try to stay calm. What should we explore next?"
)


class _FixedScorer:
    name = "fixed"

    def score(self, text):
        return TraitScores({Trait.OPENNESS: 9.5, Trait.NEUROTICISM: 2.0})


@pytest.fixture(autouse=True)
def _no_delay(monkeypatch):
    monkeypatch.setattr(config, "SIMULATED_LATENCY_SECONDS", 0.0)


def test_result_shape_and_trait_order():
    result = analyzer.analyze(SAMPLE, rng=random.Random(0))
    assert [t.name for t in result.traits] == [
        "Openness",
        "Conscientiousness",
        "Extraversion",
        "Agreeableness",
        "Neuroticism",
    ]
    for trait in result.traits:
        assert 1.0 <= trait.value <= 10.0
        assert trait.description
    assert result.summary
    assert len(result.evidence_quotes) <= 3
    assert len(result.similar_profiles) <= 3
    assert result.recommendations


def test_as_dict_uses_wire_keys():
    out = analyzer.analyze(SAMPLE).as_dict()
    assert set(out) == {"summary", "traits", "evidenceQuotes", "recommendations", "similarProfiles"}
    assert set(out["traits"][0]) == {"name", "value", "description"}
    assert set(out["similarProfiles"][0]) == {"category", "description"}


def test_empty_text_still_produces_a_result():
    result = analyzer.analyze("")
    assert len(result.traits) == 5
    assert result.evidence_quotes == ()
    assert result.summary
    assert result.recommendations


def test_same_input_same_scores_and_dominant_traits():
    first = analyzer.analyze(SAMPLE, rng=random.Random(1))
    second = analyzer.analyze(SAMPLE, rng=random.Random(99))
    assert [t.value for t in first.traits] == [t.value for t in second.traits]
    assert first.similar_profiles == second.similar_profiles

    scores = TraitScores.from_mapping({t.name.lower(): t.value for t in first.traits})
    for descriptor in narrative_parts(scores).descriptors:
        assert descriptor in first.summary
        assert descriptor in second.summary


def test_seeded_rng_pins_summary():
    a = analyzer.analyze(SAMPLE, rng=random.Random(5))
    b = analyzer.analyze(SAMPLE, rng=random.Random(5))
    assert a.summary == b.summary


def test_strategy_selection(monkeypatch):
    corpus = analyzer.analyze(SAMPLE, strategy="corpus")
    lexicon = analyzer.analyze(SAMPLE, strategy="lexicon")
    assert [t.value for t in corpus.traits] != [t.value for t in lexicon.traits]

    monkeypatch.setattr(config, "SCORING_STRATEGY", "lexicon")
    default = analyzer.analyze(SAMPLE)
    assert [t.value for t in default.traits] == [t.value for t in lexicon.traits]


def test_scorer_instance_is_used_directly():
    result = analyzer.analyze(SAMPLE, strategy=_FixedScorer(), rng=random.Random(0))
    values = {t.name: t.value for t in result.traits}
    assert values["Openness"] == 9.5
    assert values["Neuroticism"] == 2.0
    assert values["Extraversion"] == 5.0
    assert "demonstrates exceptional creativity and intellectual curiosity" in result.summary


def test_unknown_strategy_raises():
    with pytest.raises(ValueError):
        analyzer.analyze(SAMPLE, strategy="astrology")


def test_latency_is_applied(monkeypatch):
    slept = []
    monkeypatch.setattr(analyzer.time, "sleep", lambda s: slept.append(s))
    analyzer.analyze("hello", latency=0.25)
    monkeypatch.setattr(config, "SIMULATED_LATENCY_SECONDS", 1.5)
    analyzer.analyze("hello")
    assert slept == [0.25, 1.5]


def test_anxious_text_with_lexicon_strategy():
    text = "I feel anxious and worried about everything, I can't stop stressing"
    result = analyzer.analyze(text, strategy="lexicon")
    values = {t.name: t.value for t in result.traits}
    assert values["Neuroticism"] > 6.0
    assert result.evidence_quotes == (text,)
    assert comparative(result.evidence_quotes[0]) < 0
