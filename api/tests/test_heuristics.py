import pytest

from persona_insight.services.features import PronounCounts, TextFeatures
from persona_insight.services.heuristics import heuristic_traits, keyword_balance
from persona_insight.services.scoring import get_scorer
from persona_insight.services.sentiment import SentimentSummary
from persona_insight.traits import TRAIT_ORDER, Trait


def _features(**overrides) -> TextFeatures:
    base = dict(
        sentiment=SentimentSummary(),
        average_sentence_length=15.0,
        complexity_score=5.0,
    )
    base.update(overrides)
    return TextFeatures(**base)


def test_keyword_balance_counts_positive_minus_negative():
    feats = _features(word_frequencies={"creative": 2, "routine": 1, "unrelated": 4})
    assert keyword_balance(feats, Trait.OPENNESS) == pytest.approx(0.7)


def test_stability_words_lower_neuroticism():
    calm = heuristic_traits(_features(word_frequencies={"calm": 2, "steady": 1}))
    tense = heuristic_traits(_features(word_frequencies={"anxious": 2, "nervous": 1}))
    assert calm[Trait.NEUROTICISM] < 5.0 < tense[Trait.NEUROTICISM]


def test_social_pronouns_raise_extraversion():
    social = heuristic_traits(_features(pronouns=PronounCounts(first_person=4, second_person=4)))
    distant = heuristic_traits(_features(pronouns=PronounCounts(third_person=8)))
    assert social[Trait.EXTRAVERSION] > distant[Trait.EXTRAVERSION]


def test_sentence_length_near_fifteen_raises_conscientiousness():
    ideal = heuristic_traits(_features(average_sentence_length=15.0))
    rambling = heuristic_traits(_features(average_sentence_length=40.0))
    assert ideal[Trait.CONSCIENTIOUSNESS] == pytest.approx(9.0)
    assert rambling[Trait.CONSCIENTIOUSNESS] < ideal[Trait.CONSCIENTIOUSNESS]


def test_extreme_inputs_stay_in_range():
    loud = _features(
        word_frequencies={w: 50 for w in ("anxious", "worried", "stressed", "creative", "plan")},
        exclamation_frequency=1.0,
        question_frequency=1.0,
        complexity_score=10.0,
        sentiment=SentimentSummary(
            score=-40.0,
            comparative=-4.0,
            negative=("awful",) * 10,
            emotional_scores={"joy": 0, "sadness": 9, "anger": 9, "fear": 9, "surprise": 0, "disgust": 9},
        ),
    )
    scores = heuristic_traits(loud)
    for trait in TRAIT_ORDER:
        assert 1.0 <= scores[trait] <= 10.0
        assert scores[trait] == round(scores[trait], 1)
    assert scores[Trait.NEUROTICISM] == 10.0


def test_anxious_text_scores_high_neuroticism():
    scores = get_scorer("lexicon").score("I feel anxious and worried about everything, I can't stop stressing")
    assert scores[Trait.NEUROTICISM] > 6.0
