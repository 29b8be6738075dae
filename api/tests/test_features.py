import pytest

spacy = pytest.importorskip("spacy")

from persona_insight.services import features as f
from persona_insight.services.analyzer import analyze
from persona_insight.services.sentiment import EMOTION_CATEGORIES, analyze_sentiment, emotion_counts, tokenize


def test_empty_text_gives_neutral_features():
    feats = f.extract_features("")
    assert feats.text_length == 0
    assert feats.word_frequencies == {}
    assert feats.topics == ()
    assert feats.question_frequency == 0.0
    assert feats.exclamation_frequency == 0.0
    assert feats.average_sentence_length == 0.0
    assert feats.complexity_score == 1.0
    assert feats.sentiment.score == 0.0
    assert feats.sentiment.comparative == 0.0
    assert dict(feats.sentiment.emotional_scores) == {k: 0 for k in EMOTION_CATEGORIES}


def test_sentence_split_and_punctuation_frequencies():
    text = "Hello there! How are you? I am fine."
    assert f.split_sentences(text) == ["Hello there!", "How are you?", "I am fine."]
    feats = f.extract_features(text)
    assert feats.question_frequency == pytest.approx(1 / 3, abs=1e-6)
    assert feats.exclamation_frequency == pytest.approx(1 / 3, abs=1e-6)


def test_split_sentences_keeps_unterminated_tail_and_drops_bare_punctuation():
    assert f.split_sentences("First one. second one") == ["First one.", "second one"]
    assert f.split_sentences("?!...") == []


def test_content_words_drop_short_words_and_stopwords():
    words = f.content_words("Planning planning planning matters, and this would happen.")
    assert words == ["planning", "planning", "planning", "matters", "happen"]
    feats = f.extract_features("Planning planning planning matters, and this would happen.")
    assert feats.word_frequencies == {"planning": 3, "matters": 1, "happen": 1}
    assert feats.text_length == 5


def test_word_frequencies_capped_at_top_fifteen():
    text = " ".join(f"word{chr(97 + i)}xyz" for i in range(20)) + "."
    feats = f.extract_features(text)
    assert len(feats.word_frequencies) == f.TOP_WORDS


def test_complexity_score_formula_and_bounds():
    assert f.complexity_score([], 0) == 1.0
    # (2/20*3 + 6/8*2 + 1*3 + 0.5*2) * 1.5
    assert f.complexity_score(["abcdefgh", "abcd"], 1) == pytest.approx(8.7)
    long_run = [f"extraordinary{i}" for i in range(200)]
    assert f.complexity_score(long_run, 1) == 10.0


def test_pronoun_counts():
    feats = f.extract_features("I told you that she and they saw it.")
    assert feats.pronouns.first_person == 1
    assert feats.pronouns.second_person == 1
    assert feats.pronouns.third_person == 3
    assert feats.pronouns.total == 5


def test_topics_are_frequent_nouns():
    feats = f.extract_features(
        "The garden is lovely. The garden has roses. My neighbor tends the garden every morning."
    )
    assert feats.topics[0] == "garden"
    assert len(feats.topics) <= f.TOP_TOPICS
    assert all(len(t) > 3 for t in feats.topics)


def test_syntax_samples_are_capped():
    text = " ".join(["The quick brown fox jumps over the lazy dog and runs away happily."] * 10)
    feats = f.extract_features(text)
    assert len(feats.adjective_use) <= f.SYNTAX_SAMPLE
    assert len(feats.verb_use) <= f.SYNTAX_SAMPLE


def test_as_dict_uses_camel_case_keys():
    out = f.extract_features("I love this.").as_dict()
    assert {"questionFrequency", "wordFrequencies", "averageSentenceLength", "complexityScore"} <= set(out)
    assert set(out["sentiment"]["emotionalScores"]) == set(EMOTION_CATEGORIES)


def test_emotion_counts_match_suffix_variants():
    counts = emotion_counts("I was worried, so worriedly anxious, and happy!")
    assert counts["fear"] == 3
    assert counts["joy"] == 1
    assert counts["anger"] == 0


def test_sentiment_lexicon_scoring():
    assert tokenize("Can't stop!") == ["can't", "stop"]
    summary = analyze_sentiment("I love this wonderful day")
    assert summary.score > 0
    assert "love" in summary.positive
    assert "wonderful" in summary.positive
    assert summary.comparative == pytest.approx(summary.score / 5, abs=1e-6)

    sad = analyze_sentiment("This is awful and I hate it")
    assert sad.score < 0
    assert "hate" in sad.negative


def test_text_past_spacy_length_cap(monkeypatch):
    monkeypatch.setattr(f, "_nlp", lambda: spacy.blank("en"))
    text = "I plan my week carefully. " * 40000
    assert len(text) > 1_000_000

    result = analyze(text, strategy="lexicon", latency=0)
    assert len(result.traits) == 5
    assert all(1.0 <= t.value <= 10.0 for t in result.traits)
