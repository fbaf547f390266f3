import pytest

from conftest import SAMPLE_CORPORA
from profiler.analysis.sentiment import analyze_sentiment, extract_emotional_keywords, lexicon_polarity

WEIGHTS = {"love": 3, "great": 3, "hate": -3, "awful": -3, "ok": 1}


def word_scorer(text: str) -> float:
    return sum(WEIGHTS.get(word.strip(".,!?"), 0) for word in text.lower().split())


class TestBuckets:
    def test_all_positive(self):
        result = analyze_sentiment(["love great", "love"], scorer=word_scorer)
        assert (result.positive, result.neutral, result.negative) == (100, 0, 0)
        assert result.emotional_tone == "Positive"
        assert result.confidence == 95

    def test_threshold_is_exclusive(self):
        # A score of exactly 2 is neutral
        result = analyze_sentiment(["ok ok", "meh"], scorer=word_scorer)
        assert result.neutral == 100

    def test_independent_rounding_may_not_sum_to_100(self):
        result = analyze_sentiment(["love", "hate", "meh"], scorer=word_scorer)
        assert (result.positive, result.neutral, result.negative) == (33, 33, 33)
        assert result.positive + result.neutral + result.negative == 99

    def test_half_percentages_round_up(self):
        result = analyze_sentiment(["love"] + ["meh"] * 7, scorer=word_scorer)
        assert result.positive == 13
        assert result.neutral == 88
        assert result.positive + result.neutral + result.negative == 101


class TestTone:
    def test_balanced_when_average_within_one(self):
        result = analyze_sentiment(["hate", "ok", "ok", "ok"], scorer=word_scorer)
        assert result.emotional_tone == "Balanced"
        assert result.confidence == 70

    def test_mild_positive_confidence(self):
        result = analyze_sentiment(["ok ok", "ok"], scorer=word_scorer)
        assert result.emotional_tone == "Positive"
        assert result.confidence == 75

    def test_negative_confidence_is_symmetric(self):
        result = analyze_sentiment(["hate", "meh"], scorer=word_scorer)
        assert result.emotional_tone == "Negative"
        assert result.confidence == 75

    def test_confidence_is_capped(self):
        result = analyze_sentiment(["hate awful hate"], scorer=word_scorer)
        assert result.confidence == 95


class TestEmotionalKeywords:
    def test_first_seen_unique_exact_words(self):
        texts = ["I am so excited and happy", "Excited again, happy!", "feeling frustrated today"]
        assert extract_emotional_keywords(texts) == ["excited", "happy", "frustrated"]

    def test_limited_to_ten(self):
        text = ("excited happy proud grateful inspired motivated confident optimistic "
                "enthusiastic joyful thrilled delighted")
        assert len(extract_emotional_keywords([text])) == 10


def test_empty_input_does_not_divide_by_zero():
    result = analyze_sentiment([], scorer=word_scorer)
    assert (result.positive, result.neutral, result.negative) == (0, 0, 0)
    assert result.emotional_tone == "Balanced"


def test_default_scorer_uses_affect_lexicon():
    assert lexicon_polarity("I love this, it is great") > 2
    assert lexicon_polarity("I hate this terrible job") < -2


@pytest.mark.parametrize("texts", SAMPLE_CORPORA)
def test_distribution_stays_within_rounding_tolerance(texts):
    result = analyze_sentiment(texts)
    for value in (result.positive, result.neutral, result.negative):
        assert 0 <= value <= 100
    assert 97 <= result.positive + result.neutral + result.negative <= 103
    assert 0 <= result.confidence <= 95
