import pytest

from conftest import SAMPLE_CORPORA
from profiler.analysis.communication import (
    analyze_communication_patterns,
    classify_writing_style,
    count_syllables,
    engagement_score,
    formality_score,
    readability_score,
)


@pytest.mark.parametrize("word, expected", [
    ("the", 1),
    ("cake", 1),
    ("free", 1),
    ("rhythm", 1),
    ("beautiful", 3),
    ("readability", 5),
])
def test_count_syllables(word, expected):
    assert count_syllables(word) == expected


class TestWritingStyle:
    @pytest.mark.parametrize("formality, engagement, questions, fragments, expected", [
        (30, 80, 10, 1, "Casual"),
        (80, 0, 0, 10, "Formal"),
        (50, 61, 0, 10, "Engaging"),
        (50, 0, 4, 10, "Inquisitive"),
        (50, 0, 3, 10, "Professional"),
    ])
    def test_first_matching_rule_wins(self, formality, engagement, questions, fragments, expected):
        assert classify_writing_style(formality, engagement, questions, fragments) == expected


class TestScores:
    def test_formal_connectives(self):
        assert formality_score("However, we should proceed. Therefore it works.") == 100

    def test_informal_slang(self):
        assert formality_score("gonna be cool yeah") == 0

    def test_no_markers_is_neutral(self):
        assert formality_score("hello there") == 50

    def test_engagement_is_per_fragment_and_capped(self):
        text = "you and your team share what we believe"
        assert engagement_score(text, 1) == 100
        assert engagement_score(text, 10) == 12

    def test_readability_short_sentence_clamps_high(self):
        assert readability_score("Hi.") == 100

    def test_readability_long_words_clamp_low(self):
        assert readability_score("Incomprehensibilities notwithstanding internationalization") == 0


def test_structural_frequencies():
    patterns = analyze_communication_patterns(["Hello? #ai @bob", "Wow! #ml"])

    assert patterns.question_frequency == 50
    assert patterns.exclamation_frequency == 50
    assert patterns.hashtag_usage == 100
    assert patterns.mention_frequency == 50
    assert patterns.avg_tweet_length == 12
    assert patterns.writing_style == "Inquisitive"


def test_serializes_with_camel_case_keys():
    dumped = analyze_communication_patterns(["Hello world"]).model_dump(by_alias=True)
    assert {"writingStyle", "avgTweetLength", "readabilityScore", "hashtagUsage"} <= set(dumped)


@pytest.mark.parametrize("texts", SAMPLE_CORPORA)
def test_scores_are_bounded(texts):
    patterns = analyze_communication_patterns(texts)
    assert 0 <= patterns.formality <= 100
    assert 0 <= patterns.engagement <= 100
    assert 0 <= patterns.readability_score <= 100
    assert patterns.writing_style in {"Casual", "Formal", "Engaging", "Inquisitive", "Professional"}
