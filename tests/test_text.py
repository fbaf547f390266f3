from collections.abc import Iterator

from profiler.analysis.text import coverage_score, match_keywords, round_half_up, tokenize
from profiler.lexicons import build_lexicon


class TestTokenize:
    def test_lowercases_and_drops_short_tokens(self):
        tokens = list(tokenize("The Quick brown fox's data-driven AI"))
        assert tokens == ["quick", "brown", "fox", "data", "driven"]

    def test_removes_stop_words(self):
        assert list(tokenize("this is great work")) == []

    def test_is_lazy(self):
        assert isinstance(tokenize("anything at all"), Iterator)

    def test_ignores_tokens_glued_to_digits(self):
        assert list(tokenize("python3 rocks")) == ["rocks"]


class TestLexiconMatching:
    def test_substring_containment_not_word_boundary(self):
        lexicon = build_lexicon("arts", ["art", "music"])
        assert match_keywords("Start the engine", lexicon) == ["art"]

    def test_matches_keep_lexicon_order(self):
        lexicon = build_lexicon("zoo", ["zebra", "apple"])
        assert match_keywords("apple then zebra", lexicon) == ["zebra", "apple"]

    def test_lexicon_is_lowercased_and_deduplicated(self):
        lexicon = build_lexicon("team", ["Team", "team", "TEAM", "lead"])
        assert lexicon.keywords == ("team", "lead")
        assert len(lexicon) == 2


class TestCoverageScore:
    def test_rounds_share_of_lexicon(self):
        lexicon = build_lexicon("abc", ["a", "b", "c"])
        assert coverage_score(["a"], lexicon) == 33
        assert coverage_score(["a", "b"], lexicon) == 67
        assert coverage_score(["a", "b", "c"], lexicon) == 100

    def test_half_rounds_up(self):
        lexicon = build_lexicon("eight", list("abcdefgh"))
        assert coverage_score(["a"], lexicon) == 13

    def test_empty_lexicon_scores_zero(self):
        assert coverage_score([], build_lexicon("empty", [])) == 0

    def test_small_lexicons_saturate(self):
        lexicon = build_lexicon("tiny", ["one"])
        assert coverage_score(["one"], lexicon) == 100


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4) == 2
    assert round_half_up(0) == 0
