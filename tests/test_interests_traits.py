import pytest

from conftest import SAMPLE_CORPORA
from profiler.analysis.interests import analyze_interests
from profiler.analysis.text import coverage_score
from profiler.analysis.traits import analyze_personality_traits
from profiler.lexicons import INTEREST_CATEGORIES, PERSONALITY_TRAITS, by_name


class TestInterests:
    def test_only_matching_categories_sorted_by_score(self):
        interests = analyze_interests(["I love music and yoga"])

        assert [i.category for i in interests] == ["Health & Wellness", "Creative & Arts"]
        assert [i.score for i in interests] == [6, 6]
        assert interests[0].matched_keywords == ["yoga"]
        assert interests[1].description == "Creative and artistic with strong aesthetic sense"

    def test_evidence_is_truncated_in_lexicon_order(self):
        text = "coding startup product software machine artificial ai innovation technology tech"
        tech = analyze_interests([text])[0]
        lexicon = by_name(INTEREST_CATEGORIES)["Technology & Innovation"]

        assert tech.category == "Technology & Innovation"
        assert tech.matched_keywords == [
            "tech", "technology", "innovation", "ai", "artificial", "machine", "software", "product",
        ]
        assert tech.score == coverage_score(["x"] * 10, lexicon)

    def test_no_matches(self):
        assert analyze_interests(["zzz"]) == []


class TestTraits:
    def test_collaborative_language(self):
        traits = analyze_personality_traits(["our team works together"])

        assert len(traits) == 1
        assert traits[0].trait == "Collaborative"
        assert traits[0].matched_keywords == ["team", "together", "our"]
        assert traits[0].score == 15

    def test_evidence_is_static_per_trait(self):
        first = analyze_personality_traits(["our team"])[0]
        second = analyze_personality_traits(["join the group and help"])[0]
        expected = ['Frequently mentions team activities', 'Uses inclusive language', 'Shows collaborative mindset']
        assert first.evidence == expected
        assert second.evidence == expected

    def test_trait_name_is_serialized(self):
        dumped = analyze_personality_traits(["our team"])[0].model_dump(by_alias=True)
        assert dumped["trait"] == "Collaborative"
        assert dumped["matchedKeywords"] == ["team", "our"]

    def test_no_matches(self):
        assert analyze_personality_traits(["zzz"]) == []


@pytest.mark.parametrize("texts", SAMPLE_CORPORA)
def test_scores_in_range_and_keywords_from_lexicon(texts):
    for results, table in ((analyze_interests(texts), INTEREST_CATEGORIES),
                           (analyze_personality_traits(texts), PERSONALITY_TRAITS)):
        lexicons = by_name(table)
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)
        for result in results:
            assert 0 <= result.score <= 100
            assert 1 <= len(result.matched_keywords) <= 8
            assert set(result.matched_keywords) <= set(lexicons[result.category].keywords)
