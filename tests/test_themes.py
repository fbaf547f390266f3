from profiler.analysis.themes import extract_themes, identify_risk_factors, merge_risk_flags
from profiler.lexicons import RISKS


def test_themes_follow_definition_order():
    themes = extract_themes(["We love mentoring and learning about climate"])
    assert themes == ["Leadership & Management", "Learning & Development", "Sustainability"]


def test_themes_are_capped_at_five():
    themes = extract_themes(["tech team learning community balance climate"])
    assert themes == [
        "Technology & Innovation",
        "Leadership & Management",
        "Learning & Development",
        "Social Impact",
        "Work-Life Balance",
    ]


def test_every_risk_category_can_fire():
    risks = identify_risk_factors(["hate drunk radical toxic nsfw fascist stoned"])
    assert risks == [lexicon.name for lexicon in RISKS]


def test_risks_span_fragments():
    assert identify_risk_factors(["so much hate", "feeling stoned"]) == [
        "Controversial statements",
        "Substance references",
    ]


def test_clean_text_has_no_risks():
    assert identify_risk_factors(["Shipped the quarterly report"]) == []


class TestMergeRiskFlags:
    def test_local_first_without_duplicates(self):
        merged = merge_risk_flags(
            ["Controversial statements", "Frequent negativity"],
            ["Frequent negativity", "Inconsistent employment history"],
        )
        assert merged == ["Controversial statements", "Frequent negativity", "Inconsistent employment history"]

    def test_is_idempotent(self):
        once = merge_risk_flags(["Extreme views"], ["Job hopping", "Job hopping"])
        assert merge_risk_flags(once, ["Job hopping"]) == once

    def test_drops_non_strings(self):
        assert merge_risk_flags(["Extreme views"], [None, 3, "Job hopping"]) == ["Extreme views", "Job hopping"]
