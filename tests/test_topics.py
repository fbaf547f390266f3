from profiler.analysis.topics import categorize_token, extract_topics


def test_ranks_by_frequency_and_caps_confidence():
    topics = extract_topics(["Python python coding", "python data"])

    assert [t.topic for t in topics] == ["Python", "Coding", "Data"]
    assert topics[0].frequency == 3
    # 3 mentions over 2 fragments would be 150
    assert topics[0].confidence == 95
    assert topics[1].confidence == 50.0


def test_ties_keep_first_seen_order():
    topics = extract_topics(["beta alpha", "alpha beta gamma"])
    assert [t.topic for t in topics] == ["Beta", "Alpha", "Gamma"]


def test_limits_to_fifteen_topics():
    words = " ".join("zz" + chr(ord("a") + i) * 3 for i in range(20))
    assert len(extract_topics([words])) == 15


def test_categories_match_substrings_in_both_directions():
    assert categorize_token("coding") == "Technology"
    # "art" is inside "artificial", and Technology is checked first
    assert categorize_token("art") == "Technology"
    assert categorize_token("marketing") == "Business"
    assert categorize_token("zebra") == "General"


def test_empty_input():
    assert extract_topics([]) == []
