"""Tests for similarity and resonance detection."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from core.resonance import detect_resonances, similarity
from core.types import Finding
from tests.conftest import make_finding


VOCAB = ["solar", "wind", "battery", "grid", "storage", "cost", "growth", "policy"]

contents = st.lists(st.sampled_from(VOCAB), min_size=0, max_size=5).map(" ".join)
findings_strategy = st.lists(
    st.builds(
        Finding,
        source=st.sampled_from(["truth", "scholar", "lore"]),
        content=contents,
        confidence=st.floats(min_value=0.0, max_value=1.0),
    ),
    max_size=12,
)
words = st.text(alphabet="abcdef \n\t", max_size=30)


# ---------------------------------------------------------------------------
# similarity
# ---------------------------------------------------------------------------

class TestSimilarity:
    def test_identical_text(self):
        assert similarity("solar power grows", "solar power grows") == 1.0

    def test_case_insensitive(self):
        assert similarity("Solar POWER", "solar power") == 1.0

    def test_partial_overlap(self):
        # {a, b, c} vs {b, c, d}: 2 shared of 4
        assert similarity("a b c", "b c d") == pytest.approx(0.5)

    def test_disjoint(self):
        assert similarity("alpha beta", "gamma delta") == 0.0

    def test_both_empty_is_zero(self):
        assert similarity("", "") == 0.0
        assert similarity("   ", "\n") == 0.0

    def test_one_empty(self):
        assert similarity("", "solar") == 0.0

    def test_duplicate_words_count_once(self):
        assert similarity("wind wind wind", "wind") == 1.0

    @given(words, words)
    def test_symmetric(self, a, b):
        assert similarity(a, b) == similarity(b, a)

    @given(words.filter(lambda t: t.split()))
    def test_self_similarity_is_one(self, a):
        assert similarity(a, a) == 1.0

    @given(words, words)
    def test_bounded(self, a, b):
        assert 0.0 <= similarity(a, b) <= 1.0


# ---------------------------------------------------------------------------
# detect_resonances
# ---------------------------------------------------------------------------

class TestDetectResonances:
    def test_empty_input(self):
        assert detect_resonances([]) == []

    def test_single_finding_has_no_resonance(self):
        assert detect_resonances([make_finding("solar power")]) == []

    def test_two_matching_findings(self):
        a = make_finding("solar panels are cheap", source="A", confidence=0.8)
        b = make_finding("solar panels are cheap", source="B", confidence=0.6)

        resonances = detect_resonances([a, b], threshold=0.3)

        assert len(resonances) == 1
        assert resonances[0].findings == (a, b)
        assert resonances[0].strength == pytest.approx(0.7)
        assert resonances[0].pattern == "Convergence from A + B"

    def test_unrelated_findings_are_dropped(self):
        a = make_finding("solar panels are cheap", source="A")
        b = make_finding("wind turbines need maintenance", source="B")
        assert detect_resonances([a, b], threshold=0.3) == []

    def test_threshold_is_inclusive(self):
        # Jaccard of these is exactly 0.5
        a = make_finding("a b c")
        b = make_finding("b c d")
        assert len(detect_resonances([a, b], threshold=0.5)) == 1
        assert detect_resonances([a, b], threshold=0.51) == []

    def test_pattern_lists_unique_sources_in_first_seen_order(self):
        group = [
            make_finding("grid storage", source="scholar"),
            make_finding("grid storage", source="truth"),
            make_finding("grid storage", source="scholar"),
        ]
        resonances = detect_resonances(group)
        assert resonances[0].pattern == "Convergence from scholar + truth"
        assert resonances[0].sources == ["scholar", "truth"]

    def test_compares_against_seed_only(self):
        # b matches the seed, c matches b but not the seed.
        seed = make_finding("a b c d")
        b = make_finding("a b c d e f")
        c = make_finding("c d e f g")
        assert similarity(b.content, c.content) >= 0.5

        resonances = detect_resonances([seed, b, c], threshold=0.5)

        assert len(resonances) == 1
        assert resonances[0].findings == (seed, b)

    def test_member_need_not_match_other_members(self):
        seed = make_finding("a b c d")
        left = make_finding("a b c d x y")
        right = make_finding("a b c d p q")

        resonances = detect_resonances([seed, left, right], threshold=0.6)

        assert resonances[0].findings == (seed, left, right)
        assert similarity(left.content, right.content) < 0.6

    def test_sorted_by_strength_descending(self):
        weak = [make_finding("wind power", confidence=0.2), make_finding("wind power", confidence=0.4)]
        strong = [make_finding("solar cells", confidence=0.9), make_finding("solar cells", confidence=0.7)]

        resonances = detect_resonances(weak + strong)

        assert [r.strength for r in resonances] == pytest.approx([0.8, 0.3])

    def test_ties_keep_input_order(self):
        first = [make_finding("wind power", source="A"), make_finding("wind power", source="B")]
        second = [make_finding("solar cells", source="C"), make_finding("solar cells", source="D")]

        resonances = detect_resonances(first + second)

        assert [r.pattern for r in resonances] == [
            "Convergence from A + B",
            "Convergence from C + D",
        ]

    @settings(max_examples=200)
    @given(findings_strategy, st.floats(min_value=0.0, max_value=1.0))
    def test_groups_are_disjoint_and_non_trivial(self, findings, threshold):
        resonances = detect_resonances(findings, threshold)

        seen = set()
        for resonance in resonances:
            assert len(resonance.findings) >= 2
            for finding in resonance.findings:
                assert id(finding) not in seen
                seen.add(id(finding))

    @given(findings_strategy, st.floats(min_value=0.0, max_value=1.0))
    def test_always_sorted(self, findings, threshold):
        strengths = [r.strength for r in detect_resonances(findings, threshold)]
        assert strengths == sorted(strengths, reverse=True)
