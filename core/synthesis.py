"""
Deterministic synthesis of findings and resonances into a short digest.
"""

from collections import Counter
from itertools import combinations
from typing import List, Sequence, Tuple

from .types import Finding, Resonance
from .utils import as_percent, mean, tokenize


EMPTY_SYNTHESIS = "No findings to synthesize."

STOP_WORDS = frozenset(["the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for"])

OPPOSITES: Tuple[Tuple[str, str], ...] = (
    ("increase", "decrease"),
    ("positive", "negative"),
    ("success", "failure"),
    ("growth", "decline"),
)

CONTRADICTION_NOTE = "These contradictions may represent different perspectives or evolving understanding."

MAX_THEMES = 5


def extract_themes(content: str, limit: int = MAX_THEMES) -> List[str]:
    """Most frequent meaningful words, ties broken by first appearance."""
    counts: Counter = Counter()
    for word in tokenize(content):
        if len(word) > 3 and word not in STOP_WORDS:
            counts[word] += 1
    return [word for word, _ in counts.most_common(limit)]


def find_contradictions(findings: Sequence[Finding]) -> List[Tuple[Finding, Finding]]:
    """
    Pairs of findings that use opposing words.

    A pair is reported once per opposing word pair it matches.
    """
    contradictions: List[Tuple[Finding, Finding]] = []

    for first, second in combinations(findings, 2):
        for word1, word2 in OPPOSITES:
            if (
                (word1 in first.content and word2 in second.content)
                or (word2 in first.content and word1 in second.content)
            ):
                contradictions.append((first, second))

    return contradictions


def synthesize(findings: Sequence[Finding], resonances: Sequence[Resonance]) -> str:
    """
    Build the digest for a set of findings.

    Blocks appear in a fixed order (themes, strongest convergence, sources,
    average confidence, contradictions) separated by blank lines. Blocks
    with nothing to report are left out.
    """
    if not findings:
        return EMPTY_SYNTHESIS

    all_content = "\n\n".join(f.content for f in findings)
    parts: List[str] = [f"Key themes: {', '.join(extract_themes(all_content))}"]

    if resonances:
        strongest = resonances[0]
        parts.append(
            f"\nStrongest convergence ({as_percent(strongest.strength)}%): {strongest.pattern}"
        )

    sources = list(dict.fromkeys(f.source for f in findings))
    parts.append(f"\nSources consulted: {', '.join(sources)}")

    avg_confidence = mean(f.confidence for f in findings)
    parts.append(f"\nAverage confidence: {as_percent(avg_confidence)}%")

    contradictions = find_contradictions(findings)
    if contradictions:
        parts.append(f"\nContradictions found: {len(contradictions)}")
        parts.append(CONTRADICTION_NOTE)

    return "\n".join(parts)
