"""
Resonance detection: finds where findings from different seekers converge.

Clustering is a greedy single pass. Each finding not yet assigned seeds a
group, and every later unassigned finding whose similarity to that seed
reaches the threshold joins it. Candidates are compared with the seed only,
never with members added after it, so a member may be dissimilar to the
rest of its group. Groups without a partner are dropped.
"""

from typing import List, Sequence

from .types import Finding, Resonance
from .utils import jaccard_similarity, mean


DEFAULT_THRESHOLD = 0.3


def similarity(text1: str, text2: str) -> float:
    """Word-set Jaccard similarity of two texts, in [0, 1]."""
    return jaccard_similarity(text1, text2)


def _build_resonance(group: List[Finding]) -> Resonance:
    sources = list(dict.fromkeys(f.source for f in group))
    return Resonance(
        findings=tuple(group),
        strength=mean(f.confidence for f in group),
        pattern=f"Convergence from {' + '.join(sources)}",
    )


def detect_resonances(
    findings: Sequence[Finding],
    threshold: float = DEFAULT_THRESHOLD
) -> List[Resonance]:
    """
    Group findings whose content overlaps.

    Args:
        findings: Findings in collection order
        threshold: Minimum similarity to the group seed (inclusive)

    Returns:
        Resonances sorted by strength, strongest first. Equal strengths keep
        the order in which their seeds appeared.
    """
    resonances: List[Resonance] = []
    used = set()

    for i, seed in enumerate(findings):
        if i in used:
            continue

        group = [seed]
        used.add(i)

        for j in range(i + 1, len(findings)):
            if j in used:
                continue
            if similarity(seed.content, findings[j].content) >= threshold:
                group.append(findings[j])
                used.add(j)

        if len(group) > 1:
            resonances.append(_build_resonance(group))

    return sorted(resonances, key=lambda r: r.strength, reverse=True)
