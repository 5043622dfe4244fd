"""Shared fakes and fixtures for the Research Symphony tests.

Seekers here never touch the network; each test builds a fresh Conductor
around them.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

import pytest

from core.base_seeker import Seeker, SeekerConfig
from core.types import Finding, Resonance, Symphony


def make_finding(content: str, source: str = "truth", confidence: float = 0.8) -> Finding:
    return Finding(source=source, content=content, confidence=confidence)


def make_symphony(
    query: str,
    findings: Sequence[Finding] = (),
    duration_ms: int = 100,
    strength: Optional[float] = None,
) -> Symphony:
    """Symphony with an optional single resonance of the given strength."""
    resonances = ()
    if strength is not None:
        pair = (make_finding("a b"), make_finding("a b"))
        resonances = (Resonance(findings=pair, strength=strength, pattern="Convergence from truth"),)
    return Symphony(
        query=query,
        findings=tuple(findings),
        resonances=resonances,
        synthesis="",
        duration_ms=duration_ms,
    )


class StaticSeeker(Seeker):
    """Returns fixed contents, optionally after a delay."""

    def __init__(self, name: str, contents: Sequence[str], confidence: float = 0.8, delay: float = 0.0):
        super().__init__(SeekerConfig(name=name, timeout_seconds=None))
        self.contents = list(contents)
        self.confidence = confidence
        self.delay = delay
        self.queries: List[str] = []

    async def _seek(self, query: str) -> List[Finding]:
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        return [make_finding(c, source=self.name, confidence=self.confidence) for c in self.contents]


class FailingSeeker(Seeker):
    """Raises from inside the seeker."""

    def __init__(self, name: str, delay: float = 0.0):
        super().__init__(SeekerConfig(name=name, timeout_seconds=None))
        self.delay = delay

    async def _seek(self, query: str) -> List[Finding]:
        if self.delay:
            await asyncio.sleep(self.delay)
        raise RuntimeError(f"{self.name} exploded")


class RawSeeker:
    """Duck-typed seeker whose seek() raises straight to the caller."""

    def __init__(self, name: str, error: Optional[Exception] = None, contents: Sequence[str] = ()):
        self.name = name
        self.error = error
        self.contents = list(contents)

    async def seek(self, query: str) -> List[Finding]:
        if self.error is not None:
            raise self.error
        return [make_finding(c, source=self.name) for c in self.contents]


class StepClock:
    """Datetime clock advancing one second per call."""

    def __init__(self, start: Optional[datetime] = None):
        self.current = start or datetime(2024, 1, 1, 12, 0, 0)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def clock() -> StepClock:
    return StepClock()
