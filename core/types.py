from typing import List, Dict, Any, Mapping, Optional, Tuple
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType


@dataclass(frozen=True)
class Finding:
    """A single piece of content discovered by a seeker."""
    source: str
    content: str
    url: Optional[str] = None
    confidence: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "content": self.content,
            "url": self.url,
            "confidence": self.confidence,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class Resonance:
    """A group of findings from the run that converge on overlapping content."""
    findings: Tuple[Finding, ...]
    strength: float  # mean confidence of the members
    pattern: str

    @property
    def sources(self) -> List[str]:
        return list(dict.fromkeys(f.source for f in self.findings))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "findings": [f.to_dict() for f in self.findings],
            "strength": self.strength,
            "pattern": self.pattern,
        }


@dataclass(frozen=True)
class SeekResult:
    """
    Outcome of one seeker call.

    A failed call carries no findings and the reason in ``error``; callers
    that only care about content read ``findings`` and never see an exception.
    """
    source: str
    findings: Tuple[Finding, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, source: str, error: str) -> "SeekResult":
        return cls(source=source, findings=(), error=error)


@dataclass(frozen=True)
class Symphony:
    """The complete result of orchestrating seekers against one query."""
    query: str
    findings: Tuple[Finding, ...]
    resonances: Tuple[Resonance, ...]
    synthesis: str
    duration_ms: int = 0

    # Seeker name -> reason it contributed nothing. Diagnostic only.
    failures: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "failures", MappingProxyType(dict(self.failures)))

    @property
    def strongest_resonance(self) -> Optional[Resonance]:
        return self.resonances[0] if self.resonances else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "findings": [f.to_dict() for f in self.findings],
            "resonances": [r.to_dict() for r in self.resonances],
            "synthesis": self.synthesis,
            "duration_ms": self.duration_ms,
            "failures": dict(self.failures),
        }


@dataclass
class ConductorOptions:
    """Per-call options for ``Conductor.perform``."""
    seekers: Optional[List[str]] = None  # None or empty -> all registered seekers
    resonance_threshold: float = 0.3
    parallel: bool = True
