from typing import Callable, Dict, List, Any, Iterable, Tuple, Union
from collections import deque
from dataclasses import dataclass
from datetime import datetime
import threading

from loguru import logger

from core.types import Symphony
from core.utils import jaccard_similarity, mean, preview, round_half_up


DEFAULT_CAPACITY = 100
TOP_FINDINGS = 3
SIMILARITY_CUTOFF = 0.3  # strict: records must score above it


def parse_timestamp(value: Any) -> datetime:
    """
    Read a stored timestamp.

    Accepts a datetime, an ISO 8601 string, or epoch milliseconds as
    written by older exports.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000)
    raise ValueError(f"Unsupported timestamp: {value!r}")


@dataclass(frozen=True)
class MemoryRecord:
    """Compressed projection of a Symphony kept in research memory."""
    query: str
    timestamp: datetime
    top_findings: Tuple[str, ...] = ()
    resonance_strength: float = 0.0
    duration_ms: int = 0

    @classmethod
    def from_symphony(cls, symphony: Symphony, timestamp: datetime) -> "MemoryRecord":
        ranked = sorted(symphony.findings, key=lambda f: f.confidence, reverse=True)
        strongest = symphony.strongest_resonance
        return cls(
            query=symphony.query,
            timestamp=timestamp,
            top_findings=tuple(preview(f.content) for f in ranked[:TOP_FINDINGS]),
            resonance_strength=strongest.strength if strongest else 0.0,
            duration_ms=symphony.duration_ms,
        )

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        clock: Callable[[], datetime] = datetime.now
    ) -> "MemoryRecord":
        """Build a record from ``to_dict`` output; ``clock`` stamps records without a timestamp."""
        timestamp = data.get("timestamp")
        return cls(
            query=str(data["query"]),
            timestamp=clock() if timestamp is None else parse_timestamp(timestamp),
            top_findings=tuple(str(p) for p in data.get("top_findings", [])),
            resonance_strength=float(data.get("resonance_strength", 0.0)),
            duration_ms=int(data.get("duration_ms", 0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "timestamp": self.timestamp.isoformat(),
            "top_findings": list(self.top_findings),
            "resonance_strength": self.resonance_strength,
            "duration_ms": self.duration_ms,
        }


@dataclass(frozen=True)
class ResearchInsights:
    """Aggregate statistics over remembered research."""
    total_searches: int = 0
    avg_duration_ms: int = 0
    avg_resonance: int = 0  # percent, 0-100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_searches": self.total_searches,
            "avg_duration_ms": self.avg_duration_ms,
            "avg_resonance": self.avg_resonance,
        }


class ResearchMemory:
    """
    Bounded, in-process history of past research.

    Holds at most ``capacity`` records in insertion order and evicts the
    oldest first. Appends, evictions and reads share one lock so concurrent
    orchestration calls never observe a store mid-eviction.

    Nothing survives the process; use ``export``/``import_records`` to
    persist elsewhere.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        clock: Callable[[], datetime] = datetime.now
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.clock = clock
        self._records: deque = deque()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def remember(self, symphony: Symphony) -> MemoryRecord:
        """Store the projection of a Symphony. Always appends one record."""
        record = MemoryRecord.from_symphony(symphony, timestamp=self.clock())
        with self._lock:
            self._records.append(record)
            self._enforce_capacity()
        return record

    def find_similar(self, query: str, limit: int = 5) -> List[MemoryRecord]:
        """
        Past research whose query resembles ``query``.

        Records must score strictly above the similarity cutoff. Results are
        ordered by similarity, most similar first; equal scores keep store
        order.
        """
        with self._lock:
            records = list(self._records)

        scored = [(jaccard_similarity(query, r.query), r) for r in records]
        matches = [(score, r) for score, r in scored if score > SIMILARITY_CUTOFF]
        matches.sort(key=lambda pair: pair[0], reverse=True)
        return [r for _, r in matches[:max(limit, 0)]]

    def get_insights(self) -> ResearchInsights:
        with self._lock:
            records = list(self._records)

        if not records:
            return ResearchInsights()

        return ResearchInsights(
            total_searches=len(records),
            avg_duration_ms=round_half_up(mean(r.duration_ms for r in records)),
            avg_resonance=round_half_up(mean(r.resonance_strength for r in records) * 100),
        )

    def export(self) -> List[MemoryRecord]:
        """Snapshot of all records, oldest first. Records are immutable."""
        with self._lock:
            return list(self._records)

    def import_records(self, records: Iterable[Union[MemoryRecord, Dict[str, Any]]]) -> int:
        """
        Append previously exported records.

        Existing records are kept; the capacity limit applies after the
        whole batch is appended. Dicts without a timestamp are stamped with
        this memory's clock. Nothing is stored if any record is invalid.

        Returns:
            Number of records held afterwards
        """
        incoming = [
            r if isinstance(r, MemoryRecord) else MemoryRecord.from_dict(r, clock=self.clock)
            for r in records
        ]
        with self._lock:
            self._records.extend(incoming)
            self._enforce_capacity()
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def _enforce_capacity(self) -> None:
        # Caller holds the lock.
        evicted = 0
        while len(self._records) > self.capacity:
            self._records.popleft()
            evicted += 1
        if evicted:
            logger.debug(f"Evicted {evicted} memory record(s), capacity {self.capacity}")
