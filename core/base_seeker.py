from abc import ABC, abstractmethod
from typing import List, Optional
from dataclasses import dataclass
import asyncio

from loguru import logger

from .types import Finding, SeekResult


@dataclass
class SeekerConfig:
    """Configuration for a seeker."""
    name: str
    description: str = ""
    timeout_seconds: Optional[float] = 25.0  # None disables the bound


class Seeker(ABC):
    """
    Base class for all seekers.

    Subclasses implement ``_seek`` and may raise freely. ``search`` bounds the
    call with the configured timeout and turns any failure into an empty
    ``SeekResult`` carrying the reason; ``seek`` returns only the findings.
    Neither of the public methods raises.
    """

    def __init__(self, config: SeekerConfig):
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def description(self) -> str:
        return self.config.description

    @abstractmethod
    async def _seek(self, query: str) -> List[Finding]:
        """Query the underlying source. May raise."""
        pass

    async def search(self, query: str) -> SeekResult:
        timeout = self.config.timeout_seconds
        try:
            if timeout:
                findings = await asyncio.wait_for(self._seek(query), timeout=timeout)
            else:
                findings = await self._seek(query)
        except asyncio.TimeoutError:
            logger.warning(f"{self.name} seeker timed out after {timeout}s")
            return SeekResult.failure(self.name, f"Timeout after {timeout}s")
        except Exception as e:
            logger.warning(f"{self.name} seeker error: {e}")
            return SeekResult.failure(self.name, str(e) or type(e).__name__)

        return SeekResult(source=self.name, findings=tuple(findings))

    async def seek(self, query: str) -> List[Finding]:
        result = await self.search(query)
        return list(result.findings)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
