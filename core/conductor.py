import time
import asyncio
from typing import Any, Callable, Dict, Iterable, List, Optional

from loguru import logger

from .base_seeker import Seeker
from .exceptions import NoSeekersAvailable
from .resonance import detect_resonances
from .synthesis import synthesize
from .types import ConductorOptions, Finding, SeekResult, Symphony


class Conductor:
    """
    Conductor: runs a query against a set of seekers and assembles a Symphony.

    Responsibilities:
    - Own the seeker registry (name -> seeker, last registration wins)
    - Select seekers per call, falling back to all of them
    - Run seekers in parallel or one after another
    - Isolate failures so a broken seeker only costs its own findings
    - Detect resonances and synthesize the result

    Any object with a ``name`` and an async ``seek(query)`` can be registered.
    ``Seeker`` subclasses additionally report why they came back empty.
    """

    def __init__(
        self,
        seekers: Optional[Iterable[Any]] = None,
        clock: Callable[[], float] = time.perf_counter
    ):
        self._registry: Dict[str, Any] = {}
        self.clock = clock

        for seeker in seekers or []:
            self.add_seeker(seeker)

    @property
    def seekers(self) -> Dict[str, Any]:
        return dict(self._registry)

    def add_seeker(self, seeker: Any) -> None:
        """Register a seeker, replacing any seeker with the same name."""
        if seeker.name in self._registry:
            logger.debug(f"Replacing seeker '{seeker.name}'")
        self._registry[seeker.name] = seeker

    def get_seeker(self, name: str) -> Optional[Any]:
        return self._registry.get(name)

    def select_seekers(self, names: Optional[List[str]] = None) -> List[Any]:
        """
        Resolve seeker names against the registry.

        Unknown names are dropped. When nothing is requested, or nothing
        requested is known, every registered seeker is selected.
        """
        selected = [self._registry[n] for n in names or [] if n in self._registry]
        if not selected:
            selected = list(self._registry.values())
        return selected

    async def seek(self, name: str, query: str) -> List[Finding]:
        """Run a single registered seeker directly."""
        seeker = self._registry.get(name)
        if seeker is None:
            raise KeyError(f"Unknown seeker '{name}'")
        result = await self._run_seeker(seeker, query)
        return list(result.findings)

    async def perform(self, query: str, options: Optional[ConductorOptions] = None) -> Symphony:
        """
        Orchestrate the selected seekers against a query.

        Args:
            query: What to research
            options: Seeker selection, resonance threshold and execution mode

        Returns:
            The assembled Symphony

        Raises:
            NoSeekersAvailable: if no seeker could be selected
        """
        options = options or ConductorOptions()
        start_time = self.clock()

        selected = self.select_seekers(options.seekers)
        if not selected:
            raise NoSeekersAvailable()

        mode = "parallel" if options.parallel else "sequential"
        logger.info(f"Performing '{query}' with {len(selected)} seekers ({mode})")

        if options.parallel:
            results = await asyncio.gather(
                *(self._run_seeker(seeker, query) for seeker in selected)
            )
        else:
            results = []
            for seeker in selected:
                results.append(await self._run_seeker(seeker, query))

        findings: List[Finding] = []
        failures: Dict[str, str] = {}
        for result in results:
            findings.extend(result.findings)
            if not result.ok:
                failures[result.source] = result.error

        resonances = detect_resonances(findings, options.resonance_threshold)
        synthesis = synthesize(findings, resonances)

        duration_ms = int((self.clock() - start_time) * 1000)
        logger.info(
            f"Symphony complete: {len(findings)} findings, "
            f"{len(resonances)} resonances, {len(failures)} failed seekers in {duration_ms}ms"
        )

        return Symphony(
            query=query,
            findings=tuple(findings),
            resonances=tuple(resonances),
            synthesis=synthesis,
            duration_ms=duration_ms,
            failures=failures
        )

    async def _run_seeker(self, seeker: Any, query: str) -> SeekResult:
        """Run one seeker. Never raises an ``Exception``."""
        try:
            if isinstance(seeker, Seeker):
                return await seeker.search(query)
            findings = await seeker.seek(query)
            return SeekResult(source=seeker.name, findings=tuple(findings))
        except Exception as e:
            logger.warning(f"Seeker '{seeker.name}' failed: {e}")
            return SeekResult.failure(seeker.name, str(e) or type(e).__name__)
