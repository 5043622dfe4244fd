#!/usr/bin/env python3
"""
Demo script for Research Symphony.

Runs the conductor against a query and prints the symphony, without the
API server. With --mock (or without TAVILY_API_KEY) canned seekers are used.

Usage:
    python demo.py "What are the latest developments in quantum computing?"
    python demo.py --mock "Explain the impact of AI on healthcare"
    python demo.py --sequential --seekers truth scholar "solid state batteries"
"""

import os
import asyncio
import argparse
from typing import List

from dotenv import load_dotenv

# Load environment before config is read
load_dotenv()

from config import config
from core.base_seeker import Seeker, SeekerConfig
from core.conductor import Conductor
from core.types import ConductorOptions, Finding
from seekers import create_default_seekers
from storage.memory import ResearchMemory


class MockSeeker(Seeker):
    """Canned seeker for demo without API keys."""

    def __init__(self, name: str, snippets: List[str], confidence: float):
        super().__init__(SeekerConfig(name=name, description=f"Mock {name} seeker"))
        self.snippets = snippets
        self.confidence = confidence

    async def _seek(self, query: str) -> List[Finding]:
        await asyncio.sleep(0.05)
        return [
            Finding(
                source=self.name,
                content=snippet.format(query=query),
                url=f"https://{self.name}.example.com/{i}",
                confidence=self.confidence,
            )
            for i, snippet in enumerate(self.snippets)
        ]


class BrokenSeeker(Seeker):
    """Always fails, to show failure isolation."""

    async def _seek(self, query: str) -> List[Finding]:
        raise ConnectionError("upstream unavailable")


def create_mock_seekers() -> List[Seeker]:
    return [
        MockSeeker("truth", [
            "{query} adoption shows strong growth across industry reports",
            "Recent news about {query} highlights regulatory attention",
        ], 0.8),
        MockSeeker("scholar", [
            "{query} adoption shows strong growth in peer reviewed studies",
        ], 0.85),
        MockSeeker("commerce", [
            "Funding for {query} startups saw a decline this quarter",
        ], 0.75),
        MockSeeker("lore", [
            "The history of {query} began decades before its recent popularity",
        ], 0.9),
        BrokenSeeker(SeekerConfig(name="rival", description="Broken on purpose")),
    ]


async def run_demo(query: str, use_mock: bool, seekers: List[str], parallel: bool):
    """Run the symphony demo."""

    print("\n" + "="*60)
    print("🎼 RESEARCH SYMPHONY DEMO")
    print("="*60)
    print(f"\n📝 Query: {query}\n")

    if use_mock or not os.getenv("TAVILY_API_KEY"):
        print("ℹ️  Using mock seekers (no TAVILY_API_KEY or --mock given)\n")
        conductor = Conductor(create_mock_seekers())
    else:
        print("✅ Using Tavily-backed seekers\n")
        conductor = Conductor(create_default_seekers(config))

    memory = ResearchMemory(capacity=config.memory_capacity)

    print(f"🤖 Seekers: {', '.join(conductor.seekers)}")
    print(f"🚀 Performing ({'parallel' if parallel else 'sequential'})...\n")

    symphony = await conductor.perform(query, ConductorOptions(
        seekers=seekers,
        resonance_threshold=config.resonance_threshold,
        parallel=parallel,
    ))
    memory.remember(symphony)

    print(f"✅ Complete in {symphony.duration_ms}ms\n")
    print("-"*60)

    print(f"\n📚 Findings ({len(symphony.findings)}):")
    for finding in symphony.findings:
        first_line = finding.content.splitlines()[0] if finding.content else ""
        print(f"   • [{finding.source}] {first_line[:70]} ({finding.confidence*100:.0f}%)")

    if symphony.resonances:
        print(f"\n🔗 Resonances ({len(symphony.resonances)}):")
        for resonance in symphony.resonances:
            print(f"   • {resonance.pattern} ({resonance.strength*100:.0f}%, {len(resonance.findings)} findings)")

    if symphony.failures:
        print("\n⚠️  Seekers that came back empty:")
        for name, reason in symphony.failures.items():
            print(f"   • {name}: {reason}")

    print("\n📝 Synthesis:\n")
    print(symphony.synthesis)

    insights = memory.get_insights()
    print(f"\n🧠 Memory: {insights.total_searches} search(es), avg {insights.avg_duration_ms}ms")

    print("\n" + "="*60)
    print("Demo complete!")
    print("="*60 + "\n")


def main():
    parser = argparse.ArgumentParser(description="Research Symphony Demo")
    parser.add_argument("query", nargs="?", default="electric vehicle batteries",
                        help="Research query to investigate")
    parser.add_argument("--mock", action="store_true", help="Use mock seekers (no API key needed)")
    parser.add_argument("--seekers", nargs="*", default=None, help="Seekers to use (default: all)")
    parser.add_argument("--sequential", action="store_true", help="Run seekers one at a time")
    args = parser.parse_args()

    asyncio.run(run_demo(args.query, args.mock, args.seekers, not args.sequential))


if __name__ == "__main__":
    main()
