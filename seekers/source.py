from typing import List

from core.types import Finding

from .tavily_seeker import TavilySeeker, TavilySeekerConfig


DIRECT_SOURCE_CONFIDENCE = 0.95


def is_url(query: str) -> bool:
    return query.startswith("http://") or query.startswith("https://")


class SourceSeeker(TavilySeeker):
    """
    Source Seeker: reads primary sources directly.

    A URL query is fetched with Tavily's extract endpoint. Anything else,
    including a URL that yields no content, is searched with full page
    content included.
    """

    default_config = TavilySeekerConfig(
        name="source",
        description="Official and authoritative source search",
        max_results=3,
        max_characters=5000,
        include_raw_content=True,
        fixed_confidence=0.9,
    )

    async def _seek(self, query: str) -> List[Finding]:
        client = self._get_client()

        if is_url(query):
            response = await client.extract(urls=[query])
            results = (response or {}).get("results") or []
            if results:
                item = dict(results[0], url=query)
                return [self._to_finding(item, confidence=DIRECT_SOURCE_CONFIDENCE)]

        response = await client.search(**self._search_params(query))
        return self._to_findings(response)
