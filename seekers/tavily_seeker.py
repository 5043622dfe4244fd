import os
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from tavily import AsyncTavilyClient

from core.base_seeker import Seeker, SeekerConfig
from core.exceptions import SeekerError
from core.types import Finding


@dataclass
class TavilySeekerConfig(SeekerConfig):
    """Configuration for seekers backed by the Tavily search API."""
    api_key_env: str = "TAVILY_API_KEY"
    search_depth: str = "advanced"  # "basic" or "advanced"
    topic: str = "general"  # "general", "news" or "finance"
    max_results: int = 5
    max_characters: int = 3000
    include_domains: Tuple[str, ...] = ()
    query_suffix: str = ""
    include_raw_content: bool = False

    # Confidence comes from the provider score unless fixed_confidence is set.
    default_confidence: float = 0.8
    fixed_confidence: Optional[float] = None


ClientFactory = Callable[[str], Any]


def create_tavily_client(api_key: str) -> AsyncTavilyClient:
    return AsyncTavilyClient(api_key=api_key)


class TavilySeeker(Seeker):
    """
    Seeker that searches the web through Tavily.

    The API key is read from the environment on every call, so a key set
    after startup is picked up. Subclasses provide ``default_config`` and
    may override ``_seek`` for non-search behaviour.
    """

    default_config: Optional[TavilySeekerConfig] = None

    def __init__(
        self,
        config: Optional[TavilySeekerConfig] = None,
        client_factory: Optional[ClientFactory] = None,
        **overrides: Any
    ):
        config = config or self.default_config
        if config is None:
            raise ValueError(f"{type(self).__name__} requires a config")
        super().__init__(replace(config, **overrides))
        self.client_factory = client_factory or create_tavily_client

    def _get_client(self) -> Any:
        api_key = os.getenv(self.config.api_key_env)
        if not api_key:
            raise SeekerError(self.name, f"{self.config.api_key_env} is not set")
        return self.client_factory(api_key)

    def build_query(self, query: str) -> str:
        if self.config.query_suffix:
            return f"{query} {self.config.query_suffix}"
        return query

    def _search_params(self, query: str) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "query": self.build_query(query),
            "search_depth": self.config.search_depth,
            "topic": self.config.topic,
            "max_results": self.config.max_results,
        }
        if self.config.include_domains:
            params["include_domains"] = list(self.config.include_domains)
        if self.config.include_raw_content:
            params["include_raw_content"] = True
        return params

    async def _seek(self, query: str) -> List[Finding]:
        client = self._get_client()
        response = await client.search(**self._search_params(query))
        return self._to_findings(response)

    def _to_findings(self, response: Optional[Dict[str, Any]]) -> List[Finding]:
        if not response or not response.get("results"):
            return []
        return [self._to_finding(item) for item in response["results"]]

    def _to_finding(self, item: Dict[str, Any], confidence: Optional[float] = None) -> Finding:
        text = item.get("raw_content") or item.get("content") or ""
        title = item.get("title") or "Content"
        if confidence is None:
            confidence = self._confidence(item.get("score"))
        return Finding(
            source=self.name,
            content=f"{title}\n\n{text[:self.config.max_characters]}",
            url=item.get("url"),
            confidence=confidence,
        )

    def _confidence(self, score: Optional[float]) -> float:
        if self.config.fixed_confidence is not None:
            return self.config.fixed_confidence
        if not score:
            return self.config.default_confidence
        return min(max(float(score), 0.0), 1.0)
