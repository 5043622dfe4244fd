from typing import Any, List, Optional

from .tavily_seeker import TavilySeeker, TavilySeekerConfig, ClientFactory, create_tavily_client
from .truth import TruthSeeker
from .scholar import ScholarSeeker
from .commerce import CommerceSeeker
from .source import SourceSeeker
from .rival import RivalSeeker
from .network import NetworkSeeker
from .lore import LoreSeeker

SEEKER_CLASSES = (
    TruthSeeker,
    ScholarSeeker,
    CommerceSeeker,
    SourceSeeker,
    RivalSeeker,
    NetworkSeeker,
    LoreSeeker,
)

SEEKER_NAMES = tuple(cls.default_config.name for cls in SEEKER_CLASSES)


def create_default_seekers(
    settings: Optional[Any] = None,
    client_factory: Optional[ClientFactory] = None
) -> List[TavilySeeker]:
    """
    Build one instance of every built-in seeker.

    Args:
        settings: A ``Config``; its search depth and timeout are applied to
            every seeker when given
        client_factory: Builds a search client from an API key
    """
    overrides = {}
    if settings is not None:
        overrides["search_depth"] = settings.search_depth
        overrides["timeout_seconds"] = settings.seeker_timeout_seconds

    return [cls(client_factory=client_factory, **overrides) for cls in SEEKER_CLASSES]


__all__ = [
    "TavilySeeker",
    "TavilySeekerConfig",
    "ClientFactory",
    "create_tavily_client",
    "TruthSeeker",
    "ScholarSeeker",
    "CommerceSeeker",
    "SourceSeeker",
    "RivalSeeker",
    "NetworkSeeker",
    "LoreSeeker",
    "SEEKER_CLASSES",
    "SEEKER_NAMES",
    "create_default_seekers",
]
