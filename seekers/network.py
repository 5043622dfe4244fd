from .tavily_seeker import TavilySeeker, TavilySeekerConfig


NETWORK_DOMAINS = (
    "linkedin.com",
    "x.com",
    "twitter.com",
    "reddit.com",
)


class NetworkSeeker(TavilySeeker):
    """Network Seeker: social and professional networks."""

    default_config = TavilySeekerConfig(
        name="network",
        description="Social and professional network search",
        include_domains=NETWORK_DOMAINS,
        max_results=5,
        default_confidence=0.7,
    )
