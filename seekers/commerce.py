from .tavily_seeker import TavilySeeker, TavilySeekerConfig


class CommerceSeeker(TavilySeeker):
    """Commerce Seeker: companies, markets and funding."""

    default_config = TavilySeekerConfig(
        name="commerce",
        description="Business and market focused search",
        topic="finance",
        query_suffix="company business revenue funding",
        max_results=5,
        default_confidence=0.75,
    )
