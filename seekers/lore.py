from .tavily_seeker import TavilySeeker, TavilySeekerConfig


class LoreSeeker(TavilySeeker):
    """Lore Seeker: historical and cultural context from Wikipedia."""

    default_config = TavilySeekerConfig(
        name="lore",
        description="Historical and cultural context search",
        include_domains=("wikipedia.org", "en.wikipedia.org"),
        max_results=5,
        fixed_confidence=0.9,  # established encyclopedic facts
    )
