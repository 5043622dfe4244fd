from .tavily_seeker import TavilySeeker, TavilySeekerConfig


class TruthSeeker(TavilySeeker):
    """Truth Seeker: general web search for facts and current information."""

    default_config = TavilySeekerConfig(
        name="truth",
        description="Direct web search with truth-focused filtering",
        max_results=5,
        default_confidence=0.8,
    )
