from .tavily_seeker import TavilySeeker, TavilySeekerConfig


class RivalSeeker(TavilySeeker):
    """Rival Seeker: competitors, alternatives and opposing viewpoints."""

    default_config = TavilySeekerConfig(
        name="rival",
        description="Competitive analysis and opposing viewpoints",
        query_suffix='competitors "similar to" "alternative to" "vs" market share',
        max_results=5,
        default_confidence=0.7,
    )
