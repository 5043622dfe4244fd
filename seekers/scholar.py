from .tavily_seeker import TavilySeeker, TavilySeekerConfig


ACADEMIC_DOMAINS = (
    "arxiv.org",
    "scholar.google.com",
    "pubmed.ncbi.nlm.nih.gov",
    "researchgate.net",
)


class ScholarSeeker(TavilySeeker):
    """Scholar Seeker: academic papers and research."""

    default_config = TavilySeekerConfig(
        name="scholar",
        description="Academic and research paper focused search",
        include_domains=ACADEMIC_DOMAINS,
        max_results=5,
        default_confidence=0.85,
    )
