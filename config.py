"""
Configuration for Research Symphony.

Environment Variables:
    TAVILY_API_KEY          - Required for live search; read by each seeker at call time
    SEARCH_DEPTH            - Optional: "basic" or "advanced" (default: advanced)
    SEEKER_TIMEOUT_SECONDS  - Optional: per-seeker time bound (default: 25)
    RESONANCE_THRESHOLD     - Optional: default similarity threshold (default: 0.3)
    PARALLEL_SEEKERS        - Optional: run seekers concurrently (default: true)
    MEMORY_CAPACITY         - Optional: research memory size (default: 100)
    LOG_LEVEL               - Optional: loguru level (default: INFO)

Create a .env file in this directory with:

    TAVILY_API_KEY=tvly-your-key-here
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Application configuration."""

    # Search Settings
    tavily_api_key: Optional[str] = None
    search_depth: str = "advanced"
    seeker_timeout_seconds: float = 25.0

    # Orchestration Settings
    resonance_threshold: float = 0.3
    parallel: bool = True
    memory_capacity: int = 100

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            tavily_api_key=os.getenv("TAVILY_API_KEY"),
            search_depth=os.getenv("SEARCH_DEPTH", "advanced"),
            seeker_timeout_seconds=float(os.getenv("SEEKER_TIMEOUT_SECONDS", "25")),
            resonance_threshold=float(os.getenv("RESONANCE_THRESHOLD", "0.3")),
            parallel=_env_bool("PARALLEL_SEEKERS", True),
            memory_capacity=int(os.getenv("MEMORY_CAPACITY", "100")),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("API_PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def validate(self) -> bool:
        """Check if live search is possible."""
        return bool(self.tavily_api_key)


# Global config instance
config = Config.from_env()
