from .types import (
    Finding,
    Resonance,
    SeekResult,
    Symphony,
    ConductorOptions,
)
from .exceptions import SymphonyError, NoSeekersAvailable, SeekerError
from .base_seeker import Seeker, SeekerConfig
from .resonance import similarity, detect_resonances
from .synthesis import synthesize
from .conductor import Conductor

__all__ = [
    "Finding",
    "Resonance",
    "SeekResult",
    "Symphony",
    "ConductorOptions",
    "SymphonyError",
    "NoSeekersAvailable",
    "SeekerError",
    "Seeker",
    "SeekerConfig",
    "similarity",
    "detect_resonances",
    "synthesize",
    "Conductor",
]
