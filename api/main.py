import sys
from typing import Any, Dict, List, Optional
from datetime import datetime
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel, Field

from config import config
from core.conductor import Conductor
from core.types import ConductorOptions
from seekers import create_default_seekers
from storage.memory import ResearchMemory

# Configure logger
logger.remove()
logger.add(
    sys.stderr,
    level=config.log_level,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
)

# Initialize lazily so tests can override before first use
_conductor: Optional[Conductor] = None
_memory: Optional[ResearchMemory] = None


def get_conductor() -> Conductor:
    """Get the process conductor, registering every built-in seeker."""
    global _conductor
    if _conductor is None:
        _conductor = Conductor(create_default_seekers(config))
    return _conductor


def get_memory() -> ResearchMemory:
    global _memory
    if _memory is None:
        _memory = ResearchMemory(capacity=config.memory_capacity)
    return _memory


def error_payload(prefix: str, error: Exception) -> Dict[str, Any]:
    """Error-flagged text result returned instead of failing the request."""
    return {"is_error": True, "text": f"{prefix}: {error}"}


# Request Models
class SymphonyRequest(BaseModel):
    query: str = Field(..., min_length=1, description="What to research")
    seekers: Optional[List[str]] = Field(default=None, description="Which seekers to use (default: all)")
    resonance_threshold: Optional[float] = Field(
        default=None, ge=0.0, le=1.0,
        description="Similarity threshold for resonance detection (0-1)"
    )
    parallel: Optional[bool] = Field(default=None, description="Run seekers concurrently")


class SeekRequest(BaseModel):
    query: str = Field(..., min_length=1, description="What to search for")


class MemorySearchRequest(BaseModel):
    query: str = Field(..., min_length=1, description="What to search for in memory")
    limit: int = Field(default=5, ge=1, le=100)


class MemoryImportRequest(BaseModel):
    records: List[Dict[str, Any]] = Field(default_factory=list)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Research Symphony API starting...")
    yield
    logger.info("Research Symphony API shutting down...")


app = FastAPI(
    title="Research Symphony",
    description="""
    Orchestrates multiple seekers against one query:
    - **Conductor**: runs seekers in parallel or in sequence
    - **Resonance**: finds where independent findings converge
    - **Synthesis**: summarizes themes, sources, confidence and contradictions
    - **Memory**: recalls similar past research
    """,
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root(conductor: Conductor = Depends(get_conductor)):
    return {
        "name": "Research Symphony",
        "version": "1.0.0",
        "status": "running",
        "seekers": list(conductor.seekers),
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "tavily_configured": config.validate(),
    }


@app.get("/seekers")
async def list_seekers(conductor: Conductor = Depends(get_conductor)):
    return {
        "seekers": [
            {"name": name, "description": getattr(seeker, "description", "")}
            for name, seeker in conductor.seekers.items()
        ]
    }


@app.post("/symphony")
async def perform_symphony(
    request: SymphonyRequest,
    conductor: Conductor = Depends(get_conductor),
    memory: ResearchMemory = Depends(get_memory)
):
    """
    Orchestrate seekers against a query and remember the result.

    Failures come back as an error-flagged payload rather than an HTTP error.
    """
    options = ConductorOptions(
        seekers=request.seekers,
        resonance_threshold=(
            request.resonance_threshold
            if request.resonance_threshold is not None
            else config.resonance_threshold
        ),
        parallel=request.parallel if request.parallel is not None else config.parallel,
    )

    try:
        symphony = await conductor.perform(request.query, options)
    except Exception as e:
        logger.error(f"Symphony failed for '{request.query}': {e}")
        return error_payload("Symphony error", e)

    memory.remember(symphony)
    return symphony.to_dict()


@app.post("/seek/{name}")
async def run_seeker(
    name: str,
    request: SeekRequest,
    conductor: Conductor = Depends(get_conductor)
):
    """Use one seeker directly."""
    if conductor.get_seeker(name) is None:
        raise HTTPException(status_code=404, detail=f"Unknown seeker '{name}'")

    try:
        findings = await conductor.seek(name, request.query)
    except Exception as e:
        logger.error(f"Seeker '{name}' failed: {e}")
        return error_payload("Seeker error", e)

    return {"seeker": name, "findings": [f.to_dict() for f in findings]}


@app.post("/memory/search")
async def search_memory(
    request: MemorySearchRequest,
    memory: ResearchMemory = Depends(get_memory)
):
    """Search past research."""
    records = memory.find_similar(request.query, limit=request.limit)
    return {"query": request.query, "results": [r.to_dict() for r in records]}


@app.get("/memory/insights")
async def memory_insights(memory: ResearchMemory = Depends(get_memory)):
    """Get insights from research history."""
    return memory.get_insights().to_dict()


@app.get("/memory/export")
async def export_memory(memory: ResearchMemory = Depends(get_memory)):
    return {"records": [r.to_dict() for r in memory.export()]}


@app.post("/memory/import")
async def import_memory(
    request: MemoryImportRequest,
    memory: ResearchMemory = Depends(get_memory)
):
    try:
        total = memory.import_records(request.records)
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid memory record: {e}")
    return {"imported": len(request.records), "total": total}


# Run with: uvicorn api.main:app --reload
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.api_host, port=config.api_port)
