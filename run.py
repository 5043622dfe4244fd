#!/usr/bin/env python3
"""
Run the Research Symphony API server.

Usage:
    python run.py                    # Run on default port 8000
    python run.py --port 8080        # Run on custom port
    python run.py --reload           # Run with hot reload (dev mode)

Environment Variables (set in .env file or export):
    TAVILY_API_KEY=tvly-...          # Required for live search
    LOG_LEVEL=DEBUG                  # Optional: loguru level

Quick Start:
    1. Create a .env file with your API key
    2. Install: pip install -e .
    3. Run the server: python run.py
    4. Open http://localhost:8000/docs in your browser
"""

import os
import argparse
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_file = Path(__file__).parent / ".env"
if env_file.exists():
    load_dotenv(env_file)
    print(f"✅ Loaded .env from {env_file}")


def main():
    parser = argparse.ArgumentParser(description="Run the Research Symphony API")
    parser.add_argument("--host", default=os.getenv("API_HOST", "0.0.0.0"), help="Host to bind to")
    parser.add_argument("--port", type=int, default=int(os.getenv("API_PORT", "8000")), help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    args = parser.parse_args()

    if not os.getenv("TAVILY_API_KEY"):
        print("⚠️  Warning: TAVILY_API_KEY not set. Seekers will return no findings.")
    else:
        print("✅ Tavily search configured")

    print(f"""
╔══════════════════════════════════════════════════════════════╗
║         Research Symphony                                     ║
╠══════════════════════════════════════════════════════════════╣
║  🔍 Seekers     - truth, scholar, commerce, source,           ║
║                   rival, network, lore                        ║
║  🔗 Resonance   - convergence across findings                 ║
║  📝 Synthesis   - themes, sources, confidence, contradictions ║
║  🧠 Memory      - recall of past research                     ║
╚══════════════════════════════════════════════════════════════╝

🚀 Starting server at http://{args.host}:{args.port}
📖 API docs at http://localhost:{args.port}/docs
""")

    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload
    )


if __name__ == "__main__":
    main()
