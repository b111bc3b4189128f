#!/usr/bin/env python3
"""
Serve the Kids News Generator API with uvicorn.

Usage:
    python scripts/run_api.py
    python scripts/run_api.py --reload --port 8080
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the Kids News Generator API")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    args = parser.parse_args(argv)

    uvicorn.run(
        "kids_news.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
