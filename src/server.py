"""Uvicorn runner for the Mealstream API.

Usage:
    python src/server.py                 # Serve on $HOST:$PORT (default 0.0.0.0:3000)
    python src/server.py --port 8080     # Override the port
    python src/server.py --reload        # Auto-reload for development
"""

import argparse
import os

import structlog
import uvicorn

logger = structlog.get_logger(__name__)

DEFAULT_PORT = 3000


def main():
    parser = argparse.ArgumentParser(description="Mealstream API server")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", DEFAULT_PORT)))
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    logger.info("api_starting", host=args.host, port=args.port)
    uvicorn.run("app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
