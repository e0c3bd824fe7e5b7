#!/usr/bin/env python3
"""
Writing Helper - Development Launcher

Starts the FastAPI backend (JSON API + single-page form) with uvicorn.

Usage:
    python run.py                    # http://127.0.0.1:8000
    python run.py --host 0.0.0.0     # Network accessible (other devices can connect)
    python run.py --port 9000        # Custom port
    python run.py --reload           # Auto-reload on code changes

Environment Variables:
    - OPENAI_API_KEY: Primary checking service (warning only)
    - ANTHROPIC_API_KEY: Backup checking service (warning only)
    - LOG_LEVEL: Defaults to info
"""

import argparse
import os
import sys
from pathlib import Path

import uvicorn

ROOT = Path(__file__).resolve().parent
BACKEND_DIR = ROOT / "backend"


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Writing Helper - Development Launcher",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Interface to bind (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind (default: 8000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when backend code changes",
    )
    return parser


def check_environment() -> None:
    """Warn about missing provider credentials; the server still starts."""
    for var, role in (("OPENAI_API_KEY", "primary"), ("ANTHROPIC_API_KEY", "backup")):
        if not os.environ.get(var) and not (ROOT / ".env").exists():
            print(f"Warning: {var} is not set; the {role} checking service will be unavailable.")


def main() -> int:
    args = create_argument_parser().parse_args()
    check_environment()
    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        app_dir=str(BACKEND_DIR),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
