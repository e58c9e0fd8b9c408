#!/usr/bin/env python3
"""Launch the content API under uvicorn and wait until it reports healthy.

This script handles:
- Checking the content endpoint configuration
- Starting the FastAPI backend
- Polling the health endpoint until the service is up
- Graceful shutdown on Ctrl+C
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import time
import urllib.error
import urllib.request
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
UVICORN_APP = "src.beluga_content.api.server:app"


def check_env_vars() -> None:
    """Report which optional settings fall back to their defaults."""

    optional = ["CONTENT_API_URL", "CACHE_TTL_SECONDS", "SANITY_PROJECT_ID", "SANITY_DATASET"]
    for var in optional:
        if not os.environ.get(var):
            print(f"[env] Note: {var} not set, using default.")


def start_process(label: str, command: Sequence[str], env: dict[str, str]) -> subprocess.Popen:
    """Launch a child process and return the handle."""

    print(f"[{label}] {' '.join(command)}")
    return subprocess.Popen(  # noqa: S603 - command constructed above
        command,
        cwd=ROOT_DIR,
        env=env,
    )


def wait_for_backend(base_url: str, timeout: float) -> bool:
    """Poll the backend health endpoint until it responds or timeout occurs."""

    health_url = f"{base_url.rstrip('/')}/health"
    deadline = time.time() + timeout
    print(f"[backend] Waiting for health check at {health_url} ...")
    while time.time() < deadline:
        try:
            with urllib.request.urlopen(health_url, timeout=3):  # noqa: S310
                print("[backend] Health check succeeded.")
                return True
        except urllib.error.URLError:
            time.sleep(1.0)
    print("[backend] Health check timed out.")
    return False


def shutdown_process(proc: subprocess.Popen | None, label: str) -> None:
    if proc is None or proc.poll() is not None:
        return

    print(f"[{label}] Stopping...")
    proc.terminate()
    try:
        proc.wait(timeout=10)
    except subprocess.TimeoutExpired:
        print(f"[{label}] Terminate timed out. Killing...")
        proc.kill()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Start the Beluga content API.")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind.")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes.")
    parser.add_argument(
        "--health-timeout",
        type=float,
        default=30.0,
        help="Seconds to wait for the health check before giving up.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    env_file = ROOT_DIR / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        print(f"[env] Loaded environment from {env_file}")
    check_env_vars()

    command = [
        sys.executable,
        "-m",
        "uvicorn",
        UVICORN_APP,
        "--host",
        args.host,
        "--port",
        str(args.port),
    ]
    if args.reload:
        command.append("--reload")

    backend: subprocess.Popen | None = None
    try:
        backend = start_process("backend", command, dict(os.environ))
        if not wait_for_backend(f"http://{args.host}:{args.port}", args.health_timeout):
            return 1
        print(f"[backend] Serving on http://{args.host}:{args.port} (Ctrl+C to stop)")
        backend.wait()
    except KeyboardInterrupt:
        print("\n[main] Interrupted.")
    finally:
        shutdown_process(backend, "backend")
    return 0 if backend is None else (backend.returncode or 0)


if __name__ == "__main__":
    raise SystemExit(main())
