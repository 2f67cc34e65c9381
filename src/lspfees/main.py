"""Entry point serving the fee params API with uvicorn."""

from __future__ import annotations

import asyncio
import os
import sys

import uvicorn

# uvloop has no Windows build
if sys.platform != "win32":
    import uvloop

    asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())

from .envs.service_env import get_settings


def _reset_metrics_dir() -> None:
    """Empty PROMETHEUS_MULTIPROC_DIR so samples from a previous run are not aggregated."""
    metrics_dir = os.environ.get("PROMETHEUS_MULTIPROC_DIR")
    if not metrics_dir:
        return

    os.makedirs(metrics_dir, exist_ok=True)
    for filename in os.listdir(metrics_dir):
        file_path = os.path.join(metrics_dir, filename)
        if os.path.isfile(file_path):
            os.remove(file_path)


def main() -> None:
    settings = get_settings()

    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"Fee settings store: {settings.database_url}")
    print(f"Fee params API will be available at: http://{settings.api_host}:{settings.api_port}")
    print(f"Docs: http://{settings.api_host}:{settings.api_port}/docs")

    _reset_metrics_dir()

    uvicorn.run(
        "lspfees.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
        log_level="info",
    )


if __name__ == "__main__":
    main()
