# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Step Executor API Server.

Usage:
    uvicorn main:app --host 0.0.0.0 --port $PORT
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Tuple

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse

from api.logging_utils import set_log_base
from api.router import api_router
from container import Container, container, get_outputs_config

APP_VERSION = "1.0.0"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Point step logs at the configured directory and prepare staging."""
    outputs_config = get_outputs_config()
    set_log_base(Path(outputs_config.log_base))
    try:
        Path(outputs_config.staging_dir).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning(
            "Staging directory %s is not usable: %s", outputs_config.staging_dir, exc
        )
    logger.info(
        "Step Executor ready: container=%s, backend=%s, workers=%d",
        Container.__name__,
        outputs_config.backend,
        outputs_config.max_workers,
    )
    yield
    logger.info("Step Executor shutting down")


app = FastAPI(
    title="Step Executor API",
    description="Saves the artifacts produced by workflow steps and reports them",
    version=APP_VERSION,
    lifespan=lifespan,
)
app.container = container
app.include_router(api_router)


@app.get("/", summary="Service information")
async def root() -> dict:
    return {"service": "step-executor", "version": APP_VERSION, "docs": app.docs_url}


@app.get("/health", summary="Health check", status_code=status.HTTP_200_OK)
async def health_check() -> dict:
    """Liveness check that also reports the active container profile."""
    return {"status": "healthy", "container": Container.__name__}


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):  # pylint: disable=unused-argument
    """Turn anything the routes did not map into a generic 500."""
    logger.exception("Unhandled exception occurred")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "error", "message": "An internal server error occurred"},
    )


def get_server_config() -> Tuple[str, int]:
    """Read HOST and PORT from the environment.

    Raises:
        ValueError: If HOST is blank or PORT is missing, non-numeric or out of range.
    """
    host = os.getenv("HOST", "0.0.0.0").strip()
    if not host:
        raise ValueError("HOST environment variable cannot be empty")

    port_env = os.getenv("PORT", "").strip()
    if not port_env.isdigit():
        raise ValueError(f"PORT must be set to a positive integer, got: {port_env!r}")
    port = int(port_env)
    if not 1 <= port <= 65535:
        raise ValueError(f"Port {port} is not in valid range 1-65535")
    return host, port


if __name__ == "__main__":
    import uvicorn

    server_host, server_port = get_server_config()
    logger.info("Starting Step Executor API server on %s:%d", server_host, server_port)
    uvicorn.run("main:app", host=server_host, port=server_port)
