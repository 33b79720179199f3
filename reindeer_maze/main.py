"""Reindeer Maze API - Main FastAPI Application."""

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from reindeer_maze.config import configure_logging, get_settings
from reindeer_maze.api.routes import maze

settings = get_settings()

configure_logging(settings)
logger = logging.getLogger("reindeer_maze")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request on completion and echo its correlation ID."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} "
            f"-> {response.status_code} ({elapsed_ms:.2f}ms)"
        )
        response.headers["X-Request-ID"] = request_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        f"Starting {settings.app_name} API "
        f"(step_cost={settings.step_cost}, turn_cost={settings.turn_cost}, "
        f"facing={settings.initial_direction})"
    )
    yield
    logger.info(f"Shutting down {settings.app_name} API...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Lowest-score routes through turn-costly grid mazes",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": settings.app_version}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


app.include_router(maze.router, prefix="/v1")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("reindeer_maze.main:app", host="0.0.0.0", port=8000)
