"""
Health endpoints.

Key behaviors:
- /health: overall status from all registered checks (503 if any fails)
- /health/live: liveness probe (process alive)
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# --- Types ---


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass
class CheckResult:
    """Result of a single health check."""

    name: str
    status: HealthStatus
    message: str = ""


class HealthCheck(Protocol):
    """Protocol for health checks."""

    name: str

    def check(self) -> CheckResult:
        """Run the health check and return result."""
        ...


# --- Startup Tracker ---


class StartupTracker:
    """Tracks application startup time for uptime calculation."""

    _start_time: float | None = None

    @classmethod
    def mark_started(cls) -> None:
        cls._start_time = time.time()

    @classmethod
    def get_uptime_seconds(cls) -> float:
        if cls._start_time is None:
            return 0.0
        return time.time() - cls._start_time

    @classmethod
    def is_started(cls) -> bool:
        return cls._start_time is not None


# --- Health Check Registry ---


class HealthCheckRegistry:
    """Registry of health checks to run."""

    def __init__(self) -> None:
        self._checks: list[HealthCheck] = []

    def register(self, check: HealthCheck) -> None:
        self._checks.append(check)

    def run_all(self) -> list[CheckResult]:
        return [check.check() for check in self._checks]

    def clear(self) -> None:
        self._checks = []


_registry = HealthCheckRegistry()


def get_health_registry() -> HealthCheckRegistry:
    """Get the global health check registry."""
    return _registry


# --- Built-in Checks ---


class StartupCheck:
    """Check if application has completed startup."""

    name = "startup"

    def check(self) -> CheckResult:
        if StartupTracker.is_started():
            return CheckResult(self.name, HealthStatus.HEALTHY, "Startup complete")
        return CheckResult(self.name, HealthStatus.UNHEALTHY, "Startup not complete")


class RulesCheck:
    """Check that the rules file still loads."""

    name = "rules"

    def __init__(self, load_fn: Callable[[], Any]) -> None:
        self._load_fn = load_fn

    def check(self) -> CheckResult:
        try:
            self._load_fn()
        except (FileNotFoundError, ValueError) as e:
            return CheckResult(self.name, HealthStatus.UNHEALTHY, f"Rules error: {e!s}")
        return CheckResult(self.name, HealthStatus.HEALTHY, "Rules loaded")


# --- FastAPI Router ---


def create_health_router(
    version: str = "0.0.0",
    registry: HealthCheckRegistry | None = None,
) -> APIRouter:
    """
    Create FastAPI router for health endpoints.

    Args:
        version: Application version string
        registry: Health check registry (uses global if None)

    Returns:
        FastAPI router with health endpoints
    """
    router = APIRouter(tags=["health"])
    reg = registry or get_health_registry()

    @router.get(
        "/health",
        response_model=None,
        responses={
            200: {"description": "Service is healthy"},
            503: {"description": "Service is unhealthy"},
        },
    )
    def health_check() -> JSONResponse:
        """Overall health status based on all registered checks."""
        results = reg.run_all()
        healthy = all(r.status == HealthStatus.HEALTHY for r in results)
        overall = HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY

        response = {
            "status": overall.value,
            "version": version,
            "uptime_seconds": StartupTracker.get_uptime_seconds(),
            "checks": [
                {"name": r.name, "status": r.status.value, "message": r.message} for r in results
            ],
        }
        status_code = status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(content=response, status_code=status_code)

    @router.get("/health/live", response_model=None)
    def liveness_check() -> JSONResponse:
        """Liveness probe; always 200 while the process responds."""
        return JSONResponse(
            content={"alive": True, "uptime_seconds": StartupTracker.get_uptime_seconds()},
            status_code=status.HTTP_200_OK,
        )

    return router


def setup_default_health_checks(
    load_rules_fn: Callable[[], Any],
    registry: HealthCheckRegistry | None = None,
) -> None:
    """Register the startup and rules checks (once per registry)."""
    reg = registry or get_health_registry()
    reg.clear()
    reg.register(StartupCheck())
    reg.register(RulesCheck(load_rules_fn))


def mark_startup_complete() -> None:
    StartupTracker.mark_started()
