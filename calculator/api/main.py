import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from calculator import __version__
from calculator.api.deps import get_rules, get_settings
from calculator.app_shell.config import (
    configure_logging,
    resolve_log_level,
    validate_startup_rules,
)
from calculator.components.formatting import render_error
from calculator.rules.loader import load_rules
from calculator.shell.http.health import (
    create_health_router,
    mark_startup_complete,
    setup_default_health_checks,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = get_rules()
        validate_startup_rules(rules)
        log_level = resolve_log_level(settings.log_level, rules)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Startup configuration failed: %s", e)
        sys.exit(1)

    configure_logging(log_level)
    logger.info("Rules loaded from %s", settings.rules_path)

    setup_default_health_checks(lambda: load_rules(settings.rules_path))
    mark_startup_complete()
    yield


app = FastAPI(
    title="Calculator API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    """Missing or unparsable query parameters become a plain-text 400."""
    errors = exc.errors()
    loc = errors[0].get("loc", ()) if errors else ()
    name = loc[-1] if loc else "request"
    return PlainTextResponse(
        render_error(f"Invalid value for parameter '{name}'"),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


# --- Routers ---
from calculator.api.routes import operations  # noqa: E402

app.include_router(operations.router, prefix="", tags=["Calculator"])
app.include_router(create_health_router(version=__version__))


# CORS (Allow Frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)
