"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.routes import check, pages
from app.config import settings
from app.core.correction_gateway import build_gateway
from app.core.errors import INVALID_REQUEST_MESSAGE, GatewayError
from app.middleware.request_id import RequestIDLogFilter, RequestIDMiddleware
from app.services.llm_client import LLMProvider, get_provider_config

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

# Configure logging format based on dev_mode
_log_handler = logging.StreamHandler()
_log_handler.addFilter(RequestIDLogFilter())

if not settings.dev_mode:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=(
            '{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s",'
            '"request_id":"%(request_id)s","message":"%(message)s"}'
        ),
        handlers=[_log_handler],
    )
else:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s [%(request_id)s]: %(message)s",
        handlers=[_log_handler],
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared HTTP client and the provider chain for the process lifetime."""
    client = httpx.AsyncClient(
        timeout=httpx.Timeout(
            settings.llm_timeout_seconds, connect=settings.llm_connect_timeout_seconds,
        ),
    )
    app.state.gateway = build_gateway(settings, client)
    logger.info("Correction gateway ready (%d providers)", len(app.state.gateway.providers))
    yield
    app.state.gateway = None
    await client.aclose()


app = FastAPI(
    title="Writing Helper API",
    description="Spelling, grammar and paragraph feedback for young writers",
    version="0.1.0",
    docs_url="/docs" if settings.dev_mode else None,
    redoc_url="/redoc" if settings.dev_mode else None,
    lifespan=lifespan,
)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


# ---------------------------------------------------------------------------
# Security headers middleware
# ---------------------------------------------------------------------------

class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "same-origin"
        if not settings.dev_mode:
            response.headers["Strict-Transport-Security"] = (
                "max-age=63072000; includeSubDomains"
            )
        return response


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIDMiddleware)


# ---------------------------------------------------------------------------
# Exception handlers: every error body is {"error": "<message>"}
# ---------------------------------------------------------------------------

@app.exception_handler(GatewayError)
async def _gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.info("%s on %s -> %d", type(exc).__name__, request.url.path, exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Rejected malformed body on %s: %d error(s)", request.url.path, len(exc.errors()))
    return JSONResponse(status_code=400, content={"error": INVALID_REQUEST_MESSAGE})


@app.exception_handler(Exception)
async def _global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=True)
    detail = str(exc) if settings.dev_mode else "Internal server error"
    return JSONResponse(status_code=500, content={"error": detail})


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "X-Request-ID"],
)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(check.router, tags=["check"])
app.include_router(pages.router, tags=["pages"])


# ---------------------------------------------------------------------------
# System endpoints
# ---------------------------------------------------------------------------


@app.get("/health")
async def health_check() -> dict:
    """Liveness check: reports which providers have credentials."""
    services = {}
    for provider in LLMProvider:
        cfg = get_provider_config(provider, settings)
        services[provider.value] = "configured" if cfg.is_configured else "not_configured"
    return {"status": "healthy", "services": services}
