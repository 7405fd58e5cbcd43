import logging
import os
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from openrouter_dashboard.config.settings import settings
from openrouter_dashboard.core.errors import ConfigError, GatewayError
from openrouter_dashboard.core.logging_config import setup_logging
from openrouter_dashboard.core.security import token_required
from openrouter_dashboard.routers import api, health, ui
from openrouter_dashboard.utils.response import error_response

# inicializar logging lo antes posible
setup_logging()
logger = logging.getLogger("openrouter_dashboard")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Refuse to serve without both secrets configured."""
    try:
        settings.validate()
    except ConfigError as e:
        for line in e.lines():
            logger.critical(line)
        raise
    if not os.path.isdir(settings.STATIC_DIR):
        logger.warning("Static directory %s does not exist; dashboard assets will not be served", settings.STATIC_DIR)
    logger.info("OpenRouter Dashboard ready (upstream %s)", settings.OPENROUTER_BASE_URL)
    yield
    logger.info("OpenRouter Dashboard stopped")


app = FastAPI(
    title="OpenRouter Dashboard",
    description="Token-protected proxy for OpenRouter usage stats plus the dashboard UI",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(health.router)
# el token se valida en el router, no en cada endpoint
app.include_router(api.router, dependencies=[Depends(token_required)])
app.include_router(ui.router)
# static mount must stay last: it claims every path the routers above did not
app.mount("/", ui.static_files(), name="static")


def apply_frame_policy(response):
    """Allow the dashboard to be embedded in third-party pages.

    Controlled by `FRAME_ANCESTORS`; an empty value leaves responses untouched.
    """
    if settings.FRAME_ANCESTORS:
        if "x-frame-options" in response.headers:
            del response.headers["x-frame-options"]
        response.headers["Content-Security-Policy"] = f"frame-ancestors {settings.FRAME_ANCESTORS}"
    return response


@app.middleware("http")
async def frame_policy(request: Request, call_next):
    response = await call_next(request)
    return apply_frame_policy(response)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Middleware simple para registrar peticiones entrantes y respuestas.

    Registra: method, path, status_code, elapsed_ms. Only the path is logged,
    so the `token` query parameter never reaches the logs.
    """
    start = time.time()
    response = await call_next(request)
    elapsed = (time.time() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed:.1f}ms)")
    return response


@app.exception_handler(GatewayError)
async def gateway_exception_handler(request: Request, exc: GatewayError):
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=error_response(str(exc.detail)), headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # runs in ServerErrorMiddleware, outside frame_policy
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    response = JSONResponse(status_code=500, content=error_response("Internal server error", message=str(exc)))
    return apply_frame_policy(response)
