"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ministry_hub.api import router as api_router
from ministry_hub.core.config import settings
from ministry_hub.core.security import ConfigurationError
from ministry_hub.services.route_guard import RouteGuard, RouteGuardMiddleware
from ministry_hub.services.storage import StorageError, StorageNotConfiguredError
from ministry_hub.services.upload_guard import UploadRateLimiter

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Ministry Hub API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.state.upload_limiter = UploadRateLimiter(
    settings.UPLOAD_RATE_LIMIT_PER_MINUTE,
    storage_uri=settings.UPLOAD_RATE_LIMIT_STORAGE_URI,
)

# Added first so CORS (added last) wraps guard responses too.
app.add_middleware(
    RouteGuardMiddleware,
    guard=RouteGuard(settings.protected_prefixes, login_path=settings.LOGIN_PATH),
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, **extra})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("loc", ("",))[0] == "path" for err in errors):
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid ID format")
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
            "message": err.get("msg", "Invalid value"),
        }
        for err in errors
    ]
    return _error(status.HTTP_400_BAD_REQUEST, "Validation failed", details=details)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = _error(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(StorageNotConfiguredError)
async def storage_not_configured_handler(request: Request, exc: StorageNotConfiguredError) -> JSONResponse:
    logger.error("Storage used but not configured", extra={"path": request.url.path})
    return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "File storage is not configured")


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    return _error(exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("Configuration error: %s", exc.message, extra={"path": request.url.path})
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path, "method": request.method})
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Ministry Hub API"}
