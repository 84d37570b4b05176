"""NoteKeeper ASGI application.

Run with ``uvicorn notekeeper.main:app`` or ``python -m notekeeper.main``.
"""
from contextlib import asynccontextmanager
from http import HTTPStatus
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import auth_router, health_router, notes_router, users_router
from .config import get_settings
from .core.exceptions import AppError, InvalidRequestError, NotFoundError, UnauthorizedError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import ErrorResponse
from .core.services import AuthService

setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the upload directory and the first admin account."""
    active_settings = app.dependency_overrides.get(get_settings, get_settings)()
    logger.info(
        "Starting NoteKeeper application",
        extra={
            "version": __version__,
            "environment": active_settings.environment,
            "debug": active_settings.debug,
        },
    )

    Path(active_settings.upload_dir).mkdir(parents=True, exist_ok=True)

    if await AuthService(active_settings).ensure_initial_admin():
        logger.info("Initial admin account created")

    yield

    logger.info("Shutting down NoteKeeper application")


app = FastAPI(
    title="NoteKeeper",
    description="Notes and user management API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc, AppError):
        error, details = exc.error_code, exc.details
    else:
        error, details = HTTPStatus(exc.status_code).phrase.replace(" ", ""), None

    body = ErrorResponse(error=error, message=str(exc.detail), details=details)
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error as an ErrorResponse body."""
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Validation failures get the same body as every other error.

    A note id that is not a number names no note, and a login body that
    does not hold a username and password is a failed login.
    """
    errors = exc.errors()
    if any(tuple(e.get("loc", ()))[:2] == ("path", "note_id") for e in errors):
        return _error_response(NotFoundError("Note not found"))
    if request.url.path.rstrip("/") == "/api/login":
        return _error_response(UnauthorizedError("Invalid login credentials"))

    details = {
        "errors": [
            {"loc": [str(part) for part in e.get("loc", ())], "msg": e.get("msg"), "type": e.get("type")}
            for e in errors
        ]
    }
    return _error_response(InvalidRequestError(details=details))


app.include_router(auth_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(health_router, prefix="/api")


@app.get("/api/")
async def api_index():
    """Entry points of the API, for people poking at it by hand."""
    return {
        "message": settings.app_name,
        "version": __version__,
        "docs": app.docs_url,
        "endpoints": {
            "login": "/api/login",
            "logout": "/api/logout",
            "check_auth": "/api/check-auth",
            "notes": "/api/notes",
            "users": "/api/users",
            "health": "/api/health",
        },
    }


@app.get("/health")
async def basic_health():
    """Liveness probe that never touches the stores."""
    return {"status": "ok"}


app.mount(
    settings.upload_url_prefix,
    StaticFiles(directory=settings.upload_dir, check_dir=False),
    name="uploads",
)

# The client is served from static_dir when it is deployed alongside the API
if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
else:
    @app.get("/")
    async def root():
        return {"message": "NoteKeeper API"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("notekeeper.main:app", host=settings.host, port=settings.port, reload=settings.reload)
