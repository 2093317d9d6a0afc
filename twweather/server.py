from datetime import UTC, datetime
from importlib import import_module
from pathlib import Path

import structlog
from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .responses import error_response
from .settings import Settings

logger = structlog.get_logger()

router = APIRouter()


@router.get("/")
async def get_index() -> dict:
    return {
        "message": "Welcome to the CWA weather forecast API",
        "endpoints": {
            "kaohsiung": "/api/weather/kaohsiung",
            "health": "/api/health",
        },
    }


@router.get("/api/health")
async def get_health() -> dict:
    timestamp = datetime.now(UTC).isoformat(timespec="milliseconds")
    return {"status": "OK", "timestamp": timestamp.replace("+00:00", "Z")}


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Unknown paths and unsupported methods are both reported as not found
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return error_response(status.HTTP_404_NOT_FOUND, error="Path not found")

    return error_response(exc.status_code, error=str(exc.detail))


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    logger.error("Unhandled error", path=request.url.path, exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, error="Server error", message=str(exc)
    )


def load_apps(app: FastAPI, path: Path) -> None:
    for api_module in path.glob("*/api.py"):

        # Construct the name of the module
        relative_path = api_module.relative_to(Path(__file__).parent)
        module_path = ".".join(p.name for p in reversed(relative_path.parents))
        module_name = f"{module_path}.{api_module.stem}"

        # Register the module
        module = import_module(module_name, package="twweather")
        if api_router := getattr(module, "router", None):
            app.include_router(api_router)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create the application. Settings are loaded from the environment (and a
    .env file) if not given. Run with:

        uvicorn twweather.server:create_app --factory
    """

    if settings is None:
        load_dotenv()
        settings = Settings.from_env()

    app = FastAPI(title="twweather")
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(
        StarletteHTTPException,
        http_exception_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(router)
    load_apps(app, Path(__file__).parent)

    return app
