"""Module: main."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vetclinic.api.api import api_router
from vetclinic.core.config import settings
from vetclinic.core.exceptions import ClinicError
from vetclinic.core.logging import configure_logging
from vetclinic.db.init_db import init_db
from vetclinic.middleware.access_log import AccessLogMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if settings.create_tables_on_startup:
        init_db()
    logger.info("Vet Clinic API started (prefix=%s)", settings.api_prefix)
    yield
    logger.info("Vet Clinic API shutting down")


def _error_body(code: str, message: str) -> dict[str, str]:
    return {"error": code, "message": message}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ClinicError)
    async def clinic_error_handler(request: Request, exc: ClinicError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s %s", request.method, request.url.path, exc.message, exc.context)
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.code, exc.message))

    # Malformed bodies and non-numeric path ids are validation failures (400), not 422.
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query"))
            message = f"Invalid {location}: {first.get('msg', 'invalid value')}" if location else first.get("msg", "Invalid request")
        else:
            message = "Invalid request"
        return JSONResponse(status_code=400, content=_error_body("validation_error", message))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content=_error_body("internal_error", "An unexpected error occurred"))


def create_app() -> FastAPI:
    app = FastAPI(title="Vet Clinic API", version="0.1.0", lifespan=lifespan)

    app.include_router(api_router, prefix=settings.api_prefix)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(AccessLogMiddleware)

    register_exception_handlers(app)
    return app


app = create_app()


def run() -> None:
    uvicorn.run("vetclinic.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
