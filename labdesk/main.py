from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from labdesk.api import admin, public
from labdesk.core.config import Settings
from labdesk.core.errors import AuthError, IntakeError
from labdesk.core.logger import logger, setup_logging
from labdesk.services.collection_store import CollectionStore


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL, settings.ERROR_LOG_PATH)

    store = CollectionStore(settings.DATA_DIR)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(f"🚀 Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")
        store.ensure_data_dir()
        if settings.uses_default_admin_pass:
            logger.warning("⚠️ ADMIN_PASS is not set, the built-in default password is in use")
        yield
        # Shutdown
        logger.info("🛑 Shutting down backend")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store = store

    @app.exception_handler(IntakeError)
    async def intake_error_handler(request: Request, exc: IntakeError):
        if isinstance(exc, AuthError):
            return PlainTextResponse(exc.message, status_code=exc.status_code)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected malformed body on {}: {}", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Missing or invalid fields"})

    # Global Exception Handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error("🔥 UNHANDLED ERROR: {}", exc)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    app.include_router(public.router, prefix="/api", tags=["Intake"])
    app.include_router(admin.router, prefix="/admin", tags=["Admin"])

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "environment": settings.ENVIRONMENT, "timestamp": datetime.now().isoformat()}

    # Static site last so it never shadows the API
    if Path(settings.STATIC_DIR).is_dir():
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

    return app


if __name__ == "__main__":
    import uvicorn
    default_settings = Settings()
    uvicorn.run("labdesk.main:create_app", factory=True, host=default_settings.HOST, port=default_settings.PORT)
