# review_api/main.py

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from review_api.api.api import api_router
from review_api.core.config import Settings, settings
from review_api.core.errors import register_exception_handlers
from review_api.core.logging_config import configure_logging
from review_api.db.init_db import init_db

logger = logging.getLogger(__name__)


def check_startup_config(config: Settings) -> None:
    """
    Refuse to start without a database; warn about the fallback JWT secret.
    """
    if not config.database_url:
        logger.error("Missing DATABASE_URL environment variable. Set it before starting the server.")
        raise SystemExit(1)

    if config.uses_default_jwt_secret:
        logger.warning(
            "JWT_SECRET is not set; signing tokens with the insecure development "
            "secret. Production deployments must set JWT_SECRET."
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    check_startup_config(settings)
    init_db()
    logger.info("Database ready")
    logger.info("Environment: %s", settings.environment)
    yield


def mount_frontend(app: FastAPI, dist_dir: Path) -> bool:
    """
    Serve the built React app from `dist_dir`, falling back to index.html
    for client-side routes. Returns False when there is no build.
    """
    index_file = dist_dir / "index.html"
    if not index_file.is_file():
        logger.info("No frontend build found at %s - skipping static file hosting.", dist_dir)
        return False

    assets_dir = dist_dir / "assets"
    if assets_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")

    root = dist_dir.resolve()

    @app.get("/{full_path:path}", include_in_schema=False)
    def serve_frontend(full_path: str):
        if full_path.startswith(("auth/", "api/")):
            raise HTTPException(status_code=404, detail="Not Found")
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        return FileResponse(index_file)

    return True


def create_application(config: Settings = settings) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(api_router)

    # ---------- STATIC FILES ----------
    # Catch-all route, so it has to be registered after the API routers
    if config.is_production:
        mount_frontend(app, Path(config.frontend_dist_dir))

    return app


app = create_application()


if __name__ == "__main__":
    uvicorn.run("review_api.main:app", host="0.0.0.0", port=settings.port)
