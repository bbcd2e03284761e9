"""
Users API — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI

from api.middleware import register_exception_handlers, register_middleware
from api.users import router as users_router
from auth.routes import router as auth_router
from config.settings import config
from database.helpers import build_store

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("asyncio", "watchfiles"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

DOCS_PATH = "/api-docs"


def create_app() -> FastAPI:
    app = FastAPI(
        title="Users API",
        version="1.0.0",
        description=(
            "In-memory user management with JWT login and registration. "
            "Protected routes expect `Authorization: Bearer <token>`."
        ),
        docs_url=DOCS_PATH,
        openapi_url=f"{DOCS_PATH}/openapi.json",
        redoc_url=None,
    )

    # Each app owns its store; state is lost on restart.
    app.state.store = build_store()

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router, prefix="/api/auth")
    app.include_router(users_router, prefix="/api/users")

    if config.uses_default_secret:
        logger.warning("JWT_SECRET is not set; using the insecure demo default.")

    return app


app = create_app()

if __name__ == "__main__":
    logger.info("Server running at http://localhost:%d (docs at %s)", config.port, DOCS_PATH)
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
