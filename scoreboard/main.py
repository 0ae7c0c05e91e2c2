import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from scoreboard.create_store import create_store
from scoreboard.load_secrets import (
    app_env,
    cors_origins,
    host,
    log_level,
    port,
    redis_url,
)
from scoreboard.models.dc_models import HealthModel
from scoreboard.routers import leaderboard
from scoreboard.stores.base import RankedScoreStore

logging.basicConfig(level=log_level)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logging.debug(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Missing or invalid required fields"},
    )


def create_app(store: RankedScoreStore | None = None) -> FastAPI:
    """Build the application. The store is created here and owned by the app.

    Args:
        store (RankedScoreStore | None, optional): Store to use instead of the
            configured one. Defaults to None.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store = store or create_store(redis_url, app_env)
        logging.info(f"Leaderboard server started with {app.state.store.name} store")
        try:
            yield
        finally:
            await app.state.store.close()
            logging.info("Stop Server")

    app = FastAPI(lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(leaderboard.leaderboard_router)

    @app.get("/health", response_model=HealthModel)
    async def health(request: Request):
        current_store: RankedScoreStore = request.app.state.store
        ok = await current_store.ping()
        return JSONResponse(
            status_code=status.HTTP_200_OK if ok else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"ok": ok, "backing": current_store.name},
        )

    return app


app = create_app()


def run() -> None:
    uvicorn.run("scoreboard.main:app", host=host, port=port)


if __name__ == "__main__":
    run()
