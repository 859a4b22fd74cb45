"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_exception_handlers, register_routes
from .core import ALLOWED_CORS_ORIGINS, LOG_LEVEL


def create_app() -> FastAPI:
    logging.basicConfig(
        level=LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )

    app = FastAPI(title="Score Gateway", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("score_gateway.app:app", host="127.0.0.1", port=8787, reload=True)
