"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from plankcut.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Plank Cut Planner",
        description="Cut list and offcut planning for plank flooring layouts",
        version="0.1.0",
    )

    # CORS — allow the browser front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
