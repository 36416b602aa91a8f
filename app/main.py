from __future__ import annotations

from fastapi import FastAPI


def create_app() -> FastAPI:
    app = FastAPI(title="Retrieval Function Selection Lab", version="0.1.0")

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    from app.routes import chat, functions, scenarios  # noqa: WPS433

    app.include_router(chat.router)
    app.include_router(functions.router)
    app.include_router(scenarios.router)
    return app


app = create_app()
