"""Main FastAPI server for the audio capture relay."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, WebSocket
from fastapi.staticfiles import StaticFiles
from fastapi.responses import ORJSONResponse

from relay.state import RuntimeDeps
from relay.state.settings import AppSettings
from relay.handlers.upload import handle_upload
from relay.runtime.settings import load_settings
from relay.runtime.logging import configure_logging
from relay.runtime.dependencies import build_runtime_deps
from relay.handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)

configure_logging()


def _runtime_deps(app: FastAPI) -> RuntimeDeps:
    runtime_deps = getattr(app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


def create_app(settings: AppSettings | None = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.runtime_deps = build_runtime_deps(settings)
        logger.info("runtime: ready")
        try:
            yield
        finally:
            app.state.runtime_deps = None

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/upload")
    async def upload(request: Request) -> ORJSONResponse:
        return await handle_upload(request, _runtime_deps(app).settings.storage.recordings_dir)

    @app.websocket(settings.server.ws_endpoint_path)
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await handle_websocket_connection(websocket, _runtime_deps(app))

    # Mounted last so it never shadows the routes above.
    if settings.server.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.server.public_dir, html=True), name="public")

    return app


app = create_app()


def main() -> None:
    settings = load_settings()
    logger.info("listening on http://%s:%s", settings.server.host, settings.server.port)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)


if __name__ == "__main__":
    main()
