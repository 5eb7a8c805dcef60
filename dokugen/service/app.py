"""FastAPI application exposing project introspection over HTTP."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..errors import ConfigError, NoFilesFoundError
from ..introspection import IntrospectionEngine
from ..models import IntrospectionResult


class IntrospectRequest(BaseModel):
    path: str
    include_snippets: bool = True


class FeaturesResponse(BaseModel):
    hasContainer: bool
    hasApi: bool
    hasDatabase: bool


class IntrospectResponse(BaseModel):
    languageLabel: str
    files: list[str]
    features: FeaturesResponse
    snippetBundle: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_engine() -> IntrospectionEngine:
    return IntrospectionEngine()


def create_app(
    engine_factory: Callable[[], IntrospectionEngine] = _default_engine,
) -> FastAPI:
    """Create the FastAPI application exposing dokugen introspection."""

    app = FastAPI(title="Dokugen Service", version=__version__)

    async def get_engine() -> IntrospectionEngine:
        # Fresh engine per request; nothing is shared between runs.
        return engine_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/introspect", response_model=IntrospectResponse, response_model_exclude_none=True)
    async def introspect(
        payload: IntrospectRequest,
        engine: IntrospectionEngine = Depends(get_engine),
    ) -> Dict[str, object]:
        def _run() -> IntrospectionResult:
            return engine.introspect(payload.path)

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run)
        return result.to_payload(include_snippets=payload.include_snippets)

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(PermissionError)
    async def permission_error_handler(_: Any, exc: PermissionError) -> JSONResponse:
        return JSONResponse(status_code=403, content={"detail": str(exc)})

    @app.exception_handler(NoFilesFoundError)
    async def no_files_handler(_: Any, exc: NoFilesFoundError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)


__all__ = ["create_app", "run_service"]
