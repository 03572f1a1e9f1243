"""FastAPI application entrypoint for iconbuild service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import BuildConfig, ConfigError
from ..errors import IconBuildError
from ..orchestrator import BuildResult, Orchestrator


class BuildRequest(BaseModel):
    input_dir: str
    output_dir: str
    typescript: bool = False
    pattern: Optional[str] = None
    naming: Optional[str] = None


class BuildResponse(BaseModel):
    status: str
    components: List[str]
    index_path: str


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing icon builds."""

    app = FastAPI(title="iconbuild Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        # One orchestrator per request so collaborators never leak between builds.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/build", response_model=BuildResponse)
    async def build(
        payload: BuildRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> BuildResponse:
        config = BuildConfig(
            input_dir=payload.input_dir,
            output_dir=payload.output_dir,
            typescript=payload.typescript,
        ).with_overrides(pattern=payload.pattern, naming=payload.naming)

        def _run_build() -> BuildResult:
            # Prettier and filesystem calls block; keep them off the server loop.
            return asyncio.run(orchestrator.build(config))

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run_build)
        return BuildResponse(
            status="ok",
            components=[str(path) for path in result.components],
            index_path=str(result.index_path),
        )

    @app.exception_handler(IconBuildError)
    async def build_error_handler(
        _: Any, exc: IconBuildError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        _: Any, exc: ConfigError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    try:
        import uvicorn
    except ModuleNotFoundError as exc:
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install iconbuild[service]`."
        ) from exc

    app = create_app()
    uvicorn.run(app, host=host, port=port)
