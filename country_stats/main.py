# country_stats/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional
import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from country_stats.config import ConfigError, Settings, load_settings
from country_stats.providers.disease_provider import CountryStatsProvider, FetchError, build_client
from country_stats.routes import countries, probe

logger = logging.getLogger("country-stats")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def _fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    # never echo the cause; it is already in the log
    logger.error("fetch failed for %s (%s)", request.url.path, exc.kind.value)
    return JSONResponse(status_code=502, content={"detail": "upstream fetch failed"})


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]
    logger.info("rejected %s?%s: %s", request.url.path, request.url.query, errors)
    return JSONResponse(
        status_code=400,
        content={"detail": "invalid request parameters", "errors": errors},
    )


def create_app(settings: Settings, transport: Optional[httpx.BaseTransport] = None) -> FastAPI:
    """
    Wire the routers to one provider bound to `settings.upstream_url`.

    `transport` is handed to the httpx client (tests pass a MockTransport).
    """
    client = build_client(settings, transport=transport)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("[init] upstream: %s (timeout %.1fs)", settings.upstream_url, settings.timeout)
        yield
        client.close()

    app = FastAPI(
        title="Country Stats API",
        description="Country-level epidemiological statistics, optionally range-filtered",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.provider = CountryStatsProvider(settings.upstream_url, client)

    app.add_exception_handler(FetchError, _fetch_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(countries.router)
    app.include_router(probe.router)
    return app


def run() -> None:
    """Console entry point: fail fast on bad config, then serve."""
    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging("INFO")
        logger.error("configuration error: %s", e)
        raise SystemExit(1) from e

    configure_logging(settings.log_level)

    import uvicorn

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
