from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.routes import router as routes_router
from src.domain.exceptions import (
    EmptyRoute,
    RouteNotFound,
    RouteNotOptimizable,
    RouteOptimizationError,
)

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="binroute")
app.include_router(routes_router)


def _status_for(exc: RouteOptimizationError) -> int:
    if isinstance(exc, RouteNotFound):
        return 404
    if isinstance(exc, (RouteNotOptimizable, EmptyRoute)):
        return 400
    return 500


@app.exception_handler(RouteOptimizationError)
async def route_optimization_error_handler(
    request: Request, exc: RouteOptimizationError
) -> JSONResponse:
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.exception("Route optimization failed", extra={"path": request.url.path})
    else:
        logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Keep 500s as JSON; the message itself stays server-side.
    logger.exception("Unhandled exception", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
