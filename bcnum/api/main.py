"""FastAPI application exposing the bcmath engine.

Each request runs in its own execution context: a fresh ScaleContext is
created per call, so a default scale set by one request is never visible
to another.
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bcnum import __version__
from bcnum.api.endpoints import ENGINE_CONFIG, bcmath_error_handler, router
from bcnum.errors import BcMathError

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("BCNUM_HOST", "127.0.0.1")
PORT = int(os.environ.get("BCNUM_PORT", "8000"))
DEBUG = os.environ.get("BCNUM_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB)
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="bcnum",
    description="Arbitrary-precision decimal arithmetic with bcmath semantics",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests whose declared body is larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.add_exception_handler(BcMathError, bcmath_error_handler)  # type: ignore[arg-type]
app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - BCNUM_HOST: Host to bind to (default: 127.0.0.1)
    - BCNUM_PORT: Port to bind to (default: 8000)
    - BCNUM_DEBUG: Enable debug/reload mode (default: false)
    - BCNUM_DEFAULT_SCALE, BCNUM_MAX_OPERAND_LENGTH: see EngineConfig.from_env
    """
    logger.info(
        "bcnum_api_starting",
        host=HOST,
        port=PORT,
        reload=DEBUG,
        default_scale=ENGINE_CONFIG.default_scale,
        max_operand_length=ENGINE_CONFIG.max_operand_length,
    )
    uvicorn.run(
        "bcnum.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
