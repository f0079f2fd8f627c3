"""API endpoints for the bcmath adapter."""

from collections.abc import Callable

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from bcnum import engine
from bcnum.api.models import BcMathRequest, BcMathResponse, ErrorResponse, Operation
from bcnum.config import EngineConfig
from bcnum.context import ScaleContext
from bcnum.errors import BcMathError

logger = structlog.get_logger()

router = APIRouter()

# Loaded once at import; override get_engine_config in tests
ENGINE_CONFIG = EngineConfig.from_env()

OPERATIONS: dict[Operation, Callable[..., str | int]] = {
    Operation.ADD: engine.add,
    Operation.SUB: engine.sub,
    Operation.MUL: engine.mul,
    Operation.DIV: engine.div,
    Operation.MOD: engine.mod,
    Operation.POW: engine.pow,
    Operation.POWMOD: engine.powmod,
    Operation.SQRT: engine.sqrt,
    Operation.COMPARE: engine.compare,
}


def get_engine_config() -> EngineConfig:
    """Dependency provider for the engine configuration.

    Override this in tests to change limits or the default scale:
        app.dependency_overrides[get_engine_config] = lambda: EngineConfig(default_scale=4)
    """
    return ENGINE_CONFIG


@router.post(
    "/bcmath/{operation}",
    response_model=BcMathResponse,
    responses={400: {"model": ErrorResponse}},
)
def calculate(
    operation: Operation,
    request: BcMathRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> BcMathResponse:
    """Run one operation in a fresh execution context.

    Error Handling:
        - Wrong operand count or oversized operand: 422
        - Engine errors (malformed operand, division by zero, ...): 400 with
          the error kind, see bcmath_error_handler
    """
    if len(request.operands) != operation.arity:
        raise HTTPException(
            status_code=422,
            detail=f"{operation.value} takes {operation.arity} operand(s), "
            f"got {len(request.operands)}",
        )

    longest = max(len(operand) for operand in request.operands)
    if longest > config.max_operand_length:
        raise HTTPException(
            status_code=422,
            detail=f"Operand longer than {config.max_operand_length} characters",
        )

    ctx = ScaleContext(config.default_scale)
    if request.default_scale is not None:
        ctx.set_scale(request.default_scale)

    logger.info(
        "bcmath_request",
        operation=operation.value,
        operand_count=len(request.operands),
        scale=request.scale,
        context_scale=ctx.get_scale(),
    )

    result = OPERATIONS[operation](ctx, *request.operands, scale=request.scale)
    return BcMathResponse(result=result, scale=ctx.get_scale())


async def bcmath_error_handler(request: Request, exc: BcMathError) -> JSONResponse:
    """Translate engine errors into 400 responses carrying the error kind."""
    logger.warning(
        "bcmath_error",
        path=request.url.path,
        kind=exc.kind.value,
        detail=str(exc),
    )
    body = ErrorResponse(error=exc.kind.value, detail=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())
