"""Pydantic models for the bcmath HTTP adapter."""

from enum import Enum

from pydantic import BaseModel, Field


class Operation(str, Enum):
    """Operations exposed over HTTP."""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    POW = "pow"
    POWMOD = "powmod"
    SQRT = "sqrt"
    COMPARE = "compare"

    @property
    def arity(self) -> int:
        """Number of operands the operation takes."""
        if self is Operation.SQRT:
            return 1
        if self is Operation.POWMOD:
            return 3
        return 2


class BcMathRequest(BaseModel):
    """One call into the engine. The request is its own execution context."""

    operands: list[str] = Field(
        min_length=1,
        max_length=3,
        description="Operand literals, e.g. ['1.5', '2'].",
    )
    scale: int | None = Field(
        default=None,
        description="Explicit result scale. Omit to use the context's default scale.",
    )
    default_scale: int | None = Field(
        default=None,
        description="Default scale of this request's context. Negative values clamp to 0.",
    )


class BcMathResponse(BaseModel):
    """Result of a successful call."""

    result: str | int = Field(description="Canonical decimal text, or -1/0/1 for compare.")
    scale: int = Field(description="Default scale of the context after the call.")


class ErrorResponse(BaseModel):
    """Engine error translated for HTTP clients."""

    error: str = Field(description="Error kind, e.g. 'division_by_zero'.")
    detail: str
