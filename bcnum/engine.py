"""Text-level call surface of the engine.

Every function takes the caller's ScaleContext first, parses its operands,
runs the operation and formats the result. When no explicit scale is given,
mul, div, pow, powmod and sqrt use the context's scale; add, sub and mod use
their operands' own scales instead.

Usage pattern:
    from bcnum import engine
    from bcnum.context import ScaleContext

    ctx = ScaleContext()
    engine.set_scale(ctx, 3)
    engine.div(ctx, "1", "3")       # "0.333"
    engine.add(ctx, "1.5", "2.25")  # "3.75"

Or through the facade bound to one context:
    calc = BcMath.with_scale(5)
    calc.sqrt("2")                  # "1.41421"
"""

from __future__ import annotations

from bcnum import arithmetic
from bcnum.compare import compare as compare_values
from bcnum.context import ScaleContext, new_context
from bcnum.parsing import format_number, parse, parse_scale
from bcnum.powmod import powmod as powmod_values

__all__ = [
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "pow",
    "powmod",
    "sqrt",
    "compare",
    "get_scale",
    "set_scale",
    "bcscale",
    "BcMath",
]


def _target_scale(ctx: ScaleContext, scale: int | None) -> int:
    explicit = parse_scale(scale)
    return ctx.get_scale() if explicit is None else explicit


def add(ctx: ScaleContext, a: str, b: str, scale: int | None = None) -> str:
    """Add two numbers."""
    return format_number(arithmetic.add(parse(a), parse(b), parse_scale(scale)))


def sub(ctx: ScaleContext, a: str, b: str, scale: int | None = None) -> str:
    """Subtract b from a."""
    return format_number(arithmetic.sub(parse(a), parse(b), parse_scale(scale)))


def mul(ctx: ScaleContext, a: str, b: str, scale: int | None = None) -> str:
    """Multiply two numbers."""
    return format_number(arithmetic.mul(parse(a), parse(b), _target_scale(ctx, scale)))


def div(ctx: ScaleContext, a: str, b: str, scale: int | None = None) -> str:
    """Divide a by b.

    Raises:
        DivisionByZero: If b is zero
    """
    return format_number(arithmetic.div(parse(a), parse(b), _target_scale(ctx, scale)))


def mod(ctx: ScaleContext, a: str, b: str, scale: int | None = None) -> str:
    """Remainder of a divided by b; takes the sign of a.

    Raises:
        DivisionByZero: If b is zero
    """
    return format_number(arithmetic.mod(parse(a), parse(b), parse_scale(scale)))


def pow(ctx: ScaleContext, base: str, exponent: str, scale: int | None = None) -> str:
    """Raise base to a non-negative integer exponent.

    Raises:
        NonIntegerExponent: If exponent has a fractional part
        NegativeExponent: If exponent is negative
    """
    return format_number(
        arithmetic.pow(parse(base), parse(exponent), _target_scale(ctx, scale))
    )


def powmod(
    ctx: ScaleContext,
    base: str,
    exponent: str,
    modulus: str,
    scale: int | None = None,
) -> str:
    """Raise base to exponent, reduced by modulus.

    Raises:
        NonIntegerOperand: If base or modulus has a fractional part
        NonIntegerExponent: If exponent has a fractional part
        NegativeExponent: If exponent is negative
        DivisionByZero: If modulus is zero
    """
    return format_number(
        powmod_values(
            parse(base),
            parse(exponent),
            parse(modulus),
            _target_scale(ctx, scale),
        )
    )


def sqrt(ctx: ScaleContext, a: str, scale: int | None = None) -> str:
    """Square root of a.

    Raises:
        NegativeRadicand: If a is negative
    """
    return format_number(arithmetic.sqrt(parse(a), _target_scale(ctx, scale)))


def compare(ctx: ScaleContext, a: str, b: str, scale: int | None = None) -> int:
    """Compare a with b: -1, 0 or 1."""
    return compare_values(parse(a), parse(b), parse_scale(scale))


def get_scale(ctx: ScaleContext) -> int:
    return ctx.get_scale()


def set_scale(ctx: ScaleContext, value: int) -> None:
    ctx.set_scale(value)


def bcscale(ctx: ScaleContext, value: int | None = None) -> int:
    """Return the previous default scale, setting a new one when given."""
    return ctx.bcscale(value)


class BcMath:
    """The call surface bound to one ScaleContext.

    Attributes:
        context: The execution context whose scale this instance reads
    """

    def __init__(self, context: ScaleContext | None = None) -> None:
        self.context = context if context is not None else new_context()

    @classmethod
    def with_scale(cls, scale: int) -> BcMath:
        """Create an instance with a fresh context at the given scale."""
        return cls(ScaleContext(scale))

    def add(self, a: str, b: str, scale: int | None = None) -> str:
        return add(self.context, a, b, scale)

    def sub(self, a: str, b: str, scale: int | None = None) -> str:
        return sub(self.context, a, b, scale)

    def mul(self, a: str, b: str, scale: int | None = None) -> str:
        return mul(self.context, a, b, scale)

    def div(self, a: str, b: str, scale: int | None = None) -> str:
        return div(self.context, a, b, scale)

    def mod(self, a: str, b: str, scale: int | None = None) -> str:
        return mod(self.context, a, b, scale)

    def pow(self, base: str, exponent: str, scale: int | None = None) -> str:
        return pow(self.context, base, exponent, scale)

    def powmod(self, base: str, exponent: str, modulus: str, scale: int | None = None) -> str:
        return powmod(self.context, base, exponent, modulus, scale)

    def sqrt(self, a: str, scale: int | None = None) -> str:
        return sqrt(self.context, a, scale)

    def compare(self, a: str, b: str, scale: int | None = None) -> int:
        return compare(self.context, a, b, scale)

    def get_scale(self) -> int:
        return get_scale(self.context)

    def set_scale(self, value: int) -> None:
        set_scale(self.context, value)

    def bcscale(self, value: int | None = None) -> int:
        return bcscale(self.context, value)

    def __repr__(self) -> str:
        return f"BcMath({self.context!r})"
