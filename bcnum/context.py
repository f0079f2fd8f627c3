"""Per-context default scale.

A ScaleContext belongs to exactly one execution context of the host (a
request, a session, a task) and is passed explicitly to every call. The
engine does no locking: a host sharing one context between concurrent
calls must serialize access itself.
"""

from __future__ import annotations

import structlog

from bcnum.config import DEFAULT_ENGINE_CONFIG, EngineConfig

__all__ = ["ScaleContext", "new_context"]

logger = structlog.get_logger()


class ScaleContext:
    """Mutable default scale of one execution context.

    Operations read it when the caller gives no explicit scale; none of
    them write it. Negative scales are clamped to 0 without an error.
    """

    __slots__ = ("_scale",)
    _scale: int

    def __init__(self, scale: int = 0) -> None:
        self._scale = 0
        self.set_scale(scale)

    def get_scale(self) -> int:
        return self._scale

    def set_scale(self, value: int) -> None:
        """Set the default scale, clamping negative values to 0.

        Raises:
            TypeError: If value is not an int
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"scale must be an int, got {type(value).__name__}")
        if value < 0:
            logger.debug("scale_clamped", requested=value)
            value = 0
        self._scale = value

    def bcscale(self, value: int | None = None) -> int:
        """Return the current scale, then set it to `value` when given."""
        previous = self._scale
        if value is not None:
            self.set_scale(value)
        return previous

    def copy(self) -> ScaleContext:
        """Independent context starting from the same scale."""
        return ScaleContext(self._scale)

    def __repr__(self) -> str:
        return f"ScaleContext(scale={self._scale})"


def new_context(config: EngineConfig | None = None) -> ScaleContext:
    """Create a context seeded with the configured default scale."""
    config = config or DEFAULT_ENGINE_CONFIG
    return ScaleContext(config.default_scale)
