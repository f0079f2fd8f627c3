"""Engine configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Settings shared by every execution context a host creates.

    Attributes:
        default_scale: Scale a fresh context starts with (default: 0)
        max_operand_length: Longest operand text the HTTP adapter accepts.
            The engine itself has no limit.
    """

    default_scale: int = 0
    max_operand_length: int = 100_000

    def __post_init__(self) -> None:
        if self.default_scale < 0:
            raise ValueError(f"default_scale must be non-negative, got {self.default_scale}")
        if self.max_operand_length <= 0:
            raise ValueError(
                f"max_operand_length must be positive, got {self.max_operand_length}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineConfig:
        """Load settings from environment variables.

        - BCNUM_DEFAULT_SCALE: initial scale of new contexts (default: 0)
        - BCNUM_MAX_OPERAND_LENGTH: operand length limit (default: 100000)
        """
        env = os.environ if environ is None else environ
        return cls(
            default_scale=int(env.get("BCNUM_DEFAULT_SCALE", "0")),
            max_operand_length=int(env.get("BCNUM_MAX_OPERAND_LENGTH", "100000")),
        )


# Default configuration instance
DEFAULT_ENGINE_CONFIG = EngineConfig()
