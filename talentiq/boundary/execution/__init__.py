"""Remote code execution boundary."""

from talentiq.boundary.execution.piston_client import (
    LANGUAGE_CONFIG,
    ExecutionResult,
    PistonClient,
)

__all__ = ["LANGUAGE_CONFIG", "ExecutionResult", "PistonClient"]
