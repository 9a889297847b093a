"""ServiceResult and ServiceError — the contract between services and the CLI.

Every PoemService method returns a ServiceResult; expected failures
(unreadable corpus, bad arguments) travel in ``error`` rather than as
exceptions.  Formatters in :mod:`graphpoet.output` consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable error code plus a human message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"poem"``, ``"bridge"``, ``"affinities"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, e.g. an empty corpus.
        error: Set when ``ok`` is False.
        meta: Optional extra information (corpus stats, backend).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result carrying a single :class:`ServiceError`."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
