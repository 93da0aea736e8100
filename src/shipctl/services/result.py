"""The envelope every service operation returns.

Renderers, ``--json`` and the exit-code logic in ``AppContext.emit`` all
read this one shape. Services report failures here instead of raising;
dates inside ``data`` are ISO strings so the JSON view needs no custom
encoder.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus a readable message."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a service call.

    ``op`` names the operation (``"cutoff"``, ``"recommend"``...) and picks
    the renderer. ``warnings`` go to stderr in human mode; ``meta`` only
    carries the ``--verbose`` timing tree.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """A failed *op* whose error carries *code*, *message* and *detail*."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
