"""Operation timing for ``--verbose`` runs.

A service method wrapped in :func:`traced` becomes the root of a small
timing tree. Stages inside it (``trace_span("project_all")``) hang off
that root, and :func:`current_span` lets the method attach notes such as
the recommendation outcome. The finished tree lands in
``ServiceResult.meta["telemetry"]`` and one debug line per operation goes
to the ``shipctl.telemetry`` logger.

With telemetry off every helper returns after a single ContextVar read.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec

import structlog

from shipctl.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("shipctl_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("shipctl_active_span", default=None)

log = structlog.get_logger("shipctl.telemetry")


@dataclass
class Span:
    """One timed operation or stage."""

    name: str
    notes: dict[str, Any] = field(default_factory=dict)
    stages: list[Span] = field(default_factory=list)
    ms: float = 0.0
    _started: float = field(default_factory=time.perf_counter, repr=False)

    def annotate(self, key: str, value: Any) -> None:
        self.notes[key] = value

    def finish(self) -> None:
        self.ms = round((time.perf_counter() - self._started) * 1000, 3)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "ms": self.ms}
        if self.notes:
            out["notes"] = dict(self.notes)
        if self.stages:
            out["stages"] = [stage.to_dict() for stage in self.stages]
        return out


@contextmanager
def _running(span: Span) -> Iterator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.finish()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a stage of the enclosing traced operation.

    Yields None outside a traced operation or with telemetry off.
    """
    parent = current_span()
    if parent is None:
        yield None
        return
    stage = Span(name)
    parent.stages.append(stage)
    with _running(stage):
        yield stage


_P = ParamSpec("_P")


def traced(method: Callable[_P, ServiceResult]) -> Callable[_P, ServiceResult]:
    """Attach a timing tree to the ServiceResult returned by *method*."""

    @functools.wraps(method)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        if not _enabled.get():
            return method(*args, **kwargs)

        with _running(Span(method.__qualname__)) as root:
            result = method(*args, **kwargs)

        log.debug(
            "operation timed",
            op=result.op,
            ok=result.ok,
            ms=root.ms,
            stages=[stage.name for stage in root.stages],
            warnings=len(result.warnings),
        )
        meta = {**(result.meta or {}), "telemetry": root.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper


def set_telemetry(enabled: bool) -> None:
    """Switch timing on or off for the current context."""
    _enabled.set(enabled)


def current_span() -> Span | None:
    """The innermost running span, or None when telemetry is off."""
    if not _enabled.get():
        return None
    return _active.get()
