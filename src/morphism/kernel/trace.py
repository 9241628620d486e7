"""Runtime trace infrastructure for morphism applications.

Tracing is opt-in and lives outside the morphisms themselves: ``traced``
wraps a callable so that each application is recorded on a ``Trace``.
Nesting follows the call stack, so a traced composite of traced parts
produces a tree of events.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, TypeVar

from morphism.kernel.arrow import Morphism, describe

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Evidence:
    """A single recorded event.

    ``action`` is one of "apply_begin", "apply_end" or "apply_error";
    ``morphism`` is the display name of the applied morphism.
    """

    action: str
    morphism: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Collects evidence of morphism applications.

    Each application opens with ``begin`` and closes with exactly one of
    ``end`` or ``fail``. Applications started while another is open become
    its children. Single-threaded use only; a disabled trace records nothing.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0
        self._open: list[int] = []

    def _append(
        self,
        action: str,
        morphism: str,
        parent_id: int | None,
        info: dict[str, Any] | None = None,
        duration_ms: float | None = None,
    ) -> int:
        event_id = self._next_id
        self._next_id += 1
        self._events.append(
            Evidence(
                action=action,
                morphism=morphism,
                id=event_id,
                parent_id=parent_id,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def begin(self, morphism: str) -> int | None:
        """Open an application of ``morphism``; returns its event id."""
        if not self.enabled:
            return None
        parent = self._open[-1] if self._open else None
        step_id = self._append("apply_begin", morphism, parent)
        self._open.append(step_id)
        return step_id

    def end(self, step_id: int | None, duration_ms: float) -> None:
        """Close an application that returned a value."""
        if step_id is None:
            return
        self._open.pop()
        self._append("apply_end", self._events[step_id].morphism, step_id, duration_ms=duration_ms)

    def fail(self, step_id: int | None, exc: BaseException) -> None:
        """Close an application that raised ``exc``."""
        if step_id is None:
            return
        self._open.pop()
        self._append(
            "apply_error",
            self._events[step_id].morphism,
            step_id,
            info={"error": repr(exc)},
        )

    @property
    def events(self) -> tuple[Evidence, ...]:
        return tuple(self._events)

    @property
    def depth(self) -> int:
        """Number of applications currently open."""
        return len(self._open)

    def applications(self, morphism: str | None = None) -> list[Evidence]:
        """``apply_begin`` events, optionally only those of one morphism."""
        return [
            ev
            for ev in self._events
            if ev.action == "apply_begin" and (morphism is None or ev.morphism == morphism)
        ]

    def children(self, event: Evidence) -> list[Evidence]:
        """Applications started while ``event`` was open."""
        return [ev for ev in self.applications() if ev.parent_id == event.id]

    def errors(self) -> list[Evidence]:
        return [ev for ev in self._events if ev.action == "apply_error"]

    def __len__(self) -> int:
        return len(self._events)


def traced(f: Callable[[A], B], trace: Trace, name: str | None = None) -> Morphism[A, B]:
    """Wrap ``f`` so every application is recorded on ``trace``.

    The result and any exception are passed through untouched; an exception
    is recorded with ``Trace.fail`` and then re-raised.
    """
    label = name or describe(f)

    def run(a: A) -> B:
        step_id = trace.begin(label)
        start_time = time.perf_counter()
        try:
            result = f(a)
        except BaseException as exc:
            trace.fail(step_id, exc)
            raise
        trace.end(step_id, (time.perf_counter() - start_time) * 1000)
        return result

    return Morphism(run, label)
