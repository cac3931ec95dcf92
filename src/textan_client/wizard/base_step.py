"""Base classes and shared plumbing for report wizard steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Literal, Optional

from textan_client.config import ClientSettings

PointerKind = Literal["press", "drag_enter", "release"]


@dataclass(frozen=True, slots=True)
class PointerInput:
    """Normalized pointer event aimed at one rendered token."""

    kind: PointerKind
    index: Optional[int] = None


@dataclass(slots=True)
class StepResult:
    """Result returned from step handlers."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None
    close: bool = False


class WizardBus:
    """Tiny publish/subscribe channel between steps and the host view."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class WizardContext:
    """Services every step can reach."""

    bus: WizardBus
    settings: ClientSettings = field(default_factory=ClientSettings)
    extras: Dict[str, object] = field(default_factory=dict)


class Step:
    """One page of the report wizard."""

    name: str = "step"

    def __init__(self, context: WizardContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:  # pragma: no cover
        del previous

    def on_exit(self, next_step: Optional[str]) -> None:  # pragma: no cover
        del next_step

    def handle_pointer(self, event: PointerInput) -> StepResult:
        del event
        return StepResult(consumed=False, status="ignored")

    def next(self) -> StepResult:  # pragma: no cover - abstract override
        raise NotImplementedError

    def cancel(self) -> StepResult:
        self.context.bus.emit("wizard.cancel", self.name)
        return StepResult(consumed=True, message="cancelled", close=True)
