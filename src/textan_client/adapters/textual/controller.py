"""Textual adapter that wires ReportWizard events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from textan_client.report import Token
from textan_client.wizard import PointerInput, PointerKind, ReportWizard, StepResult
from textan_client.wizard.edit_step import ReportEditStep
from textan_client.wizard.entities_step import ReportEntitiesStep


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    render_tokens: Callable[[Sequence[Token]], None]
    update_selection: Callable[[Sequence[int]], None] = _noop
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualReportAdapter:
    """Bridges ReportWizard + bus events to a Textual-friendly surface.

    After every pointer event the host receives the full selected index list
    so it can restyle tokens declaratively: exactly those indices are marked
    ``selected`` and no others.
    """

    def __init__(self, wizard: ReportWizard, hooks: TextualUIHooks) -> None:
        self.wizard = wizard
        self.hooks = hooks
        self._subscribe_events()

    def handle_pointer(
        self, kind: PointerKind, index: Optional[int] = None
    ) -> StepResult:
        """Dispatch a pointer event tagged with the token index it hit."""

        self._log_state("pointer ->", kind=kind, index=index)
        result = self.wizard.handle_pointer(PointerInput(kind=kind, index=index))
        self._after_step_result(result)
        return result

    def set_report_text(self, text: str) -> None:
        step = self.wizard.active_step
        if not isinstance(step, ReportEditStep):
            raise RuntimeError("Report text can only change on the edit step")
        step.set_text(text)

    def next(self) -> StepResult:
        result = self.wizard.next()
        self._after_step_result(result)
        return result

    def cancel(self) -> StepResult:
        result = self.wizard.cancel()
        self._after_step_result(result)
        return result

    def current_selection(self) -> List[int]:
        step = self.wizard.get_step("entities")
        if not isinstance(step, ReportEntitiesStep):
            raise RuntimeError("Selection is only tracked by the entities step")
        return sorted(step.selection.current_selection())

    def _after_step_result(self, result: StepResult) -> None:
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )

    def _subscribe_events(self) -> None:
        bus = self.wizard.context.bus
        for event in (
            "edit.text",
            "entities.tokens",
            "entities.selection",
            "report.created",
            "wizard.step",
            "wizard.cancel",
            "wizard.close",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        if name == "entities.tokens" and isinstance(payload, list):
            self.hooks.render_tokens(payload)
        elif name == "entities.selection" and isinstance(payload, list):
            self.hooks.update_selection(payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        step = self.wizard.active_step
        metadata: Dict[str, object] = {
            "step": step.name if step else "?",
            "closed": self.wizard.closed,
        }
        if isinstance(step, ReportEntitiesStep):
            metadata["tokens"] = len(step.tokens)
            metadata["phase"] = step.selection.phase.value
        return metadata


__all__ = ["TextualReportAdapter", "TextualUIHooks"]
