"""Report wizard: owns the active step and routes host events to it."""

from __future__ import annotations

from typing import Dict, Optional, Type

from textan_client.config import ClientSettings
from textan_client.runtime import telemetry

from .base_step import PointerInput, Step, StepResult, WizardBus, WizardContext
from .edit_step import ReportEditStep
from .entities_step import ReportEntitiesStep


class ReportWizard:
    """Owns the active step, handles transitions, and dispatches events."""

    title = "Report Wizard"

    def __init__(self, context: WizardContext) -> None:
        self.context = context
        self._steps: Dict[str, Step] = {}
        self._active: Optional[str] = None
        self.closed = False

    @property
    def active_step(self) -> Optional[Step]:
        if self._active is None:
            return None
        return self._steps.get(self._active)

    def get_step(self, name: str) -> Step:
        if name not in self._steps:
            raise KeyError(f"Unknown step '{name}'")
        return self._steps[name]

    def register_step(
        self,
        step_cls: Type[Step],
        /,
        *step_args: object,
        **step_kwargs: object,
    ) -> Step:
        step = step_cls(self.context, *step_args, **step_kwargs)
        if step.name in self._steps:
            raise ValueError(f"Step '{step.name}' already registered")
        self._steps[step.name] = step
        if self._active is None:
            self._active = step.name
            step.on_enter(None)
        return step

    def switch_step(self, name: str) -> None:
        target = self.get_step(name)
        previous = self.active_step
        if previous is target:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        target.on_enter(previous.name if previous else None)
        telemetry.record_event("wizard.switch", data={"step": name})
        self.context.bus.emit("wizard.step", name)

    def handle_pointer(self, event: PointerInput) -> StepResult:
        step = self._require_step()
        return self._after_step_result(step.handle_pointer(event))

    def next(self) -> StepResult:
        step = self._require_step()
        with telemetry.span(
            f"wizard::{step.name}::next", component=True, metadata={"step": step.name}
        ):
            result = step.next()
        return self._after_step_result(result)

    def cancel(self) -> StepResult:
        step = self._require_step()
        return self._after_step_result(step.cancel())

    def close(self) -> None:
        if self.closed:
            return
        step = self.active_step
        if step:
            step.on_exit(None)
        self.closed = True
        telemetry.record_event("wizard.close", data={"step": self._active})
        self.context.bus.emit("wizard.close", self._active)

    def _require_step(self) -> Step:
        if self.closed:
            raise RuntimeError("Wizard already closed")
        step = self.active_step
        if step is None:
            raise RuntimeError("No active step registered")
        return step

    def _after_step_result(self, result: StepResult) -> StepResult:
        if result.switch_to:
            self.switch_step(result.switch_to)
        if result.close:
            self.close()
        return result


def create_report_wizard(settings: Optional[ClientSettings] = None) -> ReportWizard:
    """Build a wizard with the edit and entities steps, starting at edit."""

    context = WizardContext(bus=WizardBus(), settings=settings or ClientSettings())
    wizard = ReportWizard(context)
    wizard.register_step(ReportEditStep)
    wizard.register_step(ReportEntitiesStep)
    return wizard
