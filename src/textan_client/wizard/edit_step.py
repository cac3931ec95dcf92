"""Report editing step: the user types or pastes the report text."""

from __future__ import annotations

from typing import Optional

from .base_step import Step, StepResult, WizardContext


class ReportEditStep(Step):
    name = "edit"

    def __init__(self, context: WizardContext, *, next_step: str = "entities") -> None:
        super().__init__(context)
        self.text = context.settings.sample_text
        self._next_step = next_step

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self.context.bus.emit("edit.text", self.text)

    def set_text(self, text: str) -> None:
        self.text = text
        self.context.bus.emit("edit.text", text)

    def next(self) -> StepResult:
        self.context.extras["report_text"] = self.text
        return StepResult(
            consumed=True, switch_to=self._next_step, message="report_ready"
        )
