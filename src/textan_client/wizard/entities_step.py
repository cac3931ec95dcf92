"""Entities step: token rendering data plus the drag selection gesture."""

from __future__ import annotations

from typing import List, Optional

from textan_client.report import (
    SelectionModel,
    Token,
    span_text,
    tokenize,
)
from textan_client.runtime import telemetry

from .base_step import PointerInput, Step, StepResult, WizardContext


class ReportEntitiesStep(Step):
    name = "entities"

    def __init__(self, context: WizardContext) -> None:
        super().__init__(context)
        self.report = ""
        self.tokens: List[Token] = []
        self.selection = SelectionModel(0)

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        text = self.context.extras.get("report_text")
        if isinstance(text, str):
            self.set_report(text)

    def set_report(self, report: str) -> List[Token]:
        """Tokenize ``report`` and start a fresh selection over it."""

        with telemetry.span(
            "entities::tokenize",
            component=True,
            metadata={"chars": len(report)},
        ) as handle:
            self.tokens = tokenize(report)
            handle.add_metadata("tokens", len(self.tokens))
        self.report = report
        self.selection = SelectionModel(
            len(self.tokens),
            preserve_on_press=self.context.settings.preserve_on_press,
        )
        self.context.bus.emit("entities.tokens", list(self.tokens))
        self.context.bus.emit("entities.selection", [])
        return self.tokens

    def handle_pointer(self, event: PointerInput) -> StepResult:
        if event.kind not in {"press", "drag_enter", "release"}:
            raise ValueError(f"Unknown pointer event '{event.kind}'")
        if event.kind == "release":
            self.selection.on_release()
        elif event.index is None:
            raise ValueError(f"Pointer event '{event.kind}' requires a token index")
        elif event.kind == "press":
            self.selection.on_press(event.index)
        else:
            self.selection.on_drag_enter(event.index)

        selected = sorted(self.selection.current_selection())
        self.context.bus.emit("entities.selection", selected)
        return StepResult(consumed=True, message=f"selection:{len(selected)}")

    def next(self) -> StepResult:
        selected = sorted(self.selection.current_selection())
        payload = {
            "report": self.report,
            "tokens": list(self.tokens),
            "selection": selected,
            "text": span_text(self.tokens, selected),
        }
        telemetry.record_event(
            "report.created",
            data={"tokens": len(self.tokens), "selection": selected},
        )
        self.context.bus.emit("report.created", payload)
        return StepResult(consumed=True, message="report_created", close=True)
