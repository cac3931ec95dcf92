from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from textan_client.config import SAMPLE_TEXT, ClientSettings
from textan_client.report import SelectionRangeError
from textan_client.wizard import (
    PointerInput,
    ReportEditStep,
    ReportEntitiesStep,
    ReportWizard,
    WizardBus,
    WizardContext,
    create_report_wizard,
)


def record_events(wizard: ReportWizard, *names: str) -> List[Tuple[str, Any]]:
    events: List[Tuple[str, Any]] = []
    for name in names:
        wizard.context.bus.subscribe(
            name, lambda payload, name=name: events.append((name, payload))
        )
    return events


def open_entities(text: str = "Ahoj, svete.", **settings: Any) -> ReportWizard:
    wizard = create_report_wizard(ClientSettings(**settings))
    edit = wizard.active_step
    assert isinstance(edit, ReportEditStep)
    edit.set_text(text)
    wizard.next()
    return wizard


def test_wizard_starts_on_edit_step_with_sample_text() -> None:
    wizard = create_report_wizard()

    step = wizard.active_step
    assert isinstance(step, ReportEditStep)
    assert step.text == SAMPLE_TEXT
    assert wizard.closed is False


def test_next_tokenizes_report_on_entities_step() -> None:
    wizard = create_report_wizard()
    events = record_events(wizard, "wizard.step", "entities.tokens")
    edit = wizard.active_step
    assert isinstance(edit, ReportEditStep)
    edit.set_text("Ahoj, svete.")

    result = wizard.next()

    assert result.switch_to == "entities"
    step = wizard.active_step
    assert isinstance(step, ReportEntitiesStep)
    assert [token.text for token in step.tokens] == ["Ahoj", ",", " ", "svete", "."]
    assert ("wizard.step", "entities") in events
    tokens_payload = next(p for name, p in events if name == "entities.tokens")
    assert len(tokens_payload) == 5


def test_pointer_events_drive_selection() -> None:
    wizard = open_entities()
    events = record_events(wizard, "entities.selection")

    wizard.handle_pointer(PointerInput("press", 0))
    wizard.handle_pointer(PointerInput("drag_enter", 2))
    wizard.handle_pointer(PointerInput("drag_enter", 4))
    result = wizard.handle_pointer(PointerInput("release"))

    assert [payload for _, payload in events] == [
        [0],
        [0, 1, 2],
        [0, 1, 2, 3, 4],
        [0, 1, 2, 3, 4],
    ]
    assert result.message == "selection:5"


def test_set_report_replaces_selection_model() -> None:
    wizard = open_entities()
    step = wizard.active_step
    assert isinstance(step, ReportEntitiesStep)
    wizard.handle_pointer(PointerInput("press", 1))
    old_model = step.selection

    step.set_report("novy text")

    assert step.selection is not old_model
    assert step.selection.current_selection() == frozenset()
    assert step.selection.token_count == 3


def test_entities_step_honours_preserve_on_press_setting() -> None:
    wizard = open_entities(preserve_on_press=True)
    step = wizard.active_step
    assert isinstance(step, ReportEntitiesStep)

    assert step.selection.preserve_on_press is True


def test_out_of_range_pointer_propagates() -> None:
    wizard = open_entities()

    with pytest.raises(SelectionRangeError):
        wizard.handle_pointer(PointerInput("press", 9))


def test_press_without_index_is_rejected() -> None:
    wizard = open_entities()

    with pytest.raises(ValueError):
        wizard.handle_pointer(PointerInput("press"))


def test_pointer_on_edit_step_is_ignored() -> None:
    wizard = create_report_wizard()

    result = wizard.handle_pointer(PointerInput("release"))

    assert result.consumed is False
    assert result.status == "ignored"


def test_finish_emits_report_created_and_closes() -> None:
    wizard = open_entities()
    events = record_events(wizard, "report.created", "wizard.close")
    wizard.handle_pointer(PointerInput("press", 3))
    wizard.handle_pointer(PointerInput("drag_enter", 0))
    wizard.handle_pointer(PointerInput("release"))

    result = wizard.next()

    assert result.close is True
    assert wizard.closed is True
    created: Dict[str, Any] = next(p for name, p in events if name == "report.created")
    assert created["report"] == "Ahoj, svete."
    assert created["selection"] == [0, 1, 2, 3]
    assert created["text"] == "Ahoj, svete"
    assert ("wizard.close", "entities") in events


def test_cancel_closes_wizard() -> None:
    wizard = create_report_wizard()
    events = record_events(wizard, "wizard.cancel", "wizard.close")

    wizard.cancel()

    assert wizard.closed is True
    assert events == [("wizard.cancel", "edit"), ("wizard.close", "edit")]


def test_closed_wizard_rejects_events() -> None:
    wizard = create_report_wizard()
    wizard.cancel()

    with pytest.raises(RuntimeError):
        wizard.next()


def test_empty_wizard_has_no_active_step() -> None:
    wizard = ReportWizard(WizardContext(bus=WizardBus()))

    assert wizard.active_step is None
    with pytest.raises(RuntimeError):
        wizard.handle_pointer(PointerInput("release"))


def test_duplicate_step_registration_fails() -> None:
    wizard = create_report_wizard()

    with pytest.raises(ValueError):
        wizard.register_step(ReportEditStep)


def test_switch_to_unknown_step_fails() -> None:
    wizard = create_report_wizard()

    with pytest.raises(KeyError):
        wizard.switch_step("load")


def test_unknown_pointer_kind_is_rejected_before_index_check() -> None:
    wizard = open_entities()

    with pytest.raises(ValueError, match="Unknown pointer event 'bogus'"):
        wizard.handle_pointer(PointerInput("bogus"))  # type: ignore[arg-type]
