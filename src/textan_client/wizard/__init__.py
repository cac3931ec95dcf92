"""Report wizard steps and the manager that drives them."""

from .base_step import (
    PointerInput,
    PointerKind,
    Step,
    StepResult,
    WizardBus,
    WizardContext,
)
from .edit_step import ReportEditStep
from .entities_step import ReportEntitiesStep
from .manager import ReportWizard, create_report_wizard

__all__ = [
    "PointerInput",
    "PointerKind",
    "Step",
    "StepResult",
    "WizardBus",
    "WizardContext",
    "ReportEditStep",
    "ReportEntitiesStep",
    "ReportWizard",
    "create_report_wizard",
]
