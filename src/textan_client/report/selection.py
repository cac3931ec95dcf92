"""Click/drag range selection over a tokenized report."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple

TokenRange = Tuple[int, int]  # closed interval (lo, hi)


class SelectionPhase(str, Enum):
    IDLE = "idle"
    ANCHORED = "anchored"


class SelectionRangeError(IndexError):
    """Raised when a pointer event names a token index that does not exist."""

    def __init__(self, message: str, *, index: int, token_count: int) -> None:
        super().__init__(message)
        self.index = index
        self.token_count = token_count


@dataclass(slots=True)
class SelectionState:
    anchor: Optional[int] = None
    active_range: Optional[TokenRange] = None


class SelectionModel:
    """Tracks the anchor of a drag gesture and the highlighted token range.

    ``on_press`` anchors the gesture, ``on_drag_enter`` stretches the range
    between the anchor and the hovered token (in either direction) and
    ``on_release`` drops the anchor while keeping the range as the
    committed selection. One instance belongs to one tokenized report.
    """

    def __init__(self, token_count: int, *, preserve_on_press: bool = False) -> None:
        if token_count < 0:
            raise ValueError("token_count cannot be negative")
        self.token_count = token_count
        self.preserve_on_press = preserve_on_press
        self._state = SelectionState()

    @property
    def phase(self) -> SelectionPhase:
        if self._state.anchor is None:
            return SelectionPhase.IDLE
        return SelectionPhase.ANCHORED

    @property
    def state(self) -> SelectionState:
        return SelectionState(
            anchor=self._state.anchor, active_range=self._state.active_range
        )

    def on_press(self, index: int) -> None:
        self._check(index)
        if self.preserve_on_press and self.phase is SelectionPhase.IDLE:
            if index in self.current_selection():
                return
        self._state.anchor = index
        self._state.active_range = (index, index)

    def on_drag_enter(self, index: int) -> None:
        self._check(index)
        anchor = self._state.anchor
        if anchor is None:
            return
        self._state.active_range = (min(anchor, index), max(anchor, index))

    def on_release(self) -> None:
        self._state.anchor = None

    def current_selection(self) -> FrozenSet[int]:
        active = self._state.active_range
        if active is None:
            return frozenset()
        lo, hi = active
        return frozenset(range(lo, hi + 1))

    def clear(self) -> None:
        self._state = SelectionState()

    def _check(self, index: int) -> None:
        if not 0 <= index < self.token_count:
            raise SelectionRangeError(
                f"Token index {index} out of range",
                index=index,
                token_count=self.token_count,
            )


__all__ = [
    "SelectionModel",
    "SelectionPhase",
    "SelectionRangeError",
    "SelectionState",
    "TokenRange",
]
