"""A named visual state captured inside a suite."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from src.models.actions import Action

if TYPE_CHECKING:
    from src.models.suite import Suite


class State:
    """One screenshot to compare, plus the actions that lead to it."""

    def __init__(self, suite: "Suite", name: str):
        self.suite = suite
        self.name = name
        self.actions: list[Action] = []
        self.tolerance: Optional[float] = None

    @property
    def full_name(self) -> str:
        return f"{self.suite.full_name} {self.name}"

    @property
    def capture_selectors(self) -> list[str]:
        return self.suite.capture_selectors

    @property
    def ignore_selectors(self) -> list:
        return self.suite.ignore_selectors

    def should_skip(self, browser_id: str) -> bool:
        return self.suite.should_skip(browser_id)

    def clone(self) -> "State":
        state = State(self.suite, self.name)
        state.actions = list(self.actions)
        state.tolerance = self.tolerance
        return state

    def __repr__(self) -> str:
        return f"State({self.full_name!r})"
