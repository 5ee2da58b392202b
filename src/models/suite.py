"""Suite tree — the declarative description produced by the suite builder."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Optional, Union

from src.models.actions import Action, EverySelector
from src.models.state import State

logger = logging.getLogger(__name__)


class SkipRule:
    """Skip the suite for every browser id accepted by ``matches``."""

    def __init__(self, matches: Callable[[str], bool], comment: Optional[str] = None):
        self.matches = matches
        self.comment = comment

    def __repr__(self) -> str:
        return f"SkipRule({self.matches!r}, comment={self.comment!r})"


class Suite:
    """A node in the suite tree.

    Children derived with ``Suite.create`` start out sharing their parent's
    selector, action and browser lists. Builder methods replace those lists
    rather than mutating them, so a child never changes what its parent
    (or a sibling) sees.
    """

    def __init__(self, name: str, parent: Optional["Suite"] = None):
        self.name = name
        self.parent = parent
        self.children: list[Suite] = []
        self.states: list[State] = []
        self.context: Any = None
        self.file: Optional[str] = None

        self.url: Optional[str] = None
        self.tolerance: Optional[float] = None
        self.capture_selectors: list[str] = []
        self.ignore_selectors: list[Union[str, EverySelector]] = []
        self.before_actions: list[Action] = []
        self.after_actions: list[Action] = []
        self.browsers: list[str] = []

        # False, True (skip for every browser) or a list of SkipRule
        self.skipped: Union[bool, list[SkipRule]] = False
        self.skip_comment: Optional[str] = None

    @classmethod
    def create_root(cls) -> "Suite":
        return cls("")

    @classmethod
    def create(cls, name: str, parent: Optional["Suite"] = None) -> "Suite":
        """Create a suite, inheriting settings from ``parent`` by reference."""
        suite = cls(name, parent)
        if parent is not None:
            suite.url = parent.url
            suite.tolerance = parent.tolerance
            suite.capture_selectors = parent.capture_selectors
            suite.ignore_selectors = parent.ignore_selectors
            suite.before_actions = parent.before_actions
            suite.after_actions = parent.after_actions
            suite.browsers = parent.browsers
            suite.context = parent.context
            suite.file = parent.file
        return suite

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def has_states(self) -> bool:
        return len(self.states) > 0

    @property
    def full_name(self) -> str:
        if self.parent is None or self.parent.is_root:
            return self.name
        return f"{self.parent.full_name} {self.name}"

    @property
    def path(self) -> list[str]:
        if self.parent is None:
            return []
        return self.parent.path + [self.name]

    @property
    def deep_states(self) -> list[State]:
        states = list(self.states)
        for child in self.children:
            states.extend(child.deep_states)
        return states

    def iter_suites(self) -> Iterator["Suite"]:
        """Yield this suite and all of its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.iter_suites()

    def has_child_named(self, name: str) -> bool:
        return any(child.name == name for child in self.children)

    def add_child(self, suite: "Suite") -> None:
        if self.has_child_named(suite.name):
            raise ValueError(
                f'Suite "{suite.name}" already exists in suite "{self.full_name}". '
                "Choose different name"
            )
        suite.parent = self
        self.children.append(suite)

    def has_state_named(self, name: str) -> bool:
        return any(state.name == name for state in self.states)

    def add_state(self, state: State) -> None:
        state.suite = self
        self.states.append(state)
        logger.debug("Registered state '%s'", state.full_name)

    def skip(self, rule: Optional[SkipRule] = None) -> None:
        """Skip unconditionally, or for browsers matched by ``rule``.

        An unconditional skip supersedes every rule, past or future.
        """
        if rule is None:
            self.skipped = True
            return
        if self.skipped is True:
            return
        if not self.skipped:
            self.skipped = []
        self.skipped.append(rule)

    def should_skip(self, browser_id: str) -> bool:
        """Check whether ``browser_id`` is skipped; ``skip_comment`` reflects the last query."""
        self.skip_comment = None
        if self.parent is not None and self.parent.should_skip(browser_id):
            self.skip_comment = self.parent.skip_comment
            return True
        if self.skipped is True:
            return True
        if not self.skipped:
            return False
        for rule in self.skipped:
            if rule.matches(browser_id):
                self.skip_comment = rule.comment
                return True
        return False

    def clone(self) -> "Suite":
        """Copy the subtree rooted at this suite.

        States and children are copied; selector, action and browser lists
        are shared with the source suite until a builder call replaces them.
        """
        clone = Suite(self.name, self.parent)
        clone.context = self.context
        clone.file = self.file
        clone.url = self.url
        clone.tolerance = self.tolerance
        clone.capture_selectors = self.capture_selectors
        clone.ignore_selectors = self.ignore_selectors
        clone.before_actions = self.before_actions
        clone.after_actions = self.after_actions
        clone.browsers = self.browsers
        clone.skipped = list(self.skipped) if isinstance(self.skipped, list) else self.skipped
        clone.skip_comment = self.skip_comment

        for state in self.states:
            state_clone = state.clone()
            state_clone.suite = clone
            clone.states.append(state_clone)

        for child in self.children:
            child_clone = child.clone()
            child_clone.parent = clone
            clone.children.append(child_clone)

        return clone

    def __repr__(self) -> str:
        return f"Suite({self.full_name!r})"
