"""Suite builder — the chainable API handed to ``qa.suite`` callbacks.

Every method validates its arguments before touching the suite, so a call
that raises leaves the suite exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from src.api.actions_builder import ActionsBuilder
from src.api.find import find
from src.api.matchers import create_matcher
from src.api.validators import (
    flatten,
    is_list_of_strings_and_patterns,
    is_not_valid_selector,
    is_number,
)
from src.models.actions import EverySelector
from src.models.state import State
from src.models.suite import SkipRule, Suite

logger = logging.getLogger(__name__)


def _noop(actions: ActionsBuilder, find: Callable) -> None:
    pass


def _to_ignore_selector(selector: Any) -> Any:
    if isinstance(selector, (str, EverySelector)):
        return selector
    if isinstance(selector, Mapping):
        return EverySelector(every=selector["every"])
    return EverySelector(every=selector.every)


def _is_blank(browser: Any) -> bool:
    # An empty list is a browser filter, not an unconditional skip.
    return not browser and not isinstance(browser, (list, tuple))


class _Skip:
    """``builder.skip(...)`` plus its ``in_`` / ``not_in`` variants."""

    def __init__(self, builder: "SuiteBuilder"):
        self._builder = builder

    def __call__(self, browser: Any = None, comment: Optional[str] = None) -> "SuiteBuilder":
        if _is_blank(browser):
            self._builder.suite.skip()
        else:
            self._builder._save_skipped(browser, comment)
        return self._builder

    def in_(self, browser: Any = None, comment: Optional[str] = None) -> "SuiteBuilder":
        return self(browser, comment)

    def not_in(self, browser: Any = None, comment: Optional[str] = None) -> "SuiteBuilder":
        if not _is_blank(browser):
            self._builder._save_skipped(browser, comment, negate=True)
        return self._builder


class _Only:
    """``builder.only.in_(...)`` / ``builder.only.not_in(...)``."""

    def __init__(self, builder: "SuiteBuilder"):
        self._builder = builder

    def in_(self, *matchers: Any) -> "SuiteBuilder":
        return self._builder._save_browsers(matchers)

    def not_in(self, *matchers: Any) -> "SuiteBuilder":
        return self._builder._save_browsers(matchers, negate=True)


class SuiteBuilder:
    def __init__(self, suite: Suite):
        self.suite = suite
        self.skip = _Skip(self)
        self.only = _Only(self)

    def set_capture_elements(self, *args: Any) -> "SuiteBuilder":
        selectors = flatten(args)
        if any(not isinstance(s, str) for s in selectors):
            raise TypeError("suite.set_capture_elements accepts only strings or lists of strings")

        self.suite.capture_selectors = selectors
        return self

    def ignore_elements(self, *args: Any) -> "SuiteBuilder":
        selectors = flatten(args)
        if any(is_not_valid_selector(s) for s in selectors):
            raise TypeError(
                'suite.ignore_elements accepts strings, objects with an "every" string '
                "property, or lists of them"
            )

        self.suite.ignore_selectors = [_to_ignore_selector(s) for s in selectors]
        return self

    def set_url(self, url: str) -> "SuiteBuilder":
        if not isinstance(url, str):
            raise TypeError("URL must be string")
        self.suite.url = url
        return self

    def set_tolerance(self, tolerance: float) -> "SuiteBuilder":
        if not is_number(tolerance):
            raise TypeError("tolerance must be number")
        self.suite.tolerance = tolerance
        return self

    def before(self, hook: Callable) -> "SuiteBuilder":
        if not callable(hook):
            raise TypeError("before hook must be a function")

        # The list may still be shared with the suite this one was derived from.
        actions = list(self.suite.before_actions)
        hook(ActionsBuilder.create(actions, self.suite.context), find)
        self.suite.before_actions = actions
        return self

    def after(self, hook: Callable) -> "SuiteBuilder":
        if not callable(hook):
            raise TypeError("after hook must be a function")

        actions: list = []
        hook(ActionsBuilder.create(actions, self.suite.context), find)
        # Later-declared cleanup runs first.
        self.suite.after_actions = actions + self.suite.after_actions
        return self

    def capture(self, name: str, opts: Any = None, cb: Any = None) -> "SuiteBuilder":
        """Declare a state to compare, recording the actions that lead to it.

        ``capture(name, cb)`` is shorthand for ``capture(name, {}, cb)``; a
        missing callback means the state is captured without any actions.
        """
        if not isinstance(name, str):
            raise TypeError("State name should be string")

        if cb is None:
            cb, opts = opts, None
        cb = cb or _noop
        opts = opts or {}

        if not callable(cb):
            raise TypeError("Second argument of suite.capture must be a function")

        if self.suite.has_state_named(name):
            raise ValueError(
                f'State "{name}" already exists in suite "{self.suite.name}". '
                "Choose different name"
            )

        state = State(self.suite, name)
        cb(ActionsBuilder.create(state.actions, self.suite.context), find)

        if "tolerance" in opts:
            if not is_number(opts["tolerance"]):
                raise TypeError("Tolerance should be number")
            state.tolerance = opts["tolerance"]

        self.suite.add_state(state)
        return self

    def _save_skipped(self, browser: Any, comment: Optional[str], negate: bool = False) -> None:
        browsers = browser if isinstance(browser, (list, tuple)) else [browser]
        if not is_list_of_strings_and_patterns(browsers):
            raise TypeError("Browser must be string or compiled regular expression")

        self.suite.skip(SkipRule(create_matcher(browser, negate=negate), comment))
        logger.debug("Suite '%s' skip rule: %s", self.suite.full_name, browser)

    def _save_browsers(self, matchers: Any, negate: bool = False) -> "SuiteBuilder":
        matchers = flatten(matchers)
        if len(matchers) == 0 or not is_list_of_strings_and_patterns(matchers):
            raise TypeError("suite.browsers must be string or compiled regular expression")

        match = create_matcher(matchers, negate=negate)
        self.suite.browsers = [b for b in self.suite.browsers if match(b)]
        logger.debug("Suite '%s' browsers: %s", self.suite.full_name, self.suite.browsers)
        return self

    def browsers(self, *matchers: Any) -> "SuiteBuilder":
        return self._save_browsers(matchers)
