"""Suite API — the ``qa`` object suite-definition files talk to."""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Callable, Optional

from src.api.keys import Keys
from src.api.suite_builder import SuiteBuilder
from src.models.suite import Suite

logger = logging.getLogger(__name__)


class SuiteApi:
    """Declares suites under ``root``, nesting them when ``suite`` is called from a callback.

    Children of the root start with ``browsers`` and ``tolerance``; deeper
    suites inherit the (possibly filtered) browser list and tolerance of their
    parent.
    """

    keys = Keys

    def __init__(
        self,
        root: Suite,
        browsers: list[str],
        file: Optional[str] = None,
        tolerance: Optional[float] = None,
    ):
        self._root = root
        self._current = root
        self._browsers = list(browsers)
        self._file = file
        self._tolerance = tolerance
        self.ctx = SimpleNamespace()

    def suite(self, name: str, callback: Callable[[SuiteBuilder], None]) -> None:
        if not isinstance(name, str):
            raise TypeError("First argument of qa.suite must be a string")
        if not callable(callback):
            raise TypeError("Second argument of qa.suite must be a function")

        parent = self._current
        if parent.has_child_named(name):
            raise ValueError(
                f'Suite "{name}" already exists in suite "{parent.full_name}". '
                "Choose different name"
            )

        child = Suite.create(name, parent)
        if parent.is_root:
            child.browsers = list(self._browsers)
            child.tolerance = self._tolerance
            child.file = self._file
            child.context = self.ctx
        parent.add_child(child)
        logger.debug("Declaring suite '%s'", child.full_name)

        self._current = child
        try:
            callback(SuiteBuilder(child))
        finally:
            self._current = parent

        if child.has_states:
            if not child.url:
                raise ValueError(f'URL is required to capture: call suite.set_url() in "{child.full_name}"')
            if not child.capture_selectors:
                raise ValueError(
                    "Capture elements are required to capture: "
                    f'call suite.set_capture_elements() in "{child.full_name}"'
                )
