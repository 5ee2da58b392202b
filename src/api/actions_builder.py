"""Actions recorder — the object hooks receive to describe interaction steps.

Nothing is executed here. Each method validates its arguments and appends
one ``Action`` to the list the recorder was created with.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from src.api.validators import is_number
from src.models.actions import Action, ElementRef

logger = logging.getLogger(__name__)

Element = Union[str, ElementRef]

MOUSE_BUTTONS = (0, 1, 2)  # left, middle, right
DEFAULT_TIMEOUT_MS = 1000


def _element_selector(element: Any, method: str) -> str:
    if isinstance(element, str):
        return element
    if isinstance(element, ElementRef):
        return element.selector
    raise TypeError(f"{method}: element should be a CSS selector or the result of find()")


def _check_button(button: Any) -> None:
    if button not in MOUSE_BUTTONS or not is_number(button):
        raise TypeError("Mouse button should be 0 (left), 1 (middle) or 2 (right)")


def _check_offset(offset: Any, method: str) -> dict[str, float]:
    if not isinstance(offset, Mapping) or not is_number(offset.get("x")) or not is_number(offset.get("y")):
        raise TypeError(f"{method}: offset should be a mapping with numeric 'x' and 'y'")
    return {"x": offset["x"], "y": offset["y"]}


def _check_timeout(timeout: Any, method: str) -> None:
    if not is_number(timeout):
        raise TypeError(f"{method}: timeout should be a number")


class ActionsBuilder:
    """Chainable recorder bound to one action list.

    ``context`` is the suite-definition context, forwarded unchanged so that
    hooks can share values between each other.
    """

    def __init__(self, actions: list[Action], context: Any = None):
        self._actions = actions
        self.context = context

    @classmethod
    def create(cls, actions: list[Action], context: Any = None) -> "ActionsBuilder":
        return cls(actions, context)

    def _push(self, action_type: str, selector: Optional[str] = None, value: Any = None,
              **options: Any) -> "ActionsBuilder":
        action = Action(action_type=action_type, selector=selector, value=value, options=options)
        self._actions.append(action)
        logger.debug("Recorded %s | selector=%s | value=%s", action_type, selector, value)
        return self

    # Waiting

    def wait(self, milliseconds: float) -> "ActionsBuilder":
        if not is_number(milliseconds):
            raise TypeError("wait: milliseconds should be a number")
        return self._push("wait", value=milliseconds)

    def wait_for_element_to_show(self, element: Element, timeout: float = DEFAULT_TIMEOUT_MS) -> "ActionsBuilder":
        selector = _element_selector(element, "wait_for_element_to_show")
        _check_timeout(timeout, "wait_for_element_to_show")
        return self._push("wait_for_element_to_show", selector, timeout=timeout)

    def wait_for_element_to_hide(self, element: Element, timeout: float = DEFAULT_TIMEOUT_MS) -> "ActionsBuilder":
        selector = _element_selector(element, "wait_for_element_to_hide")
        _check_timeout(timeout, "wait_for_element_to_hide")
        return self._push("wait_for_element_to_hide", selector, timeout=timeout)

    def wait_for_js_condition(self, script: str, timeout: float = DEFAULT_TIMEOUT_MS) -> "ActionsBuilder":
        if not isinstance(script, str):
            raise TypeError("wait_for_js_condition: script should be a string")
        _check_timeout(timeout, "wait_for_js_condition")
        return self._push("wait_for_js_condition", value=script, timeout=timeout)

    # Mouse

    def click(self, element: Element, button: int = 0) -> "ActionsBuilder":
        selector = _element_selector(element, "click")
        _check_button(button)
        return self._push("click", selector, button=button)

    def double_click(self, element: Element) -> "ActionsBuilder":
        return self._push("double_click", _element_selector(element, "double_click"))

    def drag_and_drop(self, element: Element, drag_to: Element) -> "ActionsBuilder":
        selector = _element_selector(element, "drag_and_drop")
        target = _element_selector(drag_to, "drag_and_drop")
        return self._push("drag_and_drop", selector, value=target)

    def mouse_down(self, element: Element, button: int = 0) -> "ActionsBuilder":
        selector = _element_selector(element, "mouse_down")
        _check_button(button)
        return self._push("mouse_down", selector, button=button)

    def mouse_up(self, element: Optional[Element] = None, button: int = 0) -> "ActionsBuilder":
        selector = None if element is None else _element_selector(element, "mouse_up")
        _check_button(button)
        return self._push("mouse_up", selector, button=button)

    def mouse_move(self, element: Element, offset: Optional[Mapping] = None) -> "ActionsBuilder":
        selector = _element_selector(element, "mouse_move")
        if offset is None:
            return self._push("mouse_move", selector)
        return self._push("mouse_move", selector, offset=_check_offset(offset, "mouse_move"))

    # Keyboard and input

    def send_keys(self, element: Any, keys: Any = None) -> "ActionsBuilder":
        """Type ``keys`` into ``element``, or into the focused element when only keys are given."""
        if keys is None:
            element, keys = None, element
        if isinstance(keys, (list, tuple)) and all(isinstance(k, str) for k in keys):
            keys = "".join(keys)
        if not isinstance(keys, str):
            raise TypeError("send_keys: keys should be a string or a list of strings")
        selector = None if element is None else _element_selector(element, "send_keys")
        return self._push("send_keys", selector, value=keys)

    def send_file(self, element: Element, path: str) -> "ActionsBuilder":
        selector = _element_selector(element, "send_file")
        if not isinstance(path, str):
            raise TypeError("send_file: path should be a string")
        return self._push("send_file", selector, value=path)

    def focus(self, element: Element) -> "ActionsBuilder":
        return self._push("focus", _element_selector(element, "focus"))

    # Touch

    def tap(self, element: Element) -> "ActionsBuilder":
        return self._push("tap", _element_selector(element, "tap"))

    def flick(self, offsets: Mapping, speed: float, element: Optional[Element] = None) -> "ActionsBuilder":
        checked = _check_offset(offsets, "flick")
        if not is_number(speed):
            raise TypeError("flick: speed should be a number")
        selector = None if element is None else _element_selector(element, "flick")
        return self._push("flick", selector, offset=checked, speed=speed)

    # Page

    def execute_js(self, script: str) -> "ActionsBuilder":
        if not isinstance(script, str):
            raise TypeError("execute_js: script should be a string")
        return self._push("execute_js", value=script)

    def set_window_size(self, width: int, height: int) -> "ActionsBuilder":
        for value in (width, height):
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise TypeError("set_window_size: width and height should be positive integers")
        return self._push("set_window_size", value=f"{width}x{height}", width=width, height=height)

    def change_orientation(self) -> "ActionsBuilder":
        return self._push("change_orientation")
