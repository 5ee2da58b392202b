"""Recorded interaction steps and selector value types used by suite hooks."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class Action(BaseModel):
    action_type: str  # wait, wait_for_element_to_show, wait_for_element_to_hide,
    # wait_for_js_condition, click, double_click, drag_and_drop, mouse_down,
    # mouse_up, mouse_move, send_keys, send_file, focus, tap, flick,
    # execute_js, set_window_size, change_orientation
    selector: Optional[str] = None
    value: Any = None
    options: dict[str, Any] = Field(default_factory=dict)
    description: str = ""


class ElementRef(BaseModel):
    """Element lookup produced by ``find`` inside hooks."""
    selector: str


class EverySelector(BaseModel):
    """Ignore every element matched by ``every``, not just the first one."""
    every: str
