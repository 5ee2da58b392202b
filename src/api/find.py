"""Element lookup helper passed as the second argument to every hook."""

from __future__ import annotations

from src.models.actions import ElementRef


def find(selector: str) -> ElementRef:
    """Reference an element by CSS selector for use in recorded actions."""
    if not isinstance(selector, str):
        raise TypeError("find accepts only CSS selector strings")
    return ElementRef(selector=selector)
