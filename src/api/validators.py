"""Argument guards shared by the suite builder and the actions recorder."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Iterable


def flatten(args: Iterable[Any]) -> list[Any]:
    """Flatten one level of list/tuple nesting: ``('a', ['b', 'c'])`` -> ``['a', 'b', 'c']``."""
    result: list[Any] = []
    for arg in args:
        if isinstance(arg, (list, tuple)):
            result.extend(arg)
        else:
            result.append(arg)
    return result


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _every_of(selector: Any) -> Any:
    if isinstance(selector, Mapping):
        return selector.get("every")
    return getattr(selector, "every", None)


def is_not_valid_selector(selector: Any) -> bool:
    """True unless ``selector`` is a string or carries a string ``every``."""
    if isinstance(selector, str):
        return False
    return not isinstance(_every_of(selector), str)


def is_text_pattern(item: Any) -> bool:
    # Browser ids are str; a bytes pattern could never be searched against them.
    return isinstance(item, re.Pattern) and isinstance(item.pattern, str)


def is_list_of_strings_and_patterns(items: Iterable[Any]) -> bool:
    return all(isinstance(item, str) or is_text_pattern(item) for item in items)
