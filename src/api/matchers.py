"""Browser matchers — compile strings and patterns into browser-id predicates.

A positive list matches when *any* criterion matches. A negated list
matches only when the id fails *every* criterion, so ``not_in("a", "b")``
keeps exactly the ids that are neither ``a`` nor ``b``.
"""

from __future__ import annotations

import re
from typing import Any, Sequence, Union

Criterion = Union[str, re.Pattern]


class Matcher:
    """Predicate over a browser id."""

    def __call__(self, browser_id: str) -> bool:
        raise NotImplementedError


class Exact(Matcher):
    def __init__(self, value: Any):
        self.value = value

    def __call__(self, browser_id: str) -> bool:
        return self.value == browser_id

    def __repr__(self) -> str:
        return f"Exact({self.value!r})"


class Pattern(Matcher):
    def __init__(self, pattern: re.Pattern):
        self.pattern = pattern

    def __call__(self, browser_id: str) -> bool:
        return self.pattern.search(browser_id) is not None

    def __repr__(self) -> str:
        return f"Pattern({self.pattern.pattern!r})"


class Not(Matcher):
    def __init__(self, inner: Matcher):
        self.inner = inner

    def __call__(self, browser_id: str) -> bool:
        return not self.inner(browser_id)

    def __repr__(self) -> str:
        return f"Not({self.inner!r})"


class AnyOf(Matcher):
    def __init__(self, matchers: Sequence[Matcher]):
        self.matchers = list(matchers)

    def __call__(self, browser_id: str) -> bool:
        return any(match(browser_id) for match in self.matchers)

    def __repr__(self) -> str:
        return f"AnyOf({self.matchers!r})"


class AllOf(Matcher):
    def __init__(self, matchers: Sequence[Matcher]):
        self.matchers = list(matchers)

    def __call__(self, browser_id: str) -> bool:
        return all(match(browser_id) for match in self.matchers)

    def __repr__(self) -> str:
        return f"AllOf({self.matchers!r})"


def _leaf(criterion: Any, negate: bool) -> Matcher:
    matcher = Pattern(criterion) if isinstance(criterion, re.Pattern) else Exact(criterion)
    return Not(matcher) if negate else matcher


def create_matcher(matchers: Union[Criterion, Sequence[Criterion]], negate: bool = False) -> Matcher:
    """Compile one criterion, or a list of them, into a single matcher."""
    if not isinstance(matchers, (list, tuple)):
        return _leaf(matchers, negate)

    leaves = [_leaf(m, negate) for m in matchers]
    return AllOf(leaves) if negate else AnyOf(leaves)
