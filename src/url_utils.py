"""Shared URL utilities."""

from __future__ import annotations

from urllib.parse import urljoin


def resolve_suite_url(root_url: str, url: str | None) -> str:
    """Resolve a suite URL against the configured root URL.

    Absolute suite URLs are returned as-is; an empty root leaves the URL unchanged.
    """
    if not url:
        return ""
    if not root_url:
        return url
    return urljoin(root_url.rstrip("/") + "/", url.lstrip("/"))
