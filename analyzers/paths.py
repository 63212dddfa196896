"""
Page path normalization.

Two policies exist because two comparisons need them:

- `normalize_page_path` matches page paths against navigation targets and
  groups duplicate paths. Only the literal English prefix is stripped.
- `normalize_path_for_link_matching` keys the orphan link graph. Any
  two-letter locale segment is stripped, as is a trailing slash.

Keep them separate: merging them changes duplicate and orphan results.
"""
from __future__ import annotations

import re

from config import LINK_LOCALE_PATTERN, NAV_LOCALE_PREFIX

_LOCALE_RE = re.compile(LINK_LOCALE_PATTERN)


def normalize_page_path(path: str) -> str:
    """Canonical key for comparing a page path with a navigation target."""
    normalized = path.lower().strip()
    if normalized.startswith(NAV_LOCALE_PREFIX):
        normalized = normalized[len(NAV_LOCALE_PREFIX):]
    if normalized.startswith("/"):
        normalized = normalized[1:]
    return normalized


def normalize_path_for_link_matching(path: str) -> str:
    """Canonical key for a node of the page link graph."""
    normalized = path.lower().strip()
    if normalized.startswith("/"):
        normalized = normalized[1:]
    if _LOCALE_RE.match(normalized):
        normalized = normalized[3:]
    if normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized
