"""
Loads exported JSON snapshots into model objects.

Accepts raw JSON text, bytes (e.g. an uploaded file) or a filesystem path.
Only the outer shape is checked; the analyzers trust everything inside.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from models import ExportSummary, NavigationExportData, Page, PageExportData, PageLinkItem

logger = logging.getLogger(__name__)

Source = Union[str, bytes, Path]


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be read or does not have the expected shape."""


def build_summary(pages: list[Page]) -> ExportSummary:
    published = sum(1 for p in pages if p.is_published)
    return ExportSummary(
        total_pages=len(pages),
        published_pages=published,
        unpublished_pages=len(pages) - published,
    )


def load_page_export(source: Source, name: str = "") -> PageExportData:
    data = _load_json(source, "pages", name)
    _require_object(data, "pages", source, name)
    _require_list(data, "pages", "pages", source, name)

    export = PageExportData.from_dict(data)
    if export.summary is None:
        export.summary = build_summary(export.pages)
    logger.info("Loaded %d pages from %s", len(export.pages), _describe(source, name))
    return export


def load_navigation_export(source: Source, name: str = "") -> NavigationExportData:
    data = _load_json(source, "navigation", name)
    _require_object(data, "navigation", source, name)
    _require_list(data, "tree", "navigation", source, name)

    export = NavigationExportData.from_dict(data)
    logger.info("Loaded navigation (%d locales) from %s", len(export.tree), _describe(source, name))
    return export


def load_page_links(source: Source, name: str = "") -> list[PageLinkItem]:
    data = _load_json(source, "page links", name)
    if not isinstance(data, list):
        _fail("page links", source, name, "expected a JSON list")
    return [PageLinkItem.from_dict(item) for item in data if isinstance(item, dict)]


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_json(source: Source, kind: str, name: str) -> Any:
    try:
        if isinstance(source, Path):
            text = source.read_text(encoding="utf-8")
        elif isinstance(source, bytes):
            text = source.decode("utf-8")
        else:
            text = source
        return json.loads(text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        _fail(kind, source, name, str(exc), exc)


def _require_object(data: Any, kind: str, source: Source, name: str) -> None:
    if not isinstance(data, dict):
        _fail(kind, source, name, "expected a JSON object")


def _require_list(data: dict, key: str, kind: str, source: Source, name: str) -> None:
    if not isinstance(data.get(key), list):
        _fail(kind, source, name, f"'{key}' must be a list")


def _describe(source: Source, name: str) -> str:
    if name:
        return name
    if isinstance(source, Path):
        return str(source)
    return "<memory>"


def _fail(kind: str, source: Source, name: str, reason: str, cause: Exception = None) -> None:
    message = f"Failed to load {kind} export from {_describe(source, name)}: {reason}"
    logger.warning(message)
    raise SnapshotError(message) from cause
