"""
Snapshot differ: compares two page exports and/or two navigation exports by
stable identifier.

Records are matched on `id` only; path normalization plays no part. A record
whose id appears on one side only is added or removed; a record present on
both sides is modified when any compared field differs.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from models import (
    DiffSummary,
    ExportDiffResult,
    Modification,
    NavigationExportData,
    PageExportData,
    utc_now_iso,
)
from analyzers.tree import all_navigation_links

logger = logging.getLogger(__name__)

# Compared fields as (attribute, name reported in `changes`)
PAGE_FIELDS = [("title", "title"), ("path", "path"), ("is_published", "isPublished")]
NAV_FIELDS = [
    ("label", "label"),
    ("target", "target"),
    ("icon", "icon"),
    ("visibility_groups", "visibilityGroups"),
]


def _changed_fields(before: Any, after: Any, fields: list[tuple[str, str]]) -> list[str]:
    # == on lists compares element by element
    return [name for attr, name in fields if getattr(before, attr) != getattr(after, attr)]


def diff_records(
    old_records: list,
    new_records: list,
    fields: list[tuple[str, str]],
) -> tuple[list, list, list[Modification]]:
    """Return (added, removed, modified) for two record lists keyed by `id`."""
    old_by_id = {r.id: r for r in old_records}
    new_ids = {r.id for r in new_records}

    added: list = []
    modified: list[Modification] = []
    for record in new_records:
        previous = old_by_id.get(record.id)
        if previous is None:
            added.append(record)
            continue
        changes = _changed_fields(previous, record, fields)
        if changes:
            modified.append(Modification(before=previous, after=record, changes=changes))

    removed = [r for r in old_records if r.id not in new_ids]
    return added, removed, modified


def compare_exports(
    old_page_export: Optional[PageExportData] = None,
    new_page_export: Optional[PageExportData] = None,
    old_nav_export: Optional[NavigationExportData] = None,
    new_nav_export: Optional[NavigationExportData] = None,
) -> ExportDiffResult:
    """
    Diff two snapshots. Each half (pages, navigation) is compared only when
    both its old and new exports are given; otherwise that half is empty.
    Navigation is compared on flattened link items.
    """
    compared_at = utc_now_iso()
    result = ExportDiffResult(compared_at=compared_at)

    if old_page_export is not None and new_page_export is not None:
        result.pages_added, result.pages_removed, result.pages_modified = diff_records(
            old_page_export.pages, new_page_export.pages, PAGE_FIELDS,
        )

    if old_nav_export is not None and new_nav_export is not None:
        result.nav_items_added, result.nav_items_removed, result.nav_items_modified = diff_records(
            all_navigation_links(old_nav_export), all_navigation_links(new_nav_export), NAV_FIELDS,
        )

    page_changes = len(result.pages_added) + len(result.pages_removed) + len(result.pages_modified)
    nav_changes = len(result.nav_items_added) + len(result.nav_items_removed) + len(result.nav_items_modified)
    result.summary = DiffSummary(
        total_changes=page_changes + nav_changes,
        page_changes=page_changes,
        nav_changes=nav_changes,
    )

    logger.debug("Compared snapshots: %d page changes, %d navigation changes", page_changes, nav_changes)
    return result
