"""
Converts analysis, orphan and diff results to Pandas DataFrames and
CSV / JSON bytes for export.
"""
from __future__ import annotations

import io
import json

import pandas as pd

from models import AnalysisResult, ExportDiffResult, HealthScore, OrphanAnalysisResult, Severity


# ── Structural findings ────────────────────────────────────────────────────────

def unlisted_to_df(result: AnalysisResult) -> pd.DataFrame:
    columns = ["Path", "Title", "ID", "Published", "Reason"]
    rows = [{
        "Path":      u.page.path,
        "Title":     u.page.title,
        "ID":        u.page.id,
        "Published": u.page.is_published,
        "Reason":    _humanize(u.reason),
    } for u in result.unlisted_pages]
    return _frame(rows, columns, sort_by="Path")


def broken_links_to_df(result: AnalysisResult) -> pd.DataFrame:
    columns = ["Label", "Target", "Nav ID", "Reason"]
    rows = [{
        "Label":  b.nav_item.label or "(no label)",
        "Target": b.target,
        "Nav ID": b.nav_item.id,
        "Reason": _humanize(b.reason),
    } for b in result.broken_nav_links]
    return _frame(rows, columns)


def title_inconsistencies_to_df(result: AnalysisResult) -> pd.DataFrame:
    columns = ["Path", "Page Title", "Nav Label", "Nav ID"]
    rows = [{
        "Path":       t.page.path,
        "Page Title": t.page_title,
        "Nav Label":  t.nav_label,
        "Nav ID":     t.nav_item.id,
    } for t in result.title_inconsistencies]
    return _frame(rows, columns)


def duplicates_to_df(result: AnalysisResult) -> pd.DataFrame:
    """One row per page; `Group` numbers the duplicate set it belongs to."""
    columns = ["Group", "Path", "Title", "ID"]
    rows = [
        {"Group": n, "Path": page.path, "Title": page.title, "ID": page.id}
        for n, dup in enumerate(result.duplicate_paths, start=1)
        for page in dup.pages
    ]
    return _frame(rows, columns)


def visibility_to_df(result: AnalysisResult) -> pd.DataFrame:
    columns = ["Group", "Pages"]
    rows = [
        {"Group": group, "Pages": len(pages)}
        for group, pages in result.visibility_analysis.pages_by_group.items()
    ]
    return _frame(rows, columns, sort_by="Group")


def health_issues_to_df(health: HealthScore) -> pd.DataFrame:
    columns = ["Severity", "Category", "Count", "Points"]
    rows = [{
        "Severity": issue.severity.upper(),
        "Category": issue.category,
        "Count":    issue.count,
        "Points":   issue.points,
    } for issue in health.issues]
    df = _frame(rows, columns)
    if df.empty:
        return df

    severity_order = {Severity.CRITICAL: 0, Severity.WARNING: 1, Severity.INFO: 2}
    df["_sev_order"] = df["Severity"].str.lower().map(severity_order)
    df = df.sort_values(["_sev_order", "Points"], ascending=[True, False]).drop(columns=["_sev_order"])
    return df.reset_index(drop=True)


# ── Orphans ────────────────────────────────────────────────────────────────────

def orphans_to_df(result: OrphanAnalysisResult) -> pd.DataFrame:
    columns = ["Path", "Title", "ID", "Published", "Outgoing Links", "Reason"]
    rows = [{
        "Path":           o.page.path,
        "Title":          o.page.title,
        "ID":             o.page.id,
        "Published":      o.page.is_published,
        "Outgoing Links": o.outgoing_link_count,
        "Reason":         _humanize(o.reason),
    } for o in result.orphaned_pages]
    return _frame(rows, columns, sort_by="Path")


# ── Snapshot diff ──────────────────────────────────────────────────────────────

def page_diff_to_df(result: ExportDiffResult) -> pd.DataFrame:
    columns = ["Change", "ID", "Path", "Title", "Fields", "Before", "After"]
    rows = []
    for page in result.pages_added:
        rows.append({"Change": "Added", "ID": page.id, "Path": page.path, "Title": page.title})
    for page in result.pages_removed:
        rows.append({"Change": "Removed", "ID": page.id, "Path": page.path, "Title": page.title})
    for mod in result.pages_modified:
        rows.append({
            "Change": "Modified",
            "ID":     mod.after.id,
            "Path":   mod.after.path,
            "Title":  mod.after.title,
            "Fields": ", ".join(mod.changes),
            "Before": _field_values(mod.before.to_dict(), mod.changes),
            "After":  _field_values(mod.after.to_dict(), mod.changes),
        })
    return _frame(rows, columns)


def nav_diff_to_df(result: ExportDiffResult) -> pd.DataFrame:
    columns = ["Change", "ID", "Kind", "Label", "Target", "Fields", "Before", "After"]
    rows = []
    for label, items in (("Added", result.nav_items_added), ("Removed", result.nav_items_removed)):
        for nav in items:
            rows.append({
                "Change": label,
                "ID":     nav.id,
                "Kind":   nav.kind,
                "Label":  nav.label or "(no label)",
                "Target": nav.target or "",
            })
    for mod in result.nav_items_modified:
        rows.append({
            "Change": "Modified",
            "ID":     mod.after.id,
            "Kind":   mod.after.kind,
            "Label":  mod.after.label or "(no label)",
            "Target": mod.after.target or "",
            "Fields": ", ".join(mod.changes),
            "Before": _field_values(mod.before.to_dict(), mod.changes),
            "After":  _field_values(mod.after.to_dict(), mod.changes),
        })
    return _frame(rows, columns)


# ── Byte exports ───────────────────────────────────────────────────────────────

def to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def result_to_json(result) -> bytes:
    """Serialize any result object with a `to_dict` method."""
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False).encode("utf-8")


# ── Helpers ────────────────────────────────────────────────────────────────────

def _frame(rows: list[dict], columns: list[str], sort_by: str = "") -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame([{c: row.get(c, "") for c in columns} for row in rows], columns=columns)
    if sort_by:
        df = df.sort_values(sort_by, kind="stable")
    return df.reset_index(drop=True)


def _field_values(record: dict, changes: list[str]) -> str:
    return "; ".join(f"{name}={json.dumps(record.get(name))}" for name in changes)


def _humanize(snake: str) -> str:
    """Convert snake_case to Sentence case for display."""
    return snake.replace("_", " ").capitalize()
