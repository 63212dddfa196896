"""
Core data models for the Snapshot Audit Tool.
All modules import from here; nothing else is cross-imported at this level.

Input models mirror the JSON exports produced by the content site tooling
(camelCase keys); `from_dict` reads that shape and `to_dict` writes it back.
Result models are created fresh by every analysis call and only ever
serialized by the caller.

NOTE: `from __future__ import annotations` is intentionally omitted here.
Python 3.13.0 has a regression (bpo-121814) where that import causes a crash
in the dataclasses decorator when the module is not yet fully registered in
sys.modules. Python 3.9+ supports generic aliases (list[str], dict[str, Any])
natively, so the future import is unnecessary.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


# ── Severity ──────────────────────────────────────────────────────────────────
class Severity:
    CRITICAL = "critical"
    WARNING  = "warning"
    INFO     = "info"

    COLORS = {
        CRITICAL: "#FF4B4B",
        WARNING:  "#FFA500",
        INFO:     "#4B9EFF",
    }


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


# ── Pages ─────────────────────────────────────────────────────────────────────
@dataclass
class Page:
    id: Any
    path: str
    title: str = ""
    locale: str = ""
    is_published: bool = False
    is_private: Optional[bool] = None
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Page":
        return cls(
            id=data.get("id"),
            path=data.get("path") or "",
            title=data.get("title") or "",
            locale=data.get("locale") or "",
            is_published=bool(data.get("isPublished", False)),
            is_private=data.get("isPrivate"),
            tags=list(data.get("tags") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        out = {
            "id": self.id,
            "path": self.path,
            "title": self.title,
            "locale": self.locale,
            "isPublished": self.is_published,
            "isPrivate": self.is_private,
        }
        if self.tags:
            out["tags"] = list(self.tags)
        return _drop_none(out)


@dataclass
class ExportSummary:
    total_pages: int = 0
    published_pages: int = 0
    unpublished_pages: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExportSummary":
        return cls(
            total_pages=int(data.get("totalPages", 0)),
            published_pages=int(data.get("publishedPages", 0)),
            unpublished_pages=int(data.get("unpublishedPages", 0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalPages": self.total_pages,
            "publishedPages": self.published_pages,
            "unpublishedPages": self.unpublished_pages,
        }


@dataclass
class PageExportData:
    pages: list[Page] = field(default_factory=list)
    exported_at: str = ""
    instance_id: Optional[str] = None
    summary: Optional[ExportSummary] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageExportData":
        summary = data.get("summary")
        return cls(
            pages=[Page.from_dict(p) for p in data.get("pages") or []],
            exported_at=data.get("exportedAt") or "",
            instance_id=data.get("instanceId"),
            summary=ExportSummary.from_dict(summary) if isinstance(summary, dict) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "pages": [p.to_dict() for p in self.pages],
            "exportedAt": self.exported_at,
            "instanceId": self.instance_id,
            "summary": self.summary.to_dict() if self.summary else None,
        })


# ── Navigation ────────────────────────────────────────────────────────────────
@dataclass
class NavigationItem:
    id: Any
    kind: str
    label: Optional[str] = None
    icon: Optional[str] = None
    target_type: Optional[str] = None
    target: Optional[str] = None
    visibility_mode: Optional[str] = None
    visibility_groups: Optional[list[Any]] = None
    expanded: Optional[bool] = None
    children: list["NavigationItem"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NavigationItem":
        groups = data.get("visibilityGroups")
        return cls(
            id=data.get("id"),
            kind=data.get("kind") or "",
            label=data.get("label"),
            icon=data.get("icon"),
            target_type=data.get("targetType"),
            target=data.get("target"),
            visibility_mode=data.get("visibilityMode"),
            visibility_groups=list(groups) if groups is not None else None,
            expanded=data.get("expanded"),
            children=[cls.from_dict(c) for c in data.get("children") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        out = _drop_none({
            "id": self.id,
            "kind": self.kind,
            "label": self.label,
            "icon": self.icon,
            "targetType": self.target_type,
            "target": self.target,
            "visibilityMode": self.visibility_mode,
            "visibilityGroups": list(self.visibility_groups) if self.visibility_groups is not None else None,
            "expanded": self.expanded,
        })
        if self.children:
            out["children"] = [c.to_dict() for c in self.children]
        return out


@dataclass
class NavigationTree:
    locale: str
    items: list[NavigationItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NavigationTree":
        return cls(
            locale=data.get("locale") or "",
            items=[NavigationItem.from_dict(i) for i in data.get("items") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"locale": self.locale, "items": [i.to_dict() for i in self.items]}


@dataclass
class NavigationExportData:
    tree: list[NavigationTree] = field(default_factory=list)
    exported_at: str = ""
    config: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NavigationExportData":
        return cls(
            tree=[NavigationTree.from_dict(t) for t in data.get("tree") or []],
            exported_at=data.get("exportedAt") or "",
            config=dict(data.get("config") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "config": dict(self.config),
            "tree": [t.to_dict() for t in self.tree],
            "exportedAt": self.exported_at,
        }


# ── Live link data ────────────────────────────────────────────────────────────
@dataclass
class PageLinkItem:
    id: Any
    path: str
    title: str = ""
    links: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageLinkItem":
        return cls(
            id=data.get("id"),
            path=data.get("path") or "",
            title=data.get("title") or "",
            links=list(data.get("links") or []),
        )


# ── Structural findings ───────────────────────────────────────────────────────
@dataclass
class UnlistedPage:
    page: Page
    reason: str          # published_not_in_nav / unpublished_not_in_nav

    def to_dict(self) -> dict[str, Any]:
        return {"page": self.page.to_dict(), "reason": self.reason}


@dataclass
class BrokenNavLink:
    nav_item: NavigationItem
    target: str
    reason: str          # page_not_found / page_unpublished

    def to_dict(self) -> dict[str, Any]:
        return {"navItem": self.nav_item.to_dict(), "target": self.target, "reason": self.reason}


@dataclass
class TitleInconsistency:
    page: Page
    nav_item: NavigationItem
    page_title: str
    nav_label: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page.to_dict(),
            "navItem": self.nav_item.to_dict(),
            "pageTitle": self.page_title,
            "navLabel": self.nav_label,
        }


@dataclass
class DuplicatePath:
    paths: list[str]
    pages: list[Page]

    def to_dict(self) -> dict[str, Any]:
        return {"paths": list(self.paths), "pages": [p.to_dict() for p in self.pages]}


@dataclass
class NavigationCoverage:
    total_pages: int
    pages_in_navigation: int
    pages_not_in_navigation: int
    coverage_percentage: float
    unlisted_pages: list[Page] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalPages": self.total_pages,
            "pagesInNavigation": self.pages_in_navigation,
            "pagesNotInNavigation": self.pages_not_in_navigation,
            "coveragePercentage": self.coverage_percentage,
            "unlistedPages": [p.to_dict() for p in self.unlisted_pages],
        }


@dataclass
class VisibilityAnalysis:
    public_pages: int = 0
    restricted_pages: int = 0
    pages_by_group: dict[str, list[Page]] = field(default_factory=dict)   # "group_<id>" → pages

    def to_dict(self) -> dict[str, Any]:
        return {
            "publicPages": self.public_pages,
            "restrictedPages": self.restricted_pages,
            "pagesByGroup": {k: [p.to_dict() for p in v] for k, v in self.pages_by_group.items()},
        }


# ── Health score ──────────────────────────────────────────────────────────────
@dataclass
class HealthIssue:
    category: str
    severity: str        # Severity.CRITICAL / WARNING / INFO
    count: int
    points: int

    def to_dict(self) -> dict[str, Any]:
        return {"category": self.category, "severity": self.severity, "count": self.count, "points": self.points}


@dataclass
class HealthScore:
    score: float
    max_score: float
    percentage: float
    issues: list[HealthIssue] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "issues": [i.to_dict() for i in self.issues],
        }


# ── Top-level analysis result ─────────────────────────────────────────────────
@dataclass
class AnalysisResult:
    unlisted_pages: list[UnlistedPage]
    broken_nav_links: list[BrokenNavLink]
    title_inconsistencies: list[TitleInconsistency]
    duplicate_paths: list[DuplicatePath]
    navigation_coverage: NavigationCoverage
    visibility_analysis: VisibilityAnalysis
    health_score: HealthScore
    analyzed_at: str = field(default_factory=utc_now_iso)

    def to_dict(self) -> dict[str, Any]:
        return {
            "unlistedPages": [u.to_dict() for u in self.unlisted_pages],
            "brokenNavLinks": [b.to_dict() for b in self.broken_nav_links],
            "titleInconsistencies": [t.to_dict() for t in self.title_inconsistencies],
            "duplicatePaths": [d.to_dict() for d in self.duplicate_paths],
            "navigationCoverage": self.navigation_coverage.to_dict(),
            "visibilityAnalysis": self.visibility_analysis.to_dict(),
            "healthScore": self.health_score.to_dict(),
            "analyzedAt": self.analyzed_at,
        }


# ── Orphan analysis ───────────────────────────────────────────────────────────
@dataclass
class OrphanedPage:
    page: Page
    incoming_link_count: int
    outgoing_link_count: int
    reason: str          # published_no_links / unpublished_no_links

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page.to_dict(),
            "incomingLinkCount": self.incoming_link_count,
            "outgoingLinkCount": self.outgoing_link_count,
            "reason": self.reason,
        }


@dataclass
class OrphanAnalysisResult:
    orphaned_pages: list[OrphanedPage]
    total_pages: int
    analyzed_at: str = field(default_factory=utc_now_iso)

    def to_dict(self) -> dict[str, Any]:
        return {
            "orphanedPages": [o.to_dict() for o in self.orphaned_pages],
            "totalPages": self.total_pages,
            "analyzedAt": self.analyzed_at,
        }


# ── Snapshot diff ─────────────────────────────────────────────────────────────
@dataclass
class Modification:
    """A record present in both snapshots whose compared fields differ."""
    before: Any          # Page or NavigationItem
    after: Any
    changes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"before": self.before.to_dict(), "after": self.after.to_dict(), "changes": list(self.changes)}


@dataclass
class DiffSummary:
    total_changes: int = 0
    page_changes: int = 0
    nav_changes: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalChanges": self.total_changes,
            "pageChanges": self.page_changes,
            "navChanges": self.nav_changes,
        }


@dataclass
class ExportDiffResult:
    pages_added: list[Page] = field(default_factory=list)
    pages_removed: list[Page] = field(default_factory=list)
    pages_modified: list[Modification] = field(default_factory=list)
    nav_items_added: list[NavigationItem] = field(default_factory=list)
    nav_items_removed: list[NavigationItem] = field(default_factory=list)
    nav_items_modified: list[Modification] = field(default_factory=list)
    summary: DiffSummary = field(default_factory=DiffSummary)
    compared_at: str = field(default_factory=utc_now_iso)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pagesAdded": [p.to_dict() for p in self.pages_added],
            "pagesRemoved": [p.to_dict() for p in self.pages_removed],
            "pagesModified": [m.to_dict() for m in self.pages_modified],
            "navItemsAdded": [n.to_dict() for n in self.nav_items_added],
            "navItemsRemoved": [n.to_dict() for n in self.nav_items_removed],
            "navItemsModified": [m.to_dict() for m in self.nav_items_modified],
            "summary": self.summary.to_dict(),
            "comparedAt": self.compared_at,
        }
