"""
Base class for all structural analyzers.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from models import NavigationExportData, NavigationItem, Page, PageExportData, Severity
from config import HEALTH_CATEGORIES
from analyzers.paths import normalize_page_path
from analyzers.tree import all_navigation_links


def pages_by_path(page_export: PageExportData) -> dict[str, Page]:
    """Normalized path → page. Later pages win when two share a path."""
    return {normalize_page_path(p.path): p for p in page_export.pages}


class BaseAnalyzer(ABC):
    """All structural analyzers inherit from this class."""

    category: str = "Uncategorized"

    @abstractmethod
    def analyze(
        self,
        page_export: PageExportData,
        nav_export: Optional[NavigationExportData],
    ) -> list:
        """Analyze one page/navigation snapshot pair and return the findings."""
        ...

    # ── Scoring metadata ──────────────────────────────────────────────────────

    @property
    def severity(self) -> str:
        return HEALTH_CATEGORIES.get(self.category, (Severity.INFO, 0))[0]

    @property
    def weight(self) -> int:
        return HEALTH_CATEGORIES.get(self.category, (Severity.INFO, 0))[1]

    # ── Shared lookups ────────────────────────────────────────────────────────

    @staticmethod
    def _pages_by_path(page_export: PageExportData) -> dict[str, Page]:
        return pages_by_path(page_export)

    @staticmethod
    def _nav_links(nav_export: NavigationExportData) -> list[NavigationItem]:
        return all_navigation_links(nav_export)
