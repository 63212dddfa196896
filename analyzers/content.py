"""
Content analyzer: pages sharing a normalized path.
"""
from __future__ import annotations

import logging
from typing import Optional

from models import DuplicatePath, NavigationExportData, Page, PageExportData
from analyzers.base import BaseAnalyzer
from analyzers.paths import normalize_page_path

logger = logging.getLogger(__name__)


class DuplicatePathAnalyzer(BaseAnalyzer):
    """
    Group pages by normalized path; every group with more than one page is a
    finding. Navigation is not consulted.
    """
    category = "Duplicate Paths"

    def analyze(
        self,
        page_export: PageExportData,
        nav_export: Optional[NavigationExportData] = None,
    ) -> list[DuplicatePath]:
        path_groups: dict[str, list[Page]] = {}
        for page in page_export.pages:
            path_groups.setdefault(normalize_page_path(page.path), []).append(page)

        duplicates = [
            DuplicatePath(paths=[p.path for p in pages], pages=pages)
            for pages in path_groups.values()
            if len(pages) > 1
        ]

        if duplicates:
            logger.debug("%d duplicate path groups", len(duplicates))
        return duplicates


def find_duplicate_paths(page_export: PageExportData) -> list[DuplicatePath]:
    return DuplicatePathAnalyzer().analyze(page_export)
