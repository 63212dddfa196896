"""
Navigation analyzers: unlisted pages, broken navigation links, title
inconsistencies, navigation coverage and visibility distribution.
"""
from __future__ import annotations

import logging

from models import (
    BrokenNavLink,
    NavigationCoverage,
    NavigationExportData,
    PageExportData,
    TitleInconsistency,
    UnlistedPage,
    VisibilityAnalysis,
)
from analyzers.base import BaseAnalyzer, pages_by_path
from analyzers.paths import normalize_page_path
from analyzers.tree import all_navigation_links

logger = logging.getLogger(__name__)


class UnlistedPageAnalyzer(BaseAnalyzer):
    """Pages whose path no navigation link targets."""

    category = "Unlisted Pages"

    def analyze(
        self,
        page_export: PageExportData,
        nav_export: NavigationExportData,
    ) -> list[UnlistedPage]:
        nav_targets = {normalize_page_path(link.target or "") for link in self._nav_links(nav_export)}

        unlisted: list[UnlistedPage] = []
        for page in page_export.pages:
            if normalize_page_path(page.path) in nav_targets:
                continue
            reason = "published_not_in_nav" if page.is_published else "unpublished_not_in_nav"
            unlisted.append(UnlistedPage(page=page, reason=reason))

        logger.debug("%d of %d pages not in navigation", len(unlisted), len(page_export.pages))
        return unlisted


class BrokenNavLinkAnalyzer(BaseAnalyzer):
    """Navigation links pointing at a missing or unpublished page."""

    category = "Broken Navigation Links"

    def analyze(
        self,
        page_export: PageExportData,
        nav_export: NavigationExportData,
    ) -> list[BrokenNavLink]:
        lookup = self._pages_by_path(page_export)

        broken: list[BrokenNavLink] = []
        for nav_item in self._nav_links(nav_export):
            page = lookup.get(normalize_page_path(nav_item.target))
            if page is None:
                broken.append(BrokenNavLink(nav_item=nav_item, target=nav_item.target, reason="page_not_found"))
            elif not page.is_published:
                broken.append(BrokenNavLink(nav_item=nav_item, target=nav_item.target, reason="page_unpublished"))

        logger.debug("%d broken navigation links", len(broken))
        return broken


class TitleConsistencyAnalyzer(BaseAnalyzer):
    """Navigation labels that differ from the title of the page they link to."""

    category = "Title Inconsistencies"

    def analyze(
        self,
        page_export: PageExportData,
        nav_export: NavigationExportData,
    ) -> list[TitleInconsistency]:
        lookup = self._pages_by_path(page_export)

        inconsistencies: list[TitleInconsistency] = []
        for nav_item in self._nav_links(nav_export):
            if not nav_item.label:
                continue
            page = lookup.get(normalize_page_path(nav_item.target))
            if page is not None and page.title != nav_item.label:
                inconsistencies.append(TitleInconsistency(
                    page=page,
                    nav_item=nav_item,
                    page_title=page.title,
                    nav_label=nav_item.label,
                ))

        return inconsistencies


def find_unlisted_pages(page_export: PageExportData, nav_export: NavigationExportData) -> list[UnlistedPage]:
    return UnlistedPageAnalyzer().analyze(page_export, nav_export)


def find_broken_nav_links(page_export: PageExportData, nav_export: NavigationExportData) -> list[BrokenNavLink]:
    return BrokenNavLinkAnalyzer().analyze(page_export, nav_export)


def find_title_inconsistencies(
    page_export: PageExportData,
    nav_export: NavigationExportData,
) -> list[TitleInconsistency]:
    return TitleConsistencyAnalyzer().analyze(page_export, nav_export)


# ── Coverage ──────────────────────────────────────────────────────────────────

def coverage_from_unlisted(page_export: PageExportData, unlisted: list[UnlistedPage]) -> NavigationCoverage:
    total_pages = len(page_export.pages)
    pages_in_navigation = total_pages - len(unlisted)
    return NavigationCoverage(
        total_pages=total_pages,
        pages_in_navigation=pages_in_navigation,
        pages_not_in_navigation=len(unlisted),
        coverage_percentage=(pages_in_navigation / total_pages) * 100 if total_pages > 0 else 0,
        unlisted_pages=[u.page for u in unlisted],
    )


def calculate_navigation_coverage(
    page_export: PageExportData,
    nav_export: NavigationExportData,
) -> NavigationCoverage:
    """Share of pages reachable from the navigation; 0 for an empty export."""
    return coverage_from_unlisted(page_export, find_unlisted_pages(page_export, nav_export))


# ── Visibility ────────────────────────────────────────────────────────────────

def analyze_visibility(page_export: PageExportData, nav_export: NavigationExportData) -> VisibilityAnalysis:
    """
    Count navigation links to existing pages as public or restricted.

    Counts are per navigation link, not per page: a page linked twice is
    counted twice. A restricted link adds its page to the bucket of every
    group it names.
    """
    lookup = pages_by_path(page_export)
    result = VisibilityAnalysis()

    for nav_item in all_navigation_links(nav_export):
        page = lookup.get(normalize_page_path(nav_item.target))
        if page is None:
            continue

        if not nav_item.visibility_groups:
            result.public_pages += 1
            continue

        result.restricted_pages += 1
        for group_id in nav_item.visibility_groups:
            result.pages_by_group.setdefault(f"group_{group_id}", []).append(page)

    return result
