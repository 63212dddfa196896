"""
Runs all structural analyzers over a page/navigation snapshot pair and
assembles the AnalysisResult.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from models import AnalysisResult, NavigationExportData, PageExportData, utc_now_iso
from scoring.scorer import score_from_counts

from analyzers.content import DuplicatePathAnalyzer
from analyzers.navigation import (
    BrokenNavLinkAnalyzer,
    TitleConsistencyAnalyzer,
    UnlistedPageAnalyzer,
    analyze_visibility,
    coverage_from_unlisted,
)

logger = logging.getLogger(__name__)

# Report sections in display order
SECTIONS = ["health", "coverage", "unlisted", "broken", "consistency", "duplicates", "visibility"]


def selected_sections(**flags: bool) -> list[str]:
    """
    Sections to report given per-section flags.
    With no flag set, every section is selected.
    """
    unknown = set(flags) - set(SECTIONS)
    if unknown:
        raise ValueError(f"Unknown report section(s): {', '.join(sorted(unknown))}")
    if not any(flags.values()):
        return list(SECTIONS)
    return [s for s in SECTIONS if flags.get(s)]


def analyze_exports(
    page_export: PageExportData,
    nav_export: NavigationExportData,
    progress_callback: Optional[Callable[[dict], None]] = None,
) -> AnalysisResult:
    """
    Run every structural analyzer and score the findings.
    Inputs are never modified; the result is built fresh on each call.
    """
    analyzed_at = utc_now_iso()
    _emit(progress_callback, f"Analysing {len(page_export.pages)} pages…", 0)

    unlisted = UnlistedPageAnalyzer().analyze(page_export, nav_export)
    _emit(progress_callback, "Checking navigation links…", 25)

    broken = BrokenNavLinkAnalyzer().analyze(page_export, nav_export)
    inconsistencies = TitleConsistencyAnalyzer().analyze(page_export, nav_export)
    _emit(progress_callback, "Checking duplicate paths…", 50)

    duplicates = DuplicatePathAnalyzer().analyze(page_export)
    _emit(progress_callback, "Analysing visibility…", 75)

    visibility = analyze_visibility(page_export, nav_export)

    _emit(progress_callback, "Scoring…", 95)
    health = score_from_counts({
        BrokenNavLinkAnalyzer.category:    len(broken),
        UnlistedPageAnalyzer.category:     len(unlisted),
        TitleConsistencyAnalyzer.category: len(inconsistencies),
        DuplicatePathAnalyzer.category:    len(duplicates),
    })

    logger.info(
        "Analysed %d pages: score %s, %d unlisted, %d broken links",
        len(page_export.pages), health.score, len(unlisted), len(broken),
    )
    _emit(progress_callback, "Analysis complete.", 100)

    return AnalysisResult(
        unlisted_pages=unlisted,
        broken_nav_links=broken,
        title_inconsistencies=inconsistencies,
        duplicate_paths=duplicates,
        navigation_coverage=coverage_from_unlisted(page_export, unlisted),
        visibility_analysis=visibility,
        health_score=health,
        analyzed_at=analyzed_at,
    )


def _emit(callback, message: str, pct: int) -> None:
    if callback:
        callback({"message": message, "pct": pct})
