"""
Health score calculator.

Scoring model:
- Four fixed categories, each with a severity and a point weight per
  occurrence (see config.HEALTH_CATEGORIES).
- score = max(0, 100 - sum(count * weight)). The score never goes negative
  and never exceeds the maximum.
- Only categories with at least one occurrence appear in the issue list.
"""
from __future__ import annotations

from models import HealthIssue, HealthScore, NavigationExportData, PageExportData
from config import HEALTH_CATEGORIES, HEALTH_MAX_SCORE

from analyzers.base import BaseAnalyzer
from analyzers.content import DuplicatePathAnalyzer
from analyzers.navigation import BrokenNavLinkAnalyzer, TitleConsistencyAnalyzer, UnlistedPageAnalyzer


# Analyzers whose finding counts feed the score
SCORED_ANALYZERS: list[BaseAnalyzer] = [
    BrokenNavLinkAnalyzer(),
    UnlistedPageAnalyzer(),
    TitleConsistencyAnalyzer(),
    DuplicatePathAnalyzer(),
]


def score_from_counts(counts: dict[str, int]) -> HealthScore:
    """
    Build a HealthScore from per-category occurrence counts.

    counts: category name → number of findings; missing categories count as 0.
    """
    issues: list[HealthIssue] = []
    total_points = 0

    for category, (severity, weight) in HEALTH_CATEGORIES.items():
        count = counts.get(category, 0)
        points = count * weight
        total_points += points
        if count > 0:
            issues.append(HealthIssue(category=category, severity=severity, count=count, points=points))

    score = max(0, HEALTH_MAX_SCORE - total_points)
    return HealthScore(
        score=score,
        max_score=HEALTH_MAX_SCORE,
        percentage=score / HEALTH_MAX_SCORE * 100,
        issues=issues,
    )


def calculate_health_score(page_export: PageExportData, nav_export: NavigationExportData) -> HealthScore:
    """Run every scored analyzer over the snapshot pair and score the findings."""
    counts = {
        analyzer.category: len(analyzer.analyze(page_export, nav_export))
        for analyzer in SCORED_ANALYZERS
    }
    return score_from_counts(counts)


def score_label(score: float) -> str:
    if score >= 90:
        return "Excellent"
    elif score >= 75:
        return "Good"
    elif score >= 50:
        return "Needs Work"
    else:
        return "Poor"


def score_color(score: float) -> str:
    if score >= 90:
        return "#00C851"
    elif score >= 75:
        return "#FFD700"
    elif score >= 50:
        return "#FF8800"
    else:
        return "#FF4444"
