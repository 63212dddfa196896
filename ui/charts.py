"""
Plotly chart builders for the Snapshot Audit dashboard.
All functions return plotly Figure objects.
"""
from __future__ import annotations

import plotly.graph_objects as go

from models import ExportDiffResult, HealthScore, NavigationCoverage, Severity, VisibilityAnalysis
from scoring.scorer import score_color

# Consistent colour palette
_COLORS = {
    "critical": "#FF4B4B",
    "warning":  "#FFA500",
    "info":     "#4B9EFF",
}

_BG = "#1A1D27"
_PAPER = "#0E1117"
_GRID = "#2A2D3A"
_TEXT = "#FAFAFA"


def _base_layout(**kwargs) -> dict:
    return {
        "paper_bgcolor": _PAPER,
        "plot_bgcolor":  _BG,
        "font": {"color": _TEXT, "family": "sans-serif"},
        "margin": {"l": 20, "r": 20, "t": 40, "b": 20},
        **kwargs,
    }


def _title(text: str) -> dict:
    return {"text": text, "x": 0.5, "xanchor": "center", "font": {"size": 14, "color": _TEXT}}


# ── Health score gauge ─────────────────────────────────────────────────────────

def health_score_gauge(score: float) -> go.Figure:
    color = score_color(score)
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=score,
        domain={"x": [0, 1], "y": [0, 1]},
        number={"font": {"size": 48, "color": color}},
        gauge={
            "axis": {"range": [0, 100], "tickcolor": _TEXT, "tickfont": {"color": _TEXT}},
            "bar": {"color": color, "thickness": 0.25},
            "bgcolor": _BG,
            "borderwidth": 2,
            "bordercolor": _GRID,
            "steps": [
                {"range": [0, 50],  "color": "#3A1A1A"},
                {"range": [50, 75], "color": "#3A2E1A"},
                {"range": [75, 90], "color": "#2A3A1A"},
                {"range": [90, 100],"color": "#1A3A1A"},
            ],
        },
    ))
    fig.update_layout(**_base_layout(height=260), title=_title("Content Health Score"))
    return fig


# ── Points lost per category ───────────────────────────────────────────────────

def health_issues_bar(health: HealthScore) -> go.Figure:
    if not health.issues:
        return _empty_chart("No issues found")

    issues = sorted(health.issues, key=lambda i: i.points)
    fig = go.Figure(go.Bar(
        y=[i.category for i in issues],
        x=[i.points for i in issues],
        orientation="h",
        marker_color=[_COLORS.get(i.severity, "#888888") for i in issues],
        customdata=[i.count for i in issues],
        hovertemplate="<b>%{y}</b><br>%{customdata} occurrence(s), %{x} points<extra></extra>",
    ))
    fig.update_layout(
        **_base_layout(height=max(240, len(issues) * 48 + 80)),
        title=_title("Points Lost by Category"),
        xaxis={"title": "Points", "gridcolor": _GRID, "color": _TEXT},
        yaxis={"gridcolor": _GRID, "color": _TEXT, "automargin": True},
        showlegend=False,
    )
    return fig


# ── Navigation coverage ────────────────────────────────────────────────────────

def coverage_bar(coverage: NavigationCoverage) -> go.Figure:
    if coverage.total_pages == 0:
        return _empty_chart("No pages in export")

    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=["Pages"], x=[coverage.pages_in_navigation], name="In navigation",
        orientation="h", marker_color="#00C851",
    ))
    fig.add_trace(go.Bar(
        y=["Pages"], x=[coverage.pages_not_in_navigation], name="Not in navigation",
        orientation="h", marker_color=Severity.COLORS[Severity.WARNING],
    ))
    fig.update_layout(
        **_base_layout(height=180),
        title=_title(f"Navigation Coverage: {coverage.coverage_percentage:.1f}%"),
        barmode="stack",
        legend={"orientation": "h", "y": -0.3, "font": {"color": _TEXT}},
        xaxis={"gridcolor": _GRID, "color": _TEXT},
        yaxis={"visible": False},
    )
    return fig


# ── Visibility donut ───────────────────────────────────────────────────────────

def visibility_donut(visibility: VisibilityAnalysis) -> go.Figure:
    values = [visibility.public_pages, visibility.restricted_pages]
    if not any(values):
        return _empty_chart("No linked pages")

    fig = go.Figure(go.Pie(
        labels=["Public", "Restricted"],
        values=values,
        hole=0.6,
        marker={"colors": ["#00C851", "#6C63FF"], "line": {"color": _BG, "width": 2}},
        hovertemplate="<b>%{label}</b>: %{value} link(s)<extra></extra>",
    ))
    fig.update_layout(
        **_base_layout(height=260),
        title=_title("Navigation Visibility"),
        annotations=[{
            "text": f"<b>{sum(values)}</b><br>Links",
            "x": 0.5, "y": 0.5,
            "font_size": 18,
            "font_color": _TEXT,
            "showarrow": False,
        }],
        legend={"font": {"color": _TEXT}},
    )
    return fig


# ── Diff summary ───────────────────────────────────────────────────────────────

def diff_summary_bar(diff: ExportDiffResult) -> go.Figure:
    if diff.summary.total_changes == 0:
        return _empty_chart("No changes detected")

    groups = ["Pages", "Navigation"]
    series = [
        ("Added",    "#00C851", [len(diff.pages_added),    len(diff.nav_items_added)]),
        ("Removed",  "#FF4B4B", [len(diff.pages_removed),  len(diff.nav_items_removed)]),
        ("Modified", "#4B9EFF", [len(diff.pages_modified), len(diff.nav_items_modified)]),
    ]

    fig = go.Figure()
    for name, color, values in series:
        fig.add_trace(go.Bar(
            x=groups, y=values, name=name, marker_color=color,
            hovertemplate=f"<b>%{{x}}</b><br>{name}: %{{y}}<extra></extra>",
        ))
    fig.update_layout(
        **_base_layout(height=280),
        title=_title(f"{diff.summary.total_changes} Change(s)"),
        barmode="group",
        legend={"orientation": "h", "y": -0.15, "font": {"color": _TEXT}},
        xaxis={"gridcolor": _GRID, "color": _TEXT},
        yaxis={"title": "Count", "gridcolor": _GRID, "color": _TEXT},
    )
    return fig


# ── Helper ─────────────────────────────────────────────────────────────────────

def _empty_chart(message: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(text=message, x=0.5, y=0.5, showarrow=False, font={"color": _TEXT, "size": 14})
    fig.update_layout(**_base_layout(height=260))
    return fig
