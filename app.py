"""
Snapshot Audit Tool: Streamlit Application
Audits exported page and navigation snapshots of a content site and compares
two snapshots with each other.
"""
from __future__ import annotations

import logging
import logging.config
from datetime import datetime
from typing import Callable, Optional

import pandas as pd
import streamlit as st

from models import AnalysisResult, ExportDiffResult, OrphanAnalysisResult, Severity
from snapshots import SnapshotError, load_navigation_export, load_page_export, load_page_links
from analyzers.orchestrator import SECTIONS, analyze_exports, selected_sections
from analyzers.links import find_orphaned_pages
from comparison.differ import compare_exports
from reporting.exporter import (
    broken_links_to_df,
    duplicates_to_df,
    health_issues_to_df,
    nav_diff_to_df,
    orphans_to_df,
    page_diff_to_df,
    result_to_json,
    title_inconsistencies_to_df,
    to_csv_bytes,
    unlisted_to_df,
    visibility_to_df,
)
from scoring.scorer import score_color, score_label
from ui.charts import coverage_bar, diff_summary_bar, health_issues_bar, health_score_gauge, visibility_donut
from config import LOG_LEVEL

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            }
        },
        "root": {"level": LOG_LEVEL, "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

# ── Page config ────────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Snapshot Audit Tool",
    page_icon="🧭",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ── Custom CSS ─────────────────────────────────────────────────────────────────
st.markdown("""
<style>
.block-container { padding-top: 1rem; }

.metric-card {
    background: #1A1D27;
    border-radius: 10px;
    padding: 1rem 1.2rem;
    margin-bottom: 0.5rem;
    border-left: 4px solid;
}
.metric-card.critical { border-color: #FF4B4B; }
.metric-card.warning  { border-color: #FFA500; }
.metric-card.info     { border-color: #4B9EFF; }
.metric-card.success  { border-color: #00C851; }
.metric-card.neutral  { border-color: #6C63FF; }

.metric-val  { font-size: 2rem; font-weight: 700; margin: 0; }
.metric-lbl  { font-size: 0.8rem; color: #888; text-transform: uppercase; letter-spacing: 0.05em; }

.modebar { display: none !important; }

.sidebar-logo { font-size: 1.5rem; font-weight: 800; color: #6C63FF; margin-bottom: 0.5rem; }
</style>
""", unsafe_allow_html=True)

_SECTION_LABELS = {
    "health":      "Health score",
    "coverage":    "Navigation coverage",
    "unlisted":    "Unlisted pages",
    "broken":      "Broken navigation links",
    "consistency": "Title inconsistencies",
    "duplicates":  "Duplicate paths",
    "visibility":  "Visibility",
}


# ── State helpers ──────────────────────────────────────────────────────────────

_RESULT_KEYS = ["analysis_result", "orphan_result", "diff_result", "sections"]


def _clear_results():
    for key in _RESULT_KEYS:
        st.session_state.pop(key, None)


def _has_result() -> bool:
    return any(st.session_state.get(k) is not None for k in _RESULT_KEYS[:3])


def _load(uploaded, loader: Callable, label: str):
    """Parse an uploaded file; show the error and return None when it is unusable."""
    if uploaded is None:
        return None
    try:
        return loader(uploaded.getvalue(), name=uploaded.name)
    except SnapshotError as exc:
        st.error(f"{label}: {exc}")
        return None


# ── Sidebar ────────────────────────────────────────────────────────────────────

def render_sidebar() -> Optional[dict]:
    with st.sidebar:
        st.markdown('<div class="sidebar-logo">🧭 Snapshot Audit</div>', unsafe_allow_html=True)
        st.caption("Content & navigation integrity")
        st.divider()

        st.subheader("Current snapshot")
        pages_file = st.file_uploader("Page export (JSON)", type=["json"], key="pages_new")
        nav_file = st.file_uploader("Navigation export (JSON)", type=["json"], key="nav_new")

        st.subheader("Previous snapshot")
        old_pages_file = st.file_uploader("Old page export (JSON)", type=["json"], key="pages_old")
        old_nav_file = st.file_uploader("Old navigation export (JSON)", type=["json"], key="nav_old")

        st.subheader("Live link data")
        links_file = st.file_uploader(
            "Page links (JSON)",
            type=["json"],
            key="page_links",
            help="List of {id, path, title, links} records fetched from the site.",
        )

        st.subheader("Report sections")
        flags = {s: st.checkbox(_SECTION_LABELS[s], value=False, key=f"section_{s}") for s in SECTIONS}
        st.caption("Leave all unchecked to show every section.")

        st.divider()

        if _has_result():
            if st.button("🔄 Clear Results", use_container_width=True):
                _clear_results()
                st.rerun()
            st.divider()

        start = st.button("Run Audit", type="primary", use_container_width=True)

    if not start:
        return None

    return {
        "page_export":     _load(pages_file, load_page_export, "Page export"),
        "nav_export":      _load(nav_file, load_navigation_export, "Navigation export"),
        "old_page_export": _load(old_pages_file, load_page_export, "Old page export"),
        "old_nav_export":  _load(old_nav_file, load_navigation_export, "Old navigation export"),
        "page_links":      _load(links_file, load_page_links, "Page links"),
        "sections":        selected_sections(**flags),
    }


# ── Run audit ──────────────────────────────────────────────────────────────────

def run_audit(inputs: dict) -> None:
    page_export = inputs["page_export"]
    nav_export = inputs["nav_export"]
    old_page_export = inputs["old_page_export"]
    old_nav_export = inputs["old_nav_export"]

    progress_bar = st.progress(0)
    status_text = st.empty()

    def on_progress(update: dict):
        progress_bar.progress(min(update.get("pct", 0), 100))
        status_text.markdown(f"**{update.get('message', '')}**")

    ran = False
    if page_export is not None and nav_export is not None:
        st.session_state.analysis_result = analyze_exports(page_export, nav_export, progress_callback=on_progress)
        ran = True

    if page_export is not None and inputs["page_links"] is not None:
        st.session_state.orphan_result = find_orphaned_pages(page_export.pages, inputs["page_links"])
        ran = True

    compare_pages = old_page_export is not None and page_export is not None
    compare_nav = old_nav_export is not None and nav_export is not None
    if compare_pages or compare_nav:
        st.session_state.diff_result = compare_exports(old_page_export, page_export, old_nav_export, nav_export)
        ran = True

    progress_bar.empty()
    status_text.empty()

    if not ran:
        st.warning(
            "Nothing to run. Upload a page and navigation export to analyse, "
            "page links for orphan detection, or an old snapshot to compare."
        )
        return

    logger.info(
        "Audit run: analysis=%s orphans=%s compare_pages=%s compare_nav=%s",
        "analysis_result" in st.session_state, "orphan_result" in st.session_state, compare_pages, compare_nav,
    )
    st.session_state.sections = inputs["sections"]
    st.rerun()


# ── Dashboard: Analysis ───────────────────────────────────────────────────────

def render_analysis(result: AnalysisResult, sections: list[str]) -> None:
    health = result.health_score
    coverage = result.navigation_coverage

    if "health" in sections:
        col_gauge, col_stats = st.columns([1, 2])
        with col_gauge:
            st.plotly_chart(health_score_gauge(health.score), use_container_width=True)
            st.markdown(
                f'<div style="text-align:center;font-size:1.1rem;font-weight:700;'
                f'color:{score_color(health.score)}">{score_label(health.score)}</div>',
                unsafe_allow_html=True,
            )
        with col_stats:
            c1, c2, c3, c4 = st.columns(4)
            _metric_card(c1, "Pages",        coverage.total_pages,              "neutral")
            _metric_card(c2, "Broken Links", len(result.broken_nav_links),      "critical" if result.broken_nav_links else "success")
            _metric_card(c3, "Unlisted",     len(result.unlisted_pages),        "warning" if result.unlisted_pages else "success")
            _metric_card(c4, "Duplicates",   len(result.duplicate_paths),       "critical" if result.duplicate_paths else "success")
            st.plotly_chart(health_issues_bar(health), use_container_width=True)
        st.dataframe(health_issues_to_df(health), use_container_width=True)
        st.divider()

    if "coverage" in sections:
        st.subheader("Navigation Coverage")
        st.plotly_chart(coverage_bar(coverage), use_container_width=True)
        st.caption(
            f"{coverage.pages_in_navigation} of {coverage.total_pages} pages in navigation "
            f"({coverage.coverage_percentage:.2f}%)"
        )
        st.divider()

    _finding_section(sections, "unlisted", "Unlisted Pages", unlisted_to_df(result),
                     "No unlisted pages found.")
    _finding_section(sections, "broken", "Broken Navigation Links", broken_links_to_df(result),
                     "No broken navigation links found.")
    _finding_section(sections, "consistency", "Title Inconsistencies", title_inconsistencies_to_df(result),
                     "No title inconsistencies found.")
    _finding_section(sections, "duplicates", "Duplicate Paths", duplicates_to_df(result),
                     "No duplicate paths found.")

    if "visibility" in sections:
        st.subheader("Visibility")
        col_chart, col_table = st.columns(2)
        with col_chart:
            st.plotly_chart(visibility_donut(result.visibility_analysis), use_container_width=True)
        with col_table:
            df = visibility_to_df(result)
            if df.empty:
                st.info("No restricted navigation links.")
            else:
                st.dataframe(df, use_container_width=True)

    st.caption(f"Analysis completed at {result.analyzed_at}")


def _finding_section(sections: list[str], key: str, title: str, df: pd.DataFrame, empty_msg: str) -> None:
    if key not in sections:
        return
    st.subheader(f"{title} ({len(df)})")
    if df.empty:
        st.success(empty_msg)
    else:
        st.dataframe(df, use_container_width=True, height=min(500, len(df) * 36 + 60))
    st.divider()


# ── Dashboard: Orphans ────────────────────────────────────────────────────────

def render_orphans(result: Optional[OrphanAnalysisResult]) -> None:
    if result is None:
        st.info("Upload a page export and page link data to find orphaned pages.")
        return

    c1, c2 = st.columns(2)
    _metric_card(c1, "Pages Checked", result.total_pages, "neutral")
    _metric_card(c2, "Orphaned", len(result.orphaned_pages), "warning" if result.orphaned_pages else "success")

    df = orphans_to_df(result)
    if df.empty:
        st.success("Every page has at least one incoming link.")
    else:
        st.dataframe(df, use_container_width=True, height=min(600, len(df) * 36 + 60))
    st.caption(f"Analysis completed at {result.analyzed_at}")


# ── Dashboard: Compare ────────────────────────────────────────────────────────

def render_compare(result: Optional[ExportDiffResult]) -> None:
    if result is None:
        st.info("Upload an old page or navigation export alongside the current one to compare.")
        return

    c1, c2, c3 = st.columns(3)
    _metric_card(c1, "Total Changes",      result.summary.total_changes, "neutral")
    _metric_card(c2, "Page Changes",       result.summary.page_changes,  "info")
    _metric_card(c3, "Navigation Changes", result.summary.nav_changes,   "info")

    st.plotly_chart(diff_summary_bar(result), use_container_width=True)

    st.subheader("Page Changes")
    df_pages = page_diff_to_df(result)
    if df_pages.empty:
        st.success("No page changes detected.")
    else:
        st.dataframe(df_pages, use_container_width=True)

    st.subheader("Navigation Changes")
    df_nav = nav_diff_to_df(result)
    if df_nav.empty:
        st.success("No navigation changes detected.")
    else:
        st.dataframe(df_nav, use_container_width=True)

    st.caption(f"Comparison completed at {result.compared_at}")


# ── Dashboard: Export ─────────────────────────────────────────────────────────

def render_export(
    analysis: Optional[AnalysisResult],
    orphans: Optional[OrphanAnalysisResult],
    diff: Optional[ExportDiffResult],
) -> None:
    st.subheader("Export Data")
    stamp = datetime.now().strftime("%Y%m%d_%H%M")

    downloads = []
    if analysis is not None:
        downloads += [
            ("Analysis (JSON)",        result_to_json(analysis),                              f"analysis_{stamp}.json", "application/json"),
            ("Unlisted Pages (CSV)",   to_csv_bytes(unlisted_to_df(analysis)),                f"unlisted_{stamp}.csv",  "text/csv"),
            ("Broken Links (CSV)",     to_csv_bytes(broken_links_to_df(analysis)),            f"broken_{stamp}.csv",    "text/csv"),
            ("Title Mismatches (CSV)", to_csv_bytes(title_inconsistencies_to_df(analysis)),   f"titles_{stamp}.csv",    "text/csv"),
            ("Duplicate Paths (CSV)",  to_csv_bytes(duplicates_to_df(analysis)),              f"duplicates_{stamp}.csv","text/csv"),
        ]
    if orphans is not None:
        downloads += [
            ("Orphans (JSON)", result_to_json(orphans),              f"orphans_{stamp}.json", "application/json"),
            ("Orphans (CSV)",  to_csv_bytes(orphans_to_df(orphans)), f"orphans_{stamp}.csv",  "text/csv"),
        ]
    if diff is not None:
        downloads += [
            ("Comparison (JSON)",         result_to_json(diff),                f"diff_{stamp}.json",     "application/json"),
            ("Page Changes (CSV)",        to_csv_bytes(page_diff_to_df(diff)), f"diff_pages_{stamp}.csv", "text/csv"),
            ("Navigation Changes (CSV)",  to_csv_bytes(nav_diff_to_df(diff)),  f"diff_nav_{stamp}.csv",  "text/csv"),
        ]

    if not downloads:
        st.info("Run an audit to export results.")
        return

    cols = st.columns(3)
    for idx, (label, data, file_name, mime) in enumerate(downloads):
        with cols[idx % 3]:
            st.download_button(label, data=data, file_name=file_name, mime=mime, use_container_width=True)


# ── Helpers ────────────────────────────────────────────────────────────────────

def _metric_card(col, label: str, value, card_class: str = "neutral") -> None:
    with col:
        st.markdown(
            f'<div class="metric-card {card_class}">'
            f'<div class="metric-lbl">{label}</div>'
            f'<div class="metric-val">{value}</div>'
            f'</div>',
            unsafe_allow_html=True,
        )


# ── Landing / empty state ──────────────────────────────────────────────────────

def render_landing() -> None:
    st.markdown("""
    <div style="text-align:center; padding: 4rem 2rem;">
        <div style="font-size:4rem">🧭</div>
        <h1 style="font-size:2.5rem; font-weight:800; color:#6C63FF; margin:0.5rem 0">Snapshot Audit Tool</h1>
        <p style="font-size:1.1rem; color:#888; max-width:600px; margin:0 auto 2rem">
            Checks exported page and navigation snapshots for unlisted pages, broken menu links,
            title mismatches, duplicate paths and orphaned pages, and compares two snapshots.
        </p>
    </div>
    """, unsafe_allow_html=True)

    col1, col2, col3, col4 = st.columns(4)
    _feature_card(col1, "🩺", "Health Score", "Weighted score over navigation and path issues")
    _feature_card(col2, "🗺️", "Coverage", "Which pages the navigation reaches, and who can see them")
    _feature_card(col3, "🔗", "Orphans", "Pages no other page links to")
    _feature_card(col4, "🔀", "Compare", "Added, removed and changed pages and menu items")


def _feature_card(col, icon: str, title: str, desc: str) -> None:
    with col:
        st.markdown(
            f'<div class="metric-card neutral" style="text-align:center">'
            f'<div style="font-size:2rem">{icon}</div>'
            f'<div style="font-weight:700;margin:0.5rem 0">{title}</div>'
            f'<div style="font-size:0.85rem;color:#888">{desc}</div>'
            f'</div>',
            unsafe_allow_html=True,
        )


# ── Main ───────────────────────────────────────────────────────────────────────

def main():
    inputs = render_sidebar()

    if inputs is not None:
        _clear_results()
        run_audit(inputs)
        return

    if not _has_result():
        render_landing()
        return

    analysis: Optional[AnalysisResult] = st.session_state.get("analysis_result")
    orphans: Optional[OrphanAnalysisResult] = st.session_state.get("orphan_result")
    diff: Optional[ExportDiffResult] = st.session_state.get("diff_result")
    sections: list[str] = st.session_state.get("sections") or list(SECTIONS)

    st.title("Snapshot Audit")
    if analysis is not None:
        n_crit = sum(i.count for i in analysis.health_score.issues if i.severity == Severity.CRITICAL)
        st.caption(
            f"{analysis.navigation_coverage.total_pages} pages · "
            f"Score: **{analysis.health_score.score}/{analysis.health_score.max_score}** · "
            f"{n_crit} critical issue(s)"
        )

    tabs = st.tabs(["Analysis", "Orphans", "Compare", "Export"])

    with tabs[0]:
        if analysis is None:
            st.info("Upload a page export and a navigation export to run the analysis.")
        else:
            render_analysis(analysis, sections)

    with tabs[1]:
        render_orphans(orphans)

    with tabs[2]:
        render_compare(diff)

    with tabs[3]:
        render_export(analysis, orphans, diff)


if __name__ == "__main__":
    main()
