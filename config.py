"""
Global configuration constants for the Snapshot Audit Tool.
All tunable thresholds and fixed policies live here.
"""
import os

# ── Health scoring ────────────────────────────────────────────────────────────
HEALTH_MAX_SCORE = 100

# Category → (severity, points deducted per occurrence), in reporting order
HEALTH_CATEGORIES: dict[str, tuple[str, int]] = {
    "Broken Navigation Links": ("critical", 10),
    "Unlisted Pages":          ("warning",   5),
    "Title Inconsistencies":   ("info",      2),
    "Duplicate Paths":         ("critical", 10),
}

# ── Path normalization ────────────────────────────────────────────────────────
# Navigation comparison only strips the literal English prefix.
NAV_LOCALE_PREFIX = "/en/"

# Link-graph matching strips any two-letter locale segment.
LINK_LOCALE_PATTERN = r"^[a-z]{2}/"

# ── Orphan detection ──────────────────────────────────────────────────────────
ORPHAN_EXCLUDED_PATHS = frozenset({"", "home"})

# Pages under these prefixes are reached through dynamic listings
ORPHAN_EXCLUDED_PREFIXES = ("news/", "blog/", "archive/")

# Outgoing links with these prefixes never point at a page of this site
EXTERNAL_LINK_PREFIXES = ("http://", "https://", "mailto:", "#")

# ── Navigation item kinds ─────────────────────────────────────────────────────
NAV_KIND_LINK = "link"

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("SNAPSHOT_AUDIT_LOG_LEVEL", "INFO").upper()
