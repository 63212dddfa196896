"""
Navigation tree flattening.
"""
from __future__ import annotations

from models import NavigationExportData, NavigationItem
from config import NAV_KIND_LINK


def flatten_navigation(items: list[NavigationItem]) -> list[NavigationItem]:
    """
    Return every link item with a non-empty target from *items* and all
    descendant levels, depth-first, parents before their children.

    Headers, dividers and target-less links are skipped but their children
    are still visited.
    """
    links: list[NavigationItem] = []
    for item in items:
        if item.kind == NAV_KIND_LINK and item.target:
            links.append(item)
        if item.children:
            links.extend(flatten_navigation(item.children))
    return links


def all_navigation_links(nav_export: NavigationExportData) -> list[NavigationItem]:
    """Flattened link items of every locale tree, in tree order."""
    links: list[NavigationItem] = []
    for tree in nav_export.tree:
        links.extend(flatten_navigation(tree.items))
    return links
