"""
Link analyzer: builds the page-to-page link graph from live link data and
reports orphan pages, i.e. pages no other page links to.

Navigation is deliberately not part of the graph; a page reachable only from
the menu is still an orphan here.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from models import OrphanAnalysisResult, OrphanedPage, Page, PageLinkItem, utc_now_iso
from config import EXTERNAL_LINK_PREFIXES, ORPHAN_EXCLUDED_PATHS, ORPHAN_EXCLUDED_PREFIXES
from analyzers.paths import normalize_path_for_link_matching

logger = logging.getLogger(__name__)


@dataclass
class LinkNode:
    """One page in the link graph."""
    page: Page
    incoming: set[str] = field(default_factory=set)    # normalized source paths
    outgoing_count: int = 0


def internal_links(raw_links: list[str]) -> list[str]:
    """Drop empty, external, mail and same-page anchor links."""
    return [link for link in raw_links if link and not link.startswith(EXTERNAL_LINK_PREFIXES)]


def build_link_graph(pages: list[Page], page_links: list[PageLinkItem]) -> dict[str, LinkNode]:
    """
    Map normalized page path → LinkNode.

    Every known page is seeded first, so pages absent from *page_links* are
    present with no edges. Links to unknown paths are ignored.
    """
    graph: dict[str, LinkNode] = {}
    for page in pages:
        key = normalize_path_for_link_matching(page.path)
        node = graph.get(key)
        if node is None:
            graph[key] = LinkNode(page=page)
        else:
            node.page = page

    for item in page_links:
        source = normalize_path_for_link_matching(item.path)
        valid = internal_links(item.links or [])

        source_node = graph.get(source)
        if source_node is not None:
            source_node.outgoing_count = len(valid)

        for link in valid:
            clean = link.split("#", 1)[0]
            if not clean:
                continue
            target_node = graph.get(normalize_path_for_link_matching(clean))
            if target_node is not None:
                target_node.incoming.add(source)

    logger.debug(
        "Link graph: %d nodes, %d edges",
        len(graph), sum(len(n.incoming) for n in graph.values()),
    )
    return graph


def is_excluded_from_orphan_checks(path: str) -> bool:
    """Home and dynamically listed sections are never orphans."""
    return path in ORPHAN_EXCLUDED_PATHS or path.startswith(ORPHAN_EXCLUDED_PREFIXES)


class OrphanPageAnalyzer:
    """
    Detect orphan pages: pages with no incoming link from any other page.
    Run as a batch check over the whole site.
    """

    @staticmethod
    def run_orphan_checks(pages: list[Page], page_links: list[PageLinkItem]) -> list[OrphanedPage]:
        graph = build_link_graph(pages, page_links)

        orphans: list[OrphanedPage] = []
        for path, node in graph.items():
            if is_excluded_from_orphan_checks(path):
                continue
            if node.incoming:
                continue
            orphans.append(OrphanedPage(
                page=node.page,
                incoming_link_count=0,
                outgoing_link_count=node.outgoing_count,
                reason="published_no_links" if node.page.is_published else "unpublished_no_links",
            ))

        return orphans


def find_orphaned_pages(pages: list[Page], page_links: list[PageLinkItem]) -> OrphanAnalysisResult:
    analyzed_at = utc_now_iso()
    orphans = OrphanPageAnalyzer.run_orphan_checks(pages, page_links)
    logger.debug("%d orphaned pages out of %d", len(orphans), len(pages))
    return OrphanAnalysisResult(orphaned_pages=orphans, total_pages=len(pages), analyzed_at=analyzed_at)
