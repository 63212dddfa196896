"""Tests for analyzers.links (link graph and orphan detection)."""

from analyzers.links import build_link_graph, find_orphaned_pages, internal_links


class TestInternalLinks:
    def test_filters_external_mail_anchor_and_empty(self):
        raw = ["https://x.com", "http://y.com", "mailto:a@b.c", "#top", "", "/en/docs", "guide#part"]
        assert internal_links(raw) == ["/en/docs", "guide#part"]


class TestBuildLinkGraph:
    def test_seeds_every_page(self, make_page):
        graph = build_link_graph([make_page("1", "/en/a"), make_page("2", "/en/b")], [])
        assert set(graph) == {"a", "b"}
        assert all(not n.incoming and n.outgoing_count == 0 for n in graph.values())

    def test_incoming_edges_and_outgoing_count(self, make_page, page_links):
        pages = [make_page("1", "/en/a"), make_page("2", "/en/b")]
        graph = build_link_graph(pages, [page_links("/en/a", "/en/b", "https://ext.com", "/fr/b/")])
        assert graph["b"].incoming == {"a"}
        assert graph["a"].outgoing_count == 2

    def test_fragment_stripped_before_matching(self, make_page, page_links):
        pages = [make_page("1", "/en/a"), make_page("2", "/en/b")]
        graph = build_link_graph(pages, [page_links("/en/a", "/en/b#section")])
        assert graph["b"].incoming == {"a"}

    def test_links_to_unknown_pages_ignored(self, make_page, page_links):
        graph = build_link_graph([make_page("1", "/en/a")], [page_links("/en/a", "/en/nowhere")])
        assert set(graph) == {"a"}


class TestFindOrphanedPages:
    def test_home_and_dynamic_sections_excluded(self, make_page):
        pages = [
            make_page("1", "/en/home"),
            make_page("2", "/en/news/2024-01"),
            make_page("3", "/blog/post"),
            make_page("4", "/archive/old"),
            make_page("5", "/en/"),
            make_page("6", "/en/about"),
        ]
        result = find_orphaned_pages(pages, [])
        assert [o.page.id for o in result.orphaned_pages] == ["6"]
        assert result.total_pages == 6

    def test_linked_page_not_orphaned(self, make_page, page_links):
        pages = [make_page("1", "/en/home"), make_page("2", "/en/about")]
        result = find_orphaned_pages(pages, [page_links("/en/home", "/en/about")])
        assert result.orphaned_pages == []

    def test_reasons_and_counts(self, make_page, page_links):
        pages = [make_page("1", "/en/a"), make_page("2", "/en/b", is_published=False)]
        result = find_orphaned_pages(pages, [page_links("/en/a", "/en/x", "mailto:me@x.org", "/en/y")])
        by_id = {o.page.id: o for o in result.orphaned_pages}
        assert by_id["1"].reason == "published_no_links"
        assert by_id["1"].outgoing_link_count == 2
        assert by_id["1"].incoming_link_count == 0
        assert by_id["2"].reason == "unpublished_no_links"

    def test_navigation_does_not_count(self, make_page):
        # only page-to-page links matter; no navigation input exists at all
        result = find_orphaned_pages([make_page("1", "/en/guide")], [])
        assert len(result.orphaned_pages) == 1

    def test_empty_input(self):
        result = find_orphaned_pages([], [])
        assert result.orphaned_pages == []
        assert result.total_pages == 0
        assert result.analyzed_at
