"""Tests for comparison.differ.compare_exports."""

import copy

from models import NavigationItem
from comparison.differ import compare_exports


class TestComparePages:
    def test_added_removed_modified(self, make_page, page_export):
        old = page_export(make_page("1", "/a", "A"), make_page("2", "/b", "B"))
        new = page_export(make_page("1", "/a", "A2"), make_page("3", "/c", "C"))
        diff = compare_exports(old, new)
        assert [p.id for p in diff.pages_added] == ["3"]
        assert [p.id for p in diff.pages_removed] == ["2"]
        assert len(diff.pages_modified) == 1
        assert diff.pages_modified[0].changes == ["title"]
        assert diff.pages_modified[0].before.title == "A"
        assert diff.pages_modified[0].after.title == "A2"

    def test_all_compared_fields(self, make_page, page_export):
        old = page_export(make_page("1", "/a", "A", is_published=True))
        new = page_export(make_page("1", "/b", "B", is_published=False))
        assert compare_exports(old, new).pages_modified[0].changes == ["title", "path", "isPublished"]

    def test_locale_change_is_not_a_modification(self, make_page, page_export):
        old = page_export(make_page("1", "/a", "A", locale="en"))
        new = page_export(make_page("1", "/a", "A", locale="fr"))
        assert compare_exports(old, new).pages_modified == []

    def test_missing_side_leaves_pages_empty(self, make_page, page_export):
        diff = compare_exports(page_export(make_page("1", "/a")), None)
        assert diff.pages_removed == []
        assert diff.summary.total_changes == 0


class TestCompareNavigation:
    def test_matches_flattened_links_by_id(self, make_link, nav_export):
        old = nav_export(make_link("n1", "/a", label="A"), make_link("n2", "/b"))
        new = nav_export(
            NavigationItem(id="h", kind="header", children=[make_link("n1", "/a", label="Alpha")]),
            make_link("n3", "/c"),
        )
        diff = compare_exports(old_nav_export=old, new_nav_export=new)
        assert [n.id for n in diff.nav_items_added] == ["n3"]
        assert [n.id for n in diff.nav_items_removed] == ["n2"]
        assert diff.nav_items_modified[0].changes == ["label"]

    def test_visibility_groups_compared_by_value(self, make_link, nav_export):
        old = nav_export(make_link("n1", "/a", visibility_groups=[1, 2]))
        new = nav_export(make_link("n1", "/a", visibility_groups=[1, 2]))
        assert compare_exports(old_nav_export=old, new_nav_export=new).nav_items_modified == []

    def test_visibility_groups_and_icon_changes(self, make_link, nav_export):
        old = nav_export(make_link("n1", "/a", visibility_groups=[1], icon="mdi-home"))
        new = nav_export(make_link("n1", "/b", visibility_groups=[2], icon="mdi-star"))
        diff = compare_exports(old_nav_export=old, new_nav_export=new)
        assert diff.nav_items_modified[0].changes == ["target", "icon", "visibilityGroups"]

    def test_headers_are_not_diffed(self, nav_export):
        old = nav_export(NavigationItem(id="h1", kind="header", label="Old"))
        new = nav_export(NavigationItem(id="h2", kind="divider"))
        assert compare_exports(old_nav_export=old, new_nav_export=new).summary.nav_changes == 0


class TestSummary:
    def test_counts(self, make_page, make_link, page_export, nav_export):
        diff = compare_exports(
            page_export(make_page("1", "/a")),
            page_export(make_page("2", "/b")),
            nav_export(),
            nav_export(make_link("n1", "/b")),
        )
        assert diff.summary.page_changes == 2
        assert diff.summary.nav_changes == 1
        assert diff.summary.total_changes == 3
        assert diff.compared_at

    def test_self_diff_is_empty(self, make_page, make_link, page_export, nav_export):
        pages = page_export(make_page("1", "/a", "A"), make_page("2", "/b", "B", is_published=False))
        nav = nav_export(make_link("n1", "/a", label="A", visibility_groups=[3]), make_link("n2", "/b"))
        diff = compare_exports(pages, copy.deepcopy(pages), nav, copy.deepcopy(nav))
        assert diff.pages_added == diff.pages_removed == diff.pages_modified == []
        assert diff.nav_items_added == diff.nav_items_removed == diff.nav_items_modified == []
        assert diff.summary.total_changes == 0

    def test_inputs_not_mutated(self, make_page, page_export):
        old = page_export(make_page("1", "/a", "A"))
        new = page_export(make_page("1", "/a", "B"))
        snapshot = copy.deepcopy((old, new))
        compare_exports(old, new)
        assert (old, new) == snapshot
