"""Tests for analyzers.tree."""

from models import NavigationExportData, NavigationItem, NavigationTree
from analyzers.tree import all_navigation_links, flatten_navigation


def _item(id, kind="link", target=None, children=None):
    return NavigationItem(id=id, kind=kind, target=target, children=children or [])


class TestFlattenNavigation:
    def test_collects_links_with_targets(self):
        items = [_item("a", target="/a"), _item("b", target="/b")]
        assert [i.id for i in flatten_navigation(items)] == ["a", "b"]

    def test_skips_headers_dividers_and_targetless_links(self):
        items = [
            _item("h", kind="header"),
            _item("d", kind="divider"),
            _item("empty", target=""),
            _item("none"),
            _item("ok", target="/ok"),
        ]
        assert [i.id for i in flatten_navigation(items)] == ["ok"]

    def test_depth_first_parent_before_children(self):
        items = [
            _item("p", target="/p", children=[
                _item("c1", target="/c1", children=[_item("g", target="/g")]),
                _item("c2", target="/c2"),
            ]),
            _item("q", target="/q"),
        ]
        assert [i.id for i in flatten_navigation(items)] == ["p", "c1", "g", "c2", "q"]

    def test_visits_children_of_excluded_items(self):
        items = [_item("h", kind="header", children=[_item("x", target="/x")])]
        assert [i.id for i in flatten_navigation(items)] == ["x"]

    def test_empty_level(self):
        assert flatten_navigation([]) == []

    def test_returns_original_items(self):
        link = _item("a", target="/a")
        assert flatten_navigation([link])[0] is link


class TestAllNavigationLinks:
    def test_spans_every_locale_tree(self):
        export = NavigationExportData(tree=[
            NavigationTree(locale="en", items=[_item("en1", target="/en/a")]),
            NavigationTree(locale="fr", items=[_item("fr1", target="/fr/a")]),
        ])
        assert [i.id for i in all_navigation_links(export)] == ["en1", "fr1"]
