"""Tests for snapshots (JSON loading)."""

import json

import pytest

from snapshots import SnapshotError, build_summary, load_navigation_export, load_page_export, load_page_links

PAGES_JSON = {
    "pages": [
        {"id": "1", "path": "/en/home", "title": "Home", "locale": "en", "isPublished": True},
        {"id": "2", "path": "/en/draft", "title": "Draft", "locale": "en", "isPublished": False, "tags": ["wip"]},
    ],
    "exportedAt": "2024-05-01T10:00:00.000Z",
    "instanceId": "prod",
}

NAV_JSON = {
    "config": {"mode": "TREE"},
    "tree": [{
        "locale": "en",
        "items": [{
            "id": "h1", "kind": "header", "label": "Main",
            "children": [{"id": "l1", "kind": "link", "label": "Home", "target": "/en/home", "visibilityGroups": [1]}],
        }],
    }],
    "exportedAt": "2024-05-01T10:00:00.000Z",
}


class TestLoadPageExport:
    def test_from_text(self):
        export = load_page_export(json.dumps(PAGES_JSON))
        assert [p.id for p in export.pages] == ["1", "2"]
        assert export.pages[1].tags == ["wip"]
        assert export.instance_id == "prod"

    def test_missing_summary_is_built(self):
        export = load_page_export(json.dumps(PAGES_JSON).encode("utf-8"))
        assert export.summary.total_pages == 2
        assert export.summary.published_pages == 1
        assert export.summary.unpublished_pages == 1

    def test_existing_summary_kept(self):
        data = dict(PAGES_JSON, summary={"totalPages": 9, "publishedPages": 9, "unpublishedPages": 0})
        assert load_page_export(json.dumps(data)).summary.total_pages == 9

    def test_from_path(self, tmp_path):
        path = tmp_path / "pages.json"
        path.write_text(json.dumps(PAGES_JSON), encoding="utf-8")
        assert len(load_page_export(path).pages) == 2

    def test_invalid_json(self):
        with pytest.raises(SnapshotError, match="Failed to load pages export"):
            load_page_export("{not json", name="pages.json")

    def test_pages_must_be_a_list(self):
        with pytest.raises(SnapshotError, match="'pages' must be a list"):
            load_page_export(json.dumps({"pages": {}}))

    def test_top_level_must_be_object(self):
        with pytest.raises(SnapshotError):
            load_page_export("[]")

    def test_missing_file(self, tmp_path):
        with pytest.raises(SnapshotError):
            load_page_export(tmp_path / "nope.json")


class TestLoadNavigationExport:
    def test_nested_tree(self):
        export = load_navigation_export(json.dumps(NAV_JSON))
        assert export.config == {"mode": "TREE"}
        link = export.tree[0].items[0].children[0]
        assert link.target == "/en/home"
        assert link.visibility_groups == [1]

    def test_tree_required(self):
        with pytest.raises(SnapshotError, match="navigation"):
            load_navigation_export(json.dumps({"config": {}}))


class TestLoadPageLinks:
    def test_list_of_records(self):
        raw = json.dumps([{"id": 1, "path": "en/home", "title": "Home", "links": ["/en/about"]}])
        links = load_page_links(raw)
        assert links[0].links == ["/en/about"]

    def test_requires_list(self):
        with pytest.raises(SnapshotError, match="page links"):
            load_page_links(json.dumps({"links": []}))


class TestBuildSummary:
    def test_empty(self):
        summary = build_summary([])
        assert (summary.total_pages, summary.published_pages, summary.unpublished_pages) == (0, 0, 0)
