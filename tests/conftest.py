"""Shared snapshot builders for the test suite."""

import pytest

from models import (
    NavigationExportData,
    NavigationItem,
    NavigationTree,
    Page,
    PageExportData,
    PageLinkItem,
)


@pytest.fixture
def make_page():
    def _make(id, path, title="", is_published=True, locale="en"):
        return Page(id=id, path=path, title=title, locale=locale, is_published=is_published)
    return _make


@pytest.fixture
def make_link():
    def _make(id, target, label=None, visibility_groups=None, icon=None, children=None):
        return NavigationItem(
            id=id,
            kind="link",
            label=label,
            target=target,
            icon=icon,
            visibility_groups=visibility_groups,
            children=children or [],
        )
    return _make


@pytest.fixture
def page_export():
    def _make(*pages):
        return PageExportData(pages=list(pages), exported_at="2024-01-01T00:00:00.000Z")
    return _make


@pytest.fixture
def nav_export():
    def _make(*items, locale="en"):
        return NavigationExportData(
            tree=[NavigationTree(locale=locale, items=list(items))],
            exported_at="2024-01-01T00:00:00.000Z",
        )
    return _make


@pytest.fixture
def page_links():
    def _make(path, *links, id=0, title=""):
        return PageLinkItem(id=id, path=path, title=title, links=list(links))
    return _make
