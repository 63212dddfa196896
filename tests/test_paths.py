"""Tests for analyzers.paths."""

import pytest

from analyzers.paths import normalize_page_path, normalize_path_for_link_matching


class TestNormalizePagePath:
    def test_strips_english_prefix_and_lowercases(self):
        assert normalize_page_path("/EN/Foo/Bar") == "foo/bar"

    def test_plain_relative_path_unchanged(self):
        assert normalize_page_path("foo/bar") == "foo/bar"

    def test_prefixed_and_plain_paths_match(self):
        assert normalize_page_path("/EN/Foo/Bar") == normalize_page_path("foo/bar")

    def test_strips_single_leading_slash(self):
        assert normalize_page_path("/foo") == "foo"
        assert normalize_page_path("//foo") == "/foo"

    def test_trims_whitespace(self):
        assert normalize_page_path("  /en/Home  ") == "home"

    def test_other_locales_kept(self):
        assert normalize_page_path("/fr/accueil") == "fr/accueil"

    def test_english_prefix_without_leading_slash_kept(self):
        assert normalize_page_path("en/foo") == "en/foo"

    def test_trailing_slash_kept(self):
        assert normalize_page_path("/foo/") == "foo/"

    @pytest.mark.parametrize("path", ["/EN/Foo/Bar", "/en/home", "docs/Guide", "/fr/x/", "  /a  ", ""])
    def test_idempotent(self, path):
        once = normalize_page_path(path)
        assert normalize_page_path(once) == once


class TestNormalizePathForLinkMatching:
    def test_strips_any_two_letter_locale(self):
        assert normalize_path_for_link_matching("/fr/Accueil") == "accueil"
        assert normalize_path_for_link_matching("/de/docs/setup") == "docs/setup"

    def test_strips_locale_without_leading_slash(self):
        assert normalize_path_for_link_matching("en/home") == "home"

    def test_strips_trailing_slash(self):
        assert normalize_path_for_link_matching("/docs/guide/") == "docs/guide"

    def test_three_letter_segment_kept(self):
        assert normalize_path_for_link_matching("/faq/intro") == "faq/intro"

    def test_locale_only_path_becomes_empty(self):
        assert normalize_path_for_link_matching("/en/") == ""

    def test_root_becomes_empty(self):
        assert normalize_path_for_link_matching("/") == ""

    def test_differs_from_navigation_policy(self):
        assert normalize_page_path("/fr/page") == "fr/page"
        assert normalize_path_for_link_matching("/fr/page") == "page"
