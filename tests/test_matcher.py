"""Tests for dispatching.routing.matcher — path, hash, and suffix matching."""

import pytest

from dispatching.errors import InvalidUrlError
from dispatching.routing.matcher import (
    UrlMatcher,
    normalize_suffix,
    process_pattern,
    split_pattern,
)
from dispatching.url import ParsedUrl


class TestSplitPattern:
    def test_path_only(self) -> None:
        assert split_pattern("/a/<b>") == ("/a/<b>", "")

    def test_hash_only(self) -> None:
        assert split_pattern("#<tab>") == ("", "<tab>")

    def test_splits_on_first_hash(self) -> None:
        assert split_pattern("/a#b#c") == ("/a", "b#c")


class TestNormalizeSuffix:
    def test_none(self) -> None:
        assert normalize_suffix(None) is None
        assert normalize_suffix("") is None

    def test_no_dot_added(self) -> None:
        assert normalize_suffix("html") == "html"

    def test_keeps_dot(self) -> None:
        assert normalize_suffix(".json") == ".json"


class TestProcessPattern:
    def test_path_only(self) -> None:
        matcher = process_pattern("/<id>")
        assert matcher.pathname is not None
        assert matcher.hash is None
        assert matcher.url_suffix is None

    def test_hash_only(self) -> None:
        matcher = process_pattern("#<tab>")
        assert matcher.pathname is None
        assert matcher.hash is not None
        assert matcher.hash.names == ("tab",)

    def test_empty_hash_part_ignored(self) -> None:
        matcher = process_pattern("/a#")
        assert matcher.hash is None

    def test_frozen(self) -> None:
        matcher = process_pattern("/")
        with pytest.raises(AttributeError):
            matcher.url_suffix = ".html"  # type: ignore[misc]


class TestPathMatching:
    def test_root(self) -> None:
        assert process_pattern("/")("/") == {}

    def test_round_trip(self) -> None:
        matcher = process_pattern("/<a>/<b>")
        assert matcher("/alpha/beta") == {"a": "alpha", "b": "beta"}

    def test_values_are_not_decoded(self) -> None:
        matcher = process_pattern("/<q>")
        assert matcher("/hello%20world") == {"q": "hello%20world"}

    def test_no_match(self) -> None:
        assert process_pattern("/<a>/<b>")("/only") is None

    def test_query_ignored(self) -> None:
        matcher = process_pattern("/<a>")
        assert matcher("/x?wat=true") == {"a": "x"}
        assert matcher("/x") == matcher("/x?wat=true")

    def test_full_url(self) -> None:
        assert process_pattern("/<a>")("https://example.com/x") == {"a": "x"}

    def test_pre_parsed_url(self) -> None:
        assert process_pattern("/<a>")(ParsedUrl(pathname="/x")) == {"a": "x"}

    def test_path_route_ignores_hash(self) -> None:
        assert process_pattern("/<a>")("/x#anything") == {"a": "x"}

    def test_invalid_url_raises(self) -> None:
        with pytest.raises(InvalidUrlError):
            process_pattern("/")("no-slash")


class TestHashMatching:
    def test_hash(self) -> None:
        assert process_pattern("#<hash>")("/#hash") == {"hash": "hash"}

    def test_hash_with_full_url(self) -> None:
        assert process_pattern("#<hash>")("https://example.com/#hash") == {"hash": "hash"}

    def test_hash_route_ignores_path(self) -> None:
        assert process_pattern("#<hash>")("/anything/here#x") == {"hash": "x"}

    def test_missing_hash(self) -> None:
        assert process_pattern("#<hash>")("/") is None

    def test_static_hash(self) -> None:
        matcher = process_pattern("#settings")
        assert matcher("/#settings") == {}
        assert matcher("/#settings/") == {}
        assert matcher("/#other") is None

    def test_path_and_hash_are_conjunctive(self) -> None:
        matcher = process_pattern("/items/<id>#<tab>")
        assert matcher("/items/7#details") == {"id": "7", "tab": "details"}
        assert matcher("/items/7") is None
        assert matcher("/other#details") is None


class TestSuffix:
    def test_required_suffix_matches(self) -> None:
        matcher = process_pattern("/<file>", ".html")
        assert matcher("/page.html") == {"file": "page"}

    def test_wrong_suffix(self) -> None:
        assert process_pattern("/<file>", ".html")("/page.txt") is None

    def test_missing_suffix(self) -> None:
        assert process_pattern("/<file>", ".html")("/page") is None

    def test_suffix_without_dot_never_matches(self) -> None:
        matcher = process_pattern("/<file>", "html")
        assert matcher("/page.html") is None
        assert matcher("/page") is None

    def test_non_ascii_suffix_not_stripped(self) -> None:
        assert process_pattern("/<f>")("/v.\u00e9") == {"f": "v.\u00e9"}
        assert process_pattern("/<f>", ".\u00e9")("/v.\u00e9") is None

    def test_hyphen_suffix(self) -> None:
        assert process_pattern("/<file>", ".-")("/page.-") == {"file": "page"}

    def test_suffix_stripped_without_requirement(self) -> None:
        assert process_pattern("/<file>")("/report.pdf") == {"file": "report"}

    def test_only_last_suffix_stripped(self) -> None:
        assert process_pattern("/<file>")("/archive.tar.gz") == {"file": "archive.tar"}

    def test_suffix_with_query(self) -> None:
        assert process_pattern("/<file>", ".json")("/data.json?v=2") == {"file": "data"}

    def test_suffix_only_route(self) -> None:
        matcher = UrlMatcher(url_suffix=".xml")
        assert matcher("/anything/at/all.xml") == {}
        assert matcher("/anything") is None


class TestMatcherPurity:
    def test_repeated_calls_equal(self) -> None:
        matcher = process_pattern("/<a>/<b>#<c>")
        url = "/one/two#three"
        assert matcher(url) == matcher(url) == {"a": "one", "b": "two", "c": "three"}

    def test_empty_matcher_matches_everything(self) -> None:
        assert UrlMatcher()("/whatever") == {}
