"""Tests for domain-string normalization."""

from __future__ import annotations

import pytest

from redirectctl.domain.normalize import get_domain, strip_path, strip_protocol


class TestStripProtocol:
    def test_empty_string(self) -> None:
        assert strip_protocol("") == ""

    def test_non_url_unchanged(self) -> None:
        text = "wow, this really isnt a URL at all!"
        assert strip_protocol(text) == text

    def test_bare_domain_unchanged(self) -> None:
        assert strip_protocol("nickschorr.com") == "nickschorr.com"

    def test_fully_qualified(self) -> None:
        assert strip_protocol("http://nickschorr.com/") == "nickschorr.com/"

    def test_fully_qualified_with_path(self) -> None:
        url = "http://nickschorr.com/path/to/something/"
        assert strip_protocol(url) == "nickschorr.com/path/to/something/"

    def test_fully_qualified_with_subdomain(self) -> None:
        assert strip_protocol("http://test.nickschorr.com/") == "test.nickschorr.com/"

    def test_protocol_relative(self) -> None:
        assert strip_protocol("//cdn.example.com/x") == "cdn.example.com/x"

    def test_marker_only(self) -> None:
        assert strip_protocol("http://") == ""

    def test_double_slash_in_path_is_treated_as_protocol(self) -> None:
        """Known limitation: the first ``//`` anywhere is the split point."""
        assert strip_protocol("example.com/a//b") == "b"

    def test_only_first_marker_is_stripped(self) -> None:
        assert strip_protocol("http://example.com//x") == "example.com//x"

    @pytest.mark.parametrize(
        "text",
        ["", "example.com", "https://example.com/p", "//x.org", "ftp://a.b/c/d"],
    )
    def test_second_application_is_noop(self, text: str) -> None:
        """With at most one ``//`` marker, nothing remains to strip."""
        once = strip_protocol(text)
        assert strip_protocol(once) == once
        assert get_domain(strip_protocol(once)) == get_domain(once)


class TestStripPath:
    def test_no_slash(self) -> None:
        assert strip_path("example.com") == "example.com"

    def test_trailing_slash(self) -> None:
        assert strip_path("example.com/") == "example.com"

    def test_deep_path(self) -> None:
        assert strip_path("example.com/a/b/c") == "example.com"

    def test_leading_slash(self) -> None:
        assert strip_path("/path") == ""

    def test_empty(self) -> None:
        assert strip_path("") == ""


class TestGetDomain:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", ""),
            ("nickschorr.com", "nickschorr.com"),
            ("http://nickschorr.com/", "nickschorr.com"),
            ("https://one.nickschorr.com/path/x", "one.nickschorr.com"),
            ("a.com/path/test/", "a.com"),
            ("example.com:8080/x", "example.com:8080"),
        ],
    )
    def test_domain(self, text: str, expected: str) -> None:
        assert get_domain(text) == expected
