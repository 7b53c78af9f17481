"""Tests for wren.compose.urls — request URL splitting."""

import pytest

from wren.compose.urls import split_url
from wren.errors import InvalidUrl, WrenError


class TestSplitUrl:
    def test_domain_and_path(self) -> None:
        assert split_url("https://example.com/blog/post-1") == ("example.com", "/blog/post-1")

    def test_empty_path_is_root(self) -> None:
        assert split_url("https://example.com") == ("example.com", "/")

    def test_query_and_fragment_dropped(self) -> None:
        assert split_url("http://example.com/a?b=1#c") == ("example.com", "/a")

    def test_non_default_port_kept(self) -> None:
        assert split_url("http://localhost:5000/admin") == ("localhost:5000", "/admin")

    def test_default_port_dropped(self) -> None:
        assert split_url("https://example.com:443/x") == ("example.com", "/x")
        assert split_url("http://example.com:80/x") == ("example.com", "/x")

    def test_host_is_lowercased(self) -> None:
        assert split_url("https://Example.COM/Blog") == ("example.com", "/Blog")


class TestInvalid:
    def test_relative_url(self) -> None:
        with pytest.raises(InvalidUrl, match="no host"):
            split_url("/blog")

    def test_bad_port(self) -> None:
        with pytest.raises(InvalidUrl):
            split_url("http://example.com:notaport/")

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            split_url("nonsense")
        assert issubclass(InvalidUrl, WrenError)
