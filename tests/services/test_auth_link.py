from __future__ import annotations

import httpx
import pytest

from mockflow.core.errors import FlowError, InvalidAuthLinkError
from mockflow.services.auth_link import get_auth_link


def _page(html: str, url: str = "http://h/p") -> httpx.Response:
    return httpx.Response(200, html=html, request=httpx.Request("GET", url))


def test_relative_link_is_resolved_against_base() -> None:
    resp = _page('<a href="/dex/auth/mock?x=1">login</a>')
    assert get_auth_link(resp, "http://h/p") == "http://h/dex/auth/mock?x=1"


def test_first_matching_link_wins() -> None:
    resp = _page(
        '<a href="/dex/auth/local?req=1">email</a>'
        '<a href="/dex/auth/mock?req=first">mock</a>'
        '<a href="/dex/auth/mock?req=second">mock again</a>'
    )
    assert get_auth_link(resp, "http://proxy:4180/dex/auth") == (
        "http://proxy:4180/dex/auth/mock?req=first"
    )


def test_pattern_matches_anywhere_in_link() -> None:
    resp = _page('<a href="https://idp.example/prefix/dex/auth/mock/callback">x</a>')
    assert get_auth_link(resp, "http://h/p") == (
        "https://idp.example/prefix/dex/auth/mock/callback"
    )


def test_relative_link_without_dex_prefix_does_not_match() -> None:
    resp = _page('<a href="auth/mock">x</a>')
    assert get_auth_link(resp, "http://h/dex/login") is None


def test_path_relative_link_uses_base_directory() -> None:
    resp = _page('<a href="sub/dex/auth/mock">x</a>')
    assert get_auth_link(resp, "http://h/root/page") == "http://h/root/sub/dex/auth/mock"


def test_match_is_a_substring_search() -> None:
    resp = _page('<a href="/dex/auth/local">email</a><a href="/dex/auth/mocking-bird">x</a>')
    assert get_auth_link(resp, "http://h/") == "http://h/dex/auth/mocking-bird"


def test_no_matching_link_returns_none() -> None:
    assert get_auth_link(_page('<a href="/dex/auth/local">email</a>'), "http://h/") is None
    assert get_auth_link(_page(""), "http://h/") is None


def test_unresolvable_matching_link_raises_flow_error() -> None:
    resp = _page('<a href="http://[::1/dex/auth/mock">broken</a>')

    with pytest.raises(InvalidAuthLinkError) as excinfo:
        get_auth_link(resp, "http://h/")

    assert excinfo.value.link == "http://[::1/dex/auth/mock"
    assert isinstance(excinfo.value, FlowError)
    assert isinstance(excinfo.value.__cause__, ValueError)
