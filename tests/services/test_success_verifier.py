from __future__ import annotations

import httpx
import pytest

from mockflow.core.errors import AuthorizationFailedError
from mockflow.services.success_verifier import SUCCESS_TITLE, ensure_authentication_success


def _page(html: str) -> httpx.Response:
    return httpx.Response(200, html=html, request=httpx.Request("POST", "http://h/"))


def test_success_title_prints_success(capsys: pytest.CaptureFixture[str]) -> None:
    ensure_authentication_success(_page("<title>Authorization Successful!</title>"))
    assert capsys.readouterr().out == "Success!\n"


def test_full_document_with_success_title(capsys: pytest.CaptureFixture[str]) -> None:
    ensure_authentication_success(
        _page(
            "<!DOCTYPE html><html><head><meta charset='utf-8'>"
            f"<title>{SUCCESS_TITLE}</title></head><body><h1>hi</h1></body></html>"
        )
    )
    assert "Success!" in capsys.readouterr().out


@pytest.mark.parametrize(
    "title",
    [
        "authorization successful!",
        " Authorization Successful!",
        "Authorization Successful! ",
        "Authorization Successful",
        "Sign In",
        "",
    ],
)
def test_any_other_title_fails(title: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(AuthorizationFailedError) as excinfo:
        ensure_authentication_success(_page(f"<title>{title}</title>"))

    assert excinfo.value.actual == title
    assert excinfo.value.expected == SUCCESS_TITLE
    assert "Success!" not in capsys.readouterr().out


def test_missing_title_fails() -> None:
    with pytest.raises(AuthorizationFailedError) as excinfo:
        ensure_authentication_success(_page("<html><body>no title</body></html>"))
    assert excinfo.value.actual == ""

