from __future__ import annotations

import httpx
from bs4 import BeautifulSoup

from mockflow.core.errors import AuthorizationFailedError

SUCCESS_TITLE = "Authorization Successful!"


def ensure_authentication_success(resp: httpx.Response) -> None:
    """Check the final page is the protected resource, by its <title>.

    The inner HTML of <title> must equal SUCCESS_TITLE exactly, whitespace
    and case included. A page without a title compares as "".
    """
    soup = BeautifulSoup(resp.text, "html.parser")
    title = soup.find("title")
    title_html = title.decode_contents() if title is not None else ""
    if title_html != SUCCESS_TITLE:
        raise AuthorizationFailedError(title_html, SUCCESS_TITLE)
    print("Success!")
