"""Flat, append-only cookie store.

Not a general-purpose jar: there is no expiry, no domain/path scoping and
no de-duplication. Every cookie the server ever set is replayed on every
later request, whatever the host. The flow only talks to one proxy and one
identity provider, both of which must see the same session cookies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mockflow.models.cookie import Cookie

logger = logging.getLogger(__name__)


class CookieStore:
    def __init__(self) -> None:
        self._cookies: list[Cookie] = []

    def __len__(self) -> int:
        return len(self._cookies)

    def store(self, url: str, cookies: Iterable[Cookie]) -> None:
        # url is accepted for jar-interface symmetry and ignored
        for cookie in cookies:
            self._cookies.append(cookie)
            logger.debug("Stored cookie name=%s from %s", cookie.name, url)

    def retrieve(self, url: str) -> list[Cookie]:
        return list(self._cookies)

    def cookie_header(self, url: str) -> str:
        return "; ".join(cookie.pair() for cookie in self.retrieve(url))
