"""HTTP transport for the flow.

A Session owns (or borrows) an httpx.Client and a CookieStore. Cookies are
handled entirely by the store through httpx event hooks, which fire for
every hop of a redirect chain:

  request hook: overwrite the Cookie header with the store's contents
  response hook: append every Set-Cookie of the response to the store

Any outcome other than a final 200 is raised as a FlowError subclass; the
caller decides whether that ends the run.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType

import httpx

from mockflow.core.errors import TransportError, UnexpectedStatusError
from mockflow.models.cookie import parse_set_cookie
from mockflow.services.cookie_store import CookieStore

logger = logging.getLogger(__name__)


class Session:
    def __init__(
        self,
        client: httpx.Client | None = None,
        cookie_store: CookieStore | None = None,
    ) -> None:
        self._owns_client = client is None
        self.client = client or httpx.Client(follow_redirects=True, timeout=None)
        self.cookies = cookie_store if cookie_store is not None else CookieStore()

        hooks = self.client.event_hooks
        self.client.event_hooks = {
            "request": [*hooks.get("request", []), self._attach_cookies],
            "response": [*hooks.get("response", []), self._capture_cookies],
        }

    def __enter__(self) -> Session:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    # ------------------------------------------------------------------
    # Cookie hooks
    # ------------------------------------------------------------------

    def _attach_cookies(self, request: httpx.Request) -> None:
        header = self.cookies.cookie_header(str(request.url))
        if header:
            request.headers["Cookie"] = header
        elif "Cookie" in request.headers:
            del request.headers["Cookie"]

    def _capture_cookies(self, response: httpx.Response) -> None:
        url = str(response.request.url)
        for set_cookie in response.headers.get_list("set-cookie"):
            self.cookies.store(url, parse_set_cookie(set_cookie))

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def fetch(self, url: str) -> httpx.Response:
        return self._send("GET", url)

    def submit(self, url: str, form_params: Mapping[str, str]) -> httpx.Response:
        return self._send("POST", url, data=dict(form_params))

    def _send(
        self, method: str, url: str, data: dict[str, str] | None = None
    ) -> httpx.Response:
        print(f"{method} {url}...")
        try:
            resp = self.client.request(method, url, data=data)
        except httpx.HTTPError as exc:
            logger.error(
                "%s %s failed: %s",
                method,
                url,
                exc,
                extra={"method": method, "url": url},
            )
            raise TransportError(method, url, str(exc) or type(exc).__name__) from exc

        hops = len(resp.history)
        logger.info(
            "%s %s -> %d  final=%s redirects=%d cookies=%d",
            method,
            url,
            resp.status_code,
            resp.url,
            hops,
            len(self.cookies),
            extra={"method": method, "url": url, "status_code": resp.status_code},
        )
        if resp.status_code != httpx.codes.OK:
            raise UnexpectedStatusError(method, url, resp.status_code)
        return resp
