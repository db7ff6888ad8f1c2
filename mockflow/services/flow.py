"""Mock OAuth2 authorization-code walk through oauth2-proxy and Dex.

Flow:
  1. Fetch      : GET the protected resource; the proxy redirects to Dex's
                  login page (redirects are followed, so this is a 200)
  2. Auth link  : find the /dex/auth/mock link on that page
  3. Consent    : GET the auth link; Dex answers with the approval page
  4. Grant form : read the inputs of the approval=approve form
  5. Submit     : POST them back to the approval page URL; Dex redirects
                  through the proxy callback to the protected resource
  6. Verify     : the resulting page title must be the success marker

The only state carried between steps is the latest response and the
session's cookie store.
"""

from __future__ import annotations

import logging

import httpx

from mockflow.core.errors import AuthLinkNotFoundError, GrantFormNotFoundError
from mockflow.services.auth_link import get_auth_link
from mockflow.services.form_params import get_form_params
from mockflow.services.success_verifier import ensure_authentication_success
from mockflow.services.transport import Session

logger = logging.getLogger(__name__)


def _step(number: int, name: str) -> None:
    logger.info("Step %d: %s", number, name, extra={"step": number})


def run_flow(session: Session, target_url: str) -> httpx.Response:
    _step(1, "fetch protected resource")
    resp = session.fetch(target_url)

    _step(2, "locate auth link")
    auth_url = get_auth_link(resp, str(resp.url))
    if auth_url is None:
        raise AuthLinkNotFoundError(str(resp.url))

    _step(3, "start mock authentication")
    resp = session.fetch(auth_url)

    _step(4, "extract grant access form")
    approval_url = str(resp.url)
    form_params = get_form_params(resp, approval_url)
    if not form_params:
        raise GrantFormNotFoundError(approval_url)

    _step(5, "submit grant access")
    resp = session.submit(approval_url, form_params)

    _step(6, "verify protected resource")
    ensure_authentication_success(resp)
    return resp
