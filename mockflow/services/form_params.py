from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

APPROVAL_FIELD = "approval"
APPROVAL_VALUE = "approve"


def get_form_params(resp: httpx.Response, base_url: str) -> dict[str, str]:
    """Return the inputs of the "Grant Access" form as name -> value.

    Dex's approval page has one form per button; the grant form is the one
    carrying approval=approve. If several qualify the last one wins; if none
    does the mapping is empty. ``base_url`` is not needed to read the inputs.
    """
    soup = BeautifulSoup(resp.text, "html.parser")

    form_params: dict[str, str] = {}
    for form in soup.find_all("form"):
        params: dict[str, str] = {}
        for field in form.find_all("input"):
            params[field.get("name", "")] = field.get("value", "")
        if params.get(APPROVAL_FIELD) == APPROVAL_VALUE:
            form_params = params

    logger.debug("Grant form fields=%s on %s", sorted(form_params), base_url)
    return form_params
