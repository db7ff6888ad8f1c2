from __future__ import annotations

import logging
import re
from urllib.parse import urljoin

import httpx

from mockflow.core.errors import InvalidAuthLinkError
from mockflow.services.link_extractor import extract_links

logger = logging.getLogger(__name__)

# Dex renders one link per connector on its login page; the mock connector
# is the one that needs no credentials.
AUTH_LINK_PATTERN = re.compile(r"/dex/auth/mock")


def get_auth_link(resp: httpx.Response, base_url: str) -> str | None:
    """Return the first mock-connector link, made absolute, or None.

    Raises InvalidAuthLinkError when the matching href cannot be resolved.
    """
    for link in extract_links(resp.iter_text()):
        if AUTH_LINK_PATTERN.search(link):
            try:
                resolved = urljoin(base_url, link)
            except ValueError as exc:
                raise InvalidAuthLinkError(link, str(exc)) from exc
            logger.debug("Auth link %s resolved to %s", link, resolved)
            return resolved
    return None
