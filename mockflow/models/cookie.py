from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# RFC 6265 cookie-name: an HTTP token
_COOKIE_NAME = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

_VALUE_ATTRIBUTES = ("domain", "path", "expires", "max-age")
_FLAG_ATTRIBUTES = ("secure", "httponly")


@dataclass(frozen=True, slots=True)
class Cookie:
    name: str
    value: str
    domain: str = ""
    path: str = ""
    expires: str = ""
    max_age: str = ""
    secure: bool = False
    http_only: bool = False

    def pair(self) -> str:
        return f"{self.name}={self.value}"


def parse_set_cookie(header: str) -> list[Cookie]:
    """Parse one Set-Cookie header value.

    The first ``;`` segment is the cookie itself; of the attributes only
    Domain, Path, Expires, Max-Age, Secure and HttpOnly are read (names are
    case-insensitive), anything else is ignored. A header without a valid
    ``name=value`` yields an empty list. The value is kept in its wire form
    so it is replayed byte-for-byte.
    """
    name_value, *attributes = header.split(";")
    name, sep, value = name_value.partition("=")
    name = name.strip()
    if not sep or not _COOKIE_NAME.fullmatch(name):
        logger.warning("Ignoring unparseable Set-Cookie header %r", header)
        return []

    values: dict[str, str] = {}
    flags: set[str] = set()
    for attribute in attributes:
        key, _, attr_value = attribute.partition("=")
        key = key.strip().lower()
        if key in _VALUE_ATTRIBUTES:
            values[key] = attr_value.strip()
        elif key in _FLAG_ATTRIBUTES:
            flags.add(key)

    return [
        Cookie(
            name=name,
            value=value.strip(),
            domain=values.get("domain", ""),
            path=values.get("path", ""),
            expires=values.get("expires", ""),
            max_age=values.get("max-age", ""),
            secure="secure" in flags,
            http_only="httponly" in flags,
        )
    ]
