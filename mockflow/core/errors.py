from __future__ import annotations

# Every failure of the walk is a FlowError. Components raise; only the
# entry point (mockflow.main) turns one into a non-zero exit code.


class FlowError(Exception):
    pass


class TransportError(FlowError):
    """The request never produced a response (DNS, connect, protocol)."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        super().__init__(f"{method} {url} failed: {reason}")
        self.method = method
        self.url = url


class UnexpectedStatusError(FlowError):
    def __init__(self, method: str, url: str, status_code: int) -> None:
        super().__init__(f"Unexpected response code {status_code} for {method} {url}")
        self.method = method
        self.url = url
        self.status_code = status_code


class AuthLinkNotFoundError(FlowError):
    def __init__(self, url: str) -> None:
        super().__init__(
            f"No valid link to proceed with authentication was found in {url}"
        )
        self.url = url


class GrantFormNotFoundError(FlowError):
    def __init__(self, url: str) -> None:
        super().__init__(f"No 'Grant Access' form (approval=approve) found in {url}")
        self.url = url


class AuthorizationFailedError(FlowError):
    def __init__(self, actual: str, expected: str) -> None:
        super().__init__(f"Unexpected HTML response ({actual}) != ({expected})")
        self.actual = actual
        self.expected = expected


class InvalidAuthLinkError(FlowError):
    def __init__(self, link: str, reason: str) -> None:
        super().__init__(f"Authentication link {link!r} is not a valid URL: {reason}")
        self.link = link
