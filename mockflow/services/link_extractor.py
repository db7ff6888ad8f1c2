from __future__ import annotations

from collections.abc import Iterable
from html.parser import HTMLParser

# Single forward pass over the markup; no tree is built, so the body can be
# fed chunk by chunk as it is read. Duplicates are kept on purpose: callers
# only ever take the first match.


class _AnchorCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.links: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "a":
            return
        for key, value in attrs:
            if key == "href":
                self.links.append(value or "")


def extract_links(body: str | Iterable[str]) -> list[str]:
    """Return every anchor href in document order.

    ``body`` is either the whole document or an iterable of text chunks
    (e.g. ``response.iter_text()``). Malformed markup never raises; the
    links seen up to the point the parser gave up are returned.
    """
    collector = _AnchorCollector()
    chunks = [body] if isinstance(body, str) else body
    for chunk in chunks:
        collector.feed(chunk)
    collector.close()
    return collector.links
