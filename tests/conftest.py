from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure repo root is on sys.path so `import mockflow` works under pytest.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mockflow.services.transport import Session  # noqa: E402
from tests.fake_proxy import create_fake_proxy_app  # noqa: E402


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """setup_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def make_session() -> Iterator[Callable[..., Session]]:
    """Build a Session whose client talks to the in-process fake proxy.

    Keyword arguments are forwarded to create_fake_proxy_app().
    """
    clients: list[TestClient] = []

    def _make(**options: object) -> Session:
        client = TestClient(create_fake_proxy_app(**options))  # type: ignore[arg-type]
        clients.append(client)
        return Session(client=client)

    yield _make

    for client in clients:
        client.close()
