"""
Shared pytest fixtures for the HTTP echo server test suite.
"""
import socket

import pytest
import pytest_asyncio

from http_echo.config.settings import Settings
from http_echo.echo_server import EchoServer
from http_echo.utils.logging import setup_logging


# ── Logging ─────────────────────────────────────────────────────────────────

@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Route structlog through stdlib logging so caplog sees every event."""
    setup_logging(level="DEBUG", json_logs=False)


# ── Settings ────────────────────────────────────────────────────────────────

@pytest.fixture
def settings():
    """Settings with a short drain window for fast teardown."""
    return Settings(shutdown_timeout=0.5)


# ── Ports ───────────────────────────────────────────────────────────────────

@pytest.fixture
def free_port():
    """A port that was free a moment ago on 127.0.0.1."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def occupied_port():
    """A port held by a listening socket for the duration of the test."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen(1)
        yield s.getsockname()[1]


# ── Servers ─────────────────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def running_server(settings):
    """Echo server on an ephemeral port; stopped on teardown."""
    server = EchoServer("127.0.0.1", 0, settings=settings)
    await server.start()
    yield server
    await server.stop()


@pytest.fixture
def base_url(running_server):
    host, port = running_server.addresses[0][:2]
    return f"http://{host}:{port}"
