"""Live-site helpers shared by the smoke and E2E suites."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager

import requests
from flask import Flask
from werkzeug.serving import make_server

logger = logging.getLogger(__name__)


def is_site_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the demo site health endpoint responds with 200."""
    try:
        response = requests.get(f"{url}/health", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_site_healthy(url: str, timeout: float = 30, interval: float = 0.5) -> None:
    """Poll the demo site health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Demo site at {url} not healthy after {timeout}s")


@contextmanager
def serve_demo_site(app: Flask, host: str = "127.0.0.1", port: int = 0) -> Iterator[str]:
    """
    Serve ``app`` from a background thread and yield its root URL.

    Port 0 lets the OS pick a free port, so parallel workers never share one.
    The server is shut down when the context exits.
    """
    server = make_server(host, port, app, threaded=True)
    server_thread = threading.Thread(target=server.serve_forever, daemon=True)
    server_thread.start()

    root_url = f"http://{host}:{server.server_port}"
    logger.info(f"Serving demo site at {root_url}")
    try:
        wait_for_site_healthy(root_url)
        yield root_url
    finally:
        server.shutdown()
        server_thread.join(timeout=5)


@contextmanager
def live_target_url(
    provided_base_url: str | None,
    *,
    host: str = "127.0.0.1",
    config_name: str = "testing",
) -> Iterator[str]:
    """
    Yield the base URL the upgrades page identifiers resolve against.

    Priority:
    1. Use the explicitly provided base URL (an external deployment).
    2. Otherwise serve the bundled demo site and yield its ``/upgrade/`` root.
    """
    if provided_base_url:
        logger.info(f"Using external base URL {provided_base_url}")
        yield provided_base_url
        return

    from upgrades_site import create_app

    with serve_demo_site(create_app(config_name), host=host) as root_url:
        yield f"{root_url}/upgrade/"
