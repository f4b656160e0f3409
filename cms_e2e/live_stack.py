"""Live admin-app helpers for the smoke and E2E suites."""

from __future__ import annotations

import logging
import os
import subprocess
import time
from collections.abc import Generator

import pytest
import requests

from cms_e2e.config import get_config

logger = logging.getLogger(__name__)


def is_admin_ready(url: str, health_path: str = "/_health", timeout: int = 2) -> bool:
    """Return True when the admin health endpoint answers with a 2xx status."""
    try:
        response = requests.get(f"{url}{health_path}", timeout=timeout)
    except requests.RequestException:
        return False
    return response.ok


def wait_for_admin_healthy(
    url: str,
    health_path: str = "/_health",
    timeout: int = 60,
    interval: int = 1,
) -> None:
    """Poll the admin health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_admin_ready(url, health_path):
            logger.info("Admin app at %s is healthy", url)
            return
        time.sleep(interval)
    raise RuntimeError(f"Admin app at {url} not healthy after {timeout}s")


def live_admin_url(
    *,
    base_url_env: str,
    compose_project_env: str,
    compose_file_env: str,
    compose_project_default: str,
    suite_name: str,
    compose_file_default: str = "docker-compose.test.yml",
) -> Generator[str, None, None]:
    """
    Yield a healthy admin base URL, reusing or starting a compose stack when needed.

    Priority:
    1. Use explicit base URL from `base_url_env` (and wait for health).
    2. Reuse an already-running app at the configured ``ADMIN_URL``.
    3. Start compose stack, wait for health, then tear it down on exit.
    """
    settings = get_config()

    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        wait_for_admin_healthy(
            provided_base_url, settings.HEALTH_PATH, timeout=settings.HEALTH_TIMEOUT
        )
        yield provided_base_url
        return

    base_url = settings.ADMIN_URL
    if is_admin_ready(base_url, settings.HEALTH_PATH):
        yield base_url
        return

    project_name = os.getenv(compose_project_env, compose_project_default)
    compose_file = os.getenv(compose_file_env, compose_file_default)

    compose_up_cmd = [
        "docker",
        "compose",
        "-p",
        project_name,
        "-f",
        compose_file,
        "up",
        "-d",
        "--build",
    ]
    compose_down_cmd = [
        "docker",
        "compose",
        "-p",
        project_name,
        "-f",
        compose_file,
        "down",
        "-v",
        "--remove-orphans",
    ]

    logger.info("Starting compose project %s from %s", project_name, compose_file)
    try:
        subprocess.run(
            compose_up_cmd,
            check=True,
            text=True,
            capture_output=True,
        )
    except FileNotFoundError:
        pytest.skip(
            f"docker is not installed; set {base_url_env} to run {suite_name} tests"
        )
    except subprocess.CalledProcessError as exc:
        # Compose may have created networks or volumes before failing.
        subprocess.run(
            compose_down_cmd,
            check=False,
            text=True,
            capture_output=True,
        )
        stdout = exc.stdout or ""
        stderr = exc.stderr or ""
        raise RuntimeError(
            f"Failed to start docker compose stack.\nstdout:\n{stdout}\nstderr:\n{stderr}"
        ) from exc

    try:
        wait_for_admin_healthy(base_url, settings.HEALTH_PATH, timeout=settings.HEALTH_TIMEOUT)
        yield base_url
    finally:
        subprocess.run(compose_down_cmd, check=False)
