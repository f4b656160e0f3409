"""
Smoke-test fixtures for the admin app.

Provides the ``smoke_base_url`` session-scoped fixture that yields a healthy
admin URL shared across the entire smoke suite.  URL resolution is delegated
to :func:`cms_e2e.live_stack.live_admin_url`, which reuses an already-running
app when one is healthy or starts a docker compose stack on demand.
"""

from __future__ import annotations

import uuid
from collections.abc import Generator

import pytest

from cms_e2e.live_stack import live_admin_url


@pytest.fixture(scope="session")
def smoke_base_url() -> Generator[str, None, None]:
    """Yield a healthy admin URL for smoke tests."""
    run_id = uuid.uuid4().hex[:8]
    yield from live_admin_url(
        base_url_env="E2E_BASE_URL",
        compose_project_env="SMOKE_COMPOSE_PROJECT",
        compose_file_env="SMOKE_COMPOSE_FILE",
        compose_project_default=f"cms-smoke-{run_id}",
        suite_name="smoke",
    )
