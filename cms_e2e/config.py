"""
End-to-end suite configuration.

Defines environment-specific configuration classes for the browser suite.
Each class captures where the admin application lives, how its database
is reset between tests and how long the suite is willing to wait for it.
The ``get_config`` factory selects the right class based on the
``E2E_ENV`` environment variable (or an explicit key).

Every setting can be overridden by an environment variable so the same
suite runs against a developer's local app and a CI container alike.
"""

from __future__ import annotations

import os
from pathlib import Path

# Repository root (one level above this package).
BASE_DIR = Path(__file__).resolve().parent.parent


class Config:
    """
    Base (shared) configuration for the suite.

    All environment-specific classes inherit from ``Config`` so that
    common defaults only need to be stated once.
    """

    # Root URL of the admin application (without the /admin suffix).
    ADMIN_URL: str = os.environ.get("E2E_ADMIN_URL", "http://localhost:1337")

    # Health endpoint polled before the suite starts.
    HEALTH_PATH: str = os.environ.get("E2E_HEALTH_PATH", "/_health")

    # Seconds to wait for the admin app to report healthy.
    HEALTH_TIMEOUT: int = int(os.environ.get("E2E_HEALTH_TIMEOUT", "60"))

    # "cli" runs the app's import command, "http" posts to RESET_URL.
    RESET_STRATEGY: str = os.environ.get("E2E_RESET_STRATEGY", "cli")

    # Directory holding the fixture archives (with-admin.tar, ...).
    DATA_DIR: Path = Path(os.environ.get("E2E_DATA_DIR", BASE_DIR / "tests" / "e2e" / "data"))

    # Checkout of the admin application, used by the "cli" strategy.
    APP_DIR: Path = Path(os.environ.get("E2E_APP_DIR", BASE_DIR / "test-app"))

    IMPORT_COMMAND: str = os.environ.get("E2E_IMPORT_COMMAND", "npm run strapi --")

    # Endpoint and token used by the "http" strategy.
    RESET_URL: str = os.environ.get("E2E_RESET_URL", "")
    TRANSFER_TOKEN: str = os.environ.get("E2E_TRANSFER_TOKEN", "")

    # Upper bound for a single database reset, in seconds.
    RESET_TIMEOUT: int = int(os.environ.get("E2E_RESET_TIMEOUT", "120"))

    # Default timeout for Playwright ``expect`` assertions, in milliseconds.
    EXPECT_TIMEOUT: int = int(os.environ.get("E2E_EXPECT_TIMEOUT", "10000"))

    SCREENSHOT_DIR: str = os.environ.get("E2E_SCREENSHOT_DIR", "test-results/screenshots")


class LocalConfig(Config):
    """
    Developer-machine overrides.

    Keeps generous timeouts so a freshly started, unoptimised admin build
    has time to answer.
    """


class CIConfig(Config):
    """
    CI overrides.

    The admin app runs in the compose test stack; assertions get a longer
    timeout because shared runners are slower than workstations.
    """

    ADMIN_URL: str = os.environ.get("E2E_ADMIN_URL", "http://127.0.0.1:1337")
    HEALTH_TIMEOUT: int = int(os.environ.get("E2E_HEALTH_TIMEOUT", "180"))
    EXPECT_TIMEOUT: int = int(os.environ.get("E2E_EXPECT_TIMEOUT", "20000"))


# Lookup table mapping environment name strings to their config classes.
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Return the configuration class for the given environment.

    Args:
        env: One of ``"local"`` or ``"ci"``.  When *None*, the ``E2E_ENV``
            environment variable is consulted, falling back to ``"local"``.

    Returns:
        The ``Config`` subclass matching the requested environment,
        or ``LocalConfig`` if the key is unrecognised.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "local")
    return config.get(env, config["default"])
