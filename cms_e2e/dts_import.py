"""
Fixture reset for the admin application.

Before every browser test the admin app's database is wiped and restored
from a data-transfer archive (``with-admin.tar`` and friends).  Two ways of
doing that are supported:

- ``cli``: run the app's own ``import`` command inside its checkout.
- ``http``: post the archive name to a reset endpoint exposed by the
  test build of the app.

Both raise :class:`FixtureImportError` when the reset did not happen, so a
test never runs against a half-restored database.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import requests

from cms_e2e.config import Config, get_config

logger = logging.getLogger(__name__)

# Data groups understood by the import command.
DATA_GROUPS = ("content", "files", "config")


class FixtureImportError(RuntimeError):
    """Raised when the database could not be restored from an archive."""


def resolve_archive(file_path: str | Path, data_dir: Path) -> Path:
    """Return the absolute archive path, checking that it exists."""
    path = Path(file_path)
    if not path.is_absolute():
        path = data_dir / path
    if not path.is_file():
        raise FixtureImportError(f"Fixture archive not found: {path}")
    return path


def _groups(
    only: Sequence[str], exclude: Sequence[str], core_store: bool
) -> tuple[list[str], list[str]]:
    if isinstance(only, str) or isinstance(exclude, str):
        raise ValueError("only and exclude take a sequence of data groups, not a string")
    unknown = sorted((set(only) | set(exclude)) - set(DATA_GROUPS))
    if unknown:
        raise ValueError(f"Unknown data groups: {', '.join(unknown)}")
    excluded = list(exclude)
    if not core_store and "config" not in excluded:
        excluded.append("config")
    overlap = sorted(set(only) & set(excluded))
    if overlap:
        raise ValueError(f"Data groups both imported and excluded: {', '.join(overlap)}")
    return list(only), excluded


def build_import_command(
    archive: Path,
    import_command: str,
    only: Sequence[str] = (),
    exclude: Sequence[str] = (),
) -> list[str]:
    """Build the argv for the app's import command."""
    command = shlex.split(import_command)
    command += ["import", "--file", str(archive), "--force"]
    if only:
        command += ["--only", ",".join(only)]
    if exclude:
        command += ["--exclude", ",".join(exclude)]
    return command


def _import_with_cli(
    archive: Path, settings: type[Config], only: list[str], exclude: list[str]
) -> None:
    command = build_import_command(archive, settings.IMPORT_COMMAND, only, exclude)
    try:
        subprocess.run(
            command,
            cwd=settings.APP_DIR,
            check=True,
            text=True,
            capture_output=True,
            timeout=settings.RESET_TIMEOUT,
        )
    except FileNotFoundError as exc:
        raise FixtureImportError(
            f"Import command not runnable from {settings.APP_DIR}: {command[0]}"
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise FixtureImportError(
            f"Import of {archive.name} did not finish within {settings.RESET_TIMEOUT}s"
        ) from exc
    except subprocess.CalledProcessError as exc:
        stdout = exc.stdout or ""
        stderr = exc.stderr or ""
        raise FixtureImportError(
            f"Import of {archive.name} failed.\nstdout:\n{stdout}\nstderr:\n{stderr}"
        ) from exc


def _import_with_http(
    archive: Path, settings: type[Config], only: list[str], exclude: list[str]
) -> None:
    if not settings.RESET_URL:
        raise FixtureImportError("E2E_RESET_URL must be set for the http reset strategy")

    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if settings.TRANSFER_TOKEN:
        headers["Authorization"] = f"Bearer {settings.TRANSFER_TOKEN}"
    payload: dict[str, Any] = {
        "archive": archive.name,
        "only": only,
        "exclude": exclude,
        "coreStore": "config" not in exclude,
    }

    try:
        response = requests.post(
            settings.RESET_URL,
            json=payload,
            headers=headers,
            timeout=settings.RESET_TIMEOUT,
        )
    except requests.RequestException as exc:
        raise FixtureImportError(f"Reset endpoint unreachable: {exc}") from exc

    if not response.ok:
        raise FixtureImportError(
            f"Reset endpoint answered {response.status_code}: {response.text}"
        )


_STRATEGIES = {
    "cli": _import_with_cli,
    "http": _import_with_http,
}


def reset_database_and_import_data_from_path(
    file_path: str | Path,
    *,
    only: Sequence[str] = (),
    exclude: Sequence[str] = (),
    core_store: bool = True,
    settings: type[Config] | None = None,
) -> None:
    """
    Restore the admin app's database from a fixture archive.

    Args:
        file_path: Archive name relative to ``DATA_DIR``, or an absolute path.
        only: Restrict the import to these data groups.
        exclude: Skip these data groups.
        core_store: When False the app's stored configuration is left alone.
        settings: Configuration class; defaults to ``get_config()``.

    Raises:
        FixtureImportError: The archive is missing or the reset failed.
        ValueError: Unknown data group or reset strategy.
    """
    settings = settings or get_config()
    importer = _STRATEGIES.get(settings.RESET_STRATEGY)
    if importer is None:
        raise ValueError(f"Unknown reset strategy: {settings.RESET_STRATEGY}")

    only_groups, excluded_groups = _groups(only, exclude, core_store)
    archive = resolve_archive(file_path, settings.DATA_DIR)

    logger.info("Resetting database from %s (%s)", archive.name, settings.RESET_STRATEGY)
    importer(archive, settings, only_groups, excluded_groups)
    logger.info("Database restored from %s", archive.name)
