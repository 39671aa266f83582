"""Locate and read ``endzeit.toml``.

Lookup order for the config file:

1. ``--config PATH`` (ignored when the file does not exist)
2. ``ENDZEIT_CONFIG`` environment variable
3. ``endzeit.toml`` in the working directory or any parent
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "endzeit.toml"
CONFIG_ENV_VAR = "ENDZEIT_CONFIG"


def _existing(path: str | Path) -> Path | None:
    candidate = Path(path)
    return candidate if candidate.is_file() else None


def find_config(start: Path | None = None) -> Path | None:
    """Return the config named by ``ENDZEIT_CONFIG``, else the nearest
    ``endzeit.toml`` at or above *start* (default: cwd).
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _existing(env_path)

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        found = _existing(candidate_dir / CONFIG_FILENAME)
        if found is not None:
            return found
    return None


def resolve_config_path(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for one invocation.

    An explicit path wins outright, so a missing ``--config`` file means
    "no config" rather than falling back to discovery.
    """
    if explicit:
        return _existing(explicit)
    return find_config(start)


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* into raw section tables; ``{}`` when there is no file.

    Raises:
        click.ClickException: The file is not valid TOML.
    """
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
