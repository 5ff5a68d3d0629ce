"""Configuration helpers for loading environment variables.

Variables defined in a project-level ``.env`` file are loaded before they are
read.  Consumers should rely on :func:`get_env` or :func:`load_settings`
instead of using :func:`os.getenv` directly so that the configuration is
loaded in a single, well-defined place.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


LOGGER = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from the project's ``.env`` file.

    The loader first attempts to read ``.env`` from the repository root.  If the
    file does not exist we still call :func:`load_dotenv` to allow the default
    discovery mechanism to run.  Subsequent calls are cached so the file is only
    read once per process.
    """

    project_root = Path(__file__).resolve().parents[1]
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


@dataclass(frozen=True)
class GraphSettings:
    """Runtime options shared by every :class:`~routegraph.graph.store.Graph`."""

    strict: bool = False
    log_level: str = "WARNING"


def _known_level(name: str) -> str:
    """Return ``name`` if it is a registered logging level, else ``WARNING``."""

    if isinstance(logging.getLevelName(name), int):
        return name
    LOGGER.warning("Unknown log level %r, using WARNING", name)
    return "WARNING"


def load_settings() -> GraphSettings:
    """Build :class:`GraphSettings` from ``ROUTEGRAPH_*`` variables."""

    strict = (get_env("ROUTEGRAPH_STRICT", "") or "").strip().lower() in _TRUTHY
    log_level = _known_level((get_env("ROUTEGRAPH_LOG_LEVEL") or "WARNING").strip().upper())
    return GraphSettings(strict=strict, log_level=log_level)


def configure_logging(settings: GraphSettings | None = None) -> None:
    """Apply the configured level to the ``routegraph`` logger.

    The package never calls this itself; applications opt in at start-up.
    """

    settings = settings or load_settings()
    logging.getLogger("routegraph").setLevel(_known_level(settings.log_level.upper()))


__all__ = ["GraphSettings", "configure_logging", "get_env", "load_settings"]
