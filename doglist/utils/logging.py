"""Root logger setup shared by the desktop and web entry points.

Both ``doglist.app.main.main`` and ``doglist.web_ui.main.main`` call
:func:`configure_root` once before building any view. The level comes from the
caller's default unless the environment overrides it:

    DOGLIST_LOG_LEVEL   level name ("debug") or number ("10")
    DOGLIST_DEBUG       truthy ("1", "true", "yes", "on") forces DEBUG
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "DOGLIST_LOG_LEVEL"
DEBUG_ENV_VAR = "DOGLIST_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_level(value: Optional[str], fallback: int) -> int:
    """Turn a level name or number into a logging level, else ``fallback``."""
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        # isdigit() also accepts characters such as "²" that int() rejects
        try:
            return int(text)
        except ValueError:
            return fallback
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else fallback


def resolve_env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or None when nothing is set."""
    env = os.environ if environ is None else environ
    explicit = env.get(LEVEL_ENV_VAR)
    if explicit:
        return parse_level(explicit, logging.INFO)
    if (env.get(DEBUG_ENV_VAR) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def configure_root(
    default_level: int | str = logging.INFO,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Install the compact format on the root logger and return the effective level."""
    if isinstance(default_level, str):
        fallback = parse_level(default_level, logging.INFO)
    else:
        fallback = int(default_level)
    env_level = resolve_env_level(environ)
    effective = fallback if env_level is None else env_level

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(effective)
    return effective


def level_name(level: int) -> str:
    return logging.getLevelName(level)


def env_requests_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when the environment forces DEBUG (or lower) logging."""
    env_level = resolve_env_level(environ)
    return env_level is not None and env_level <= logging.DEBUG
