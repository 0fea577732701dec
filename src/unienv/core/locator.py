"""Upward directory search for the configuration file."""

from __future__ import annotations

import logging
import ntpath
import posixpath
from typing import Optional

from unienv.core.context import DEFAULT_ENV_FILE
from unienv.core.ports import HostPort

LOGGER = logging.getLogger(__name__)


def path_flavour(platform: str):
    """Return the path module matching a host platform identifier."""

    return ntpath if platform.lower().startswith("win") else posixpath


def _exists(host: HostPort, path: str) -> bool:
    try:
        return host.is_file(path)
    except OSError:
        # Unreadable directories along the way are treated as empty.
        LOGGER.debug("Existence check failed for %s", path, exc_info=True)
        return False


def find_config_file(
    host: HostPort, start_dir: str, filename: str = DEFAULT_ENV_FILE
) -> Optional[str]:
    """Walk from ``start_dir`` up to the filesystem root looking for ``filename``.

    Returns the first matching path, or None once the root has been checked.
    """

    flavour = path_flavour(host.platform())
    current = start_dir
    while True:
        candidate = flavour.join(current, filename)
        if _exists(host, candidate):
            return candidate
        parent = flavour.dirname(current)
        if parent == current:
            return None
        current = parent
