"""Seeds the host environment from a ``.env`` file, at most once per context.

Load order:
1) Skip if this context already loaded a file
2) Locate the file by walking up from the working directory
3) Parse, interpolate, then write every pair through the host port
4) Mark the context as loaded

A missing or unreadable file is not an error: nothing is written and the
next call will search again. Pairs the host refuses to store are logged and
skipped; the rest of the file is still applied.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from unienv.core.context import EnvContext
from unienv.core.interpolation import resolve_table
from unienv.core.locator import find_config_file
from unienv.core.parser import parse_config

LOGGER = logging.getLogger(__name__)


def read_config_table(context: EnvContext, path: str) -> Optional[Dict[str, str]]:
    """Parse and interpolate the file at ``path``, or None if it cannot be read."""

    host = context.host
    try:
        contents = host.read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Failed to read %s: %s", path, exc)
        return None
    return resolve_table(parse_config(contents), host)


def load_config_if_needed(context: EnvContext) -> bool:
    """Load the nearest configuration file into the environment once.

    Returns True only when this call loaded a file.
    """

    if context.loaded:
        return False

    host = context.host
    path = find_config_file(host, host.cwd(), context.env_file)
    if path is None:
        LOGGER.debug("No %s found above %s", context.env_file, host.cwd())
        return False

    table = read_config_table(context, path)
    if table is None:
        return False

    written = 0
    for key, value in table.items():
        try:
            host.write_var(key, value)
        except (ValueError, TypeError, OSError) as exc:
            LOGGER.warning("Skipping %s from %s: %s", key, path, exc)
            continue
        written += 1
    # A partial flush still marks the context loaded.
    context.mark_loaded()
    LOGGER.info("Loaded %s of %s variables from %s", written, len(table), path)
    return True
