"""``${NAME}`` substitution inside configuration values."""

from __future__ import annotations

import os
import re
from typing import Dict, Mapping, Optional

from unienv.core.ports import HostPort

# ${NAME}, ${NAME:-default} and ${NAME:-default:-fallback}, not preceded by a
# backslash. The second clause also accepts a bare ":" separator.
REFERENCE_PATTERN = re.compile(r"(?<!\\)\$\{([^}:-]+)(?::-(.*?))?(?::-?(.*?))?\}")
ESCAPED_DOLLAR = "\\$"


def _lookup_environment(name: str, host: Optional[HostPort]) -> Optional[str]:
    if host is not None:
        return host.read_var(name)
    return os.environ.get(name)


def interpolate(
    raw_value: str,
    known_values: Mapping[str, str],
    host: Optional[HostPort] = None,
) -> str:
    """Replace every reference in ``raw_value`` and unescape ``\\$``.

    Names resolve against ``known_values`` first, then the live environment.
    Defaults are inserted as written; references inside them are not
    expanded.
    """

    def _replace(match: re.Match) -> str:
        name, first_default, second_default = match.groups()
        value = known_values.get(name)
        if value is None:
            value = _lookup_environment(name, host)
        if value is not None:
            return value
        if first_default is not None:
            return first_default
        if second_default is not None:
            return second_default
        return ""

    substituted = REFERENCE_PATTERN.sub(_replace, raw_value)
    return substituted.replace(ESCAPED_DOLLAR, "$")


def resolve_table(
    raw_table: Mapping[str, str], host: Optional[HostPort] = None
) -> Dict[str, str]:
    """Interpolate every value of a parsed file, in file order.

    Each key sees only the values already resolved for the keys above it;
    a reference to itself or to a later key falls through to the live
    environment, then to its defaults.
    """

    resolved: Dict[str, str] = {}
    for key, raw_value in raw_table.items():
        resolved[key] = interpolate(raw_value, resolved, host)
    return resolved
