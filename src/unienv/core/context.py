"""Per-store mutable state.

Everything that used to be process-wide (the loaded flag, the cached host
version, the cached read permission) lives on an explicit context object so
each store, and each test, owns its own copy.
"""

from __future__ import annotations

from typing import Optional

from unienv.core.models import Versions
from unienv.core.ports import HostPort

DEFAULT_ENV_FILE = ".env"


class EnvContext:
    """State shared by the gate, the loader and the store for one host."""

    def __init__(self, host: HostPort, env_file: str = DEFAULT_ENV_FILE) -> None:
        self.host = host
        self.env_file = env_file
        self._loaded = False
        self._versions: Optional[Versions] = None
        self._read_permission: Optional[bool] = None

    @property
    def loaded(self) -> bool:
        return self._loaded

    def mark_loaded(self) -> None:
        """Record a successful load. There is no way to clear the flag."""

        self._loaded = True

    def versions(self) -> Versions:
        """Return the host's floor and running version, read once."""

        if self._versions is None:
            self._versions = Versions(
                required=self.host.kind.minimum_version,
                current=self.host.version(),
            )
        return self._versions

    def read_permission(self) -> bool:
        """Return whether the host lets us read configuration files, asked once."""

        if self._read_permission is None:
            self._read_permission = bool(self.host.query_read_permission())
        return self._read_permission
