"""Ports (interfaces) used by the core.

The host port is the only way the core reaches the running interpreter:
identity and version, the process environment table, and the filesystem.
"""

from __future__ import annotations

from typing import Optional, Protocol

from unienv.core.models import HostKind


class HostPort(Protocol):
    """Capabilities the store requires from a host interpreter."""

    kind: HostKind

    def version(self) -> str:
        ...

    def platform(self) -> str:
        ...

    def cwd(self) -> str:
        ...

    def is_file(self, path: str) -> bool:
        ...

    def read_text(self, path: str) -> str:
        ...

    def read_var(self, name: str) -> Optional[str]:
        ...

    def write_var(self, name: str, value: str) -> None:
        ...

    def delete_var(self, name: str) -> None:
        ...

    def query_read_permission(self) -> bool:
        ...
