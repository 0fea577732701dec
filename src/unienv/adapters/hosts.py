"""Interpreter host adapters.

All three implementations share the same environment table (``os.environ``)
and filesystem calls; they differ in how they report their version and in
whether they gate file reads behind a permission check.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from typing import MutableMapping, Optional

from unienv.core.models import HostKind

LOGGER = logging.getLogger(__name__)


def _join_version(parts) -> str:
    return ".".join(str(part) for part in tuple(parts)[:3])


class OsHost:
    """Shared implementation over ``os``; subclasses supply identity and version."""

    kind: HostKind = HostKind.CPYTHON

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def version(self) -> str:
        raise NotImplementedError

    def platform(self) -> str:
        return sys.platform

    def cwd(self) -> str:
        return os.getcwd()

    def is_file(self, path: str) -> bool:
        # os.path.isfile hides OSError; stat lets the locator see it.
        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        return os.path.isfile(path)

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()

    def read_var(self, name: str) -> Optional[str]:
        return self._environ.get(name)

    def write_var(self, name: str, value: str) -> None:
        self._environ[name] = value

    def delete_var(self, name: str) -> None:
        self._environ.pop(name, None)

    def query_read_permission(self) -> bool:
        return True


class CPythonHost(OsHost):
    kind = HostKind.CPYTHON

    def version(self) -> str:
        return platform.python_version()


class PyPyHost(OsHost):
    kind = HostKind.PYPY

    def version(self) -> str:
        # sys.version_info reports the Python language level; PyPy's own
        # release number lives in sys.pypy_version_info.
        pypy_version = getattr(sys, "pypy_version_info", None)
        if pypy_version is None:
            return "0"
        return _join_version(pypy_version)


class GraalPyHost(OsHost):
    """GraalPy may run inside a polyglot sandbox with restricted file IO."""

    kind = HostKind.GRAALPY

    def version(self) -> str:
        return _join_version(sys.implementation.version)

    def query_read_permission(self) -> bool:
        try:
            return os.access(self.cwd(), os.R_OK)
        except OSError:
            return False


_HOSTS = {
    "cpython": CPythonHost,
    "pypy": PyPyHost,
    "graalpy": GraalPyHost,
    "graalpython": GraalPyHost,
}


def host_for(kind: HostKind, environ: Optional[MutableMapping[str, str]] = None) -> OsHost:
    """Build the adapter for a known host kind."""

    return _HOSTS[kind.value](environ)


def detect_host(environ: Optional[MutableMapping[str, str]] = None) -> OsHost:
    """Build the adapter for the interpreter running this process."""

    name = sys.implementation.name.lower()
    host_class = _HOSTS.get(name)
    if host_class is None:
        LOGGER.warning("Unknown interpreter %r, treating it as CPython", name)
        host_class = CPythonHost
    return host_class(environ)
