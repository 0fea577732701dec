"""Core domain models.

Shared between the core and the host adapters so neither side depends on
interpreter-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HostKind(Enum):
    """The interpreter implementations the store knows how to run on."""

    CPYTHON = "cpython"
    PYPY = "pypy"
    GRAALPY = "graalpy"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def minimum_version(self) -> str:
        return _MINIMUM_VERSIONS[self]


_DISPLAY_NAMES = {
    HostKind.CPYTHON: "CPython",
    HostKind.PYPY: "PyPy",
    HostKind.GRAALPY: "GraalPy",
}

# Oldest release of each implementation the store is supported on.
_MINIMUM_VERSIONS = {
    HostKind.CPYTHON: "3.8.0",
    HostKind.PYPY: "7.3",
    HostKind.GRAALPY: "23.1.0",
}


@dataclass(frozen=True)
class Versions:
    """Supported floor and running version of the host interpreter."""

    required: str
    current: str
