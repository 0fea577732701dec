from __future__ import annotations

import sys

import pytest

from unienv.adapters import hosts
from unienv.adapters.hosts import CPythonHost, GraalPyHost, PyPyHost, detect_host, host_for
from unienv.core.models import HostKind


def test_detect_host_matches_running_interpreter() -> None:
    host = detect_host(environ={})
    assert host.kind.value == {"graalpython": "graalpy"}.get(
        sys.implementation.name, sys.implementation.name
    )


def test_detect_unknown_interpreter_falls_back_to_cpython(monkeypatch) -> None:
    monkeypatch.setattr(hosts.sys.implementation, "name", "jython")
    assert isinstance(detect_host(environ={}), CPythonHost)


@pytest.mark.parametrize(
    "kind, host_class",
    [
        (HostKind.CPYTHON, CPythonHost),
        (HostKind.PYPY, PyPyHost),
        (HostKind.GRAALPY, GraalPyHost),
    ],
)
def test_host_for_kind(kind: HostKind, host_class: type) -> None:
    host = host_for(kind, environ={})
    assert isinstance(host, host_class)
    assert host.kind is kind


def test_pypy_version_from_pypy_version_info(monkeypatch) -> None:
    monkeypatch.setattr(hosts.sys, "pypy_version_info", (7, 3, 17, "final", 0), raising=False)
    assert PyPyHost(environ={}).version() == "7.3.17"


def test_environment_operations_use_given_mapping() -> None:
    environ = {"A": "1"}
    host = CPythonHost(environ=environ)
    assert host.read_var("A") == "1"
    host.write_var("B", "2")
    host.delete_var("A")
    host.delete_var("MISSING")
    assert environ == {"B": "2"}


def test_file_operations(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("A=1\n", encoding="utf-8")
    host = CPythonHost(environ={})
    assert host.is_file(str(env_file))
    assert not host.is_file(str(tmp_path / "missing"))
    assert not host.is_file(str(tmp_path))
    assert host.read_text(str(env_file)) == "A=1\n"


def test_graalpy_read_permission_follows_cwd_access(monkeypatch) -> None:
    monkeypatch.setattr(hosts.os, "access", lambda path, mode: False)
    assert not GraalPyHost(environ={}).query_read_permission()
    assert CPythonHost(environ={}).query_read_permission()
