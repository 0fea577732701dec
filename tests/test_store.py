from __future__ import annotations

import os

from fakes import FakeHost

from unienv.adapters.hosts import CPythonHost
from unienv.core.context import EnvContext
from unienv.core.errors import GenericError, VersionError
from unienv.core.models import HostKind
from unienv.core.result import Ng, Ok
from unienv.core.store import EnvStore

ENV_PATH = "/home/user/project/.env"


def _store(host: FakeHost) -> EnvStore:
    return EnvStore(EnvContext(host))


def test_get_seeds_from_env_file() -> None:
    host = FakeHost(files={ENV_PATH: "TOKEN=secret"})
    store = _store(host)
    assert store.get("TOKEN") == Ok("secret")
    assert store.get("MISSING") == Ok(None)
    assert host.reads == [ENV_PATH]


def test_get_below_floor_touches_nothing() -> None:
    host = FakeHost(version="3.6.9", files={ENV_PATH: "TOKEN=secret"}, environ={"A": "1"})
    result = _store(host).get("A")
    assert isinstance(result, Ng)
    assert isinstance(result.error, VersionError)
    assert host.existence_checks == []
    assert host.reads == []


def test_set_and_delete_are_gated() -> None:
    host = FakeHost(version="3.6.9")
    store = _store(host)
    assert isinstance(store.set("A", "1").error, VersionError)
    assert isinstance(store.delete("A").error, VersionError)
    assert host.environ == {}


def test_set_then_get() -> None:
    host = FakeHost()
    store = _store(host)
    assert store.set("A", "1") == Ok(None)
    assert store.get("A") == Ok("1")


def test_set_does_not_load_file() -> None:
    host = FakeHost(files={ENV_PATH: "A=1"})
    store = _store(host)
    store.set("B", "2")
    assert host.reads == []
    assert not store.context.loaded


def test_delete_missing_key_is_ok() -> None:
    assert _store(FakeHost()).delete("NOPE") == Ok(None)


def test_delete_failure_becomes_generic_error() -> None:
    host = FakeHost()
    host.rejected_names.add("LOCKED")
    result = _store(host).delete("LOCKED")
    assert isinstance(result.error, GenericError)
    assert isinstance(result.error.cause, OSError)


def test_denied_read_permission_skips_file() -> None:
    host = FakeHost(
        kind=HostKind.GRAALPY,
        version="24.1.0",
        files={ENV_PATH: "A=from-file"},
        environ={"B": "present"},
        read_permission=False,
    )
    store = _store(host)
    assert store.get("A") == Ok(None)
    assert store.get("B") == Ok("present")
    assert host.reads == []


def test_real_environment_round_trip(monkeypatch) -> None:
    monkeypatch.delenv("UNIENV_STORE_TEST", raising=False)
    store = EnvStore(EnvContext(CPythonHost()))
    assert store.set("UNIENV_STORE_TEST", "value") == Ok(None)
    assert os.environ["UNIENV_STORE_TEST"] == "value"
    assert store.delete("UNIENV_STORE_TEST") == Ok(None)
    assert "UNIENV_STORE_TEST" not in os.environ


def test_real_environment_rejects_bad_name() -> None:
    store = EnvStore(EnvContext(CPythonHost()))
    result = store.set("BAD=NAME", "value")
    assert isinstance(result.error, GenericError)
    assert isinstance(result.error.cause, ValueError)


def test_get_succeeds_when_env_file_has_rejected_pair() -> None:
    host = FakeHost(files={ENV_PATH: "GOOD=1\nBAD=x"}, environ={"EXISTING": "yes"})
    host.rejected_names.add("BAD")
    store = _store(host)
    assert store.get("EXISTING") == Ok("yes")
    assert host.environ == {"EXISTING": "yes", "GOOD": "1"}
    assert store.context.loaded

    assert store.set("GOOD", "changed") == Ok(None)
    assert store.get("GOOD") == Ok("changed")
    assert host.reads == [ENV_PATH]
