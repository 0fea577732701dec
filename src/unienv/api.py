"""Module-level get/set/delete bound to a store for the running interpreter.

The default store is created on first use. Callers that need isolated state
(tests, embedding several hosts) should build their own EnvStore instead.
"""

from __future__ import annotations

from typing import Optional, Union

from unienv.adapters.hosts import detect_host
from unienv.core.context import EnvContext
from unienv.core.errors import EnvError
from unienv.core.result import Ng, Ok
from unienv.core.store import EnvStore

_default_store: Optional[EnvStore] = None


def default_store() -> EnvStore:
    global _default_store
    if _default_store is None:
        _default_store = EnvStore(EnvContext(detect_host()))
    return _default_store


def reset_default_store() -> None:
    """Forget the default store so the next call starts with a fresh context."""

    global _default_store
    _default_store = None


def get(key: str) -> Union[Ok[Optional[str]], Ng[EnvError]]:
    return default_store().get(key)


def set(key: str, value: str) -> Union[Ok[None], Ng[EnvError]]:
    return default_store().set(key, value)


def delete(key: str) -> Union[Ok[None], Ng[EnvError]]:
    return default_store().delete(key)
