"""Public get/set/delete facade over the host environment table.

Every operation is gated by the host's version floor and returns a Result;
nothing raised by the host escapes to the caller.
"""

from __future__ import annotations

from typing import Optional, Union

from unienv.core.context import EnvContext
from unienv.core.errors import EnvError
from unienv.core.gate import CapabilityGate
from unienv.core.loader import load_config_if_needed
from unienv.core.result import Ng, Ok


class EnvStore:
    """Environment access for one host, seeded lazily from ``.env``."""

    def __init__(self, context: EnvContext) -> None:
        self._context = context
        self._gate = CapabilityGate(context)

    @property
    def context(self) -> EnvContext:
        return self._context

    @property
    def gate(self) -> CapabilityGate:
        return self._gate

    def get(self, key: str) -> Union[Ok[Optional[str]], Ng[EnvError]]:
        """Read ``key``, loading the configuration file first if needed."""

        host = self._context.host

        def _read() -> Optional[str]:
            # Hosts that deny file reads only see variables already set.
            if self._gate.may_read_files():
                load_config_if_needed(self._context)
            return host.read_var(key)

        return self._gate.run(_read)

    def set(self, key: str, value: str) -> Union[Ok[None], Ng[EnvError]]:
        host = self._context.host
        return self._gate.run(lambda: host.write_var(key, value))

    def delete(self, key: str) -> Union[Ok[None], Ng[EnvError]]:
        """Remove ``key``; removing a missing key succeeds."""

        host = self._context.host
        return self._gate.run(lambda: host.delete_var(key))
