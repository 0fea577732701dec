"""Capability gating: version floors in front of every environment operation."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar, Union

from unienv.core.context import EnvContext
from unienv.core.errors import EnvError, GenericError, VersionError
from unienv.core.result import Ng, Ok
from unienv.core.versioning import more_than

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class CapabilityGate:
    """Decides whether the host meets its declared minimum version."""

    def __init__(self, context: EnvContext) -> None:
        self._context = context

    def guard(self) -> Union[Ok[None], Ng[VersionError]]:
        """Succeed when the running version satisfies the host's floor."""

        versions = self._context.versions()
        if not more_than(versions.required, versions.current):
            runtime = self._context.host.kind.display_name
            LOGGER.debug(
                "%s %s is below the supported floor %s",
                runtime,
                versions.current,
                versions.required,
            )
            return Ng(VersionError(runtime, versions.required, versions.current))
        return Ok(None)

    def run(self, operation: Callable[[], T]) -> Union[Ok[T], Ng[EnvError]]:
        """Guard, then run ``operation`` and wrap its outcome in a result.

        A failed guard is returned unchanged and ``operation`` is never
        called. Anything ``operation`` raises comes back as a GenericError.
        """

        guarded = self.guard()
        if guarded.is_ng():
            return guarded
        try:
            return Ok(operation())
        except Exception as exc:
            LOGGER.warning("Host environment operation failed: %s", exc)
            return Ng(GenericError.from_exception(exc))

    def may_read_files(self) -> bool:
        """Return whether configuration files may be read on this host."""

        return self._context.read_permission()
