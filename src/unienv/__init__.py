"""unienv: environment variables seeded from ``.env``, gated per interpreter."""

from unienv.adapters.hosts import CPythonHost, GraalPyHost, PyPyHost, detect_host
from unienv.api import default_store, delete, get, reset_default_store, set
from unienv.core.context import EnvContext
from unienv.core.errors import EnvError, GenericError, VersionError
from unienv.core.models import HostKind, Versions
from unienv.core.result import Ng, Ok, Result
from unienv.core.store import EnvStore

__version__ = "0.1.0"

__all__ = [
    "CPythonHost",
    "EnvContext",
    "EnvError",
    "EnvStore",
    "GenericError",
    "GraalPyHost",
    "HostKind",
    "Ng",
    "Ok",
    "PyPyHost",
    "Result",
    "VersionError",
    "Versions",
    "default_store",
    "delete",
    "detect_host",
    "get",
    "reset_default_store",
    "set",
]
