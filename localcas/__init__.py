# Public API exports
import importlib.metadata as importlib_metadata

from localcas.core.errors import CorruptObjectError as CorruptObjectError
from localcas.core.errors import LocalcasError as LocalcasError
from localcas.core.errors import MalformedEnvelopeError as MalformedEnvelopeError
from localcas.core.errors import ObjectNotFoundError as ObjectNotFoundError
from localcas.core.errors import StorageIOError as StorageIOError
from localcas.core.models import ObjectInfo as ObjectInfo
from localcas.core.models import StoredObject as StoredObject
from localcas.managers import ObjectManager as ObjectManager


def _detect_version() -> str:
    try:
        return importlib_metadata.version("localcas")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "CorruptObjectError",
    "LocalcasError",
    "MalformedEnvelopeError",
    "ObjectInfo",
    "ObjectManager",
    "ObjectNotFoundError",
    "StorageIOError",
    "StoredObject",
    "__version__",
]
