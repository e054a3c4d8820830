# Core module exports
from localcas.core.envelope import decode_envelope as decode_envelope
from localcas.core.envelope import encode_envelope as encode_envelope
from localcas.core.errors import CorruptObjectError as CorruptObjectError
from localcas.core.errors import LocalcasError as LocalcasError
from localcas.core.errors import MalformedEnvelopeError as MalformedEnvelopeError
from localcas.core.errors import ObjectNotFoundError as ObjectNotFoundError
from localcas.core.errors import StorageIOError as StorageIOError
from localcas.core.models import ObjectInfo as ObjectInfo
from localcas.core.models import StoredObject as StoredObject
from localcas.core.storage import (
    get_object_path as get_object_path,
)
from localcas.core.storage import (
    init_repo as init_repo,
)
from localcas.core.utils import (
    compress as compress,
)
from localcas.core.utils import (
    compute_digest as compute_digest,
)
from localcas.core.utils import (
    compute_hash as compute_hash,
)
from localcas.core.utils import (
    decompress as decompress,
)

__all__ = [
    "CorruptObjectError",
    "LocalcasError",
    "MalformedEnvelopeError",
    "ObjectInfo",
    "ObjectNotFoundError",
    "StorageIOError",
    "StoredObject",
    "compress",
    "compute_digest",
    "compute_hash",
    "decode_envelope",
    "decompress",
    "encode_envelope",
    "get_object_path",
    "init_repo",
]
