"""Self-describing base encodings: a one character prefix names the base."""

from .core.error import (
    DuplicateBaseError,
    InvalidEncodingError,
    MissingArgumentError,
    MultibaseError,
    UnsupportedBaseError,
)
from .multibase import (
    decode,
    encode,
    encoding,
    encoding_from_data,
    is_encoded,
    prefix_encoded,
)
from .registry import BaseEntry, CodecTable, Encoding, codes, names
from .version import __version__

__all__ = [
    "BaseEntry",
    "CodecTable",
    "DuplicateBaseError",
    "Encoding",
    "InvalidEncodingError",
    "MissingArgumentError",
    "MultibaseError",
    "UnsupportedBaseError",
    "__version__",
    "codes",
    "decode",
    "encode",
    "encoding",
    "encoding_from_data",
    "is_encoded",
    "names",
    "prefix_encoded",
]
