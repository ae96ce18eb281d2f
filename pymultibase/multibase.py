"""MultiBase encoding and decoding utilities."""

import logging
from typing import Union

from .core.error import InvalidEncodingError, MissingArgumentError, UnsupportedBaseError
from .registry import CODE_LENGTH, TABLE, BaseEntry, Encoding

LOGGER = logging.getLogger(__name__)

BYTES_TYPES = (bytes, bytearray, memoryview)

BaseIdentifier = Union[str, bytes, BaseEntry, Encoding]
Data = Union[str, bytes, bytearray, memoryview]


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, BYTES_TYPES):
        return bytes(data)
    raise TypeError("data must be a str or a bytes-like object")


def _as_text(data: Data) -> str:
    if isinstance(data, str):
        return data
    if isinstance(data, BYTES_TYPES):
        try:
            return bytes(data).decode("utf-8")
        except UnicodeDecodeError as err:
            raise InvalidEncodingError("Multibase data is not UTF-8 text") from err
    raise TypeError("data must be a str or a bytes-like object")


def _prefix_of(data: Data) -> str:
    if isinstance(data, str):
        return data[:CODE_LENGTH]
    if isinstance(data, memoryview):
        data = data.tobytes()
    try:
        return bytes(data[:CODE_LENGTH]).decode("ascii")
    except UnicodeDecodeError:
        raise UnsupportedBaseError(
            f"Unsupported base code: {bytes(data[:CODE_LENGTH])!r}"
        ) from None


def encoding(base: BaseIdentifier) -> BaseEntry:
    """Get the registered base for a name, a code or an Encoding member.

    Args:
        base: The base identifier

    Returns:
        The matching base entry

    Raises:
        MissingArgumentError: if no identifier was supplied
        UnsupportedBaseError: if the identifier is not registered

    """
    if base is None or (isinstance(base, (str, bytes, bytearray)) and not base):
        raise MissingArgumentError("No base identifier supplied")
    if isinstance(base, Encoding):
        return base.value
    return TABLE.lookup(base)


def encoding_from_data(data: Data) -> BaseEntry:
    """Get the base named by the prefix of multibase encoded data.

    Args:
        data: The multibase encoded data

    Returns:
        The matching base entry

    Raises:
        UnsupportedBaseError: if the data is empty or its prefix is unknown

    """
    if not isinstance(data, (str,) + BYTES_TYPES):
        raise TypeError("data must be a str or a bytes-like object")
    prefix = _prefix_of(data)
    if not prefix:
        raise UnsupportedBaseError("Empty data has no multibase prefix")
    return TABLE.lookup_by_code(prefix)


def encode(base: BaseIdentifier, data: Data) -> bytes:
    """Encode raw bytes using the given base and prefix the result.

    Args:
        base: The base name or code to use
        data: The bytes to encode, a str is encoded as UTF-8 first

    Returns:
        The multibase encoded data

    """
    if data is None:
        raise MissingArgumentError("No data supplied")
    entry = encoding(base)
    return (entry.code + entry.encode(_as_bytes(data))).encode("utf-8")


def prefix_encoded(base: BaseIdentifier = None, data: Data = None) -> bytes:
    """Prefix data that is already encoded in the given base.

    The payload is not re-encoded. It is decoded once to make sure it
    actually belongs to the claimed base before the prefix is attached.

    Args:
        base: The base name or code the data is encoded with
        data: The encoded payload

    Returns:
        The payload prefixed with the base code

    Raises:
        InvalidEncodingError: if the payload does not decode under the base

    """
    if base is None or data is None:
        raise MissingArgumentError("Both a base and encoded data are required")
    entry = encoding(base)
    try:
        entry.decode(_as_text(data))
    except (InvalidEncodingError, ValueError) as err:
        LOGGER.debug("Rejected %s payload: %s", entry.name, err)
        raise InvalidEncodingError(f"Data is not valid {entry.name}") from err
    return entry.code.encode("ascii") + _as_bytes(data)


def decode(data: Data) -> bytes:
    """Decode a multibase encoded string.

    Args:
        data: The str or bytes to decode

    Returns:
        The decoded byte string

    """
    if data is None:
        raise MissingArgumentError("No data supplied")
    entry = encoding_from_data(data)
    return entry.decode(_as_text(data)[CODE_LENGTH:])


def is_encoded(data) -> Union[str, bool]:
    """Check whether data carries a known multibase prefix.

    Only the prefix is inspected, the payload is not validated. Never raises.

    Returns:
        The base name, or False

    """
    if not isinstance(data, (str,) + BYTES_TYPES):
        return False
    try:
        return encoding_from_data(data).name
    except (UnsupportedBaseError, ValueError):
        # a released memoryview raises ValueError on access
        return False
