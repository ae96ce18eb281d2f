"""Multibase codec table."""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple, Union

import base58

from .core.error import DuplicateBaseError, UnsupportedBaseError
from .encoders.b58 import FLICKR_ALPHABET, Base58Codec
from .encoders.base import MultibaseCodec
from .encoders.rfc4648 import (
    Base16Codec,
    Base32Codec,
    Base32HexCodec,
    Base32ZCodec,
    Base64Codec,
    Base64UrlCodec,
)

LOGGER = logging.getLogger(__name__)

CODE_LENGTH = 1


class BaseEntry(NamedTuple):
    """A registered base: its name, its prefix code and its codec."""

    name: str
    code: str
    codec: MultibaseCodec

    def encode(self, value: bytes) -> str:
        """Encode a byte string without prefix."""
        return self.codec.encode(value)

    def decode(self, value: str) -> bytes:
        """Decode an unprefixed string."""
        return self.codec.decode(value)


class CodecTable:
    """Immutable name and code lookup over a fixed set of bases."""

    def __init__(self, entries: Iterable[BaseEntry]):
        """Initialize the table.

        Args:
            entries: The bases to register

        Raises:
            DuplicateBaseError: if two entries share a name or a code
            ValueError: if a code is not a single character

        """
        by_name = {}
        by_code = {}
        for entry in entries:
            if len(entry.code) != CODE_LENGTH:
                raise ValueError(
                    f"Prefix code for {entry.name} must be a single character"
                )
            if entry.name in by_name:
                raise DuplicateBaseError(f"Base name {entry.name} registered twice")
            if entry.code in by_code:
                raise DuplicateBaseError(
                    f"Prefix code {entry.code!r} of {entry.name} already used by "
                    f"{by_code[entry.code].name}"
                )
            by_name[entry.name] = entry
            by_code[entry.code] = entry

        self._by_name = MappingProxyType(by_name)
        self._by_code = MappingProxyType(by_code)
        LOGGER.debug("Built multibase codec table with %d bases", len(by_name))

    @property
    def by_name(self) -> Mapping[str, BaseEntry]:
        """Read-only mapping of base name to entry."""
        return self._by_name

    @property
    def by_code(self) -> Mapping[str, BaseEntry]:
        """Read-only mapping of prefix code to entry."""
        return self._by_code

    def lookup_by_name(self, name: str) -> BaseEntry:
        """Get an entry by base name."""
        try:
            return self._by_name[name]
        except KeyError:
            raise UnsupportedBaseError(f"Unsupported base name: {name}") from None

    def lookup_by_code(self, code: str) -> BaseEntry:
        """Get an entry by prefix code."""
        try:
            return self._by_code[code]
        except KeyError:
            raise UnsupportedBaseError(f"Unsupported base code: {code!r}") from None

    def lookup(self, identifier: Union[str, bytes, BaseEntry]) -> BaseEntry:
        """Resolve a name, a code or an entry.

        A single character (or byte) is treated as a code, anything longer
        as a name.
        """
        if isinstance(identifier, BaseEntry):
            if self._by_code.get(identifier.code) != identifier:
                raise UnsupportedBaseError(f"Unregistered base: {identifier.name}")
            return identifier
        if isinstance(identifier, (bytes, bytearray)):
            try:
                identifier = identifier.decode("ascii")
            except UnicodeDecodeError:
                raise UnsupportedBaseError(
                    f"Unsupported base identifier: {identifier!r}"
                ) from None
        if not isinstance(identifier, str):
            raise TypeError("base must be a name, a code or a BaseEntry")

        if len(identifier) == CODE_LENGTH:
            return self.lookup_by_code(identifier)
        return self.lookup_by_name(identifier)

    def __iter__(self):
        """Iterate entries in registration order."""
        return iter(self._by_name.values())

    def __len__(self):
        """Fetch the number of registered bases."""
        return len(self._by_name)

    def __contains__(self, identifier):
        """Define 'in' operator for names and codes."""
        return identifier in self._by_name or identifier in self._by_code


BASES = (
    BaseEntry("base16", "f", Base16Codec()),
    BaseEntry("base32", "b", Base32Codec()),
    BaseEntry("base32pad", "c", Base32Codec(padded=True)),
    BaseEntry("base32hex", "v", Base32HexCodec()),
    BaseEntry("base32hexpad", "t", Base32HexCodec(padded=True)),
    BaseEntry("base32z", "h", Base32ZCodec()),
    BaseEntry("base58flickr", "Z", Base58Codec(FLICKR_ALPHABET)),
    BaseEntry("base58btc", "z", Base58Codec(base58.BITCOIN_ALPHABET)),
    BaseEntry("base64", "m", Base64Codec()),
    BaseEntry("base64pad", "M", Base64Codec(padded=True)),
    BaseEntry("base64url", "u", Base64UrlCodec()),
    BaseEntry("base64urlpad", "U", Base64UrlCodec(padded=True)),
)

TABLE = CodecTable(BASES)

names: Mapping[str, BaseEntry] = TABLE.by_name
codes: Mapping[str, BaseEntry] = TABLE.by_code


class Encoding(Enum):
    """Enum for supported encodings."""

    base16 = names["base16"]
    base32 = names["base32"]
    base32pad = names["base32pad"]
    base32hex = names["base32hex"]
    base32hexpad = names["base32hexpad"]
    base32z = names["base32z"]
    base58flickr = names["base58flickr"]
    base58btc = names["base58btc"]
    base64 = names["base64"]
    base64pad = names["base64pad"]
    base64url = names["base64url"]
    base64urlpad = names["base64urlpad"]

    @classmethod
    def from_name(cls, name: str) -> BaseEntry:
        """Get encoding from name."""
        return TABLE.lookup_by_name(name)

    @classmethod
    def from_code(cls, code: str) -> BaseEntry:
        """Get encoding from prefix code."""
        return TABLE.lookup_by_code(code)
