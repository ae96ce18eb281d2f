"""RFC 4648 codecs backed by the standard library base64 module."""

import base64
import binascii

from ..core.error import InvalidEncodingError
from .base import MultibaseCodec

PAD_CHAR = "="


class Rfc4648Codec(MultibaseCodec):
    """Shared padding and validation rules for the base16/32/64 families.

    Trailing padding is always accepted on decode, for padded and unpadded
    variants alike. Whether it is emitted on encode depends on `padded`.
    """

    block_size = 1

    def __init__(self, padded: bool = False):
        """Initialize the codec.

        Args:
            padded: Emit `=` padding up to a whole block when encoding
        """
        self.padded = padded

    def _encode(self, value: bytes) -> str:
        raise NotImplementedError()

    def _decode(self, value: str) -> bytes:
        raise NotImplementedError()

    def encode(self, value: bytes) -> str:
        """Encode a byte string, padding if this variant requires it."""
        encoded = self._encode(bytes(value))
        return encoded if self.padded else encoded.rstrip(PAD_CHAR)

    def decode(self, value: str) -> bytes:
        """Decode a possibly padded string.

        Raises:
            InvalidEncodingError: if the payload is not valid for this alphabet

        """
        payload = value.rstrip(PAD_CHAR)
        self.check_alphabet(payload)
        try:
            decoded = self._decode(
                payload + PAD_CHAR * (-len(payload) % self.block_size)
            )
        except binascii.Error as err:
            raise InvalidEncodingError(
                f"Invalid {self.family} payload of length {len(value)}"
            ) from err
        # the last character must not carry set bits beyond the final byte
        if self._encode(decoded).rstrip(PAD_CHAR) != payload:
            raise InvalidEncodingError(
                f"Unexpected end of {self.family} data: non-zero trailing bits"
            )
        return decoded

    def __repr__(self) -> str:
        """Provide a human readable representation of this object."""
        return "<{}(family={}, padded={})>".format(
            self.__class__.__name__, self.family, self.padded
        )


class Base16Codec(Rfc4648Codec):
    """Lowercase hexadecimal."""

    family = "base16"
    alphabet = "0123456789abcdef"

    def _encode(self, value: bytes) -> str:
        return base64.b16encode(value).decode("ascii").lower()

    def _decode(self, value: str) -> bytes:
        return base64.b16decode(value.upper())


class Base32Codec(Rfc4648Codec):
    """Lowercase RFC 4648 base32."""

    family = "base32"
    alphabet = "abcdefghijklmnopqrstuvwxyz234567"
    block_size = 8

    def _encode(self, value: bytes) -> str:
        return base64.b32encode(value).decode("ascii").lower()

    def _decode(self, value: str) -> bytes:
        return base64.b32decode(value.upper())


class Base32HexCodec(Base32Codec):
    """Lowercase base32 with the extended hex alphabet."""

    family = "base32hex"
    alphabet = "0123456789abcdefghijklmnopqrstuv"

    def _encode(self, value: bytes) -> str:
        return base64.b32hexencode(value).decode("ascii").lower()

    def _decode(self, value: str) -> bytes:
        return base64.b32hexdecode(value.upper())


class Base32ZCodec(Base32Codec):
    """z-base-32, a permutation of the base32 alphabet. Never padded."""

    family = "base32z"
    alphabet = "ybndrfg8ejkmcpqxot1uwisza345h769"

    _to_z = str.maketrans(Base32Codec.alphabet, alphabet)
    _from_z = str.maketrans(alphabet, Base32Codec.alphabet)

    def __init__(self):
        """Initialize the codec."""
        super().__init__(padded=False)

    def _encode(self, value: bytes) -> str:
        return super()._encode(value).translate(self._to_z)

    def _decode(self, value: str) -> bytes:
        return super()._decode(value.translate(self._from_z))


class Base64Codec(Rfc4648Codec):
    """RFC 4648 base64 with the standard alphabet."""

    family = "base64"
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
    block_size = 4

    def _encode(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")

    def _decode(self, value: str) -> bytes:
        return base64.b64decode(value, validate=True)


class Base64UrlCodec(Base64Codec):
    """RFC 4648 base64 with the URL and filename safe alphabet."""

    family = "base64url"
    alphabet = Base64Codec.alphabet[:-2] + "-_"

    def _encode(self, value: bytes) -> str:
        return base64.urlsafe_b64encode(value).decode("ascii")

    def _decode(self, value: str) -> bytes:
        return base64.b64decode(value, altchars=b"-_", validate=True)
