"""Base58 codecs backed by the base58 distribution."""

import base58

from .base import MultibaseCodec

FLICKR_ALPHABET = b"123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"


class Base58Codec(MultibaseCodec):
    """Big-number base58 over a configurable alphabet."""

    family = "base58"

    def __init__(self, alphabet: bytes = base58.BITCOIN_ALPHABET):
        """Initialize the codec.

        Args:
            alphabet: The 58 byte alphabet, Bitcoin ordering by default
        """
        self._alphabet = alphabet
        self.alphabet = alphabet.decode("ascii")

    def encode(self, value: bytes) -> str:
        """Encode a byte string using this codec's alphabet."""
        return base58.b58encode(bytes(value), alphabet=self._alphabet).decode("ascii")

    def decode(self, value: str) -> bytes:
        """Decode a string using this codec's alphabet.

        Raises:
            InvalidEncodingError: if the payload contains a foreign character

        """
        # base58 itself strips surrounding whitespace, reject it up front
        self.check_alphabet(value)
        return base58.b58decode(value, alphabet=self._alphabet)
