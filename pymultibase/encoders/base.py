"""Base codec interface."""

from abc import ABC, abstractmethod
from typing import ClassVar

from ..core.error import InvalidEncodingError


class MultibaseCodec(ABC):
    """Alphabet conversion for a single base, without any prefix handling."""

    family: ClassVar[str]
    alphabet: str

    @abstractmethod
    def encode(self, value: bytes) -> str:
        """Encode a byte string using this codec's alphabet."""

    @abstractmethod
    def decode(self, value: str) -> bytes:
        """Decode a string using this codec's alphabet."""

    def check_alphabet(self, value: str):
        """Raise InvalidEncodingError on the first character outside the alphabet."""
        for char in value:
            if char not in self.alphabet:
                raise InvalidEncodingError(f"Non-{self.family} character {char!r}")

    def __repr__(self) -> str:
        """Provide a human readable representation of this object."""
        return "<{}(family={})>".format(self.__class__.__name__, self.family)
