"""
Byte-to-text encoders for digests.

Every encoder is a pure, total function of its input bytes.
"""

import base64
import binascii
from abc import ABC, abstractmethod

from .errors import InvalidArgumentError

RFC4648_BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
CROCKFORD_BASE32_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"


class ByteArrayEncoder(ABC):
    @abstractmethod
    def encode(self, data: bytes) -> str:
        ...


class HexByteArrayEncoder(ByteArrayEncoder):
    """Hexadecimal, lowercase unless uppercase=True."""

    def __init__(self, uppercase: bool = False):
        self.uppercase = uppercase

    def encode(self, data: bytes) -> str:
        s = binascii.hexlify(data).decode("ascii")
        return s.upper() if self.uppercase else s


class Base64ByteArrayEncoder(ByteArrayEncoder):
    """Standard Base64 alphabet with padding."""

    def encode(self, data: bytes) -> str:
        return base64.b64encode(data).decode("ascii")


class Base64UrlByteArrayEncoder(ByteArrayEncoder):
    """URL-safe Base64 ('-' and '_'), padding stripped."""

    def encode(self, data: bytes) -> str:
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


class Base32ByteArrayEncoder(ByteArrayEncoder):
    """
    Base32 without padding.

    Defaults to the Crockford alphabet, which avoids I, L, O and U. Any
    other 32-symbol alphabet can be passed in; symbols map to 5-bit groups
    in the same most-significant-bit-first order as RFC 4648.
    """

    def __init__(self, alphabet: str = CROCKFORD_BASE32_ALPHABET):
        if alphabet is None or len(alphabet) != 32 or len(set(alphabet)) != 32:
            raise InvalidArgumentError("Base32 alphabet must be 32 distinct characters")
        self.alphabet = alphabet
        self._table = str.maketrans(RFC4648_BASE32_ALPHABET, alphabet)

    def encode(self, data: bytes) -> str:
        s = base64.b32encode(data).decode("ascii").rstrip("=")
        return s.translate(self._table)
