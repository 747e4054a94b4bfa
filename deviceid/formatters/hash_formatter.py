"""
Formatter that hashes all component values into a single digest.
"""

from typing import Mapping

from ..core.canonical import canonical_value_bytes
from ..core.components import DeviceIdComponent
from ..core.encoders import ByteArrayEncoder
from ..core.errors import InvalidArgumentError
from ..core.hashing import HashAlgorithmFactory
from .base import DeviceIdFormatter


class HashDeviceIdFormatter(DeviceIdFormatter):
    """
    Combines components into one hash.

    Values are read in ordinal name order, joined with ",", UTF-8 encoded,
    hashed with a fresh engine from hash_algorithm and encoded with
    byte_array_encoder.

    Example:
        formatter = HashDeviceIdFormatter(md5, HexByteArrayEncoder())
        formatter.get_device_id({"CPU": ConstantComponent("ABC123")})
    """

    def __init__(self, hash_algorithm: HashAlgorithmFactory, byte_array_encoder: ByteArrayEncoder):
        if hash_algorithm is None:
            raise InvalidArgumentError("hash_algorithm is required")
        if byte_array_encoder is None:
            raise InvalidArgumentError("byte_array_encoder is required")
        self._hash_algorithm = hash_algorithm
        self._byte_array_encoder = byte_array_encoder

    @property
    def hash_algorithm(self) -> HashAlgorithmFactory:
        return self._hash_algorithm

    @property
    def byte_array_encoder(self) -> ByteArrayEncoder:
        return self._byte_array_encoder

    def get_device_id(self, components: Mapping[str, DeviceIdComponent]) -> str:
        if components is None:
            raise InvalidArgumentError("components is required")

        data = canonical_value_bytes(components)
        with self._hash_algorithm() as algorithm:
            digest = algorithm.compute_hash(data)
        return self._byte_array_encoder.encode(digest)
