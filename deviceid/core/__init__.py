"""
Core device identifier primitives.

This module provides:
- Components: value providers for named device components
- Hashing: hash engines and per-call engine factories
- Encoders: digest-to-text encoders
- Canonical: ordinal ordering and serialization of component values
"""

from .components import DeviceIdComponent, ConstantComponent, CallableComponent
from .hashing import (
    HashAlgorithm,
    HashlibAlgorithm,
    hash_algorithm_factory,
    md5,
    sha1,
    sha256,
    sha384,
    sha512,
)
from .encoders import (
    ByteArrayEncoder,
    HexByteArrayEncoder,
    Base64ByteArrayEncoder,
    Base64UrlByteArrayEncoder,
    Base32ByteArrayEncoder,
)
from .canonical import canonical_components, canonical_value_bytes
from .errors import (
    DeviceIdError,
    InvalidArgumentError,
    ConfigurationError,
    UnsupportedHashAlgorithmError,
    UnsupportedEncodingError,
    HashAlgorithmClosedError,
    FormatterNotConfiguredError,
)

__all__ = [
    "DeviceIdComponent",
    "ConstantComponent",
    "CallableComponent",
    "HashAlgorithm",
    "HashlibAlgorithm",
    "hash_algorithm_factory",
    "md5",
    "sha1",
    "sha256",
    "sha384",
    "sha512",
    "ByteArrayEncoder",
    "HexByteArrayEncoder",
    "Base64ByteArrayEncoder",
    "Base64UrlByteArrayEncoder",
    "Base32ByteArrayEncoder",
    "canonical_components",
    "canonical_value_bytes",
    "DeviceIdError",
    "InvalidArgumentError",
    "ConfigurationError",
    "UnsupportedHashAlgorithmError",
    "UnsupportedEncodingError",
    "HashAlgorithmClosedError",
    "FormatterNotConfiguredError",
]
