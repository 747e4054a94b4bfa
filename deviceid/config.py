"""
Environment-driven configuration.

Environment Variables:
    DEVICEID_HASH_ALGORITHM: hashlib algorithm name (md5, sha1, sha256, ...) - no default
    DEVICEID_ENCODING: hex, hex-upper, base64, base64url, base32 - no default
    DEVICEID_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR - default: INFO
    DEVICEID_LOG_FORMAT: json, text - default: text
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional

from .core.encoders import (
    Base32ByteArrayEncoder,
    Base64ByteArrayEncoder,
    Base64UrlByteArrayEncoder,
    ByteArrayEncoder,
    HexByteArrayEncoder,
)
from .core.errors import ConfigurationError, UnsupportedEncodingError
from .core.hashing import HASH_ALGORITHMS, HashAlgorithmFactory, hash_algorithm_factory
from .formatters.hash_formatter import HashDeviceIdFormatter

ENCODERS: Dict[str, Callable[[], ByteArrayEncoder]] = {
    "hex": HexByteArrayEncoder,
    "hex-upper": lambda: HexByteArrayEncoder(uppercase=True),
    "base64": Base64ByteArrayEncoder,
    "base64url": Base64UrlByteArrayEncoder,
    "base32": Base32ByteArrayEncoder,
}

LOG_FORMATS = ("json", "text")


def _read_optional(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class Settings:
    hash_algorithm: Optional[str] = None
    encoding: Optional[str] = None
    log_level: str = "INFO"
    log_format: str = "text"

    @staticmethod
    def from_env() -> "Settings":
        log_format = os.getenv("DEVICEID_LOG_FORMAT", "text").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"DEVICEID_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )
        return Settings(
            hash_algorithm=_read_optional("DEVICEID_HASH_ALGORITHM"),
            encoding=_read_optional("DEVICEID_ENCODING"),
            log_level=os.getenv("DEVICEID_LOG_LEVEL", "INFO").upper(),
            log_format=log_format,
        )

    def with_overrides(
        self,
        hash_algorithm: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> "Settings":
        """Return settings with the non-None arguments taking precedence."""
        return replace(
            self,
            hash_algorithm=hash_algorithm if hash_algorithm is not None else self.hash_algorithm,
            encoding=encoding if encoding is not None else self.encoding,
        )


def resolve_hash_factory(name: str) -> HashAlgorithmFactory:
    """
    Map an algorithm name to a factory.

    Raises:
        UnsupportedHashAlgorithmError: If hashlib does not know the name
    """
    key = name.strip().lower()
    if key in HASH_ALGORITHMS:
        return HASH_ALGORITHMS[key]
    return hash_algorithm_factory(key)


def resolve_encoder(name: str) -> ByteArrayEncoder:
    """
    Map an encoding name to an encoder instance.

    Raises:
        UnsupportedEncodingError: If no encoder is registered under name
    """
    key = name.strip().lower()
    if key not in ENCODERS:
        raise UnsupportedEncodingError(
            f"Unsupported encoding: {name} (expected one of {', '.join(sorted(ENCODERS))})"
        )
    return ENCODERS[key]()


def build_formatter(settings: Settings) -> HashDeviceIdFormatter:
    """
    Build a HashDeviceIdFormatter from settings.

    Raises:
        ConfigurationError: If the algorithm or encoding is missing or unknown
    """
    if not settings.hash_algorithm:
        raise ConfigurationError("No hash algorithm configured (set DEVICEID_HASH_ALGORITHM or --algorithm)")
    if not settings.encoding:
        raise ConfigurationError("No encoding configured (set DEVICEID_ENCODING or --encoding)")
    return HashDeviceIdFormatter(
        resolve_hash_factory(settings.hash_algorithm),
        resolve_encoder(settings.encoding),
    )
