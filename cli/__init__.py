"""
deviceid CLI - Deterministic Device Identifiers

Commands:
- deviceid compute - Combine NAME=VALUE components into an identifier
- deviceid algorithms - List hash algorithms and encodings
- deviceid version - Show version information
"""

from deviceid import __version__

__all__ = ["__version__"]
