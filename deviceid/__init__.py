"""
Deterministic Device Identifiers

Combines named device components into a single hashed, encoded identifier
that is stable across runs and independent of component order.
"""

__version__ = "0.1.0"
