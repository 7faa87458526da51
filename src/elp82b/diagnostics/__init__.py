"""Diagnostics package.

- diagnostics.validate_de: optional (requires ephemeris + diagnostics extras and an SPK file)
"""

__all__ = ["validate_de"]
