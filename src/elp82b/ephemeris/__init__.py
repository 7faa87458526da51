"""Data readers and ephemeris adapters.

- elp_files: reader for the published ELP2000-82B files (no extra dependency)
- jpl: geocentric Moon from a JPL SPK kernel, for validation.
  Install with:
    pip install "elp82b[ephemeris]"
"""
from ..core.errors import EphemerisUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
    except ImportError as e:
        raise EphemerisUnavailableError('JPL ephemeris support requires: pip install "elp82b[ephemeris]"') from e
