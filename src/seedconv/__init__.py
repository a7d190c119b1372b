"""seedconv — parameter resolution for cryptographic-seed conversion.

Turns raw command-line input into one validated, internally-consistent
configuration, or fails with a precise user-facing error before any
conversion work begins.
"""

from seedconv.version import __version__

__all__: list[str] = ["__version__"]
