"""Infrastructure: newline-delimited input from standard input.

Blocks until end-of-stream; there is no timeout.
"""

from __future__ import annotations

import sys
from typing import TextIO


def read_lines(stream: TextIO | None = None) -> list[str]:
    """Return every line of *stream* (default ``sys.stdin``) without its line ending."""
    source = stream if stream is not None else sys.stdin
    return [line.rstrip("\r\n") for line in source]
