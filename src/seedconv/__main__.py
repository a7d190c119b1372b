"""Allow ``python -m seedconv`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m seedconv`` behaves identically to the ``seedconv``
console script.
"""

from __future__ import annotations

from seedconv.cli.app import cli

if __name__ == "__main__":
    cli()
