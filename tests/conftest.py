"""Shared pytest configuration for the seedconv test suite.

Guidelines
----------
* No network access and no real standard input in any test.
* The UR library is replaced at the infra boundary.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations
