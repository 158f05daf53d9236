from __future__ import annotations


class MegalabsSmsError(Exception):
    """Base client error."""


class InvalidArgumentError(MegalabsSmsError, ValueError):
    """Bad configuration or call arguments."""
