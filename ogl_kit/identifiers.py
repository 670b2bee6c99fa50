"""Checks on the textual form of identifier expressions."""

from __future__ import annotations

import string

_ALLOWED = frozenset(string.ascii_letters + string.digits + "_:")


def is_id_expression(expr: str) -> bool:
    """Return True when expr holds only ASCII letters, digits, underscores and colons.

    An empty expression counts as valid.
    """
    return all(ch in _ALLOWED for ch in expr)