"""Legality check shared by element and attribute names."""

import re

# Letter or underscore first, then letters, digits, "_", "-", "." or ":",
# never ending with a colon.
_NAME_PATTERN = re.compile(r"[A-Za-z_](?:[A-Za-z0-9_.:\-]*[A-Za-z0-9_.\-])?")


def is_valid_name(name) -> bool:
    """Return whether ``name`` is a legal XML element or attribute name.

    The whole string must match; a legal prefix is not enough.

    Example:
        >>> is_valid_name("a:b.c-d_9")
        True
        >>> is_valid_name("a:")
        False
    """
    if not isinstance(name, str):
        return False
    return _NAME_PATTERN.fullmatch(name) is not None
