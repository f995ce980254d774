"""API version identifiers — validation, ordering, predecessor lookup.

Versions look like ``"v1"``, ``"v2"``, ... Ordering is plain string
comparison, so ``"v10"`` sorts before ``"v2"``. The predecessor of a
version is purely syntactic: ``"v3"`` -> ``"v2"``, ``"v1"`` -> ``None``.
"""

import re

_VERSION_RE = re.compile(r"v([1-9][0-9]*)")


def is_valid_version(version: str) -> bool:
    """True for ``"v"`` followed by a positive integer without leading zeros."""
    return isinstance(version, str) and _VERSION_RE.fullmatch(version) is not None


def compare(a: str, b: str) -> int:
    """Return ``-1``, ``0`` or ``1`` using lexicographic string order."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def predecessor(version: str) -> str | None:
    """Return the version immediately before *version*, or ``None``.

    ``None`` for ``"v1"`` and for anything that is not a valid version.
    """
    match = _VERSION_RE.fullmatch(version) if isinstance(version, str) else None
    if match is None:
        return None
    number = int(match.group(1))
    if number <= 1:
        return None
    return f"v{number - 1}"
