"""Inheritance resolver — per-version binding tables.

Bindings are processed in version order. The first time a version is
seen, its table is seeded with a relabelled copy of its predecessor's
table (when that predecessor was resolved), then every binding of the
version is upserted by path. A version therefore inherits everything
from the version before it and overrides only what it re-registers.
"""

from collections.abc import Iterable
from functools import cmp_to_key
from typing import TypeAlias

from verroute.routing.binding import Binding
from verroute.versioning import compare, predecessor

VersionTable: TypeAlias = dict[str, dict[str, Binding]]


def _binding_order(a: Binding, b: Binding) -> int:
    """Version ascending, then path descending."""
    by_version = compare(a.version, b.version)
    if by_version:
        return by_version
    return -compare(a.path, b.path)


def sort_bindings(bindings: Iterable[Binding]) -> list[Binding]:
    """Return *bindings* in resolution order.

    Stable: bindings with equal version and path keep registration
    order, so the last one registered wins the upsert.
    """
    return sorted(bindings, key=cmp_to_key(_binding_order))


def resolve_versions(bindings: Iterable[Binding]) -> VersionTable:
    """Resolve every version to its full ``path -> Binding`` table.

    Only versions with at least one binding appear as keys. A version
    whose immediate predecessor was never resolved starts empty.
    """
    tables: VersionTable = {}

    for binding in sort_bindings(bindings):
        table = tables.get(binding.version)
        if table is None:
            table = {}
            prev = predecessor(binding.version)
            if prev is not None and prev in tables:
                for path, inherited in tables[prev].items():
                    table[path] = inherited.with_version(binding.version)
            tables[binding.version] = table

        # dict assignment replaces in place or appends, matching upsert order
        table[binding.path] = binding

    return tables
