"""Immutable, case-insensitive HTTP headers.

Built from the raw byte pairs of an ASGI scope. Names are lower-cased
and values decoded once, at construction.
"""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``headers["X-Token"]`` returns the first value for the name;
    ``get_list`` returns every value (e.g. repeated ``Accept``).
    """

    __slots__ = ("_items",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        items = tuple(
            (name.decode("latin-1").lower(), value.decode("latin-1")) for name, value in raw
        )
        object.__setattr__(self, "_items", items)

    def __getitem__(self, key: str) -> str:
        wanted = key.lower()
        for name, value in self._items:
            if name == wanted:
                return value
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self._items))

    def __len__(self) -> int:
        return len(dict.fromkeys(name for name, _ in self._items))

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in arrival order."""
        wanted = key.lower()
        return [value for name, value in self._items if name == wanted]

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Re-encoded header pairs for ASGI compatibility."""
        return tuple((n.encode("latin-1"), v.encode("latin-1")) for n, v in self._items)
