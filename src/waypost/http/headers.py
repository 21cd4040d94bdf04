"""Request headers as an immutable, case-insensitive mapping.

Wraps the raw ``(name, value)`` byte pairs from the ASGI scope and decodes
them as latin-1 on access.  Repeated headers keep every value.
"""

from collections.abc import Iterator, Mapping


def _key(name: str | bytes) -> bytes:
    raw = name if isinstance(name, bytes) else name.encode("latin-1")
    return raw.lower()


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive view over raw ASGI header pairs.

    ``headers["Accept"]`` returns the first value; ``get_list`` returns all.
    Iteration yields lower-cased names, each once.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        self._raw = tuple(raw)

    def __getitem__(self, key: str) -> str:
        wanted = _key(key)
        for name, value in self._raw:
            if _key(name) == wanted:
                return value.decode("latin-1")
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        wanted = _key(key)
        return any(_key(name) == wanted for name, _ in self._raw)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(_key(name).decode("latin-1") for name, _ in self._raw))

    def __len__(self) -> int:
        return len({_key(name) for name, _ in self._raw})

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get_list(self, key: str) -> list[str]:
        """Every value sent for *key*, in order."""
        wanted = _key(key)
        return [value.decode("latin-1") for name, value in self._raw if _key(name) == wanted]

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        return self._raw
