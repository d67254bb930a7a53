"""
Case-normalized header storage for parsed HTTP messages.
"""
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, Tuple


class HeaderMap(Mapping):
    """
    Read-only, order-preserving mapping of lower-cased header names to values.

    Names are lower-cased on insertion and on lookup, so ``headers["Host"]``
    and ``headers["host"]`` resolve to the same value while ``keys()`` only
    ever yields lower-case names.

    A repeated header name keeps its first position but takes the last value
    seen. Repeated ``Set-Cookie`` lines therefore collapse to a single value.
    """

    def __init__(self, items: Optional[Iterable[Tuple[str, str]]] = None):
        self._items: Dict[str, str] = {}
        for name, value in items or ():
            self._items[name.lower()] = value

    def __getitem__(self, name: str) -> str:
        return self._items[name.lower()]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name.lower() in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._items.get(name.lower(), default)

    def copy(self) -> "HeaderMap":
        return HeaderMap(self._items.items())

    def to_dict(self) -> Dict[str, str]:
        """A plain dictionary copy of the headers, in insertion order."""
        return dict(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderMap):
            return self._items == other._items
        if isinstance(other, Mapping):
            return self._items == {str(k).lower(): v for k, v in other.items()}
        return NotImplemented

    def __repr__(self) -> str:
        return f"HeaderMap({self._items!r})"
