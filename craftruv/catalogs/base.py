"""
Read-only lookup table shared by the material and furniture-type catalogs.
"""

from types import MappingProxyType
from typing import Dict, Generic, Iterable, Iterator, List, Type, TypeVar

from ..exceptions import CatalogError

T = TypeVar("T")


class ReadOnlyCatalog(Generic[T]):
    """Immutable id -> record mapping that keeps insertion order."""

    not_found: Type[CatalogError] = CatalogError

    def __init__(self, entries: Iterable[T]):
        table: Dict[str, T] = {}
        for entry in entries:
            if entry.id in table:
                raise ValueError(f"Duplicate {self.not_found.label.lower()} id: {entry.id}")
            table[entry.id] = entry
        self._entries = MappingProxyType(table)

    def get(self, item_id: str) -> T:
        """Return the entry for item_id, or raise this catalog's not-found error."""
        try:
            return self._entries[item_id]
        except (KeyError, TypeError):
            raise self.not_found(item_id) from None

    def list(self) -> List[T]:
        """All entries in catalog order. Every call returns the full set."""
        return list(self._entries.values())

    def ids(self) -> List[str]:
        return list(self._entries.keys())

    def to_dict(self) -> dict:
        return {item_id: entry.to_dict() for item_id, entry in self._entries.items()}

    def __contains__(self, item_id: object) -> bool:
        try:
            return item_id in self._entries
        except TypeError:
            return False

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
