"""Namespace import set for the /imports compiler option."""

from typing import Iterable, Iterator, List, Optional


class NamespaceImportSet:
    """Ordered collection of distinct namespace names.

    Insertion order is preserved and duplicates are ignored. The set
    serializes to a single comma-joined string, or None when empty so
    that no /imports option gets emitted.

    A set returned by ``frozen()`` rejects further additions and is
    hashable, which lets it live inside frozen configuration records.
    """

    def __init__(self, namespaces: Optional[Iterable[str]] = None) -> None:
        self._namespaces: List[str] = []
        self._frozen = False
        if namespaces:
            for namespace in namespaces:
                self.add(namespace)

    @classmethod
    def from_string(cls, value: Optional[str]) -> "NamespaceImportSet":
        """Build an import set from a comma-separated string.

        Args:
            value: e.g. "Microsoft.VisualBasic, System, System.Data"

        Returns:
            Import set holding the non-empty entries in listed order
        """
        if not value:
            return cls()
        return cls(part.strip() for part in value.split(","))

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def frozen(self) -> "NamespaceImportSet":
        """Return an immutable copy of this set."""
        copy = NamespaceImportSet(self._namespaces)
        copy._frozen = True
        return copy

    def add(self, namespace: str) -> bool:
        """Add a namespace, returning False if empty or already present.

        Raises:
            TypeError: If the set is frozen
        """
        if self._frozen:
            raise TypeError("Cannot add to a frozen NamespaceImportSet")
        namespace = namespace.strip()
        if not namespace or namespace in self._namespaces:
            return False
        self._namespaces.append(namespace)
        return True

    def serialize(self) -> Optional[str]:
        if not self._namespaces:
            return None
        return ",".join(self._namespaces)

    def to_list(self) -> List[str]:
        return list(self._namespaces)

    def __iter__(self) -> Iterator[str]:
        return iter(self._namespaces)

    def __len__(self) -> int:
        return len(self._namespaces)

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._namespaces

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamespaceImportSet):
            return NotImplemented
        return self._namespaces == other._namespaces

    def __hash__(self) -> int:
        if not self._frozen:
            raise TypeError("unhashable type: mutable NamespaceImportSet")
        return hash(tuple(self._namespaces))

    def __repr__(self) -> str:
        return f"NamespaceImportSet({self._namespaces!r})"

    def __str__(self) -> str:
        return self.serialize() or ""
