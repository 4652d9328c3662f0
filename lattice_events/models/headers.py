from typing import Dict, Iterable, Iterator, List, Optional, Tuple


class HeaderMap:
    """
    Ordered, multi-valued HTTP header collection.

    Names are matched case-insensitively but keep the case they were first
    inserted with, so a decoded map re-encodes with the original spelling.
    Every value added for a name is kept in insertion order.
    """

    def __init__(self, pairs: Optional[Iterable[Tuple[str, str]]] = None):
        self._pairs: List[Tuple[str, str]] = []
        # folded name -> name as first inserted
        self._names: Dict[str, str] = {}
        for name, value in pairs or ():
            self.add(name, value)

    @staticmethod
    def _fold(name: str) -> str:
        return name.lower()

    def add(self, name: str, value: str) -> None:
        """Append a value for name, keeping any existing values."""
        self._names.setdefault(self._fold(name), name)
        self._pairs.append((name, value))

    def set(self, name: str, value: str) -> None:
        """Replace every value for name with a single value."""
        self.remove(name)
        self.add(name, value)

    def remove(self, name: str) -> None:
        folded = self._fold(name)
        self._names.pop(folded, None)
        self._pairs = [(k, v) for k, v in self._pairs if self._fold(k) != folded]

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the first value for name."""
        values = self.get_all(name)
        return values[0] if values else default

    def get_all(self, name: str) -> List[str]:
        folded = self._fold(name)
        return [v for k, v in self._pairs if self._fold(k) == folded]

    def keys(self) -> List[str]:
        return list(self._names.values())

    def items(self) -> List[Tuple[str, str]]:
        """Return every (name, value) pair in insertion order."""
        return list(self._pairs)

    def copy(self) -> "HeaderMap":
        return HeaderMap(self._pairs)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._fold(name) in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other):
        if isinstance(other, HeaderMap):
            return self._grouped() == other._grouped()
        return False

    __hash__ = None  # mutable

    def _grouped(self) -> Dict[str, List[str]]:
        return {folded: self.get_all(folded) for folded in self._names}

    def __repr__(self) -> str:
        return f"HeaderMap({self._pairs!r})"
