from types import MappingProxyType
from typing import Dict, Generic, Hashable, Iterable, Mapping, TypeVar

T = TypeVar("T", bound=Hashable)


class FrequencyCounter(Generic[T]):
    """Tally of how often each item has been seen."""

    def __init__(self, items: Iterable[T] = ()):
        self._counts: Dict[T, int] = {}
        self.update(items)

    def increment(self, item: T) -> None:
        self._counts[item] = self._counts.get(item, 0) + 1

    def update(self, items: Iterable[T]) -> None:
        for item in items:
            self.increment(item)

    def counts(self) -> Mapping[T, int]:
        return MappingProxyType(self._counts)

    def __getitem__(self, item: T) -> int:
        return self._counts.get(item, 0)

    def __contains__(self, item: object) -> bool:
        return item in self._counts

    def __len__(self) -> int:
        return len(self._counts)
