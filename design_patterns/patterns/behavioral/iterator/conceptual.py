"""Iterator - conceptual example.

Iterator traverses the elements of a collection without exposing its
underlying representation. In Python the collection implements
``__iter__`` and the iterator implements ``__next__``.
"""

from collections.abc import Iterable, Iterator
from typing import Any, List


class AlphabeticalOrderIterator(Iterator):
    """
    Walks a WordsCollection forwards or backwards.

    The iterator keeps its own position, so several iterators can traverse
    the same collection independently.
    """

    def __init__(self, collection: "WordsCollection", reverse: bool = False):
        self._collection = collection
        self._reverse = reverse
        self._position = len(collection) - 1 if reverse else 0

    def __next__(self) -> Any:
        try:
            if self._position < 0:
                raise IndexError(self._position)
            value = self._collection[self._position]
        except IndexError:
            raise StopIteration() from None
        self._position += -1 if self._reverse else 1
        return value


class WordsCollection(Iterable):
    """Concrete collection that hands out iterators over its items."""

    def __init__(self, collection: List[Any] = None):
        self._collection = list(collection or [])

    def __getitem__(self, index: int) -> Any:
        return self._collection[index]

    def __len__(self) -> int:
        return len(self._collection)

    def __iter__(self) -> AlphabeticalOrderIterator:
        return AlphabeticalOrderIterator(self)

    def get_reverse_iterator(self) -> AlphabeticalOrderIterator:
        return AlphabeticalOrderIterator(self, True)

    def add_item(self, item: Any) -> None:
        self._collection.append(item)


def main() -> None:
    collection = WordsCollection()
    collection.add_item("First")
    collection.add_item("Second")
    collection.add_item("Third")

    print("Straight traversal:")
    print("\n".join(collection))
    print()

    print("Reverse traversal:")
    print("\n".join(collection.get_reverse_iterator()))


if __name__ == "__main__":
    main()
