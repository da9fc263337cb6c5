"""Iterator - real-world example: reading a CSV file row by row.

``CsvIterator`` reads one row at a time instead of loading the whole file,
and can be rewound by iterating it again.
"""

import csv
from collections.abc import Iterator
from pathlib import Path
from typing import List, Optional, TextIO, Union

from design_patterns.data import CATS_CSV
from design_patterns.domain.core.exceptions import ResourceNotFoundError


class CsvIterator(Iterator):
    """Iterates over the rows of a CSV file; the key of each row is its number."""

    def __init__(self, file: Union[str, Path], delimiter: str = ","):
        path = Path(file)
        if not path.is_file():
            raise ResourceNotFoundError("CSV file", str(path), f'The file "{path}" cannot be read.')
        self._path = path
        self._delimiter = delimiter
        self._handle: Optional[TextIO] = None
        self._reader = None
        self.row_counter = 0

    def rewind(self) -> None:
        self.close()
        self._handle = open(self._path, newline="", encoding="utf-8")
        self._reader = csv.reader(self._handle, delimiter=self._delimiter)
        self.row_counter = 0

    def __iter__(self) -> "CsvIterator":
        self.rewind()
        return self

    def __next__(self) -> List[str]:
        if self._reader is None:
            raise StopIteration()
        try:
            row = next(self._reader)
        except StopIteration:
            self.close()
            raise
        self.row_counter += 1
        return row

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
        self._handle = None
        self._reader = None


def main(csv_path: Union[str, Path] = CATS_CSV) -> None:
    csv_iterator = CsvIterator(csv_path)

    for row in csv_iterator:
        print(f"Row {csv_iterator.row_counter}: {row}")


if __name__ == "__main__":
    main()
