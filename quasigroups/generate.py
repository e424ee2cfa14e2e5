"""
Random Latin squares by the sequential replacement graph method.

Rows are filled left to right. When a column has no symbol that is unused both
in the row and in the column, an element of that column's live availability
is evicted from the row: the cell holding it is rewritten with a symbol its
column could take at the start of the row, which may in turn evict another
cell, until a symbol not yet in the row is written. Committed rows are never
undone.
"""

import numpy as np


class SequentialReplacementGenerator:
    def __init__(self, order: int, rng: np.random.Generator | None = None):
        if order < 1:
            raise ValueError(f"order must be >= 1, got {order}")
        self.order = order
        self.rng = rng if rng is not None else np.random.default_rng()
        self.symbols = frozenset(range(order))
        self.available_in_column: list[set[int]] = []

    def generate(self) -> np.ndarray:
        n = self.order
        self.available_in_column = [set(self.symbols) for _ in range(n)]
        # per-row working sets, refilled at the start of every row
        self._start_of_row = [set() for _ in range(n)]
        self._available_in_row: set[int] = set()
        self._row: list[int] = []
        table = np.full((n, n), -1, dtype=np.int64)
        for r in range(n):
            table[r] = self._generate_row()
        return table

    def _pick(self, choices) -> int:
        # sorted so a seeded rng gives the same square on every run
        return int(self.rng.choice(sorted(choices)))

    def _generate_row(self) -> list[int]:
        n = self.order
        available_in_row = self._available_in_row
        available_in_row.clear()
        available_in_row.update(self.symbols)
        start_of_row = self._start_of_row
        for start, live in zip(start_of_row, self.available_in_column):
            start.clear()
            start.update(live)
        row = self._row
        row.clear()
        column = 0
        while column < n:
            valid = self.available_in_column[column] & available_in_row
            if valid:
                symbol = self._pick(valid)
                self.available_in_column[column].discard(symbol)
                available_in_row.discard(symbol)
                row.append(symbol)
                column += 1
            else:
                graph = self._replacement_graph(column, start_of_row)
                evicted = self._pick(self.available_in_column[column])
                self._make_available(evicted, graph, row, available_in_row)
        return row

    @staticmethod
    def _replacement_graph(column: int, start_of_row) -> dict[int, set[int]]:
        """column -> symbols it could take when the row began"""
        return {c: set(start_of_row[c]) for c in range(column, -1, -1) if start_of_row[c]}

    def _make_available(self, initial: int, graph, row: list[int], available_in_row: set[int]):
        for choices in graph.values():
            choices.discard(initial)

        old_element = initial
        old_index = row.index(old_element)
        path: set[int] = set()
        while True:
            choices = graph[old_index]
            candidates = choices - path
            if not candidates:
                path.clear()
                candidates = choices
            new_element = self._pick(candidates)
            new_index = row.index(new_element) if new_element in row else len(row)

            row[old_index] = new_element
            path.add(new_element)
            if old_element not in row:
                available_in_row.add(old_element)
            available_in_row.discard(new_element)
            self.available_in_column[old_index].add(old_element)
            self.available_in_column[old_index].discard(new_element)

            # new_element was not in the row: the chain is closed
            if new_index >= len(row):
                break
            old_index = new_index
            old_element = new_element


def sequential_replacement_table(order: int, rng: np.random.Generator | None = None) -> np.ndarray:
    return SequentialReplacementGenerator(order, rng=rng).generate()
