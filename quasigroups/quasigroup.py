import numpy as np


class OutOfRangeError(IndexError):
    """Raised when an operand lies outside [0, order)."""


class Quasigroup:
    """
    Finite quasigroup given by its Cayley table.

    table[a, b] is the product a * b. The table is copied into a read-only
    int64 array on construction; the Latin-square property is NOT checked
    here (see metrics.is_latin_square).
    """

    def __init__(self, table):
        try:
            T = np.array(table, copy=True)
        except ValueError:
            raise ValueError("Cayley table must be a non-empty square array, got ragged rows") from None
        if T.ndim != 2 or T.shape[0] != T.shape[1] or T.shape[0] == 0:
            raise ValueError(f"Cayley table must be a non-empty square array, got shape {T.shape}")
        if not np.issubdtype(T.dtype, np.integer):
            raise ValueError(f"Cayley table entries must be integers, got dtype {T.dtype}")
        T = T.astype(np.int64)
        T.setflags(write=False)
        self._table = T
        self._order = T.shape[0]

    @property
    def order(self) -> int:
        return self._order

    @property
    def table(self) -> np.ndarray:
        return self._table

    def apply(self, a: int, b: int) -> int:
        n = self._order
        if not (0 <= a < n and 0 <= b < n):
            raise OutOfRangeError(f"operands ({a}, {b}) outside Cayley table of order {n}")
        return int(self._table[a, b])

    def __len__(self):
        return self._order

    def __eq__(self, other):
        if not isinstance(other, Quasigroup):
            return NotImplemented
        return np.array_equal(self._table, other._table)

    def __hash__(self):
        return hash((self._order, self._table.tobytes()))

    def __repr__(self):
        return f"Quasigroup(order={self._order})"
