import numpy as np


def is_latin_square(T) -> bool:
    """
    Row r and column r must each be a permutation of 0..n-1, for every r.
    Stops at the first violation.
    """
    try:
        T = np.asarray(T)
    except ValueError:
        # ragged rows
        return False
    if T.ndim != 2 or T.shape[0] != T.shape[1]:
        return False
    if not np.issubdtype(T.dtype, np.integer):
        return False
    n = T.shape[0]
    for r in range(n):
        row_used = [False] * n
        col_used = [False] * n
        for c in range(n):
            rv = int(T[r, c])
            cv = int(T[c, r])
            if rv < 0 or rv >= n or cv < 0 or cv >= n:
                return False
            if row_used[rv] or col_used[cv]:
                return False
            row_used[rv] = col_used[cv] = True
    return True


def is_associative(T: np.ndarray) -> bool:
    n = T.shape[0]
    for i in range(n):
        for j in range(n):
            ij = T[i, j]
            if ij < 0 or ij >= n: return False
            for k in range(n):
                jk = T[j, k]
                if jk < 0 or jk >= n: return False
                a = T[ij, k]
                b = T[i, jk]
                if a < 0 or a >= n or b < 0 or b >= n: return False
                if a != b:
                    return False
    return True


def is_commutative(T: np.ndarray) -> bool:
    T = np.asarray(T)
    return bool(np.array_equal(T, T.T))


def count_latin_squares(tables) -> int:
    """
    Count how many tables in a batch are Latin squares.
    tables: (N,n,n) array or a list of (n,n) arrays
    """
    count = 0
    for T in tables:
        if is_latin_square(T):
            count += 1
    total = len(tables)
    pct = 100 * count / total if total else 0.0
    print(f"{count}/{total} tables are Latin squares ({pct:.1f}%)")
    return count
